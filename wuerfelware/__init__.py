"""Würfelware: Diceware-style passphrases from any word list."""

from .config import DEFAULT_WORDS, MAX_WORDS, MIN_WORDS, PassphraseConfig, clamp_word_count
from .errors import EmptyWordListError, WordListIndexError, WordListNotFoundError, WuerfelwareError
from .generator import PassphraseGenerator, generate, generate_many
from .sampling import LockedRandomSource, RandomSource, SystemRandomSource, next_index, rejection_limit
from .wordlist import WordList, WordListCache, load_word_list, parse

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_WORDS", "MAX_WORDS", "MIN_WORDS", "PassphraseConfig", "clamp_word_count",
    "EmptyWordListError", "WordListIndexError", "WordListNotFoundError", "WuerfelwareError",
    "PassphraseGenerator", "generate", "generate_many",
    "LockedRandomSource", "RandomSource", "SystemRandomSource", "next_index", "rejection_limit",
    "WordList", "WordListCache", "load_word_list", "parse",
]
