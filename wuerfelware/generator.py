"""Passphrase assembly."""

import logging
from typing import List, Optional

from .config import ConfigurationStore, clamp_word_count, resolve_word_list_path
from .errors import EmptyWordListError
from .sampling import RandomSource, SystemRandomSource, next_index
from .wordlist import WordList, WordListCache

logger = logging.getLogger(__name__)

SEPARATOR = " "


def generate(word_list: WordList, word_count: int, random_source: RandomSource) -> str:
    """Pick ``word_count`` words (clamped) with replacement and join them with a space."""
    if word_list.entry_count == 0:
        raise EmptyWordListError(word_list.source)

    picks: List[str] = []
    for _ in range(clamp_word_count(word_count)):
        index = next_index(random_source, word_list.entry_count)
        picks.append(word_list.get(index))
    return SEPARATOR.join(picks)


def generate_many(word_list: WordList, word_count: int, random_source: RandomSource,
                  count: int = 1) -> List[str]:
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    return [generate(word_list, word_count, random_source) for _ in range(count)]


class PassphraseGenerator:
    """Ties word list cache, configuration and random source together for a host.

    Configuration is read again on every call; the word list is reloaded only
    when the resolved path differs from the cached one.
    """

    def __init__(self, store: Optional[ConfigurationStore] = None,
                 random_source: Optional[RandomSource] = None,
                 cache: Optional[WordListCache] = None) -> None:
        self.store = store if store is not None else ConfigurationStore()
        self.random_source = random_source if random_source is not None else SystemRandomSource()
        self.cache = cache if cache is not None else WordListCache()

    def word_list(self, path=None) -> WordList:
        return self.cache.get(resolve_word_list_path(path, self.store))

    def generate(self, path=None, word_count: Optional[int] = None, count: int = 1) -> List[str]:
        word_list = self.word_list(path)
        if word_count is None:
            word_count = self.store.load().word_count
        logger.debug("Generating %d passphrase(s) of %d words from %d entries",
                     count, clamp_word_count(word_count), word_list.entry_count)
        return generate_many(word_list, word_count, self.random_source, count)
