"""
Passphrase configuration and its persistence.

Settings live in QSettings (registry on Windows, plist/ini elsewhere) under
SETTINGS_ORG / SETTINGS_APP. A word count that is missing, garbled or out of
range is clamped into MIN_WORDS..MAX_WORDS, never rejected.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# ---------------- Constants & defaults ----------------

MIN_WORDS = 1
MAX_WORDS = 12
DEFAULT_WORDS = 6

PACKAGE_DIR = Path(__file__).resolve().parent
WORD_LIST_FILENAME = "wuerfelware.txt"
DEFAULT_WORD_LIST_PATH = PACKAGE_DIR / "data" / WORD_LIST_FILENAME

SETTINGS_ORG = "Wuerfelware"
SETTINGS_APP = "PassphraseGenerator"
SETTINGS_WORD_COUNT = "word_count"
SETTINGS_WORDLIST = "wordlist_path"


def clamp_word_count(value) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Unusable word count %r, using default %d", value, DEFAULT_WORDS)
        count = DEFAULT_WORDS
    return min(max(MIN_WORDS, count), MAX_WORDS)


@dataclass(frozen=True)
class PassphraseConfig:
    word_count: int = DEFAULT_WORDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "word_count", clamp_word_count(self.word_count))


# ---------------- Persistence ----------------

class ConfigurationStore:
    """Loads and saves PassphraseConfig (and the word list path) via QSettings."""

    def __init__(self, settings: Optional[QSettings] = None) -> None:
        self.settings = settings if settings is not None else QSettings(SETTINGS_ORG, SETTINGS_APP)

    def load(self) -> PassphraseConfig:
        return PassphraseConfig(self.settings.value(SETTINGS_WORD_COUNT, DEFAULT_WORDS))

    def save(self, config: PassphraseConfig) -> None:
        self.settings.setValue(SETTINGS_WORD_COUNT, config.word_count)
        self.settings.sync()

    def word_list_path(self) -> Optional[str]:
        path = self.settings.value(SETTINGS_WORDLIST, None)
        return str(path) if path else None

    def set_word_list_path(self, path: Union[str, Path, None]) -> None:
        if path:
            self.settings.setValue(SETTINGS_WORDLIST, str(path))
        else:
            self.settings.remove(SETTINGS_WORDLIST)
        self.settings.sync()


def resolve_word_list_path(explicit: Union[str, Path, None] = None,
                           store: Optional[ConfigurationStore] = None) -> Path:
    """Explicit path, else the stored one, else the bundled list.

    The chosen path is returned even if it does not exist, so a missing file
    surfaces as WordListNotFoundError instead of quietly using another list.
    """
    if explicit:
        return Path(explicit)
    if store is not None:
        stored = store.word_list_path()
        if stored:
            return Path(stored)
    return DEFAULT_WORD_LIST_PATH
