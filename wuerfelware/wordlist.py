"""
Word list loading.

Any text file works as a word list: it is cut at spaces and line breaks and
every token that is a plain integer is thrown away, so Diceware style files
("11111 abacus") and ordinary prose can both be used as-is. Mixed tokens such
as "ab12cd" or "12a" are kept. Order and duplicates are preserved.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from .errors import WordListIndexError, WordListNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Only space, CR and LF separate words; tabs stay part of a token.
_DELIMITERS = re.compile(r"[ \r\n]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")


def is_integer_token(token: str) -> bool:
    """True if the whole token reads as a base-10 integer."""
    return _INTEGER.fullmatch(token) is not None


class WordList:
    """Immutable, ordered sequence of candidate words."""

    __slots__ = ("_entries", "source")

    def __init__(self, entries, source: Optional[str] = None) -> None:
        self._entries: Tuple[str, ...] = tuple(entries)
        self.source = source

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def max_valid_index(self) -> int:
        return len(self._entries) - 1

    def get(self, index: int) -> str:
        # no negative wrap-around: -1 is a bug, not "the last word"
        if index < 0 or index >= len(self._entries):
            raise WordListIndexError(index, len(self._entries))
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other) -> bool:
        if isinstance(other, WordList):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"WordList({self.entry_count} entries, source={self.source!r})"


def parse(raw_text: str, source: Optional[str] = None) -> WordList:
    words = [tok for tok in _DELIMITERS.split(raw_text) if tok and not is_integer_token(tok)]
    return WordList(words, source)


def read_word_list(path: PathLike) -> str:
    p = Path(path)
    if not p.is_file():
        raise WordListNotFoundError(p)
    # utf-8-sig drops a leading BOM; undecodable bytes are skipped
    return p.read_text(encoding="utf-8-sig", errors="ignore")


def load_word_list(path: PathLike) -> WordList:
    """Read and parse the word file at ``path``.

    Raises WordListNotFoundError when the file is missing; the caller decides
    what to show, there is no built-in fallback list.
    """
    raw = read_word_list(path)
    word_list = parse(raw, source=str(path))
    logger.info("Loaded %d words from %s", word_list.entry_count, path)
    return word_list


class WordListCache:
    """Holds the most recently loaded word list, keyed by its path.

    The cached list is replaced wholesale whenever a different path is asked
    for or ``reload()`` is called; WordList objects already handed out are
    never touched.
    """

    def __init__(self, loader=load_word_list) -> None:
        self._loader = loader
        self._path: Optional[str] = None
        self._word_list: Optional[WordList] = None

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def current(self) -> Optional[WordList]:
        return self._word_list

    def get(self, path: PathLike) -> WordList:
        key = str(Path(path))
        if self._word_list is not None and key == self._path:
            logger.debug("Word list cache hit for %s", key)
            return self._word_list
        word_list = self._loader(key)
        self._path, self._word_list = key, word_list
        return word_list

    def reload(self) -> WordList:
        if self._path is None:
            raise RuntimeError("Nothing to reload: no word list loaded yet.")
        path = self._path
        self.invalidate()
        return self.get(path)

    def invalidate(self) -> None:
        self._path = None
        self._word_list = None
