"""Error types raised by the passphrase core."""


class WuerfelwareError(Exception):
    """Base class for every failure the core surfaces to its host."""


class WordListNotFoundError(WuerfelwareError, FileNotFoundError):
    def __init__(self, path) -> None:
        self.path = str(path)
        super().__init__(
            f"Cannot find word file at '{self.path}'. "
            "Maybe you forgot copying it next to the program?"
        )


class EmptyWordListError(WuerfelwareError, ValueError):
    def __init__(self, source=None) -> None:
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"Word list is empty{where}.")


class WordListIndexError(WuerfelwareError, IndexError):
    # Raised on lookups outside [0, entry_count); a sampler or caller bug.
    def __init__(self, index: int, entry_count: int) -> None:
        self.index = index
        self.entry_count = entry_count
        super().__init__(f"Entry index {index} out of range (0..{entry_count - 1}).")
