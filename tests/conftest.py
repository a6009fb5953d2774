import os
from pathlib import Path

import pytest

# Widgets are created without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QSettings  # noqa: E402

from wuerfelware.config import ConfigurationStore  # noqa: E402


class SequenceSource:
    """Deterministic random source replaying the given 64-bit values."""

    def __init__(self, values):
        self.values = list(values)
        self.draws = 0

    def next_u64(self) -> int:
        if self.draws >= len(self.values):
            raise AssertionError("random source exhausted")
        value = self.values[self.draws]
        self.draws += 1
        return value


class CountingSource:
    """Returns 0, 1, 2, ... forever."""

    def __init__(self):
        self.draws = 0

    def next_u64(self) -> int:
        value = self.draws
        self.draws += 1
        return value


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def sequence_source():
    return SequenceSource


@pytest.fixture
def settings(tmp_path: Path):
    s = QSettings(str(tmp_path / "wuerfelware.ini"), QSettings.IniFormat)
    yield s
    s.sync()


@pytest.fixture
def store(settings):
    return ConfigurationStore(settings)


@pytest.fixture
def word_file(tmp_path: Path):
    path = tmp_path / "words.txt"
    path.write_text("11111 alpha\n11112 beta\n11113 gamma\n11114 delta\n", encoding="utf-8")
    return path
