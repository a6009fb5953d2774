#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Würfelware GUI (PySide6)
- Diceware-style passphrases, words drawn without modulo bias
- Word list from any text file (numbers are ignored)
- Single or multiple outputs
- Options dialog for the number of words
- Copy-first / Copy-all buttons
- Remembers word count, word list and geometry between sessions
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QClipboard, QGuiApplication
from PySide6.QtWidgets import (
    QAbstractSpinBox,
    QApplication,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from .config import (
    MAX_WORDS,
    MIN_WORDS,
    ConfigurationStore,
    PassphraseConfig,
    resolve_word_list_path,
)
from .errors import WuerfelwareError
from .generator import PassphraseGenerator

logger = logging.getLogger(__name__)


def _step_button(text: str, spin: QSpinBox, delta: int) -> QPushButton:
    b = QPushButton(text)
    b.setAutoRepeat(True); b.setAutoRepeatDelay(250); b.setAutoRepeatInterval(60)
    b.setFixedWidth(24)
    b.clicked.connect(lambda _=False, s=spin, d=delta: s.setValue(s.value() + d))
    return b


def _spin_row(spin: QSpinBox) -> QWidget:
    row = QHBoxLayout(); row.setSpacing(6); row.setContentsMargins(0, 0, 0, 0)
    row.addWidget(_step_button("–", spin, -1))
    row.addWidget(spin)
    row.addWidget(_step_button("+", spin, +1))
    w = QWidget(); w.setLayout(row); return w


# ---------------- Options dialog ----------------

class OptionsDialog(QDialog):
    """Word count setting plus read-only info about the active word list."""

    def __init__(self, config: PassphraseConfig, word_list_path: str, entry_count: Optional[int],
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWindowTitle("Würfelware options")

        self.spin_words = QSpinBox()
        self.spin_words.setRange(MIN_WORDS, MAX_WORDS)
        self.spin_words.setValue(config.word_count)
        self.spin_words.setButtonSymbols(QAbstractSpinBox.NoButtons)
        self.spin_words.setMaximumWidth(72)

        self.lbl_path = QLabel(word_list_path)
        self.lbl_path.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_entries = QLabel("—" if entry_count is None else str(entry_count))

        form = QFormLayout()
        form.addRow("Words per passphrase:", _spin_row(self.spin_words))
        form.addRow("Word list:", self.lbl_path)
        form.addRow("Words in list:", self.lbl_entries)

        buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        root = QVBoxLayout(self)
        root.addLayout(form)
        root.addWidget(buttons)

    def configuration(self) -> PassphraseConfig:
        return PassphraseConfig(self.spin_words.value())


# ---------------- Main window ----------------

class PassphraseWindow(QMainWindow):
    def __init__(self, generator: Optional[PassphraseGenerator] = None):
        super().__init__()
        self.setWindowTitle("Würfelware - Passphrases for everybody")
        self.generator = generator if generator is not None else PassphraseGenerator()
        self.store: ConfigurationStore = self.generator.store
        self.settings = self.store.settings

        geom = self.settings.value("geometry", None)
        if geom is None or not self.restoreGeometry(geom):
            screen = QGuiApplication.primaryScreen()
            if screen:
                avail = screen.availableGeometry()
                self.resize(min(max(640, int(avail.width() * 0.30)), 1000),
                            min(max(420, int(avail.height() * 0.40)), 800))
                frame = self.frameGeometry(); frame.moveCenter(avail.center()); self.move(frame.topLeft())
            else:
                self.resize(720, 480)

        central = QWidget(self); self.setCentralWidget(central)
        root = QVBoxLayout(central); root.setContentsMargins(12, 12, 12, 12); root.setSpacing(12)

        # -------- Parameters --------
        params_box = QGroupBox("Parameters")
        grid = QGridLayout(params_box)
        grid.setHorizontalSpacing(10)
        grid.setVerticalSpacing(8)

        self.lbl_words = QLabel()
        self.btn_options = QPushButton("Options…")
        self.btn_options.clicked.connect(self.on_options)

        self.cmb_mode = QComboBox()
        self.cmb_mode.addItems(["Single", "Multiple"])
        self.cmb_mode.currentIndexChanged.connect(self.on_mode_changed)

        self.spin_count = QSpinBox()
        self.spin_count.setRange(1, 1_000)
        self.spin_count.setValue(10)
        self.spin_count.setButtonSymbols(QAbstractSpinBox.NoButtons)
        self.spin_count.setMaximumWidth(72)
        self.count_controls_w = _spin_row(self.spin_count)

        self.lbl_wordlist = QLabel()
        self.btn_load_wordlist = QPushButton("Choose word list…")
        self.btn_load_wordlist.clicked.connect(self.on_load_wordlist)

        grid.addWidget(QLabel("Words:"),          0, 0, alignment=Qt.AlignRight | Qt.AlignVCenter)
        grid.addWidget(self.lbl_words,            0, 1)
        grid.addWidget(self.btn_options,          0, 3)
        grid.addWidget(QLabel("Mode:"),           1, 0, alignment=Qt.AlignRight | Qt.AlignVCenter)
        grid.addWidget(self.cmb_mode,             1, 1)
        grid.addWidget(QLabel("Count:"),          1, 2, alignment=Qt.AlignRight | Qt.AlignVCenter)
        grid.addWidget(self.count_controls_w,     1, 3)
        grid.addWidget(QLabel("Word list:"),      2, 0, alignment=Qt.AlignRight | Qt.AlignVCenter)
        grid.addWidget(self.lbl_wordlist,         2, 1, 1, 2)
        grid.addWidget(self.btn_load_wordlist,    2, 3)
        grid.setColumnStretch(1, 1)
        root.addWidget(params_box)

        # Buttons
        btns = QHBoxLayout(); btns.setSpacing(8)
        self.btn_generate = QPushButton("Generate")
        self.btn_copy_first = QPushButton("Copy First")
        self.btn_copy_all = QPushButton("Copy All")
        self.btn_clear = QPushButton("Clear")
        self.btn_generate.clicked.connect(self.on_generate)
        self.btn_copy_first.clicked.connect(self.copy_first)
        self.btn_copy_all.clicked.connect(self.copy_all)
        self.btn_clear.clicked.connect(self.clear_output)
        btns.addStretch(1)
        for b in (self.btn_generate, self.btn_copy_first, self.btn_copy_all, self.btn_clear):
            btns.addWidget(b)
        root.addLayout(btns)

        # Output
        self.out = QPlainTextEdit(); self.out.setReadOnly(True)
        self.out.setPlaceholderText("Generated passphrases will appear here...")
        root.addWidget(self.out, 1)

        self._restore_settings()
        self.on_mode_changed()
        self._refresh_labels()

    # ---------- helpers & events ----------

    def closeEvent(self, event) -> None:  # noqa: N802
        try:
            self.settings.setValue("geometry", self.saveGeometry())
            self._save_settings()
        finally:
            super().closeEvent(event)

    def show_error(self, message: str) -> None:
        QMessageBox.critical(self, "Error", message)

    def word_list_path(self) -> Path:
        return resolve_word_list_path(store=self.store)

    def _refresh_labels(self) -> None:
        self.lbl_words.setText(str(self.store.load().word_count))
        current = self.generator.cache.current
        path = self.word_list_path()
        if current is not None and self.generator.cache.path == str(path):
            self.lbl_wordlist.setText(f"{current.entry_count} words from: {path.name}")
        else:
            self.lbl_wordlist.setText(path.name)
        self.lbl_wordlist.setToolTip(str(path))

    def on_mode_changed(self) -> None:
        is_multiple = (self.cmb_mode.currentText().lower() == "multiple")
        self.count_controls_w.setEnabled(is_multiple)

    def on_options(self) -> None:
        path = self.word_list_path()
        entry_count = None
        try:
            entry_count = self.generator.word_list(path).entry_count
        except (WuerfelwareError, OSError) as exc:
            logger.warning("Word list unavailable for options dialog: %s", exc)
        dialog = OptionsDialog(self.store.load(), str(path), entry_count, self)
        if dialog.exec() == QDialog.Accepted:
            self.store.save(dialog.configuration())
        self._refresh_labels()

    def on_load_wordlist(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, "Choose word list", str(self.word_list_path().parent), "Text Files (*.txt);;All Files (*)"
        )
        if not path:
            return
        self.store.set_word_list_path(path)
        self._refresh_labels()

    # ---------- generation & actions ----------

    def on_generate(self) -> None:
        count = self.spin_count.value() if self.cmb_mode.currentText().lower() == "multiple" else 1
        try:
            passphrases = self.generator.generate(count=count)
        except (WuerfelwareError, OSError) as exc:
            self.show_error(f"Generation failed:\n{exc}")
            return
        finally:
            self._refresh_labels()
        self.out.setPlainText("\n".join(passphrases))

    def copy_first(self) -> None:
        lines = self.out.toPlainText().splitlines()
        if not lines: return
        first = lines[0].strip()
        if not first: return
        QApplication.clipboard().setText(first, mode=QClipboard.Clipboard)

    def copy_all(self) -> None:
        text = self.out.toPlainText().strip()
        if not text: return
        QApplication.clipboard().setText(text, mode=QClipboard.Clipboard)

    def clear_output(self) -> None:
        self.out.clear()

    # ----- settings persistence -----

    def _save_settings(self) -> None:
        self.settings.setValue("mode", self.cmb_mode.currentText())
        self.settings.setValue("count", self.spin_count.value())

    def _restore_settings(self) -> None:
        self.spin_count.setValue(int(self.settings.value("count", 10)))
        idx = self.cmb_mode.findText(self.settings.value("mode", "Single", str))
        if idx >= 0:
            self.cmb_mode.setCurrentIndex(idx)


# ---------------- Entrypoint ----------------

def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    w = PassphraseWindow(); w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
