"""
CheatFormPanel — right-hand side of the editor window.

Edits the selected cheat.  The code box shows the decoded display form, one
`address value` pair or token per line; it is packed again only on save.

Layout
──────
  ┌──────────────────────────────┐
  │ Description: [______________]│
  │ Code:                        │
  │ ┌──────────────────────────┐ │
  │ │8009C6A4 0063             │ │
  │ │8009C6A6 0063             │ │
  │ └──────────────────────────┘ │
  │ ☑ Enabled          [Apply]   │
  └──────────────────────────────┘
"""

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFontDatabase
from PyQt6.QtWidgets import (
    QCheckBox,
    QFormLayout,
    QHBoxLayout,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cht_editor.gui.viewmodels import CheatListViewModel

__all__ = ["CheatFormPanel"]

logger = logging.getLogger(__name__)


class CheatFormPanel(QWidget):
    """Form bound to CheatListViewModel.selected."""

    applied = pyqtSignal()   # the selected cheat was updated from the form

    def __init__(self, vm: CheatListViewModel, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._build_ui()
        self.refresh()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        form = QFormLayout()
        self._desc_edit = QLineEdit()
        form.addRow("Description:", self._desc_edit)
        self._code_edit = QPlainTextEdit()
        self._code_edit.setFont(
            QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)
        )
        self._code_edit.setPlaceholderText("ADDRESS VALUE, one per line")
        form.addRow("Code:", self._code_edit)
        layout.addLayout(form)

        btn_row = QHBoxLayout()
        self._enabled_check = QCheckBox("Enabled")
        btn_row.addWidget(self._enabled_check)
        btn_row.addStretch()
        self._apply_btn = QPushButton("Apply")
        self._apply_btn.clicked.connect(self.apply)
        btn_row.addWidget(self._apply_btn)
        layout.addLayout(btn_row)

    # ── Public API ─────────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Load the selected cheat into the form (or clear and disable it)."""
        cheat = self._vm.selected
        self.setEnabled(cheat is not None)
        self._desc_edit.setText(cheat.description if cheat else "")
        self._code_edit.setPlainText(cheat.code if cheat else "")
        self._enabled_check.setChecked(cheat.enabled if cheat else False)

    def apply(self) -> None:
        """Write the form back into the selected cheat."""
        cheat = self._vm.selected
        if cheat is None:
            return
        # A newline cannot be stored in a description line
        description = " ".join(self._desc_edit.text().splitlines())
        self._vm.update_cheat(
            cheat.id,
            description=description,
            code=self._code_edit.toPlainText(),
        )
        self._vm.set_enabled(cheat.id, self._enabled_check.isChecked())
        self.applied.emit()
