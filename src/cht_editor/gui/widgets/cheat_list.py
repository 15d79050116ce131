"""
CheatListPanel — left-hand side of the editor window.

Shows one row per cheat with a checkbox for the enabled flag.  Rows can be
dragged to reorder the document; dragging is switched off while a filter is
active because the visible rows are then only part of the document.

Layout
──────
  ┌──────────────────────────────┐
  │ Filter: [___________________]│
  │ ☑ Infinite HP                │
  │ ☐ Moon Jump                  │
  │ ☑ Have All Stars             │
  └──────────────────────────────┘
"""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from cht_editor.gui.viewmodels import CheatListViewModel

__all__ = ["CheatListPanel"]

logger = logging.getLogger(__name__)

_ID_ROLE = Qt.ItemDataRole.UserRole


class CheatListPanel(QWidget):
    """List of cheats bound to a CheatListViewModel."""

    selection_changed = pyqtSignal()   # vm.selected_id was updated
    document_changed  = pyqtSignal()   # enabled flag or order was edited

    def __init__(self, vm: CheatListViewModel, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = vm
        self._refreshing = False
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        filter_row = QHBoxLayout()
        filter_row.addWidget(QLabel("Filter:"))
        self._filter_edit = QLineEdit()
        self._filter_edit.setPlaceholderText("Filter by description…")
        self._filter_edit.textChanged.connect(self._on_filter_changed)
        filter_row.addWidget(self._filter_edit)
        layout.addLayout(filter_row)

        self._list = QListWidget()
        self._list.setDragDropMode(QAbstractItemView.DragDropMode.InternalMove)
        self._list.setDefaultDropAction(Qt.DropAction.MoveAction)
        self._list.currentItemChanged.connect(self._on_current_changed)
        self._list.itemChanged.connect(self._on_item_changed)
        self._list.model().rowsMoved.connect(self._on_rows_moved)
        layout.addWidget(self._list)

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_filter_changed(self, text: str) -> None:
        self._vm.filter_text = text
        self.refresh()

    def _on_current_changed(self, current: QListWidgetItem, _previous) -> None:
        if self._refreshing:
            return
        self._vm.select(current.data(_ID_ROLE) if current is not None else None)
        self.selection_changed.emit()

    def _on_item_changed(self, item: QListWidgetItem) -> None:
        if self._refreshing:
            return
        enabled = item.checkState() == Qt.CheckState.Checked
        self._vm.set_enabled(item.data(_ID_ROLE), enabled)
        self.document_changed.emit()

    def _on_rows_moved(self, *_args) -> None:
        if self._refreshing:
            return
        self._vm.reorder(self.visible_ids())
        logger.debug("Reordered cheats by drag and drop")
        self.document_changed.emit()

    # ── Public API ─────────────────────────────────────────────────────────

    def visible_ids(self) -> list[str]:
        """Return the cheat ids in the order the rows are shown."""
        return [self._list.item(row).data(_ID_ROLE) for row in range(self._list.count())]

    def refresh(self) -> None:
        """Rebuild the rows from the viewmodel, keeping the selection."""
        self._refreshing = True
        try:
            self._list.clear()
            for cheat in self._vm.visible_cheats:
                item = QListWidgetItem(cheat.description or "(no description)")
                item.setData(_ID_ROLE, cheat.id)
                item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
                item.setCheckState(
                    Qt.CheckState.Checked if cheat.enabled else Qt.CheckState.Unchecked
                )
                self._list.addItem(item)
                if cheat.id == self._vm.selected_id:
                    self._list.setCurrentItem(item)
            drag = (
                QAbstractItemView.DragDropMode.NoDragDrop
                if self._vm.filter_text
                else QAbstractItemView.DragDropMode.InternalMove
            )
            self._list.setDragDropMode(drag)
        finally:
            self._refreshing = False
