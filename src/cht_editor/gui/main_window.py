"""
MainWindow — top-level window of the cht-editor GUI.

Hosts the cheat list (left) and the cheat form (right) in a splitter, with a
toolbar for the document actions:

  Open · New · Add · Remove · Save As · Copy

All document state lives in one CheatListViewModel shared by both panels.
Failures (bad file, unparsable text) are reported in a message box and leave
the open document unchanged.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QGuiApplication
from PyQt6.QtWidgets import (
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QSplitter,
    QToolBar,
    QWidget,
)

from cht_editor.config import EditorConfig
from cht_editor.exceptions import ChtEditorError
from cht_editor.files import export_file_name, read_document, write_document
from cht_editor.gui.viewmodels import CheatListViewModel
from cht_editor.gui.widgets.cheat_form import CheatFormPanel
from cht_editor.gui.widgets.cheat_list import CheatListPanel

__all__ = ["MainWindow"]

logger = logging.getLogger(__name__)

_FILE_FILTER = "Cheat files (*.cht);;All files (*)"


class MainWindow(QMainWindow):
    """Root window: wires the toolbar, the two panels and the viewmodel."""

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        parent: QWidget = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or EditorConfig()
        self._vm = CheatListViewModel()
        self._vm.new_document(self._config.default_name)

        self.setWindowTitle("CHT Editor")
        self.resize(820, 520)

        self._build_ui()
        self._build_toolbar()
        self._refresh_all()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self._list_panel = CheatListPanel(self._vm)
        self._form_panel = CheatFormPanel(self._vm)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(self._list_panel)
        splitter.addWidget(self._form_panel)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self._list_panel.selection_changed.connect(self._form_panel.refresh)
        self._list_panel.document_changed.connect(self._on_document_changed)
        self._form_panel.applied.connect(self._on_form_applied)

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Document")
        self.addToolBar(toolbar)

        self._actions: dict[str, QAction] = {}
        for key, label, slot in (
            ("open",   "Open…",    self._on_open),
            ("new",    "New",      self._on_new),
            ("add",    "Add",      self._on_add),
            ("remove", "Remove",   self._on_remove),
            ("save",   "Save As…", self._on_save),
            ("copy",   "Copy",     self._on_copy),
        ):
            action = QAction(label, self)
            action.triggered.connect(slot)
            toolbar.addAction(action)
            self._actions[key] = action

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_open(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Open cheat file", "", _FILE_FILTER)
        if path:
            self.open_file(path)

    def _on_new(self) -> None:
        self._vm.new_document(self._config.default_name)
        self._refresh_all()

    def _on_add(self) -> None:
        self._vm.add_cheat(description="New cheat")
        self._refresh_all()

    def _on_remove(self) -> None:
        cheat = self._vm.selected
        if cheat is None:
            return
        self._vm.remove_cheat(cheat.id)
        self._refresh_all()

    def _on_save(self) -> None:
        suggested = export_file_name(self._vm.document)
        path, _ = QFileDialog.getSaveFileName(self, "Save cheat file", suggested, _FILE_FILTER)
        if path:
            self.save_file(path)

    def _on_copy(self) -> None:
        try:
            text = self._vm.export_text()
        except ChtEditorError as exc:
            self._show_error("Copy failed", exc)
            return
        QGuiApplication.clipboard().setText(text)
        self.statusBar().showMessage("Copied to clipboard", 3000)

    def _on_document_changed(self) -> None:
        self._form_panel.refresh()
        self._update_status()

    def _on_form_applied(self) -> None:
        self._list_panel.refresh()
        self._update_status()

    # ── Public API ─────────────────────────────────────────────────────────

    def open_file(self, path: str) -> bool:
        """Load *path* into the editor; returns False (and warns) on failure."""
        try:
            doc = read_document(path, self._config)
        except ChtEditorError as exc:
            self._show_error("Cannot open file", exc)
            return False
        self._vm.load_document(doc)
        self._refresh_all()
        return True

    def save_file(self, path: str) -> bool:
        """Write the open document to *path*; returns False (and warns) on failure."""
        try:
            write_document(self._vm.document, path, self._config)
        except ChtEditorError as exc:
            self._show_error("Cannot save file", exc)
            return False
        self._vm.document.name = Path(path).name
        self._vm.dirty = False
        self._update_status()
        return True

    @property
    def view_model(self) -> CheatListViewModel:
        return self._vm

    # ── Internal helpers ───────────────────────────────────────────────────

    def _refresh_all(self) -> None:
        self._list_panel.refresh()
        self._form_panel.refresh()
        self._update_status()

    def _update_status(self) -> None:
        doc = self._vm.document
        if doc is None:
            self.statusBar().clearMessage()
            return
        message = f"{doc.name}: {len(doc.cheats)} cheats"
        if self._vm.has_count_mismatch:
            message += f" (header declares {doc.cheats_count})"
        if self._vm.dirty:
            message += " — modified"
        self.setWindowTitle(f"CHT Editor — {doc.name}")
        self.statusBar().showMessage(message)

    def _show_error(self, title: str, exc: Exception) -> None:
        logger.warning("%s: %s", title, exc)
        QMessageBox.warning(self, title, str(exc))
