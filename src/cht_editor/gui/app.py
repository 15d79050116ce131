"""Start-up helper for the PyQt6 editor."""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from cht_editor.config import EditorConfig
from cht_editor.gui.main_window import MainWindow

__all__ = ["run_app"]

logger = logging.getLogger(__name__)


def run_app(path: Optional[str] = None, config: Optional[EditorConfig] = None) -> int:
    """Show the main window, optionally with *path* open, and run the event loop."""
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(config)
    if path:
        window.open_file(path)
    window.show()
    logger.debug("Editor window shown")
    return app.exec()
