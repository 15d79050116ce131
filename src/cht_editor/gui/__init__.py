"""
gui — PyQt6 front-end for the cheat editor.

Public API
──────────
viewmodels                — pure-Python editor state (no Qt)
main_window.MainWindow    — top-level application window
app.run_app               — create the QApplication and show MainWindow
widgets                   — list and form panels

Only viewmodels is imported here so that the editor state can be used and
tested without a Qt installation or a display.
"""

from cht_editor.gui import viewmodels

__all__ = ["viewmodels"]
