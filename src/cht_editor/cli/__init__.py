"""
cli — command-line interface for cht-editor.

Entry points
────────────
  python -m cht_editor   (via cht_editor/__main__.py)
  cht-editor             (via pyproject.toml [project.scripts])

Subcommands: show | check | export | gui
"""

from cht_editor.cli.main import build_parser, cmd_check, cmd_export, cmd_show, main

__all__ = ["build_parser", "cmd_check", "cmd_export", "cmd_show", "main"]
