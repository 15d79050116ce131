"""
CLI entry point for cht-editor.

Usage
─────
  # Print every cheat with its decoded code
  cht-editor show "Super Mario 64 (USA).cht"

  # Verify the header count matches the cheat blocks
  cht-editor check "Super Mario 64 (USA).cht"

  # Re-serialize (normalize) a file, to stdout or to a new path
  cht-editor export "Super Mario 64 (USA).cht" --output ./out/sm64.cht

  # Open the graphical editor
  cht-editor gui "Super Mario 64 (USA).cht"

Subcommands are implemented as standalone functions (cmd_show, cmd_check,
cmd_export, cmd_gui) so they can be unit-tested without invoking argparse.
"""

import argparse
import logging
import sys
import textwrap
from pathlib import Path
from typing import Optional

from cht_editor.codec import detect_layout, encode_code, serialize
from cht_editor.config import EditorConfig
from cht_editor.exceptions import ChtEditorError
from cht_editor.files import read_document, write_document

__all__ = ["build_parser", "cmd_show", "cmd_check", "cmd_export", "cmd_gui", "main"]

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """
    Build and return the top-level argument parser.

    Subcommands: show | check | export | gui
    """
    parser = argparse.ArgumentParser(
        prog="cht-editor",
        description="Read, check and rewrite emulator .cht cheat files",
    )
    parser.add_argument(
        "--encoding",
        default=None,
        metavar="NAME",
        help="Text encoding of .cht files (default: $CHT_EDITOR_ENCODING or utf-8)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Enable verbose debug logging",
    )

    sub = parser.add_subparsers(dest="subcommand")

    # ── show ──────────────────────────────────────────────────────────────
    show = sub.add_parser("show", help="Print the cheats of a .cht file")
    show.add_argument("file", metavar="FILE", help="Path to the .cht file")

    # ── check ─────────────────────────────────────────────────────────────
    check = sub.add_parser("check", help="Check the declared cheat count")
    check.add_argument("file", metavar="FILE", help="Path to the .cht file")

    # ── export ────────────────────────────────────────────────────────────
    exp = sub.add_parser("export", help="Re-serialize a .cht file")
    exp.add_argument("file", metavar="FILE", help="Path to the .cht file")
    exp.add_argument(
        "--output",
        default=None,
        metavar="PATH",
        help="Write to PATH instead of stdout",
    )

    # ── gui ───────────────────────────────────────────────────────────────
    gui = sub.add_parser("gui", help="Open the graphical cheat editor")
    gui.add_argument("file", nargs="?", default=None, metavar="FILE",
                     help="Optional .cht file to open at start-up")

    return parser


# ── Command implementations ───────────────────────────────────────────────────


def cmd_show(path: str, config: EditorConfig) -> None:
    """Print each cheat: index, enabled mark, description, layout, code."""
    doc = read_document(path, config)
    print(f"{doc.name}: {len(doc.cheats)} cheats (declared {doc.cheats_count})")
    for index, cheat in enumerate(doc.cheats):
        layout = detect_layout(encode_code(cheat.code))
        print(f"{index:>4}  {cheat}  ({layout.value})")
        if cheat.code:
            print(textwrap.indent(cheat.code, " " * 10))


def cmd_check(path: str, config: EditorConfig) -> bool:
    """
    Compare the header count with the blocks actually present.

    Returns:
        True iff they agree.
    """
    doc = read_document(path, config)
    if doc.count_matches:
        print(f"OK: {doc.name} declares and contains {doc.cheats_count} cheats")
        return True
    print(
        f"MISMATCH: {doc.name} declares {doc.cheats_count} cheats "
        f"but contains {len(doc.cheats)}"
    )
    return False


def cmd_export(path: str, output: Optional[str], config: EditorConfig) -> Optional[Path]:
    """
    Parse *path* and serialize it again.

    Returns:
        The written path, or None when the text went to stdout.
    """
    doc = read_document(path, config)
    if output is None:
        sys.stdout.write(serialize(doc))
        sys.stdout.write("\n")
        return None
    out_path = write_document(doc, output, config)
    print(f"Exported → {out_path}")
    return out_path


def cmd_gui(path: Optional[str], config: EditorConfig) -> int:
    """Start the PyQt6 editor; returns the Qt event loop's exit code."""
    from cht_editor.gui.app import run_app
    return run_app(path, config)


# ── Entry point ───────────────────────────────────────────────────────────────


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point. Returns exit code."""
    parser = build_parser()
    ns = parser.parse_args(argv)

    config = EditorConfig.from_env()
    if ns.encoding:
        config.encoding = ns.encoding
    if ns.debug:
        config.debug = True

    logging.basicConfig(level=config.log_level, format="[%(levelname)s] %(message)s")

    if ns.subcommand is None:
        parser.print_help()
        return 0

    try:
        if ns.subcommand == "show":
            cmd_show(ns.file, config)
            return 0
        if ns.subcommand == "check":
            return 0 if cmd_check(ns.file, config) else 1
        if ns.subcommand == "export":
            cmd_export(ns.file, ns.output, config)
            return 0
        if ns.subcommand == "gui":
            return cmd_gui(ns.file, config)
    except ChtEditorError as exc:
        logger.debug("%s failed", ns.subcommand, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
