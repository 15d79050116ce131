"""
File boundary — the only place .cht text meets the filesystem.

The codec works on in-memory strings; these helpers read and write them.
Files are decoded without newline translation so that a CRLF file reaches
the parser with its "\\r" characters intact.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from cht_editor.codec import ChtDocument, parse, serialize
from cht_editor.config import DEFAULT_NAME, EditorConfig
from cht_editor.exceptions import ChtFileError

__all__ = ["read_text", "read_document", "write_document", "export_file_name"]

logger = logging.getLogger(__name__)

_SUFFIX = ".cht"

PathLike = Union[str, Path]


def read_text(path: PathLike, config: Optional[EditorConfig] = None) -> str:
    """
    Return the contents of *path* decoded with config.encoding.

    Raises:
        ChtFileError: the file is missing, unreadable or not valid text.
    """
    config = config or EditorConfig()
    path = Path(path).expanduser()
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ChtFileError(f"cannot read {path}: {exc}") from exc
    try:
        return data.decode(config.encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        raise ChtFileError(f"cannot decode {path} as {config.encoding}: {exc}") from exc


def read_document(path: PathLike, config: Optional[EditorConfig] = None) -> ChtDocument:
    """
    Read and parse a .cht file.  The document's name is the file's base name.

    Raises:
        ChtFileError: see read_text().
        ParseError:   the contents are not a valid .cht document.
    """
    path = Path(path).expanduser()
    doc = parse(read_text(path, config), name=path.name)
    logger.info("Loaded %s: %d cheats", path.name, len(doc.cheats))
    return doc


def write_document(
    doc: ChtDocument,
    path: PathLike,
    config: Optional[EditorConfig] = None,
) -> Path:
    """
    Serialize *doc* and write it to *path* exactly as produced (no newline
    is appended).  Parent directories are created.

    Returns:
        The resolved output path.

    Raises:
        SerializeError: the document cannot be rendered.
        ChtFileError:   the file cannot be written.
    """
    config = config or EditorConfig()
    text = serialize(doc)
    out_path = Path(path).expanduser()
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(text.encode(config.encoding))
    except (OSError, UnicodeEncodeError, LookupError) as exc:
        raise ChtFileError(f"cannot write {out_path}: {exc}") from exc
    logger.info("Wrote %d cheats to %s", len(doc.cheats), out_path)
    return out_path


def export_file_name(doc: ChtDocument) -> str:
    """Name to save *doc* under: its source name, always ending in .cht."""
    stem = Path(doc.name).stem if doc.name else ""
    if not stem or stem.startswith("."):
        return DEFAULT_NAME
    return f"{stem}{_SUFFIX}"
