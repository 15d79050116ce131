"""
Project-wide custom exception hierarchy.
All modules raise subclasses of ChtEditorError — never bare Exception.
"""

from typing import Optional

__all__ = [
    "ChtEditorError",
    "CodecError",
    "ParseError",
    "HeaderError",
    "StructuralError",
    "FieldFormatError",
    "SerializeError",
    "DocumentError",
    "ChtFileError",
]


class ChtEditorError(Exception):
    """Root exception for all cht-editor errors."""


# ── Codec ─────────────────────────────────────────────────────────────────────

class CodecError(ChtEditorError):
    """Base class for errors raised while reading or writing .cht text."""


class ParseError(CodecError):
    """
    Raised when .cht text cannot be turned into a ChtDocument.

    line_no — 1-based line number of the offending line, if known
    """

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class HeaderError(ParseError):
    """Raised when the `cheats = N` header line is missing or malformed."""


class StructuralError(ParseError):
    """Raised when a cheat block is cut short by the end of input."""


class FieldFormatError(ParseError):
    """Raised when a block line lacks the ` = ` key/value separator."""


class SerializeError(CodecError):
    """Raised when a document holds a value that would break the line framing."""


# ── Editor ────────────────────────────────────────────────────────────────────

class DocumentError(ChtEditorError):
    """Raised on invalid edits: unknown cheat id, bad index, no open document."""


# ── Files ─────────────────────────────────────────────────────────────────────

class ChtFileError(ChtEditorError):
    """Raised when a .cht file cannot be read, decoded or written."""
