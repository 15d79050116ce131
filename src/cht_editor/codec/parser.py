"""
Parser — raw .cht text → ChtDocument.

Text shape
──────────
  cheats = 2
  <blank>
  cheat0_desc = "Infinite HP"
  cheat0_code = "ABCD1234+EF01"
  cheat0_enable = true
  <blank>
  cheat1_desc = "..."
  ...

The header declares the count.  Every blank line opens a block whose next
three lines are read positionally as description, code and enabled — key
names are not consulted.  Blocks are produced lazily by iter_blocks() and
consumed once into the document's entry list.

Lines are split on "\\n" only; a "\\r" from CRLF input stays inside the
field values.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator

from cht_editor.exceptions import FieldFormatError, HeaderError, StructuralError

from .models import CheatEntry, ChtDocument
from .transcoder import decode_code

__all__ = ["RawBlock", "split_field", "parse_header", "iter_blocks", "parse"]

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = " = "
_QUOTE = '"'
_TRUE = "true"
# Lines following a blank marker: description, code, enable
_BLOCK_SIZE = 3
_COUNT_RE = re.compile(r"^\d+$")


@dataclass
class RawBlock:
    """The three undecoded values of one cheat block, plus where it started."""
    line_no:     int     # 1-based line number of the description line
    description: str
    code:        str
    enable:      str


def split_field(line: str, line_no: int) -> tuple[str, str]:
    """
    Split a `key = value` line at its first ` = `.

    Raises:
        FieldFormatError: if the separator is missing.
    """
    key, sep, value = line.partition(_FIELD_SEPARATOR)
    if not sep:
        raise FieldFormatError(f"expected 'key = value', got {line!r}", line_no)
    return key, value


def _unquote(value: str) -> str:
    """Drop one leading and one trailing double quote, if present."""
    return value.removeprefix(_QUOTE).removesuffix(_QUOTE)


def _is_blank(line: str) -> bool:
    return not line.strip()


def parse_header(lines: list[str]) -> int:
    """
    Return the cheat count declared on the first line.

    Raises:
        HeaderError: if the line is absent, has no `=`, or the count is
            not a non-negative integer.
    """
    if not lines or _is_blank(lines[0]):
        raise HeaderError("missing 'cheats = N' header", 1)

    _key, sep, value = lines[0].partition("=")
    if not sep:
        raise HeaderError(f"malformed header {lines[0]!r}", 1)

    value = value.strip()
    if not _COUNT_RE.match(value):
        raise HeaderError(f"cheat count {value!r} is not a non-negative integer", 1)
    return int(value)


def iter_blocks(lines: list[str]) -> Iterator[RawBlock]:
    """
    Yield one RawBlock per blank-line marker after the header.

    Raises:
        StructuralError:  a marker is followed by non-blank content but
            fewer than three lines before the last non-blank one.
        FieldFormatError: a block line has no ` = ` separator.
    """
    # Index of the last non-blank line; trailing blank lines are padding
    last = len(lines) - 1
    while last > 0 and _is_blank(lines[last]):
        last -= 1

    i = 1
    while i < last:
        if not _is_blank(lines[i]):
            logger.debug("Skipping stray line %d: %r", i + 1, lines[i])
            i += 1
            continue

        remaining = last - i
        if remaining < _BLOCK_SIZE:
            raise StructuralError(
                f"cheat block has {remaining} of {_BLOCK_SIZE} lines before end of input",
                i + 2,
            )

        fields = [
            split_field(lines[i + k], i + k + 1)[1]
            for k in range(1, _BLOCK_SIZE + 1)
        ]
        yield RawBlock(
            line_no=i + 2,
            description=fields[0],
            code=fields[1],
            enable=fields[2],
        )
        i += _BLOCK_SIZE + 1


def _to_entry(block: RawBlock) -> CheatEntry:
    return CheatEntry(
        description=_unquote(block.description),
        code=decode_code(_unquote(block.code)),
        enabled=block.enable.strip() == _TRUE,
    )


def parse(text: str, name: str = "") -> ChtDocument:
    """
    Parse .cht *text* into a ChtDocument.

    The declared header count is kept as given, even when it disagrees with
    the number of blocks found (see ChtDocument.count_matches).

    Args:
        text: the whole file contents.
        name: source file name, carried on the document for re-export.

    Raises:
        HeaderError, StructuralError, FieldFormatError (all ParseError).
    """
    lines = text.split("\n")
    cheats_count = parse_header(lines)
    cheats = [_to_entry(block) for block in iter_blocks(lines)]

    logger.debug(
        "Parsed %d cheat blocks from %d lines (header declares %d)",
        len(cheats), len(lines), cheats_count,
    )
    return ChtDocument(name=name, cheats_count=cheats_count, cheats=cheats)
