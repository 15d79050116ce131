"""
Serializer — ChtDocument → raw .cht text.

Output shape (no trailing newline after the last block):

  cheats = {cheats_count}

  cheat0_desc = "{description}"
  cheat0_code = "{encode_code(code)}"
  cheat0_enable = true|false

The N in cheatN_* is the entry's current position in the list, so
reordering renames the keys.  cheats_count is written exactly as stored.
"""

import logging

from cht_editor.exceptions import SerializeError

from .models import CheatEntry, ChtDocument
from .transcoder import encode_code

__all__ = ["format_block", "serialize"]

logger = logging.getLogger(__name__)


def _check_description(description: str, index: int) -> None:
    if "\n" in description:
        raise SerializeError(
            f"cheat{index} description spans several lines: {description!r}"
        )


def format_block(index: int, cheat: CheatEntry) -> list[str]:
    """Return the three lines of one cheat block for position *index*."""
    _check_description(cheat.description, index)
    code = encode_code(cheat.code)
    return [
        f'cheat{index}_desc = "{cheat.description}"',
        f'cheat{index}_code = "{code}"',
        f"cheat{index}_enable = {'true' if cheat.enabled else 'false'}",
    ]


def serialize(doc: ChtDocument) -> str:
    """
    Render *doc* as .cht text.  The document is not modified.

    Raises:
        SerializeError: a description holds a newline, which the line-based
            format cannot represent.
    """
    lines = [f"cheats = {doc.cheats_count}"]
    for index, cheat in enumerate(doc.cheats):
        lines.append("")
        lines.extend(format_block(index, cheat))

    logger.debug("Serialized %d cheats (declared %d)", len(doc.cheats), doc.cheats_count)
    return "\n".join(lines)
