"""
codec — the .cht text format.

Public API
──────────
CheatEntry, ChtDocument   — in-memory document model
decode_code / encode_code — packed `+` code ⇄ multi-line display form
detect_layout, CodeLayout — Code-Breaker / Action-Replay classification
parse                     — raw text → ChtDocument
serialize                 — ChtDocument → raw text

Everything here is pure: no I/O, no shared state.
"""

from cht_editor.codec.models import CheatEntry, ChtDocument, new_cheat_id
from cht_editor.codec.transcoder import (
    CodeLayout,
    decode,
    decode_code,
    detect_layout,
    encode,
    encode_code,
)
from cht_editor.codec.parser import iter_blocks, parse
from cht_editor.codec.serializer import serialize

__all__ = [
    "CheatEntry",
    "ChtDocument",
    "new_cheat_id",
    "CodeLayout",
    "decode",
    "decode_code",
    "detect_layout",
    "encode",
    "encode_code",
    "iter_blocks",
    "parse",
    "serialize",
]
