r"""
cht-editor — read, edit and write emulator .cht cheat-code files.

    >>> from cht_editor import parse, serialize
    >>> doc = parse('cheats = 1\n\ncheat0_desc = "Infinite HP"\n'
    ...             'cheat0_code = "ABCD1234+EF01"\ncheat0_enable = true')
    >>> doc.cheats[0].code
    'ABCD1234 EF01'
    >>> serialize(doc).splitlines()[3]
    'cheat0_code = "ABCD1234+EF01"'
"""

from cht_editor.codec import (
    CheatEntry,
    ChtDocument,
    CodeLayout,
    decode,
    decode_code,
    detect_layout,
    encode,
    encode_code,
    parse,
    serialize,
)

__all__ = [
    "CheatEntry",
    "ChtDocument",
    "CodeLayout",
    "decode",
    "decode_code",
    "detect_layout",
    "encode",
    "encode_code",
    "parse",
    "serialize",
]

__version__ = "0.1.0"
