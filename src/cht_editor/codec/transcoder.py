"""
Code transcoder — packed on-disk cheat codes ⇄ editable display form.

On disk every cheat code is a single `+`-joined token string:

  cheat0_code = "8009C6A4+0063+8009C6A6+0063"

In the editor the same code is shown one line per instruction.  The packed
form carries no layout tag, so the layout is inferred from the length of the
second token:

  CODE_BREAKER   second token is 4 chars → tokens pair up as `address value`
                   8009C6A4 0063
                   8009C6A6 0063
  ACTION_REPLAY  anything else → one token per line (Action Replay / GameShark)
                   ABCD1234
                   EF010203
  SINGLE         no `+` at all → the raw value is shown unchanged

encode_code() goes the other way and is layout-agnostic: every run of spaces
and newlines collapses into one `+`.  Token content survives a round trip;
the layout is simply re-inferred on the next decode.

Neither direction validates that tokens are hexadecimal, and neither can fail.
"""

import logging
import re
from enum import Enum

__all__ = [
    "CodeLayout",
    "detect_layout",
    "decode_code",
    "encode_code",
    "decode",
    "encode",
]

logger = logging.getLogger(__name__)

_SEPARATOR = "+"
# Second-token length that marks a Code-Breaker (address, value) layout
_CODE_BREAKER_VALUE_LEN = 4
# Runs of spaces / newlines in the display form become one separator
_WHITESPACE_RUN_RE = re.compile(r"[ \n]+")


class CodeLayout(str, Enum):
    SINGLE        = "single"
    CODE_BREAKER  = "code_breaker"
    ACTION_REPLAY = "action_replay"


def detect_layout(raw: str) -> CodeLayout:
    """Classify a packed code by its second `+`-separated token."""
    parts = raw.split(_SEPARATOR)
    if len(parts) == 1:
        return CodeLayout.SINGLE
    if len(parts[1]) == _CODE_BREAKER_VALUE_LEN:
        return CodeLayout.CODE_BREAKER
    return CodeLayout.ACTION_REPLAY


def decode_code(raw: str) -> str:
    """
    Turn a packed on-disk code into its multi-line display form.

    Args:
        raw: the unquoted value of a cheatN_code line.

    Returns:
        The display form; *raw* itself when it contains no `+`.
    """
    parts = raw.split(_SEPARATOR)
    layout = detect_layout(raw)

    if layout is CodeLayout.SINGLE:
        return raw

    if layout is CodeLayout.CODE_BREAKER:
        # An odd trailing token has no value partner and stays on its own line
        lines = [" ".join(parts[i:i + 2]) for i in range(0, len(parts), 2)]
    else:
        lines = parts

    return "\n".join(lines).removesuffix("\n")


def encode_code(display: str) -> str:
    """
    Turn an edited display-form code back into the packed on-disk form.

    A trailing space or blank line in the editor does not leave a dangling `+`.
    """
    return _WHITESPACE_RUN_RE.sub(_SEPARATOR, display).removesuffix(_SEPARATOR)


# Short aliases matching the codec's two directions
decode = decode_code
encode = encode_code
