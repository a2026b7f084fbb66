"""GSM 7-bit codes to Unicode text."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from .errors import InvalidCodeError, InvalidEscapeError, TruncatedEscapeError
from .tables import ESCAPE, lookup_decode_base, lookup_decode_extension


class DecoderState(Enum):
    NORMAL = "normal"
    AFTER_ESCAPE = "after_escape"


def decode_gsm7_text(
    codes: Iterable[int], *, replacement: Optional[str] = None
) -> str:
    """Decode unpacked GSM 7-bit *codes* into text.

    By default any malformed input fails the whole call: a code outside the
    base table, an escape followed by a code outside the extension table, or
    an escape marker as the final code. With *replacement* set, invalid codes
    and invalid escape pairs decode to it instead; a trailing escape marker
    still raises :class:`TruncatedEscapeError`.
    """

    if isinstance(codes, str):
        raise TypeError("GSM 7-bit decoding expects a sequence of codes, not text")
    chars: List[str] = []
    state = DecoderState.NORMAL
    escape_position = 0
    for position, code in enumerate(codes):
        if state is DecoderState.AFTER_ESCAPE:
            char = lookup_decode_extension(code)
            if char is None:
                if replacement is None:
                    raise InvalidEscapeError(code, position)
                char = replacement
            chars.append(char)
            state = DecoderState.NORMAL
        elif code == ESCAPE:
            escape_position = position
            state = DecoderState.AFTER_ESCAPE
        else:
            char = lookup_decode_base(code)
            if char is None:
                if replacement is None:
                    raise InvalidCodeError(code, position)
                char = replacement
            chars.append(char)
    if state is DecoderState.AFTER_ESCAPE:
        raise TruncatedEscapeError(escape_position)
    return "".join(chars)


__all__ = ["DecoderState", "decode_gsm7_text"]
