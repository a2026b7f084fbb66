"""GSM 03.38 7-bit alphabet tables."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

ESCAPE = 0x1B

# One row per 16 codes; the 0x1B slot is the escape marker, not a character.
GSM7_BASIC_TABLE = (
    "@£$¥èéùìòÇ\nØø\rÅå"
    "Δ_ΦΓΛΩΠΨΣΘΞ\x1bÆæßÉ"
    " !\"#¤%&'()*+,-./"
    "0123456789:;<=>?"
    "¡ABCDEFGHIJKLMNO"
    "PQRSTUVWXYZÄÖÑÜ§"
    "¿abcdefghijklmno"
    "pqrstuvwxyzäöñüà"
)

GSM7_EXTENDED_TABLE: Mapping[int, str] = MappingProxyType(
    {
        0x0A: "\u000c",
        0x14: "^",
        0x28: "{",
        0x29: "}",
        0x2F: "\\",
        0x3C: "[",
        0x3D: "~",
        0x3E: "]",
        0x40: "|",
        0x65: "€",
    }
)

GSM7_BASIC_MAP: Mapping[str, int] = MappingProxyType(
    {ch: idx for idx, ch in enumerate(GSM7_BASIC_TABLE) if idx != ESCAPE}
)
GSM7_EXTENDED_REVERSE: Mapping[str, int] = MappingProxyType(
    {v: k for k, v in GSM7_EXTENDED_TABLE.items()}
)


@dataclass(frozen=True)
class BaseHit:
    """A character found in the base table."""

    code: int

    @property
    def codes(self) -> Tuple[int, ...]:
        return (self.code,)

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True)
class ExtensionHit:
    """A character reached through the escape marker."""

    code: int

    @property
    def codes(self) -> Tuple[int, ...]:
        return (ESCAPE, self.code)

    def __len__(self) -> int:
        return 2


Hit = Union[BaseHit, ExtensionHit]

_ENCODE_HITS: Mapping[str, Hit] = MappingProxyType(
    {
        **{ch: BaseHit(code) for ch, code in GSM7_BASIC_MAP.items()},
        **{ch: ExtensionHit(code) for ch, code in GSM7_EXTENDED_REVERSE.items()},
    }
)


def lookup_encode(char: str) -> Optional[Hit]:
    """Return the table entry for *char*, or ``None`` when it has no mapping."""

    return _ENCODE_HITS.get(char)


def lookup_decode_base(code: int) -> Optional[str]:
    """Return the base-table character for *code*.

    The escape marker and values outside 0..127 have no character.
    """

    if code == ESCAPE or not 0 <= code < len(GSM7_BASIC_TABLE):
        return None
    return GSM7_BASIC_TABLE[code]


def lookup_decode_extension(code: int) -> Optional[str]:
    """Return the extension character for the code following an escape."""

    return GSM7_EXTENDED_TABLE.get(code)


__all__ = [
    "ESCAPE",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "GSM7_BASIC_MAP",
    "GSM7_EXTENDED_REVERSE",
    "BaseHit",
    "ExtensionHit",
    "Hit",
    "lookup_encode",
    "lookup_decode_base",
    "lookup_decode_extension",
]
