"""Handling of characters that have no GSM 7-bit mapping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .errors import InvalidSubstituteError
from .tables import ESCAPE, lookup_decode_base, lookup_decode_extension, lookup_encode

Substitute = Union[str, int]


class PolicyKind(str, Enum):
    FAIL = "fail"
    REPLACE = "replace"
    SKIP = "skip"


@dataclass(frozen=True)
class UnsupportedCharPolicy:
    """What the encoder does with a character missing from both tables.

    Use :meth:`fail`, :meth:`replace` or :meth:`skip` rather than the
    constructor. A replacement substitute is resolved to GSM codes and
    validated once, when the policy is built.
    """

    kind: PolicyKind
    substitute_codes: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", PolicyKind(self.kind))
        object.__setattr__(self, "substitute_codes", tuple(self.substitute_codes))
        if self.kind is PolicyKind.REPLACE:
            if _codes_to_char(self.substitute_codes) is None:
                raise InvalidSubstituteError(
                    self.substitute_codes, "not a single GSM 7-bit character"
                )
        elif self.substitute_codes:
            raise ValueError(f"{self.kind.value} policy does not take a substitute")

    @classmethod
    def fail(cls) -> "UnsupportedCharPolicy":
        return cls(PolicyKind.FAIL)

    @classmethod
    def skip(cls) -> "UnsupportedCharPolicy":
        return cls(PolicyKind.SKIP)

    @classmethod
    def replace(cls, substitute: Substitute = "?") -> "UnsupportedCharPolicy":
        """Replace unsupported characters with *substitute*.

        *substitute* is a single character from the base or extension table,
        or a base-table code. Extension characters take two codes each.
        """
        return cls(PolicyKind.REPLACE, _resolve_substitute(substitute))

    @classmethod
    def from_name(
        cls, name: str, substitute: Substitute = "?"
    ) -> "UnsupportedCharPolicy":
        try:
            kind = PolicyKind(name.lower())
        except ValueError as exc:
            raise ValueError(f"Unknown unsupported-character policy {name!r}") from exc
        if kind is PolicyKind.REPLACE:
            return cls.replace(substitute)
        return cls(kind)

    @property
    def substitute(self) -> Optional[str]:
        if self.kind is not PolicyKind.REPLACE:
            return None
        return _codes_to_char(self.substitute_codes)

    @property
    def contributed_length(self) -> Optional[int]:
        """Encoded length of one unsupported character, ``None`` under fail."""
        if self.kind is PolicyKind.FAIL:
            return None
        return len(self.substitute_codes)


def _resolve_substitute(substitute: Substitute) -> Tuple[int, ...]:
    if isinstance(substitute, bool):
        raise InvalidSubstituteError(substitute, "expected a character or GSM code")
    if isinstance(substitute, int):
        if lookup_decode_base(substitute) is None:
            raise InvalidSubstituteError(
                substitute, "not a base-table code (0..127, excluding 0x1B)"
            )
        return (substitute,)
    if isinstance(substitute, str):
        if len(substitute) != 1:
            raise InvalidSubstituteError(substitute, "expected exactly one character")
        hit = lookup_encode(substitute)
        if hit is None:
            raise InvalidSubstituteError(substitute, "not in the GSM 7-bit alphabet")
        return hit.codes
    raise InvalidSubstituteError(substitute, "expected a character or GSM code")


def _codes_to_char(codes: Tuple[int, ...]) -> Optional[str]:
    if len(codes) == 1:
        return lookup_decode_base(codes[0])
    if len(codes) == 2 and codes[0] == ESCAPE:
        return lookup_decode_extension(codes[1])
    return None


FAIL = UnsupportedCharPolicy.fail()
SKIP = UnsupportedCharPolicy.skip()
REPLACE = UnsupportedCharPolicy.replace()


__all__ = [
    "PolicyKind",
    "Substitute",
    "UnsupportedCharPolicy",
    "FAIL",
    "SKIP",
    "REPLACE",
]
