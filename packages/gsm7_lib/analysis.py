"""Representability checks and encoded length prediction."""

from __future__ import annotations

from typing import List, Tuple

from .errors import UndefinedUnderPolicyError
from .policy import FAIL, UnsupportedCharPolicy
from .tables import lookup_encode


def _require_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError("GSM 7-bit analysis expects text input")


def is_representable(text: str) -> bool:
    """Return ``True`` when every character of *text* is in the base or extension table."""

    _require_text(text)
    return all(lookup_encode(char) is not None for char in text)


def find_unsupported(text: str) -> List[Tuple[int, str]]:
    """Return ``(position, character)`` for each character without a mapping."""

    _require_text(text)
    return [
        (position, char)
        for position, char in enumerate(text)
        if lookup_encode(char) is None
    ]


def estimate_encoded_length(
    text: str, policy: UnsupportedCharPolicy = FAIL
) -> int:
    """Return the number of codes encoding *text* under *policy* would produce.

    Unsupported characters count as the policy's substitute length, or
    nothing when skipped. Under fail the length is undefined and
    :class:`UndefinedUnderPolicyError` is raised.
    """

    _require_text(text)
    missing = policy.contributed_length
    length = 0
    for position, char in enumerate(text):
        hit = lookup_encode(char)
        if hit is not None:
            length += len(hit)
        elif missing is None:
            raise UndefinedUnderPolicyError(char, position)
        else:
            length += missing
    return length


__all__ = ["is_representable", "find_unsupported", "estimate_encoded_length"]
