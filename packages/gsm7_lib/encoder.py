"""Unicode text to GSM 7-bit codes."""

from __future__ import annotations

import logging
from typing import List

from .errors import UnsupportedCharacterError
from .policy import FAIL, PolicyKind, UnsupportedCharPolicy
from .tables import lookup_encode

logger = logging.getLogger(__name__)


def encode_gsm7_text(text: str, policy: UnsupportedCharPolicy = FAIL) -> List[int]:
    """Return the unpacked GSM 7-bit codes representing *text*.

    Extension characters contribute the escape marker followed by their
    secondary code. Characters with no mapping are handled by *policy*: under
    fail the first one raises :class:`UnsupportedCharacterError` and nothing
    is returned.
    """

    if not isinstance(text, str):
        raise TypeError("GSM 7-bit encoding expects text input")
    septets: List[int] = []
    for position, char in enumerate(text):
        hit = lookup_encode(char)
        if hit is not None:
            septets.extend(hit.codes)
        elif policy.kind is PolicyKind.FAIL:
            raise UnsupportedCharacterError(char, position)
        elif policy.kind is PolicyKind.REPLACE:
            logger.debug("Replacing U+%04X at position %s", ord(char), position)
            septets.extend(policy.substitute_codes)
        else:
            logger.debug("Skipping U+%04X at position %s", ord(char), position)
    return septets


__all__ = ["encode_gsm7_text"]
