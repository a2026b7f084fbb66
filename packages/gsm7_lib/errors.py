"""Exceptions raised by the GSM 7-bit codec."""

from __future__ import annotations

from typing import Any


class GSM7Error(ValueError):
    """Base class for every codec failure."""


class EncodeError(GSM7Error):
    """Raised when text cannot be converted to GSM 7-bit codes."""


class UnsupportedCharacterError(EncodeError):
    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Character not supported in GSM 7-bit: {character!r} "
            f"(U+{ord(character):04X}) at position {position}"
        )


class DecodeError(GSM7Error):
    """Raised when a code sequence is not valid GSM 7-bit data."""


class InvalidCodeError(DecodeError):
    def __init__(self, code: int, position: int) -> None:
        self.code = code
        self.position = position
        super().__init__(f"Invalid GSM 7-bit code 0x{code:02X} at position {position}")


class InvalidEscapeError(DecodeError):
    def __init__(self, code: int, position: int) -> None:
        self.code = code
        self.position = position
        super().__init__(
            f"Invalid escape sequence: 0x1B followed by 0x{code:02X} "
            f"at position {position}"
        )


class TruncatedEscapeError(DecodeError):
    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Escape byte at end of input (position {position})")


class EstimationError(GSM7Error):
    """Raised when an encoded length cannot be predicted."""


class UndefinedUnderPolicyError(EstimationError):
    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(
            f"Length undefined under fail policy: {character!r} "
            f"(U+{ord(character):04X}) at position {position} has no mapping"
        )


class InvalidSubstituteError(GSM7Error):
    """Raised when a replacement policy is given an unencodable substitute."""

    def __init__(self, substitute: Any, reason: str) -> None:
        self.substitute = substitute
        super().__init__(f"Invalid substitute {substitute!r}: {reason}")


class InputTooLongError(GSM7Error):
    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Input length {length} exceeds maximum of {limit}")


__all__ = [
    "GSM7Error",
    "EncodeError",
    "UnsupportedCharacterError",
    "DecodeError",
    "InvalidCodeError",
    "InvalidEscapeError",
    "TruncatedEscapeError",
    "EstimationError",
    "UndefinedUnderPolicyError",
    "InvalidSubstituteError",
    "InputTooLongError",
]
