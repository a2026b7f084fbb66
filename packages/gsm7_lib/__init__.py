"""GSM 03.38 7-bit alphabet codec.

Converts text to and from unpacked GSM 7-bit codes (one code per byte) and
answers whether text fits the alphabet. Septet packing is left to callers.
"""

from __future__ import annotations

from typing import Iterable, List

from .analysis import estimate_encoded_length, find_unsupported, is_representable
from .codec import REPLACEMENT_CHARACTER, CodecConfig, GSM7Codec
from .decoder import DecoderState, decode_gsm7_text
from .encoder import encode_gsm7_text
from .errors import (
    DecodeError,
    EncodeError,
    EstimationError,
    GSM7Error,
    InputTooLongError,
    InvalidCodeError,
    InvalidEscapeError,
    InvalidSubstituteError,
    TruncatedEscapeError,
    UndefinedUnderPolicyError,
    UnsupportedCharacterError,
)
from .policy import FAIL, REPLACE, SKIP, PolicyKind, UnsupportedCharPolicy
from .tables import (
    ESCAPE,
    GSM7_BASIC_MAP,
    GSM7_BASIC_TABLE,
    GSM7_EXTENDED_REVERSE,
    GSM7_EXTENDED_TABLE,
    BaseHit,
    ExtensionHit,
    lookup_decode_base,
    lookup_decode_extension,
    lookup_encode,
)


def encode(text: str, policy: UnsupportedCharPolicy = FAIL) -> List[int]:
    return encode_gsm7_text(text, policy)


def decode(codes: Iterable[int]) -> str:
    return decode_gsm7_text(codes)


__all__ = [
    "encode",
    "decode",
    "is_representable",
    "estimate_encoded_length",
    "find_unsupported",
    "encode_gsm7_text",
    "decode_gsm7_text",
    "DecoderState",
    "REPLACEMENT_CHARACTER",
    "CodecConfig",
    "GSM7Codec",
    "PolicyKind",
    "UnsupportedCharPolicy",
    "FAIL",
    "SKIP",
    "REPLACE",
    "ESCAPE",
    "GSM7_BASIC_TABLE",
    "GSM7_EXTENDED_TABLE",
    "GSM7_BASIC_MAP",
    "GSM7_EXTENDED_REVERSE",
    "BaseHit",
    "ExtensionHit",
    "lookup_encode",
    "lookup_decode_base",
    "lookup_decode_extension",
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
