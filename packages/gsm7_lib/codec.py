"""Configured encode/decode helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from .analysis import estimate_encoded_length, is_representable
from .decoder import decode_gsm7_text
from .encoder import encode_gsm7_text
from .errors import InputTooLongError
from .policy import FAIL, Substitute, UnsupportedCharPolicy

REPLACEMENT_CHARACTER = "�"


@dataclass(frozen=True)
class CodecConfig:
    """Encode policy, decode replacement and input length limit.

    ``decode_replacement`` of ``None`` keeps decoding strict; otherwise
    invalid codes and escape pairs decode to it.
    """

    policy: UnsupportedCharPolicy = field(default=FAIL)
    max_input_length: int = 0
    decode_replacement: Optional[str] = None

    def __post_init__(self) -> None:
        if self.max_input_length < 0:
            raise ValueError("max_input_length must be zero or positive")
        if self.decode_replacement is not None and not isinstance(
            self.decode_replacement, str
        ):
            raise ValueError("decode_replacement must be text or None")

    @classmethod
    def strict(cls, max_input_length: int = 0) -> "CodecConfig":
        return cls(policy=FAIL, max_input_length=max_input_length)

    @classmethod
    def lenient(
        cls,
        substitute: Substitute = "?",
        max_input_length: int = 0,
        decode_replacement: str = REPLACEMENT_CHARACTER,
    ) -> "CodecConfig":
        return cls(
            policy=UnsupportedCharPolicy.replace(substitute),
            max_input_length=max_input_length,
            decode_replacement=decode_replacement,
        )


class GSM7Codec:
    """Applies a :class:`CodecConfig` to every encode and decode call."""

    def __init__(
        self,
        config: CodecConfig | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config or CodecConfig()
        self._logger = logger or logging.getLogger(__name__)

    @property
    def config(self) -> CodecConfig:
        return self._config

    def encode(self, text: str) -> List[int]:
        """Encode *text* with the configured policy and length limit."""
        self._check_length(len(text))
        septets = encode_gsm7_text(text, self._config.policy)
        self._logger.debug(
            "Encoded %s character(s) into %s code(s)", len(text), len(septets)
        )
        return septets

    def decode(self, codes: Iterable[int]) -> str:
        """Decode *codes*; raises :class:`InputTooLongError` over the limit."""
        if isinstance(codes, str):
            raise TypeError("GSM 7-bit decoding expects a sequence of codes, not text")
        data: Sequence[int] = codes if isinstance(codes, (bytes, bytearray)) else list(codes)
        self._check_length(len(data))
        text = decode_gsm7_text(data, replacement=self._config.decode_replacement)
        self._logger.debug(
            "Decoded %s code(s) into %s character(s)", len(data), len(text)
        )
        return text

    def is_representable(self, text: str) -> bool:
        return is_representable(text)

    def estimate_encoded_length(self, text: str) -> int:
        return estimate_encoded_length(text, self._config.policy)

    def _check_length(self, length: int) -> None:
        limit = self._config.max_input_length
        if limit and length > limit:
            self._logger.warning(
                "Rejecting input of length %s (limit %s)", length, limit
            )
            raise InputTooLongError(length, limit)


__all__ = ["REPLACEMENT_CHARACTER", "CodecConfig", "GSM7Codec"]
