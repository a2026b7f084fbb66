"""
Tests for the configured codec.
"""

import logging

import pytest

from gsm7_lib import CodecConfig, GSM7Codec
from gsm7_lib.codec import REPLACEMENT_CHARACTER
from gsm7_lib.errors import (
    InputTooLongError,
    InvalidCodeError,
    TruncatedEscapeError,
    UnsupportedCharacterError,
)
from gsm7_lib.policy import FAIL, PolicyKind


class TestCodecConfig:
    def test_defaults(self):
        config = CodecConfig()
        assert config.policy is FAIL
        assert config.max_input_length == 0

    def test_strict(self):
        assert CodecConfig.strict().policy.kind is PolicyKind.FAIL

    def test_lenient(self):
        config = CodecConfig.lenient("*", max_input_length=10)
        assert config.policy.substitute == "*"
        assert config.max_input_length == 10

    def test_negative_limit_rejected(self):
        with pytest.raises(ValueError):
            CodecConfig(max_input_length=-1)


class TestGSM7Codec:
    def test_default_codec_is_strict(self):
        codec = GSM7Codec()
        with pytest.raises(UnsupportedCharacterError):
            codec.encode("Hello 🦀 World")

    def test_lenient_round_trip(self):
        codec = GSM7Codec(CodecConfig.lenient())
        assert codec.decode(codec.encode("Hello 🦀 World")) == "Hello ? World"

    def test_estimate_uses_config_policy(self):
        codec = GSM7Codec(CodecConfig.lenient("€"))
        assert codec.estimate_encoded_length("a🦀") == 3
        assert codec.is_representable("a🦀") is False

    def test_encode_length_limit(self):
        codec = GSM7Codec(CodecConfig.strict(max_input_length=5))
        assert codec.encode("Hello") == [0x48, 0x65, 0x6C, 0x6C, 0x6F]
        with pytest.raises(InputTooLongError) as info:
            codec.encode("Hello World")
        assert info.value.length == 11
        assert info.value.limit == 5

    def test_decode_length_limit(self):
        codec = GSM7Codec(CodecConfig(max_input_length=2))
        assert codec.decode([0x1B, 0x65]) == "€"
        with pytest.raises(InputTooLongError):
            codec.decode(iter([0x41, 0x42, 0x43]))

    def test_uses_supplied_logger(self, caplog):
        logger = logging.getLogger("tests.codec")
        codec = GSM7Codec(CodecConfig(max_input_length=1), logger=logger)
        with caplog.at_level(logging.DEBUG, logger="tests.codec"):
            codec.encode("a")
            with pytest.raises(InputTooLongError):
                codec.encode("ab")
        names = {record.name for record in caplog.records}
        assert names == {"tests.codec"}
        assert any(record.levelno == logging.WARNING for record in caplog.records)


class TestLenientDecode:
    def test_lenient_config_replaces_invalid_codes(self):
        codec = GSM7Codec(CodecConfig.lenient())
        assert codec.config.decode_replacement == REPLACEMENT_CHARACTER
        assert codec.decode([0x48, 0x81, 0x65]) == "H�e"

    def test_lenient_config_replaces_unknown_escape(self):
        codec = GSM7Codec(CodecConfig.lenient())
        assert codec.decode(b"\x1b\xffA") == "�A"

    def test_custom_decode_replacement(self):
        codec = GSM7Codec(CodecConfig(decode_replacement="?"))
        assert codec.decode(b"Hello\x81 W") == "Hello? W"

    def test_lenient_keeps_truncated_escape(self):
        codec = GSM7Codec(CodecConfig.lenient())
        with pytest.raises(TruncatedEscapeError):
            codec.decode(b"Hello\x1b")

    def test_strict_config_rejects_invalid_codes(self):
        with pytest.raises(InvalidCodeError):
            GSM7Codec().decode([0x48, 0x81, 0x65])

    def test_non_text_decode_replacement_rejected(self):
        with pytest.raises(ValueError):
            CodecConfig(decode_replacement=0x3F)  # type: ignore[arg-type]


class TestInputTypes:
    def test_decode_rejects_text(self):
        with pytest.raises(TypeError, match="sequence of codes"):
            GSM7Codec().decode("Hello")  # type: ignore[arg-type]

    def test_lenient_accepts_substitute_code(self):
        codec = GSM7Codec(CodecConfig.lenient(0x20))
        assert codec.encode("a你") == [0x61, 0x20]
