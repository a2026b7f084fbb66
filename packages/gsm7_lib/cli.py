"""Command line front end for the GSM 7-bit codec."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .analysis import estimate_encoded_length, find_unsupported
from .codec import CodecConfig, GSM7Codec
from .errors import GSM7Error
from .policy import PolicyKind, UnsupportedCharPolicy

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger("gsm7")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gsm7", description="Convert text to and from the GSM 03.38 7-bit alphabet"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    sub = parser.add_subparsers(dest="command", required=True)

    policy_args = argparse.ArgumentParser(add_help=False)
    policy_args.add_argument(
        "--policy",
        choices=[kind.value for kind in PolicyKind],
        default=PolicyKind.FAIL.value,
        help="How to treat characters outside the alphabet (default: fail)",
    )
    policy_args.add_argument(
        "--substitute", default="?", help="Replacement character for --policy replace"
    )

    encode = sub.add_parser("encode", parents=[policy_args], help="Encode text to GSM codes")
    encode.add_argument("text")
    encode.add_argument(
        "--format",
        choices=["hex", "list"],
        default="hex",
        help="Print codes as a hex string or as space separated decimals",
    )
    encode.add_argument("--max-length", type=int, default=0, help="Reject longer input (0: no limit)")

    decode = sub.add_parser("decode", help="Decode a hex string of GSM codes")
    decode.add_argument("hex", help="One code per byte, whitespace ignored")
    decode.add_argument("--max-length", type=int, default=0, help="Reject longer input (0: no limit)")

    check = sub.add_parser("check", help="Report whether text fits the GSM alphabet")
    check.add_argument("text")

    length = sub.add_parser("length", parents=[policy_args], help="Predict the encoded length")
    length.add_argument("text")

    return parser.parse_args(argv)


def _policy(args: argparse.Namespace) -> UnsupportedCharPolicy:
    return UnsupportedCharPolicy.from_name(args.policy, substitute=args.substitute)


def _run(args: argparse.Namespace) -> int:
    if args.command == "encode":
        codec = GSM7Codec(CodecConfig(_policy(args), args.max_length))
        codes = codec.encode(args.text)
        if args.format == "hex":
            print(bytes(codes).hex())
        else:
            print(" ".join(str(code) for code in codes))
        return 0
    if args.command == "decode":
        data = bytes.fromhex("".join(args.hex.split()))
        print(GSM7Codec(CodecConfig(max_input_length=args.max_length)).decode(data))
        return 0
    if args.command == "check":
        unsupported = find_unsupported(args.text)
        if not unsupported:
            print("representable")
            return 0
        print("not representable:")
        for position, char in unsupported:
            print(f"  {position}: {char!r} (U+{ord(char):04X})")
        return 1
    print(estimate_encoded_length(args.text, _policy(args)))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=(logging.DEBUG if args.verbose else logging.WARNING), format=LOG_FORMAT
    )
    try:
        return _run(args)
    except GSM7Error as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


__all__ = ["main", "parse_args"]
