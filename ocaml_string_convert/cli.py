"""
ocaml-string-convert CLI
========================

Command-line access to the transcoder.

COMMANDS:
- widen:  print the UTF-8 carrier of a string
- narrow: decode a carrier given as units, hex or latin-1 text
- repair: fix a string whose characters are really UTF-8 bytes
- info:   show the codec and unit policy in use

USAGE:
    ocaml-string-convert widen "foo·bar" --format hex
    echo "fooÂ·bar" | ocaml-string-convert repair
    python -m ocaml_string_convert narrow "102 111 111 194 183" --format units
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from .config import TranscoderConfig
from .contracts import ByteCarrier
from .errors import TranscodeError
from .logging_setup import setup_logging
from .registry import registered_codecs
from .transcoder import Transcoder

logger = logging.getLogger(__name__)

FORMATS = ("units", "hex", "latin1")


def read_input(value: Optional[str]) -> str:
    """Return `value`, or standard input (minus one trailing newline) for '-'."""
    if value is not None and value != "-":
        return value
    data = sys.stdin.read()
    if data.endswith("\r\n"):
        return data[:-2]
    if data.endswith("\n"):
        return data[:-1]
    return data


def format_carrier(carrier: ByteCarrier, fmt: str) -> str:
    if fmt == "units":
        return " ".join(str(unit) for unit in carrier)
    if fmt == "hex":
        return carrier.hex()
    return carrier.as_latin1()


class CarrierFormatError(Exception):
    """Command-line carrier text is not valid in the chosen format."""


def parse_carrier(text: str, fmt: str, strict: bool = False) -> ByteCarrier:
    """
    Parse a carrier written in one of FORMATS.

    `units` accepts decimal or 0x-prefixed integers separated by spaces or
    commas; `hex` accepts hex digits with optional spaces.

    Raises:
        CarrierFormatError: `text` is not valid in the given format
        CarrierRangeError: a unit exceeds 255 and `strict` is set
    """
    if fmt == "units":
        tokens = text.replace(",", " ").split()
        try:
            units = [int(token, 0) for token in tokens]
        except ValueError:
            raise CarrierFormatError(f"invalid unit list: {text!r}") from None
        return ByteCarrier.from_units(units, strict=strict)
    if fmt == "hex":
        try:
            return ByteCarrier(bytes.fromhex(text))
        except ValueError:
            raise CarrierFormatError(f"invalid hex carrier: {text!r}") from None
    return ByteCarrier.from_units(text, strict=strict)


def build_transcoder(args) -> Transcoder:
    config = TranscoderConfig.from_env()
    if args.codec:
        config = dataclasses.replace(config, codec_name=args.codec)
    if args.strict_units:
        config = dataclasses.replace(config, strict_units=True)
    return Transcoder.from_config(config)


def cmd_widen(args, transcoder: Transcoder) -> int:
    carrier = transcoder.widen(read_input(args.text))
    print(format_carrier(carrier, args.format))
    return 0


def cmd_narrow(args, transcoder: Transcoder) -> int:
    raw = read_input(args.carrier)
    try:
        carrier = parse_carrier(raw, args.format, strict=transcoder.config.strict_units)
    except CarrierFormatError as e:
        args.parser.error(str(e))
    print(transcoder.narrow(carrier))
    return 0


def cmd_repair(args, transcoder: Transcoder) -> int:
    print(transcoder.repair(read_input(args.text)))
    return 0


def cmd_info(args, transcoder: Transcoder) -> int:
    info = transcoder.info
    print(f"codec:          {info.codec.codec_id}")
    print(f"encoding:       {info.codec.encoding}")
    print(f"implementation: {info.codec.implementation}")
    print(f"strict units:   {'yes' if info.strict_units else 'no'}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocaml-string-convert",
        description="Convert between strings and UTF-8 byte carriers"
    )
    parser.add_argument(
        "--codec", choices=registered_codecs(),
        help="UTF-8 codec provider (default: $OCAML_STRING_CONVERT_CODEC or builtin)"
    )
    parser.add_argument(
        "--strict-units", action="store_true",
        help="Fail on units above 255 instead of keeping their low byte"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    widen_parser = subparsers.add_parser("widen", help="Encode a string as a carrier")
    widen_parser.add_argument("text", nargs="?", help="String to encode ('-' or omitted: stdin)")
    widen_parser.add_argument("--format", choices=FORMATS, default="units")
    widen_parser.set_defaults(handler=cmd_widen, parser=widen_parser)

    narrow_parser = subparsers.add_parser("narrow", help="Decode a carrier into a string")
    narrow_parser.add_argument("carrier", nargs="?", help="Carrier to decode ('-' or omitted: stdin)")
    narrow_parser.add_argument("--format", choices=FORMATS, default="units")
    narrow_parser.set_defaults(handler=cmd_narrow, parser=narrow_parser)

    repair_parser = subparsers.add_parser("repair", help="Fix a mis-encoded string")
    repair_parser.add_argument("text", nargs="?", help="Corrupted string ('-' or omitted: stdin)")
    repair_parser.set_defaults(handler=cmd_repair, parser=repair_parser)

    info_parser = subparsers.add_parser("info", help="Show codec configuration")
    info_parser.set_defaults(handler=cmd_info, parser=info_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command is None:
        parser.print_help()
        return 2

    try:
        transcoder = build_transcoder(args)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        return args.handler(args, transcoder)
    except TranscodeError as e:
        logger.debug("%s failed: %r", args.command, e)
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
