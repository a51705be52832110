# radix_converter/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence, TypeVar

from .__about__ import APP_TITLE, __version__, about_text
from .logic import (
    BINARY_PREFIX,
    HEX_PREFIX,
    binary_to_decimal,
    binary_to_hex,
    decimal_to_binary,
    decimal_to_hex,
    hex_to_binary,
    hex_to_decimal,
    is_valid_binary_body,
    is_valid_hex_body,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
MISSING = "-"

T = TypeVar("T")


class ConversionError(ValueError):
    """Raised when a conversion yields no result for the given input."""


# ---------- helpers ----------
def setup_logging(level: str = "WARNING") -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    # force: replace handlers left by an earlier call in the same process
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr, force=True)

def _print_kv(key: str, value: object) -> None:
    print(f"{key}: {value}")

def _read_value(args: argparse.Namespace) -> str:
    src = args.value if args.value is not None else sys.stdin.read()
    return src.strip()

def parse_decimal(text: str) -> int:
    """Parse base-10 text, allowing ``_`` separators and a leading sign."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a decimal number (e.g., 1234).")
    try:
        return int(s, 10)
    except ValueError:
        raise ValueError(f"Not a decimal number: {text!r}") from None

def _require(result: Optional[T], what: str, text: str) -> T:
    if result is None:
        raise ConversionError(f"Cannot convert {text!r} {what}.")
    return result


# ---------- subcommands ----------
def cmd_bin2dec(args: argparse.Namespace) -> int:
    print(binary_to_decimal(_read_value(args)))
    return 0

def cmd_dec2bin(args: argparse.Namespace) -> int:
    text = _read_value(args)
    print(_require(decimal_to_binary(parse_decimal(text)), "to binary", text))
    return 0

def cmd_bin2hex(args: argparse.Namespace) -> int:
    text = _read_value(args)
    print(_require(binary_to_hex(text), "to hex", text))
    return 0

def cmd_hex2bin(args: argparse.Namespace) -> int:
    text = _read_value(args)
    print(_require(hex_to_binary(text), "to binary", text))
    return 0

def cmd_hex2dec(args: argparse.Namespace) -> int:
    text = _read_value(args)
    print(_require(hex_to_decimal(text), "to decimal", text))
    return 0

def cmd_dec2hex(args: argparse.Namespace) -> int:
    text = _read_value(args)
    print(_require(decimal_to_hex(parse_decimal(text)), "to hex", text))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    text = _read_value(args)

    if text.startswith(BINARY_PREFIX):
        decimal = binary_to_decimal(text)
        binary: Optional[str] = decimal_to_binary(decimal)
        hex_str = binary_to_hex(binary) if binary is not None else None
    elif text.startswith(HEX_PREFIX):
        decimal = _require(hex_to_decimal(text), "from hex", text)
        binary = hex_to_binary(text)
        hex_str = text
    else:
        decimal = parse_decimal(text)
        binary = decimal_to_binary(decimal)
        hex_str = decimal_to_hex(decimal)

    _print_kv("Decimal", decimal)
    _print_kv("Binary", binary if binary is not None else MISSING)
    _print_kv("Hex", hex_str if hex_str is not None else MISSING)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    text = _read_value(args)
    if text.startswith(BINARY_PREFIX):
        ok = is_valid_binary_body(text[len(BINARY_PREFIX):])
    elif text.startswith(HEX_PREFIX):
        ok = is_valid_hex_body(text[len(HEX_PREFIX):])
    else:
        ok = False
    print("valid" if ok else "invalid")
    return 0 if ok else 1


# ---------- parser ----------
def _add_value_arg(p: argparse.ArgumentParser, help_text: str) -> None:
    p.add_argument("value", nargs="?", help=f"{help_text} (read from stdin if omitted)")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="radix-converter",
        description=f"{APP_TITLE} (CLI)",
        epilog=about_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--log-level", choices=LOG_LEVELS, default="WARNING",
        help="logging verbosity on stderr (default: WARNING)"
    )

    sp = p.add_subparsers(dest="cmd")

    commands: list[tuple[str, str, str, Callable[[argparse.Namespace], int]]] = [
        ("bin2dec", "binary → decimal", "binary like '0b101'", cmd_bin2dec),
        ("dec2bin", "decimal → binary", "non-negative decimal like '5'", cmd_dec2bin),
        ("bin2hex", "binary → hex", "binary like '0b1010'", cmd_bin2hex),
        ("hex2bin", "hex → binary", "uppercase hex like '0xA'", cmd_hex2bin),
        ("hex2dec", "hex → decimal", "uppercase hex like '0xFF'", cmd_hex2dec),
        ("dec2hex", "decimal → hex", "non-negative decimal like '255'", cmd_dec2hex),
        ("show", "show a value in all three forms", "0b…, 0x… or decimal", cmd_show),
        ("check", "validate a 0b…/0x… string", "0b… or 0x…", cmd_check),
    ]
    for name, help_text, value_help, func in commands:
        sub = sp.add_parser(name, help=help_text)
        _add_value_arg(sub, value_help)
        sub.set_defaults(func=func)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (ValueError, TypeError) as exc:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
