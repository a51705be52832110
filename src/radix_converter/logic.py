# radix_converter/logic.py

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

BINARY_PREFIX = "0b"
HEX_PREFIX = "0x"
BINARY_DIGITS = "01"
HEX_DIGITS = "0123456789ABCDEF"
MAX_BINARY_DIGITS = 31
MAX_HEX_DIGITS = 8
NIBBLE_WIDTH = 4
INT32_MAX = (1 << 31) - 1


# ---------------- Nibble table ----------------
def _build_nibble_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for value, digit in enumerate(HEX_DIGITS):
        table[format(value, "04b")] = digit
    return table

NIBBLE_TO_HEX: Mapping[str, str] = MappingProxyType(_build_nibble_table())
HEX_TO_NIBBLE: Mapping[str, str] = MappingProxyType(
    {digit: group for group, digit in NIBBLE_TO_HEX.items()}
)


# ---------------- Validation ----------------
def is_valid_binary_body(body: str) -> bool:
    """True iff ``body`` is 1..31 characters, each ``0`` or ``1``."""
    if not isinstance(body, str):
        return False
    if len(body) < 1 or len(body) > MAX_BINARY_DIGITS:
        return False
    return all(ch in BINARY_DIGITS for ch in body)

def is_valid_hex_body(body: str) -> bool:
    """True iff ``body`` is 1..8 characters from ``0-9`` / ``A-F``.

    Lowercase letters are rejected, as are non-ASCII digits that
    ``str.isdigit`` would accept.
    """
    if not isinstance(body, str):
        return False
    if len(body) < 1 or len(body) > MAX_HEX_DIGITS:
        return False
    return all(ch in HEX_DIGITS for ch in body)


# ---------------- Helpers ----------------
def _strip_prefix(text: object, prefix: str) -> Optional[str]:
    """Return the body after ``prefix`` or None if ``text`` doesn't carry it."""
    if not isinstance(text, str) or len(text) < len(prefix):
        return None
    if text[: len(prefix)] != prefix:
        return None
    return text[len(prefix):]

def _pad_to_nibbles(body: str) -> str:
    pad = (NIBBLE_WIDTH - len(body) % NIBBLE_WIDTH) % NIBBLE_WIDTH
    return "0" * pad + body

def _trim_leading_zeros(body: str) -> str:
    i = 0
    # keep at least one digit so zero stays "0"
    while i < len(body) - 1 and body[i] == "0":
        i += 1
    return body[i:]


# ---------------- Binary ⇆ decimal ----------------
def binary_to_decimal(binary: str) -> int:
    """Convert a ``0b``-prefixed binary string to its non-negative value.

    Unlike the other conversions this one raises instead of returning None:
      - ``TypeError`` when ``binary`` is None (or not a string)
      - ``ValueError`` when the prefix is missing or the body is malformed
    """
    if binary is None:
        raise TypeError("The binary string cannot be None.")
    if not isinstance(binary, str):
        raise TypeError(f"Expected a binary string, got {type(binary).__name__}.")

    body = _strip_prefix(binary, BINARY_PREFIX)
    if body is None or not is_valid_binary_body(body):
        logger.debug("binary_to_decimal rejected %r", binary)
        raise ValueError(f"Invalid binary string: {binary!r}")

    length = len(body)
    total = 0
    for i, bit in enumerate(body):
        if bit == "1":
            total += 1 << (length - 1 - i)
    return total

def decimal_to_binary(decimal: int) -> Optional[str]:
    """Convert a non-negative int to a minimal ``0b`` string.

    Returns None for negatives and for values beyond the signed 32-bit range.
    """
    if isinstance(decimal, bool) or not isinstance(decimal, int):
        raise TypeError(f"Expected an int, got {type(decimal).__name__}.")
    if decimal < 0 or decimal > INT32_MAX:
        logger.debug("decimal_to_binary rejected %r", decimal)
        return None
    if decimal == 0:
        return BINARY_PREFIX + "0"

    bits = ""
    quotient = decimal
    while quotient > 1:
        bits = str(quotient % 2) + bits
        quotient //= 2
    # quotient is now exactly 1: the most significant bit
    return BINARY_PREFIX + "1" + bits


# ---------------- Binary ⇆ hex ----------------
def binary_to_hex(binary: str) -> Optional[str]:
    """Convert a ``0b`` string to ``0x`` by nibble lookup; None if malformed.

    The body is left-padded to a multiple of 4 bits and every group is
    mapped, so no leading hex zero is dropped from the padded width.
    """
    body = _strip_prefix(binary, BINARY_PREFIX)
    if body is None or not is_valid_binary_body(body):
        logger.debug("binary_to_hex rejected %r", binary)
        return None

    padded = _pad_to_nibbles(body)
    digits = [
        NIBBLE_TO_HEX[padded[i : i + NIBBLE_WIDTH]]
        for i in range(0, len(padded), NIBBLE_WIDTH)
    ]
    return HEX_PREFIX + "".join(digits)

def hex_to_binary(hex_string: str) -> Optional[str]:
    """Convert a ``0x`` string to a minimal ``0b`` string; None if malformed.

    Every digit expands to a full nibble, then leading zeros of the whole
    result are trimmed. ``hex_to_binary(binary_to_hex(b))`` is therefore
    numerically equal to ``b`` but not always the same text.
    """
    body = _strip_prefix(hex_string, HEX_PREFIX)
    if body is None or not is_valid_hex_body(body):
        logger.debug("hex_to_binary rejected %r", hex_string)
        return None

    bits = "".join(HEX_TO_NIBBLE[digit] for digit in body)
    return BINARY_PREFIX + _trim_leading_zeros(bits)


# ---------------- Hex ⇆ decimal ----------------
def hex_to_decimal(hex_string: str) -> Optional[int]:
    """Unsigned value of a ``0x`` string (up to 32 bits); None if malformed."""
    body = _strip_prefix(hex_string, HEX_PREFIX)
    if body is None or not is_valid_hex_body(body):
        logger.debug("hex_to_decimal rejected %r", hex_string)
        return None

    total = 0
    for digit in body:
        total = (total << NIBBLE_WIDTH) | HEX_DIGITS.index(digit)
    return total

def decimal_to_hex(decimal: int) -> Optional[str]:
    binary = decimal_to_binary(decimal)
    if binary is None:
        return None
    return binary_to_hex(binary)
