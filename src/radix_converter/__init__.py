# radix_converter/__init__.py

"""Radix Converter package.

Re-exports the core logic for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    about_text,
)

from .logic import (
    BINARY_PREFIX,
    HEX_PREFIX,
    MAX_BINARY_DIGITS,
    MAX_HEX_DIGITS,
    INT32_MAX,
    NIBBLE_TO_HEX,
    HEX_TO_NIBBLE,
    is_valid_binary_body,
    is_valid_hex_body,
    binary_to_decimal,
    decimal_to_binary,
    binary_to_hex,
    hex_to_binary,
    hex_to_decimal,
    decimal_to_hex,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "about_text",
    # Logic
    "BINARY_PREFIX", "HEX_PREFIX", "MAX_BINARY_DIGITS", "MAX_HEX_DIGITS",
    "INT32_MAX", "NIBBLE_TO_HEX", "HEX_TO_NIBBLE",
    "is_valid_binary_body", "is_valid_hex_body",
    "binary_to_decimal", "decimal_to_binary",
    "binary_to_hex", "hex_to_binary",
    "hex_to_decimal", "decimal_to_hex",
]
