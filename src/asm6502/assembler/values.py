"""
Operand Byte Values
===================

Numeric helpers for 6502 operands. Operand numerals are written in
hexadecimal surrounded by addressing punctuation ($41, #$41, ($40),Y).
parse_hex_byte_token() strips that punctuation and returns the bare value;
range checks belong to the caller because the limit depends on the
addressing mode.

16-bit values are emitted little-endian, low byte first:

>>> split_word(0x1234)
(52, 18)
>>> join_word(0x34, 0x12) == 0x1234
True
"""

import string

BYTE_MAX = 0xFF
WORD_MAX = 0xFFFF

# Addressing punctuation removed before a numeral is read as hex
OPERAND_PUNCTUATION = "$#(),.XY;"

_STRIP_TABLE = str.maketrans("", "", OPERAND_PUNCTUATION)


def cleanup_byte_token(text: str) -> str:
    """Remove addressing punctuation from an operand token."""
    return text.translate(_STRIP_TABLE)


def parse_hex_byte_token(text: str) -> int:
    """
    Parse a hexadecimal operand token.

    Args:
        text: Token such as "$40", "#$1F" or "($12,X)"

    Returns:
        The non-negative integer value, with no upper bound applied

    Raises:
        ValueError: If nothing but hex digits remains after stripping
    """
    digits = cleanup_byte_token(text)
    # '' in string.hexdigits is True, so check for an empty token first
    if not digits or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"invalid hexadecimal value in '{text}'")
    return int(digits, 16)


def is_byte(value: int) -> bool:
    return 0 <= value <= BYTE_MAX


def split_word(value: int) -> tuple[int, int]:
    """Split a 16-bit value into (low, high) bytes."""
    return (value & 0xFF, value >> 8)


def join_word(low: int, high: int) -> int:
    """Rebuild a 16-bit value from its (low, high) bytes."""
    return low + (high << 8)
