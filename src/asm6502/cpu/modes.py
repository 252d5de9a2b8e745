"""
6502 Addressing Modes
=====================

This module defines the 6502 addressing modes and the operand widths each
mode carries. The 6502 is little-endian: 16-bit operands are stored low
byte first.

Addressing Modes
----------------
| Mode             | Syntax     | Operand bytes            |
|------------------|------------|--------------------------|
| IMPLICIT         | (none)     | 0                        |
| ACCUMULATOR      | A          | 0                        |
| IMMEDIATE        | #$nn       | 1                        |
| ZERO_PAGE        | $nn        | 1                        |
| ZERO_PAGE_X      | $nn,X      | 1                        |
| ZERO_PAGE_Y      | $nn,Y      | 1                        |
| RELATIVE         | label      | 1 (never produced)       |
| ABSOLUTE         | $nnnn      | 2 (low, high)            |
| ABSOLUTE_X       | $nnnn,X    | 2 (low, high)            |
| ABSOLUTE_Y       | $nnnn,Y    | 2 (low, high)            |
| INDIRECT         | ($nnnn)    | 1 or 2, by value         |
| INDEXED_INDIRECT | ($nn,X)    | 1                        |
| INDIRECT_INDEXED | ($nn),Y    | 1                        |

ADDRESSING_MODES is a placeholder carried over from the classic numbering
and is never the result of classifying an operand.

Reference
---------
- MOS MCS6500 Microcomputer Family Programming Manual
- http://www.6502.org/tutorials/6502opcodes.html
"""

from enum import Enum


# =============================================================================
# Addressing Mode Enumeration
# =============================================================================

class AddressingMode(Enum):
    """
    6502 addressing modes.

    Member values follow the classic 0-13 numbering so records can be
    exchanged with tools that expect it.
    """
    ADDRESSING_MODES = 0   # Placeholder, never produced
    IMPLICIT = 1           # No operand (reference, not zero)
    ACCUMULATOR = 2        # A
    IMMEDIATE = 3          # #$nn
    ZERO_PAGE = 4          # $nn
    ZERO_PAGE_X = 5        # $nn,X
    ZERO_PAGE_Y = 6        # $nn,Y
    RELATIVE = 7           # Branch displacement, not implemented
    ABSOLUTE = 8           # $nnnn
    ABSOLUTE_X = 9         # $nnnn,X
    ABSOLUTE_Y = 10        # $nnnn,Y
    INDIRECT = 11          # ($nnnn)
    INDEXED_INDIRECT = 12  # ($nn,X)
    INDIRECT_INDEXED = 13  # ($nn),Y

    def __str__(self) -> str:
        """Return human-readable name for messages and listings."""
        return MODE_NAMES[self]


MODE_NAMES: dict[AddressingMode, str] = {
    AddressingMode.ADDRESSING_MODES: "placeholder",
    AddressingMode.IMPLICIT: "implicit",
    AddressingMode.ACCUMULATOR: "accumulator",
    AddressingMode.IMMEDIATE: "immediate",
    AddressingMode.ZERO_PAGE: "zero page",
    AddressingMode.ZERO_PAGE_X: "zero page,X",
    AddressingMode.ZERO_PAGE_Y: "zero page,Y",
    AddressingMode.RELATIVE: "relative",
    AddressingMode.ABSOLUTE: "absolute",
    AddressingMode.ABSOLUTE_X: "absolute,X",
    AddressingMode.ABSOLUTE_Y: "absolute,Y",
    AddressingMode.INDIRECT: "indirect",
    AddressingMode.INDEXED_INDIRECT: "indexed indirect",
    AddressingMode.INDIRECT_INDEXED: "indirect indexed",
}


# =============================================================================
# Operand Widths
# =============================================================================
# Key: addressing mode
# Value: the operand byte counts the mode may carry
#
# INDIRECT is the only mode whose width depends on the value: a pointer
# that fits in the zero page is emitted as a single byte.
# =============================================================================

OPERAND_SIZES: dict[AddressingMode, frozenset[int]] = {
    AddressingMode.ADDRESSING_MODES: frozenset(),
    AddressingMode.IMPLICIT: frozenset({0}),
    AddressingMode.ACCUMULATOR: frozenset({0}),
    AddressingMode.IMMEDIATE: frozenset({1}),
    AddressingMode.ZERO_PAGE: frozenset({1}),
    AddressingMode.ZERO_PAGE_X: frozenset({1}),
    AddressingMode.ZERO_PAGE_Y: frozenset({1}),
    AddressingMode.RELATIVE: frozenset({1}),
    AddressingMode.ABSOLUTE: frozenset({2}),
    AddressingMode.ABSOLUTE_X: frozenset({2}),
    AddressingMode.ABSOLUTE_Y: frozenset({2}),
    AddressingMode.INDIRECT: frozenset({1, 2}),
    AddressingMode.INDEXED_INDIRECT: frozenset({1}),
    AddressingMode.INDIRECT_INDEXED: frozenset({1}),
}

# Modes the operand classifier can return.
PRODUCIBLE_MODES = frozenset(
    mode for mode in AddressingMode
    if mode not in (AddressingMode.ADDRESSING_MODES, AddressingMode.RELATIVE)
)

# Indexed modes: register -> (zero page mode, absolute mode)
INDEXED_MODES: dict[str, tuple[AddressingMode, AddressingMode]] = {
    "X": (AddressingMode.ZERO_PAGE_X, AddressingMode.ABSOLUTE_X),
    "Y": (AddressingMode.ZERO_PAGE_Y, AddressingMode.ABSOLUTE_Y),
}


def _check_exhaustive(table: dict, name: str) -> None:
    missing = [mode.name for mode in AddressingMode if mode not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


_check_exhaustive(MODE_NAMES, "MODE_NAMES")
_check_exhaustive(OPERAND_SIZES, "OPERAND_SIZES")


# =============================================================================
# Lookup Functions
# =============================================================================

def get_operand_sizes(mode: AddressingMode) -> frozenset[int]:
    """
    Get the operand byte counts an addressing mode may carry.

    Args:
        mode: The addressing mode

    Returns:
        Set of allowed operand counts (empty for the placeholder)
    """
    return OPERAND_SIZES[mode]


def is_valid_operand_count(mode: AddressingMode, count: int) -> bool:
    """Check if a mode may carry `count` operand bytes."""
    return count in OPERAND_SIZES[mode]


def is_indexed_register(register: str) -> bool:
    """Check if a register name can index zero page or absolute addresses."""
    return register in INDEXED_MODES
