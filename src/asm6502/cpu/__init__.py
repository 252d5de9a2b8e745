"""
asm6502 CPU Package
===================

Architecture definitions for the MOS 6502 shared by the assembler front end
and its tests.

Modules:
    modes: Addressing modes, operand widths per mode and lookup helpers.

Usage:
    from asm6502.cpu import AddressingMode, get_operand_sizes
"""

from asm6502.cpu.modes import (
    # Core types
    AddressingMode,
    # Tables
    MODE_NAMES,
    OPERAND_SIZES,
    PRODUCIBLE_MODES,
    INDEXED_MODES,
    # Lookup functions
    get_operand_sizes,
    is_valid_operand_count,
    is_indexed_register,
)

__all__ = [
    "AddressingMode",
    "MODE_NAMES",
    "OPERAND_SIZES",
    "PRODUCIBLE_MODES",
    "INDEXED_MODES",
    "get_operand_sizes",
    "is_valid_operand_count",
    "is_indexed_register",
]
