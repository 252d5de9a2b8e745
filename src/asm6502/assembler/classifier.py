"""
6502 Operand Classifier
=======================

This module decides which addressing mode an operand expresses and extracts
its operand bytes in the order the 6502 expects them (little-endian).

Addressing Mode Detection
-------------------------
Rules are tried in order and the first match wins:

| Syntax      | Mode                    | Operand bytes      |
|-------------|-------------------------|--------------------|
| (none)      | Implicit                | none               |
| A           | Accumulator             | none               |
| #$nn        | Immediate               | nn                 |
| $nn,X  / Y  | Zero page,X / Y         | nn                 |
| $nnnn,X / Y | Absolute,X / Y          | lo hi              |
| $nn         | Zero page               | nn                 |
| $nnnn       | Absolute                | lo hi              |
| ($nn,X)     | Indexed indirect        | nn                 |
| ($nnnn)     | Indirect                | nn, or lo hi       |
| ($nn),Y     | Indirect indexed        | nn                 |

Zero page versus absolute is decided by the value, not the spelling:
anything above $FF takes the two-byte form, so $0040 is still zero page.

Immediate, indexed indirect and indirect indexed operands must fit in one
byte. Anything that matches no rule is rejected with
UnrecognizedOperandSyntaxError.

Example Usage
-------------
>>> from asm6502.assembler.classifier import classify_operand
>>> instr = classify_operand("LDA", "$1234,X")
>>> instr.mode.name, instr.operands
('ABSOLUTE_X', (52, 18))
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from asm6502.cpu import (
    AddressingMode,
    INDEXED_MODES,
    is_valid_operand_count,
)
from asm6502.errors import (
    OperandRangeError,
    SourceLocation,
    UnrecognizedOperandSyntaxError,
    UnsupportedRegisterError,
)
from asm6502.assembler.values import (
    BYTE_MAX,
    WORD_MAX,
    is_byte,
    parse_hex_byte_token,
    split_word,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Parsed Instruction Record
# =============================================================================

@dataclass(frozen=True)
class ParsedInstruction:
    """
    One classified instruction line, ready for an opcode encoder.

    Attributes:
        mnemonic: The instruction mnemonic (uppercase)
        mode: The addressing mode
        operands: Operand bytes, low byte first for 16-bit forms
    """
    mnemonic: str
    mode: AddressingMode
    operands: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so records stay hashable
        object.__setattr__(self, "operands", tuple(self.operands))
        if not is_valid_operand_count(self.mode, len(self.operands)):
            raise ValueError(
                f"{self.mode} mode cannot carry {len(self.operands)} operand byte(s)"
            )
        for value in self.operands:
            if not is_byte(value):
                raise ValueError(f"operand byte {value} out of range 0-255")

    @property
    def size(self) -> int:
        """Encoded instruction size: opcode byte plus operands."""
        return 1 + len(self.operands)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "mnemonic": self.mnemonic,
            "mode": self.mode.name,
            "mode_number": self.mode.value,
            "operands": list(self.operands),
        }

    def __str__(self) -> str:
        operand_str = " ".join(f"${b:02X}" for b in self.operands)
        return f"{self.mnemonic:<4} {str(self.mode):<17} {operand_str}".rstrip()


# =============================================================================
# Classifier
# =============================================================================

class OperandClassifier:
    """
    Classifies the operand of a single instruction line.

    The classifier holds nothing but the line's text and location, which
    are used to build error messages. Create one per line.

    Attributes:
        source_line: Original text of the line being classified
        location: Source location of the line (optional)
    """

    def __init__(
        self,
        source_line: Optional[str] = None,
        location: Optional[SourceLocation] = None,
    ):
        self.source_line = source_line
        self.location = location

    def classify(self, mnemonic: str, operand: Optional[str]) -> ParsedInstruction:
        """
        Classify an operand and extract its bytes.

        Args:
            mnemonic: Uppercased mnemonic
            operand: Normalized operand text, None if the line has none

        Returns:
            ParsedInstruction for the line

        Raises:
            OperandRangeError: Value too wide for the addressing mode
            UnsupportedRegisterError: Wrong index register for the form
            UnrecognizedOperandSyntaxError: Operand matches no rule
        """
        if operand is None:
            return self._result(mnemonic, AddressingMode.IMPLICIT)

        if operand == "A":
            return self._result(mnemonic, AddressingMode.ACCUMULATOR)

        if operand.startswith("#"):
            return self._classify_immediate(mnemonic, operand)

        if operand.startswith("$"):
            if "," in operand:
                return self._classify_indexed(mnemonic, operand)
            return self._classify_address(mnemonic, operand)

        if operand.startswith("(") and operand.endswith(")"):
            return self._classify_parenthesized(mnemonic, operand)

        if operand.startswith("(") and "," in operand:
            return self._classify_indirect_indexed(mnemonic, operand)

        raise self._unrecognized(operand)

    # =========================================================================
    # Addressing Forms
    # =========================================================================

    def _classify_immediate(self, mnemonic: str, operand: str) -> ParsedInstruction:
        """#$nn - always exactly one byte."""
        value = self._parse_value(operand, operand)
        self._check_byte(value, "immediate operand")
        return self._result(mnemonic, AddressingMode.IMMEDIATE, (value,))

    def _classify_address(self, mnemonic: str, operand: str) -> ParsedInstruction:
        """$nn or $nnnn - width chosen by value."""
        value = self._parse_value(operand, operand)
        self._check_word(value)
        if value <= BYTE_MAX:
            return self._result(mnemonic, AddressingMode.ZERO_PAGE, (value,))
        return self._result(mnemonic, AddressingMode.ABSOLUTE, split_word(value))

    def _classify_indexed(self, mnemonic: str, operand: str) -> ParsedInstruction:
        """$nn,X / $nn,Y / $nnnn,X / $nnnn,Y."""
        address, register = operand.split(",", 1)
        self._check_register(register, tuple(INDEXED_MODES), "indexed")
        zero_page_mode, absolute_mode = INDEXED_MODES[register]

        value = self._parse_value(address, operand)
        self._check_word(value)
        if value <= BYTE_MAX:
            return self._result(mnemonic, zero_page_mode, (value,))
        return self._result(mnemonic, absolute_mode, split_word(value))

    def _classify_parenthesized(self, mnemonic: str, operand: str) -> ParsedInstruction:
        """($nn,X) or ($nnnn)."""
        inner = operand[1:-1]
        if "(" in inner or ")" in inner:
            raise self._unrecognized(operand)

        if "," in inner:
            address, register = inner.split(",", 1)
            self._check_register(register, ("X",), "indexed indirect")
            value = self._parse_value(address, operand)
            self._check_byte(value, "indexed indirect address")
            return self._result(mnemonic, AddressingMode.INDEXED_INDIRECT, (value,))

        value = self._parse_value(inner, operand)
        self._check_word(value)
        operands = (value,) if value <= BYTE_MAX else split_word(value)
        return self._result(mnemonic, AddressingMode.INDIRECT, operands)

    def _classify_indirect_indexed(self, mnemonic: str, operand: str) -> ParsedInstruction:
        """($nn),Y."""
        pointer, register = operand.split(",", 1)
        if not (pointer.endswith(")") and pointer.count("(") == 1 and pointer.count(")") == 1):
            raise self._unrecognized(operand)

        self._check_register(register, ("Y",), "indirect indexed")
        value = self._parse_value(pointer, operand)
        self._check_byte(value, "indirect indexed address")
        return self._result(mnemonic, AddressingMode.INDIRECT_INDEXED, (value,))

    # =========================================================================
    # Helpers
    # =========================================================================

    def _result(
        self,
        mnemonic: str,
        mode: AddressingMode,
        operands: tuple[int, ...] = (),
    ) -> ParsedInstruction:
        logger.debug(f"{mnemonic}: {mode} {list(operands)}")
        return ParsedInstruction(mnemonic=mnemonic, mode=mode, operands=operands)

    def _parse_value(self, token: str, operand: str) -> int:
        try:
            return parse_hex_byte_token(token)
        except ValueError as e:
            raise UnrecognizedOperandSyntaxError(
                operand,
                location=self.location,
                source_line=self.source_line,
                hint="operand values are hexadecimal, e.g. $40 or #$1F",
            ) from e

    def _check_register(self, register: str, allowed: tuple[str, ...], form: str) -> None:
        if register not in allowed:
            raise UnsupportedRegisterError(
                register,
                allowed,
                form,
                location=self.location,
                source_line=self.source_line,
            )

    def _check_byte(self, value: int, what: str) -> None:
        if value > BYTE_MAX:
            raise OperandRangeError(
                value,
                BYTE_MAX,
                what=what,
                location=self.location,
                source_line=self.source_line,
            )

    def _check_word(self, value: int) -> None:
        if value > WORD_MAX:
            raise OperandRangeError(
                value,
                WORD_MAX,
                what="address",
                location=self.location,
                source_line=self.source_line,
            )

    def _unrecognized(self, operand: str) -> UnrecognizedOperandSyntaxError:
        return UnrecognizedOperandSyntaxError(
            operand,
            location=self.location,
            source_line=self.source_line,
        )


def classify_operand(
    mnemonic: str,
    operand: Optional[str],
    source_line: Optional[str] = None,
    location: Optional[SourceLocation] = None,
) -> ParsedInstruction:
    """
    Convenience function to classify one operand.

    Args:
        mnemonic: Uppercased mnemonic
        operand: Normalized operand text, None for a bare mnemonic
        source_line: Original line text for error messages
        location: Source location for error messages

    Returns:
        ParsedInstruction for the line
    """
    return OperandClassifier(source_line, location).classify(mnemonic, operand)
