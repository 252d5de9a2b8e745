# =============================================================================
# test_classifier.py - Operand Classifier Tests
# =============================================================================
# Tests for addressing mode detection and operand byte extraction.
#
# Test coverage includes:
#   - Every producible addressing mode
#   - Zero page / absolute width selection by value
#   - Register and range errors for each form
#   - Operands matching no addressing mode
#   - ParsedInstruction invariants
# =============================================================================

import pytest

from asm6502.assembler.classifier import (
    OperandClassifier,
    ParsedInstruction,
    classify_operand,
)
from asm6502.assembler.values import join_word
from asm6502.cpu import AddressingMode, PRODUCIBLE_MODES
from asm6502.errors import (
    AssemblerError,
    OperandRangeError,
    SourceLocation,
    UnrecognizedOperandSyntaxError,
    UnsupportedRegisterError,
)


# =============================================================================
# Operand-Free Modes
# =============================================================================

class TestOperandFreeModes:
    """Test implicit and accumulator modes."""

    def test_implicit(self):
        """No operand text gives implicit mode with no bytes."""
        instr = classify_operand("NOP", None)
        assert instr.mode == AddressingMode.IMPLICIT
        assert instr.operands == ()

    def test_accumulator(self):
        """Bare A gives accumulator mode with no bytes."""
        instr = classify_operand("ASL", "A")
        assert instr.mode == AddressingMode.ACCUMULATOR
        assert instr.operands == ()

    def test_mnemonic_preserved(self):
        """The mnemonic is carried through unchanged."""
        assert classify_operand("ROL", "A").mnemonic == "ROL"


# =============================================================================
# Immediate Mode
# =============================================================================

class TestImmediate:
    """Test #$nn operands."""

    def test_immediate_byte(self):
        """#$41 gives one byte."""
        instr = classify_operand("LDA", "#$41")
        assert instr.mode == AddressingMode.IMMEDIATE
        assert instr.operands == (0x41,)

    def test_immediate_full_range(self):
        """Every byte value is accepted."""
        for value in range(256):
            instr = classify_operand("LDA", f"#${value:02X}")
            assert instr.mode == AddressingMode.IMMEDIATE
            assert instr.operands == (value,)

    def test_immediate_too_wide(self):
        """#$1FF does not fit in one byte."""
        with pytest.raises(OperandRangeError) as exc_info:
            classify_operand("LDA", "#$1FF")
        assert exc_info.value.value == 0x1FF
        assert exc_info.value.limit == 0xFF

    def test_immediate_just_over(self):
        """#$100 is rejected even though it has leading zero page digits."""
        with pytest.raises(OperandRangeError):
            classify_operand("LDA", "#$0100")


# =============================================================================
# Zero Page and Absolute
# =============================================================================

class TestZeroPageAbsolute:
    """Test $nn / $nnnn operands."""

    def test_zero_page_all_bytes(self):
        """$v for v in 0..255 is zero page with the value as its byte."""
        for value in range(256):
            instr = classify_operand("LDA", f"${value:X}")
            assert instr.mode == AddressingMode.ZERO_PAGE
            assert instr.operands == (value,)

    def test_absolute_little_endian(self):
        """$v above 255 is absolute, low byte first, and round-trips."""
        for value in list(range(0x100, 0x1000, 0x3F)) + [0x1234, 0x8000, 0xFFFF]:
            instr = classify_operand("LDA", f"${value:04X}")
            assert instr.mode == AddressingMode.ABSOLUTE
            assert instr.operands == (value & 0xFF, value >> 8)
            assert join_word(*instr.operands) == value

    def test_boundary(self):
        """$FF stays zero page, $100 becomes absolute."""
        assert classify_operand("STA", "$FF").mode == AddressingMode.ZERO_PAGE
        assert classify_operand("STA", "$100").mode == AddressingMode.ABSOLUTE

    def test_width_is_value_driven(self):
        """$0040 is zero page despite four digits."""
        instr = classify_operand("STA", "$0040")
        assert instr.mode == AddressingMode.ZERO_PAGE
        assert instr.operands == (0x40,)

    def test_address_wider_than_16_bits(self):
        """$10000 cannot be an address."""
        with pytest.raises(OperandRangeError):
            classify_operand("JMP", "$10000")


# =============================================================================
# Indexed Modes
# =============================================================================

class TestIndexed:
    """Test $nn,X / $nnnn,Y operands."""

    def test_zero_page_x(self):
        """$40,X is zero page,X."""
        instr = classify_operand("LDA", "$40,X")
        assert instr.mode == AddressingMode.ZERO_PAGE_X
        assert instr.operands == (0x40,)

    def test_zero_page_y(self):
        """$40,Y is zero page,Y."""
        instr = classify_operand("LDX", "$40,Y")
        assert instr.mode == AddressingMode.ZERO_PAGE_Y
        assert instr.operands == (0x40,)

    def test_absolute_x(self):
        """$4000,X is absolute,X with bytes (0x00, 0x40)."""
        instr = classify_operand("LDA", "$4000,X")
        assert instr.mode == AddressingMode.ABSOLUTE_X
        assert instr.operands == (0x00, 0x40)

    def test_absolute_y(self):
        """$1234,Y is absolute,Y with bytes (0x34, 0x12)."""
        instr = classify_operand("LDA", "$1234,Y")
        assert instr.mode == AddressingMode.ABSOLUTE_Y
        assert instr.operands == (0x34, 0x12)

    def test_indexed_boundary(self):
        """$FF,X is zero page,X; $100,X is absolute,X."""
        assert classify_operand("LDA", "$FF,X").mode == AddressingMode.ZERO_PAGE_X
        assert classify_operand("LDA", "$100,X").mode == AddressingMode.ABSOLUTE_X

    def test_unsupported_register(self):
        """$40,Z names no index register."""
        with pytest.raises(UnsupportedRegisterError) as exc_info:
            classify_operand("LDA", "$40,Z")
        assert exc_info.value.register == "Z"
        assert exc_info.value.allowed == ("X", "Y")

    def test_missing_register(self):
        """$40, with nothing after the comma is a register error."""
        with pytest.raises(UnsupportedRegisterError):
            classify_operand("LDA", "$40,")

    def test_double_index(self):
        """$40,X,Y is rejected."""
        with pytest.raises(UnsupportedRegisterError):
            classify_operand("LDA", "$40,X,Y")


# =============================================================================
# Indirect Modes
# =============================================================================

class TestIndirect:
    """Test parenthesized operands."""

    def test_indexed_indirect(self):
        """($40,X) is indexed indirect with one byte."""
        instr = classify_operand("LDA", "($40,X)")
        assert instr.mode == AddressingMode.INDEXED_INDIRECT
        assert instr.operands == (0x40,)

    def test_indirect_indexed(self):
        """($40),Y is indirect indexed with one byte."""
        instr = classify_operand("LDA", "($40),Y")
        assert instr.mode == AddressingMode.INDIRECT_INDEXED
        assert instr.operands == (0x40,)

    def test_indirect_absolute(self):
        """($1234) is indirect with bytes (0x34, 0x12)."""
        instr = classify_operand("JMP", "($1234)")
        assert instr.mode == AddressingMode.INDIRECT
        assert instr.operands == (0x34, 0x12)

    def test_indirect_zero_page_pointer(self):
        """($40) is indirect with a single byte."""
        instr = classify_operand("JMP", "($40)")
        assert instr.mode == AddressingMode.INDIRECT
        assert instr.operands == (0x40,)

    def test_indexed_indirect_too_wide(self):
        """($140,X) must fit in the zero page."""
        with pytest.raises(OperandRangeError):
            classify_operand("LDA", "($140,X)")

    def test_indirect_indexed_too_wide(self):
        """($140),Y must fit in the zero page."""
        with pytest.raises(OperandRangeError):
            classify_operand("LDA", "($140),Y")

    def test_indexed_indirect_needs_x(self):
        """($40,Y) is not a 6502 addressing mode."""
        with pytest.raises(UnsupportedRegisterError) as exc_info:
            classify_operand("LDA", "($40,Y)")
        assert exc_info.value.allowed == ("X",)

    def test_indirect_indexed_needs_y(self):
        """($40),X is not a 6502 addressing mode."""
        with pytest.raises(UnsupportedRegisterError) as exc_info:
            classify_operand("LDA", "($40),X")
        assert exc_info.value.allowed == ("Y",)

    def test_register_checked_before_range(self):
        """A bad register is reported even when the value is also too wide."""
        with pytest.raises(UnsupportedRegisterError):
            classify_operand("LDA", "($140,Z)")


# =============================================================================
# Unrecognized Syntax
# =============================================================================

class TestUnrecognized:
    """Test operands that match no addressing mode."""

    def test_bare_number(self):
        """40 without $ matches nothing."""
        with pytest.raises(UnrecognizedOperandSyntaxError) as exc_info:
            classify_operand("LDA", "40")
        assert exc_info.value.operand == "40"

    def test_label(self):
        """Labels are not resolved here."""
        with pytest.raises(UnrecognizedOperandSyntaxError):
            classify_operand("BNE", "LOOP")

    def test_unclosed_paren(self):
        """($40 has no closing paren and no comma."""
        with pytest.raises(UnrecognizedOperandSyntaxError):
            classify_operand("JMP", "($40")

    def test_unclosed_paren_with_index(self):
        """($40,Y is not ($40),Y."""
        with pytest.raises(UnrecognizedOperandSyntaxError):
            classify_operand("LDA", "($40,Y")

    def test_nested_parens(self):
        """(($40)) is rejected."""
        with pytest.raises(UnrecognizedOperandSyntaxError):
            classify_operand("JMP", "(($40))")

    def test_invalid_hex(self):
        """$G0 is not a number."""
        with pytest.raises(UnrecognizedOperandSyntaxError):
            classify_operand("LDA", "$G0")

    def test_empty_immediate(self):
        """# with no digits is rejected."""
        with pytest.raises(UnrecognizedOperandSyntaxError):
            classify_operand("LDA", "#$")

    def test_all_are_assembler_errors(self):
        """Every classifier error shares the AssemblerError base."""
        for operand in ("40", "$40,Z", "#$1FF"):
            with pytest.raises(AssemblerError):
                classify_operand("LDA", operand)


# =============================================================================
# Error Context
# =============================================================================

class TestErrorContext:
    """Test that errors identify the offending line."""

    def test_source_line_in_message(self):
        """The original line text appears in the message."""
        with pytest.raises(OperandRangeError) as exc_info:
            classify_operand("LDA", "#$1FF", source_line="lda #$1ff")
        assert exc_info.value.source_line == "lda #$1ff"
        assert "lda #$1ff" in str(exc_info.value)

    def test_location_in_message(self):
        """The location prefixes the message when known."""
        classifier = OperandClassifier("LDA $40,Q", SourceLocation("prog.asm", 12))
        with pytest.raises(UnsupportedRegisterError) as exc_info:
            classifier.classify("LDA", "$40,Q")
        assert str(exc_info.value).startswith("prog.asm:12: error:")


# =============================================================================
# Parsed Instruction Record
# =============================================================================

class TestParsedInstruction:
    """Test ParsedInstruction invariants and output."""

    def test_idempotent(self):
        """Classifying the same operand twice gives equal records."""
        for operand in (None, "A", "#$10", "$40", "$1234,X", "($40),Y", "($1234)"):
            assert classify_operand("LDA", operand) == classify_operand("LDA", operand)

    def test_immutable(self):
        """Records cannot be modified after construction."""
        instr = classify_operand("LDA", "$40")
        with pytest.raises(AttributeError):
            instr.mode = AddressingMode.ABSOLUTE

    def test_operands_stored_as_tuple(self):
        """A list of operands is stored as a tuple."""
        instr = ParsedInstruction("LDA", AddressingMode.ZERO_PAGE, [0x40])
        assert instr.operands == (0x40,)

    def test_wrong_operand_count_rejected(self):
        """Absolute mode with one byte violates the mode width."""
        with pytest.raises(ValueError):
            ParsedInstruction("LDA", AddressingMode.ABSOLUTE, (0x40,))

    def test_byte_out_of_range_rejected(self):
        """Operand bytes must be 0-255."""
        with pytest.raises(ValueError):
            ParsedInstruction("LDA", AddressingMode.ZERO_PAGE, (0x100,))

    def test_placeholder_mode_rejected(self):
        """The placeholder mode can never be a record's mode."""
        with pytest.raises(ValueError):
            ParsedInstruction("LDA", AddressingMode.ADDRESSING_MODES, ())

    def test_size(self):
        """Size counts the opcode byte."""
        assert classify_operand("NOP", None).size == 1
        assert classify_operand("LDA", "$40").size == 2
        assert classify_operand("LDA", "$1234").size == 3

    def test_to_dict(self):
        """to_dict gives mode name and classic mode number."""
        assert classify_operand("STA", "$1234,Y").to_dict() == {
            "mnemonic": "STA",
            "mode": "ABSOLUTE_Y",
            "mode_number": 10,
            "operands": [0x34, 0x12],
        }

    def test_str(self):
        """str() shows mnemonic, mode and hex bytes."""
        text = str(classify_operand("LDA", "$1234"))
        assert text.startswith("LDA")
        assert "absolute" in text
        assert text.endswith("$34 $12")

    def test_relative_never_produced(self):
        """No operand spelling yields relative mode."""
        operands = [None, "A", "#$10", "$10", "$1000", "$10,X", "$10,Y",
                    "$1000,X", "$1000,Y", "($10)", "($1000)", "($10,X)", "($10),Y"]
        modes = {classify_operand("BNE", op).mode for op in operands}
        assert AddressingMode.RELATIVE not in modes
        assert modes == PRODUCIBLE_MODES
