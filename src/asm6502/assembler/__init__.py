"""
6502 Assembler Front End
========================

This package classifies the operands of 6502 instruction lines and extracts
their operand bytes. It is the syntax stage of an assembler: it produces one
ParsedInstruction per line for a downstream opcode encoder, not machine code.

Main Components
---------------
- **normalize_line**: Trims, uppercases and splits a line into mnemonic and
  operand text
- **OperandClassifier**: Picks the addressing mode and extracts operand bytes
- **parse_hex_byte_token**: Reads a hex numeral wrapped in addressing
  punctuation
- **Assembler**: Runs the pipeline over a file and applies the error policy

Example Usage
-------------
>>> from asm6502.assembler import parse_line
>>> instr = parse_line("lda ($40),y")
>>> instr.mnemonic, instr.mode.name, instr.operands
('LDA', 'INDIRECT_INDEXED', (64,))
"""

from asm6502.assembler.assembler import (
    Assembler,
    LineResult,
    assemble,
    assemble_file,
    parse_line,
    parse_lines,
    try_parse_line,
)
from asm6502.assembler.classifier import (
    OperandClassifier,
    ParsedInstruction,
    classify_operand,
)
from asm6502.assembler.normalizer import NormalizedLine, normalize_line
from asm6502.assembler.values import (
    BYTE_MAX,
    WORD_MAX,
    cleanup_byte_token,
    is_byte,
    join_word,
    parse_hex_byte_token,
    split_word,
)
from asm6502.cpu import AddressingMode

__all__ = [
    # Main class and functions
    "Assembler",
    "LineResult",
    "assemble",
    "assemble_file",
    "parse_line",
    "parse_lines",
    "try_parse_line",
    # Normalizer
    "NormalizedLine",
    "normalize_line",
    # Classifier
    "OperandClassifier",
    "ParsedInstruction",
    "classify_operand",
    # Byte values
    "BYTE_MAX",
    "WORD_MAX",
    "cleanup_byte_token",
    "is_byte",
    "join_word",
    "parse_hex_byte_token",
    "split_word",
    # Addressing modes
    "AddressingMode",
]
