"""
asm6502 - Operand Syntax Front End for a 6502 Assembler
========================================================

For each instruction line, asm6502 works out which of the 6502's addressing
modes the operand text expresses and extracts the operand bytes in the
little-endian layout the processor expects. The result is a structured
record per line, meant for a downstream opcode encoder.

Main Components
---------------
- **assembler**: Line normalizer, operand classifier and file driver
- **cpu**: 6502 addressing modes and operand widths
- **cli**: The as6502 command-line tool

Quick Start
-----------
    >>> from asm6502 import Assembler
    >>> asm = Assembler()
    >>> for record in asm.assemble_string("LDA #$41\\nSTA $40"):
    ...     print(record)
    LDA  immediate         $41
    STA  zero page         $40

Or from the command line:
    $ as6502 program.asm
    $ as6502 --keep-going --format json program.asm

Version History
---------------
1.0.0 - Initial release
"""

__version__ = "1.0.0"

from asm6502.assembler import (
    Assembler,
    LineResult,
    ParsedInstruction,
    parse_line,
    try_parse_line,
)
from asm6502.config import AssemblerConfig
from asm6502.cpu import AddressingMode
from asm6502.errors import (
    Asm6502Error,
    AssemblerError,
    AssemblySyntaxError,
    UnrecognizedOperandSyntaxError,
    AddressingModeError,
    UnsupportedRegisterError,
    OperandRangeError,
    TooManyErrors,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "AssemblerConfig",
    "LineResult",
    "ParsedInstruction",
    "parse_line",
    "try_parse_line",
    "AddressingMode",
    # Exception hierarchy
    "Asm6502Error",
    "AssemblerError",
    "AssemblySyntaxError",
    "UnrecognizedOperandSyntaxError",
    "AddressingModeError",
    "UnsupportedRegisterError",
    "OperandRangeError",
    "TooManyErrors",
    "SourceLocation",
]
