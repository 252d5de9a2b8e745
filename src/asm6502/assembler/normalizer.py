"""
Instruction Line Normalizer
===========================

Turns a raw source line into a mnemonic and its operand text. Lines are
case-insensitive, so everything is uppercased. Addressing syntax has no
significant whitespace, so the operand tokens are joined back together
without separators:

>>> normalize_line("  lda ($40), y ")
NormalizedLine(mnemonic='LDA', operand='($40),Y')
>>> normalize_line("nop")
NormalizedLine(mnemonic='NOP', operand=None)
"""

from dataclasses import dataclass
from typing import Optional

from asm6502.errors import AssemblySyntaxError, SourceLocation


@dataclass(frozen=True)
class NormalizedLine:
    """
    A line split into mnemonic and operand text.

    Attributes:
        mnemonic: Uppercased mnemonic
        operand: Joined operand text, or None when the line has no operand
    """
    mnemonic: str
    operand: Optional[str] = None


def normalize_line(
    line: str,
    location: Optional[SourceLocation] = None,
) -> NormalizedLine:
    """
    Trim, uppercase and split an instruction line.

    Args:
        line: Raw source line
        location: Source location for error reporting

    Returns:
        NormalizedLine with operand None when only a mnemonic is present

    Raises:
        AssemblySyntaxError: If the line is blank
    """
    tokens = line.strip().upper().split()
    if not tokens:
        raise AssemblySyntaxError(
            "empty instruction line",
            location=location,
            source_line=line,
        )

    if len(tokens) == 1:
        return NormalizedLine(mnemonic=tokens[0])

    return NormalizedLine(mnemonic=tokens[0], operand="".join(tokens[1:]))
