"""
6502 Assembler Front End - Main Interface
=========================================

This module provides the line-level entry points and the Assembler class,
which drives them over a whole source file. Each line goes through the same
pipeline:

    raw line -> normalize_line() -> classify_operand() -> ParsedInstruction

Lines are independent: nothing learned from one line affects another, so
the same line always produces the same record.

Error Policy
------------
A bad line raises an AssemblerError subclass from parse_line(), or comes
back as a failed LineResult from try_parse_line(). The Assembler decides
what happens next:

- stop_on_error=True (default): the first error is raised and the run ends
- stop_on_error=False: the error is recorded, the line is skipped, and the
  run continues; check has_errors() / get_error_report() afterwards

Example Usage
-------------
>>> from asm6502.assembler import Assembler
>>> asm = Assembler()
>>> records = asm.assemble_string('''
...     LDA #$41
...     STA $0400,X
...     RTS
... ''')
>>> [str(r.mode) for r in records]
['immediate', 'absolute,X', 'implicit']
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator, Optional

from asm6502.assembler.classifier import ParsedInstruction, classify_operand
from asm6502.assembler.normalizer import normalize_line
from asm6502.config import AssemblerConfig
from asm6502.errors import AssemblerError, ErrorCollector, SourceLocation

logger = logging.getLogger(__name__)


# =============================================================================
# Line-Level Entry Points
# =============================================================================

@dataclass(frozen=True)
class LineResult:
    """
    Outcome of parsing one line: either an instruction or an error.

    Attributes:
        source_line: Original text of the line
        instruction: The parsed record, None on failure
        error: The line error, None on success
        location: Source location of the line (optional)
    """
    source_line: str
    instruction: Optional[ParsedInstruction] = None
    error: Optional[AssemblerError] = None
    location: Optional[SourceLocation] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_line(line: str, location: Optional[SourceLocation] = None) -> ParsedInstruction:
    """
    Parse one instruction line.

    Args:
        line: Raw source line (any case, surrounding whitespace allowed)
        location: Source location used in error messages

    Returns:
        ParsedInstruction for the line

    Raises:
        AssemblerError: If the line cannot be classified
    """
    normalized = normalize_line(line, location)
    return classify_operand(
        normalized.mnemonic,
        normalized.operand,
        source_line=line,
        location=location,
    )


def try_parse_line(line: str, location: Optional[SourceLocation] = None) -> LineResult:
    """Parse one line, returning line errors in the result instead of raising."""
    try:
        instruction = parse_line(line, location)
    except AssemblerError as e:
        return LineResult(source_line=line, error=e, location=location)
    return LineResult(source_line=line, instruction=instruction, location=location)


def parse_lines(lines: Iterable[str], filename: str = "<input>") -> Iterator[LineResult]:
    """
    Parse a sequence of lines, yielding one LineResult per non-blank line.

    Line numbers count every input line, blank ones included, so locations
    match the source file.
    """
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        yield try_parse_line(line, SourceLocation(filename, line_number))


# =============================================================================
# Assembler
# =============================================================================

class Assembler:
    """
    Drives the line parser over a whole source and applies the error policy.

    Attributes:
        config: Run configuration (error policy, encoding, error limit)
    """

    def __init__(
        self,
        config: Optional[AssemblerConfig] = None,
        stop_on_error: Optional[bool] = None,
    ):
        """
        Initialize the assembler.

        Args:
            config: Run configuration; defaults to AssemblerConfig()
            stop_on_error: Overrides config.stop_on_error when given
        """
        self.config = config or AssemblerConfig()
        if stop_on_error is not None:
            self.config = replace(self.config, stop_on_error=stop_on_error)

        self._results: list[LineResult] = []
        self._errors = ErrorCollector(max_errors=self.config.max_errors)

    # =========================================================================
    # Assembly Methods
    # =========================================================================

    def assemble_lines(
        self,
        lines: Iterable[str],
        filename: str = "<input>",
    ) -> list[ParsedInstruction]:
        """
        Parse every non-blank line.

        Args:
            lines: Source lines
            filename: Name used in error locations

        Returns:
            Records for the lines that parsed, in source order

        Raises:
            AssemblerError: First line error when stop_on_error is set
            TooManyErrors: When the error limit is reached otherwise
        """
        self._results.clear()
        self._errors.clear()

        for result in parse_lines(lines, filename):
            self._results.append(result)
            if result.ok:
                continue

            if self.config.stop_on_error:
                raise result.error

            logger.warning(f"skipping line: {result.error.message} ({result.location})")
            self._errors.add(result.error)

        instructions = self.get_instructions()
        logger.info(
            f"{filename}: {len(instructions)} instructions, "
            f"{self._errors.error_count()} errors"
        )
        return instructions

    def assemble_string(self, source: str, filename: str = "<input>") -> list[ParsedInstruction]:
        """Parse source code held in a string."""
        return self.assemble_lines(source.splitlines(), filename)

    def assemble_file(self, filepath: str | Path) -> list[ParsedInstruction]:
        """
        Parse a source file.

        Args:
            filepath: Path to assembly source file

        Returns:
            Records for the lines that parsed

        Raises:
            AssemblerError: As for assemble_lines()
            FileNotFoundError: If source file not found
        """
        filepath = Path(filepath)
        logger.info(f"Assembling {filepath}...")
        source = filepath.read_text(encoding=self.config.encoding)
        return self.assemble_string(source, str(filepath))

    # =========================================================================
    # Results
    # =========================================================================

    def get_results(self) -> list[LineResult]:
        """All line results of the last run, failed ones included."""
        return list(self._results)

    def get_instructions(self) -> list[ParsedInstruction]:
        return [r.instruction for r in self._results if r.instruction is not None]

    def has_errors(self) -> bool:
        """Check if the last run recorded line errors."""
        return self._errors.has_errors()

    def get_errors(self) -> list[AssemblerError]:
        return list(self._errors.errors)

    def get_error_report(self) -> str:
        """
        Get formatted error report.

        Returns:
            Error report string
        """
        return self._errors.report()


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, filename: str = "<input>") -> list[ParsedInstruction]:
    """
    Convenience function to parse source code, stopping at the first error.

    Raises:
        AssemblerError: If any line fails
    """
    return Assembler(stop_on_error=True).assemble_string(source, filename)


def assemble_file(filepath: str | Path) -> list[ParsedInstruction]:
    """
    Convenience function to parse a file, stopping at the first error.

    Raises:
        AssemblerError: If any line fails
    """
    return Assembler(stop_on_error=True).assemble_file(filepath)
