"""
asm6502 Error Hierarchy
=======================

This module defines the exception hierarchy for the 6502 operand front end.
All exceptions inherit from Asm6502Error, allowing callers to catch every
package-level error with a single except clause if desired.

Exception Hierarchy
-------------------
Asm6502Error (base)
└── AssemblerError (line-level errors)
    ├── AssemblySyntaxError - malformed instruction line
    │   └── UnrecognizedOperandSyntaxError - operand matches no addressing mode
    ├── AddressingModeError - operand shape is wrong for its addressing mode
    │   └── UnsupportedRegisterError - index register not valid for the form
    ├── OperandRangeError - value too large for the addressing mode
    └── TooManyErrors - error limit reached while continuing past bad lines

Every line-level error keeps the original source text of the offending line,
and a source location when the driver knows one. Errors abort the offending
line only; the driver decides whether to stop or carry on.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class Asm6502Error(Exception):
    """
    Base exception for all asm6502 errors.

        try:
            asm.assemble_file("program.asm")
        except Asm6502Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in a source file, used for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 when unknown)
    """
    filename: str
    line: int
    column: int = 0

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        if self.column > 0:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.filename}:{self.line}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(Asm6502Error):
    """
    Base exception for all errors tied to a single source line.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The original text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.asm:3: error: immediate operand $1FF does not fit in one byte
                LDA #$1FF
            hint: value must be in the range $00-$FF
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        elif self.source_line is not None:
            parts.append(f"error at line '{self.source_line}': {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in an instruction line.

    Examples:
        - Empty line handed to the parser
        - Operand numeral that is not hexadecimal
    """
    pass


class UnrecognizedOperandSyntaxError(AssemblySyntaxError):
    """
    Operand text matches none of the known addressing-mode patterns.

    Example:
        LDA 40      ; Error: addresses must start with '$'
    """

    def __init__(
        self,
        operand: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.operand = operand
        super().__init__(
            f"unrecognized operand syntax '{operand}'",
            location=location,
            hint=hint or "expected one of: A, #$nn, $nn, $nnnn, $nn,X, $nnnn,Y, "
                         "($nnnn), ($nn,X), ($nn),Y",
            source_line=source_line,
        )


class AddressingModeError(AssemblerError):
    """Operand shape is invalid for the addressing mode it selects."""
    pass


class UnsupportedRegisterError(AddressingModeError):
    """
    Index register not valid for the addressing form.

    Zero page and absolute indexing accept X or Y. Indexed indirect
    accepts only X, indirect indexed only Y.

    Example:
        LDA $40,Z   ; Error: Z is not an index register
    """

    def __init__(
        self,
        register: str,
        allowed: tuple[str, ...],
        form: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.register = register
        self.allowed = allowed

        if len(allowed) == 1:
            hint = f"only {allowed[0]} is supported in {form} addressing"
        else:
            hint = f"only {' or '.join(allowed)} is supported in {form} addressing"

        super().__init__(
            f"unsupported register '{register}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class OperandRangeError(AssemblerError):
    """
    Operand value does not fit the width its addressing mode allows.

    Immediate, indexed indirect and indirect indexed operands are always
    one byte. Other addresses are at most 16 bits.

    Example:
        LDA #$1FF   ; Error: only 1 byte is allowed
    """

    def __init__(
        self,
        value: int,
        limit: int,
        what: str = "operand",
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.limit = limit

        width = "one byte" if limit == 0xFF else "16 bits"
        super().__init__(
            f"{what} ${value:X} does not fit in {width}",
            location=location,
            hint=f"value must be in the range $00-${limit:X}",
            source_line=source_line,
        )


class TooManyErrors(AssemblerError):
    """
    Raised when the error limit is reached while continuing past bad lines.
    """

    def __init__(self, message: str = "Too many errors"):
        super().__init__(message)

    def _format_message(self) -> str:
        # Not tied to a line, so no "error:" prefix or source context
        return self.message


# =============================================================================
# Error Collection
# =============================================================================

class ErrorCollector:
    """
    Collects line errors for batch reporting.

    Used by the driver when it is told to keep going after a bad line,
    so every problem in a file can be reported in one run.

    Example:
        collector = ErrorCollector(max_errors=100)
        collector.add(error)
        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: int = 100):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before raising TooManyErrors
        """
        self.errors: list[AssemblerError] = []
        self.max_errors = max_errors

    def add(self, error: AssemblerError) -> None:
        """
        Add an error to the collection.

        Raises:
            TooManyErrors: If max_errors has been reached
        """
        self.errors.append(error)
        if len(self.errors) >= self.max_errors:
            raise TooManyErrors(f"Too many errors ({self.max_errors}), stopping")

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def error_count(self) -> int:
        return len(self.errors)

    def report(self) -> str:
        """Format all errors followed by a summary line."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        self.errors.clear()
