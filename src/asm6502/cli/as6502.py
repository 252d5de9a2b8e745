"""
as6502 - 6502 Operand Parser Command-Line Interface
===================================================

Parses a 6502 assembly source file and prints the structured record of
every instruction line: mnemonic, addressing mode and operand bytes.

Usage Examples
--------------
Print records for a file:
    $ as6502 program.asm

Report every bad line instead of stopping at the first:
    $ as6502 --keep-going program.asm

JSON Lines output to a file:
    $ as6502 --format json -o program.jsonl program.asm

Environment variables (AS6502_STOP_ON_ERROR, AS6502_FORMAT,
AS6502_ENCODING, AS6502_MAX_ERRORS) set the defaults; options override them.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from asm6502 import __version__
from asm6502.assembler import Assembler, LineResult
from asm6502.cli.errors import ExitCode, handle_cli_exception
from asm6502.config import OUTPUT_FORMATS, AssemblerConfig
from asm6502.errors import TooManyErrors


# =============================================================================
# Record Formatting
# =============================================================================

def format_result(result: LineResult, output_format: str) -> str:
    """Format one successful line result for output."""
    line_number = result.location.line if result.location else 0
    if output_format == "json":
        record = {"line": line_number}
        record.update(result.instruction.to_dict())
        return json.dumps(record)
    return f"{line_number:5d}  {result.instruction}"


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write records to FILE instead of standard output",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Record format: text (default) or json (one object per line)",
)
@click.option(
    "--keep-going",
    is_flag=True,
    help="Report bad lines and continue with the next one",
)
@click.option(
    "--stop-on-error",
    is_flag=True,
    help="Stop at the first bad line (the default unless AS6502_STOP_ON_ERROR is off)",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="With --keep-going, give up after this many errors (default: 100)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="as6502")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: Optional[str],
    keep_going: bool,
    stop_on_error: bool,
    max_errors: Optional[int],
    verbose: bool,
) -> None:
    """
    Classify the operands of a 6502 assembly source file.

    INPUT_FILE holds one instruction per line (no labels). Each line is
    printed as its mnemonic, addressing mode and operand bytes, with
    16-bit operands in little-endian order.

    \b
    Examples:
        as6502 program.asm
        as6502 --keep-going program.asm
        as6502 -f json -o out.jsonl program.asm
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    config = AssemblerConfig.from_env()
    if output_format is not None:
        config.output_format = output_format.lower()
    if keep_going and stop_on_error:
        click.echo("Error: --keep-going and --stop-on-error are mutually exclusive", err=True)
        sys.exit(ExitCode.INVALID_ARGS)
    if keep_going:
        config.stop_on_error = False
    elif stop_on_error:
        config.stop_on_error = True
    if max_errors is not None:
        config.max_errors = max_errors

    asm = Assembler(config)
    failure: Optional[Exception] = None
    limit_reached: Optional[TooManyErrors] = None

    if verbose:
        click.echo(f"Parsing {input_file}...", err=True)

    try:
        asm.assemble_file(input_file)
    except TooManyErrors as e:
        limit_reached = e
    except Exception as e:
        failure = e

    # Lines parsed before a stop are still printed, as they would be when
    # streaming the file
    lines = [
        format_result(result, config.output_format)
        for result in asm.get_results()
        if result.ok
    ]

    try:
        if output is not None:
            if lines or failure is None:
                output.write_text("".join(f"{line}\n" for line in lines))
                if verbose:
                    click.echo(f"Wrote {len(lines)} records to {output}", err=True)
        else:
            for line in lines:
                click.echo(line)
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if failure is not None:
        handle_cli_exception(failure, verbose=verbose, error_type="Assembly")

    if asm.has_errors():
        click.echo(asm.get_error_report(), err=True)
        if limit_reached is not None:
            click.echo(str(limit_reached), err=True)
        sys.exit(ExitCode.BUILD_ERROR)


if __name__ == "__main__":
    main()
