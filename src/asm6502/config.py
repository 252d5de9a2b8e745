"""
asm6502 Configuration
=====================

Settings for the line driver and the as6502 command. Configuration can
come from:
- Default values (defined here)
- Environment variables (AssemblerConfig.from_env)
- Command-line options, which override both
"""

from dataclasses import dataclass
import os


# Output formats understood by the CLI record writer
OUTPUT_FORMATS = ("text", "json")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AssemblerConfig:
    """
    Configuration for an assembly run.

    Attributes:
        stop_on_error: Halt at the first bad line (default: True). When
            False, the error is recorded and the next line is processed.
        output_format: How records are written: "text" or "json"
        encoding: Text encoding of source files (default: "ascii")
        max_errors: Errors recorded before giving up when not stopping
            on the first one (default: 100)
    """

    stop_on_error: bool = True
    output_format: str = "text"
    encoding: str = "ascii"
    max_errors: int = 100

    @classmethod
    def from_env(cls) -> "AssemblerConfig":
        """
        Create AssemblerConfig from environment variables.

        Environment variables (all optional):
            AS6502_STOP_ON_ERROR: "1"/"true"/"yes"/"on" or "0"/"false"/"no"/"off"
            AS6502_FORMAT: Output format ("text" or "json")
            AS6502_ENCODING: Source file encoding
            AS6502_MAX_ERRORS: Error limit (positive integer)

        Unrecognized values are ignored and the default is kept.

        Returns:
            AssemblerConfig with values from environment variables
        """
        config = cls()

        if stop := os.environ.get("AS6502_STOP_ON_ERROR"):
            stop = stop.strip().lower()
            if stop in _TRUE_VALUES:
                config.stop_on_error = True
            elif stop in _FALSE_VALUES:
                config.stop_on_error = False

        if output_format := os.environ.get("AS6502_FORMAT"):
            output_format = output_format.strip().lower()
            if output_format in OUTPUT_FORMATS:
                config.output_format = output_format

        if encoding := os.environ.get("AS6502_ENCODING"):
            config.encoding = encoding.strip()

        if max_errors := os.environ.get("AS6502_MAX_ERRORS"):
            try:
                value = int(max_errors)
            except ValueError:
                value = 0
            if value > 0:
                config.max_errors = value

        return config
