"""
asm6502 Command-Line Interface
==============================

- **as6502**: Parses a 6502 source file and prints one record per line

Implemented as a Click application with shared error handling and exit
codes (see cli.errors).
"""

__all__ = ["as6502"]
