"""Command-line interface for checking spec sets against raw input.

This package contains the core logic; scripts/ wrappers are optional.
"""

from explicit.cli.check import check_input, main

__all__ = ['check_input', 'main']
