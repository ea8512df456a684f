"""Syntax highlighting for source code in the terminal with ANSI colours."""

__version__ = "0.1.0"