"""
Elysabettian Command-Line Interface
===================================

This package provides command-line tools for the Elysabettian toolchain:

- **elylex**: Scanner token dump

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["elylex"]
