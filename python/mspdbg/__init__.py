"""
mspdbg shell core.

Command dispatch, typed runtime options and 16-bit address expression
evaluation for an interactive MSP430 debugger shell.  Use ``python -m
mspdbg`` or the ``mspdbg`` console script to start the shell.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
