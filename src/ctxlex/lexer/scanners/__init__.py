"""Scanners for the ctxlex lexer.

Each scanner is a mixin that consumes a token of a specific kind: string
bodies (driven by the quoting mode of the current context) and the
context-free host tokens.
"""

from __future__ import annotations

from ctxlex.lexer.scanners.code import CodeScannerMixin
from ctxlex.lexer.scanners.string import StringScannerMixin

__all__ = [
    "CodeScannerMixin",
    "StringScannerMixin",
]
