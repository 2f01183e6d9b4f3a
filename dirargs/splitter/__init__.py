"""
Argument-list splitting.

Turns the raw expression passed to a directive into an ordered
list of (value, name) sub-expressions.
"""

from __future__ import annotations

from .lexer import ArgumentLexer, Token
from .splitter import ArgumentSplitter, split

__all__ = [
    "ArgumentLexer",
    "Token",
    "ArgumentSplitter",
    "split",
]
