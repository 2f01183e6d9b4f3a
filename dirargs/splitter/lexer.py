"""
Lexer for directive argument lists.

Tokenizes the raw text between a directive's parentheses into:
- Strings in single or double quotes (backslash escapes allowed)
- Brackets: ( ) [ ] { }
- Commas and the named-argument arrow =>
- Identifiers
- Whitespace (kept, so values can be sliced verbatim)
- Any other run of characters
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

from ..errors import SplitError


@dataclass(frozen=True)
class Token:
    """
    Token of an argument list.

    Attributes:
        type: Token type (STRING, OPEN, CLOSE, COMMA, ARROW, IDENTIFIER,
              WHITESPACE, OTHER, EOF)
        value: Token text
        position: Offset in the source string
    """
    type: str
    value: str
    position: int

    @property
    def end(self) -> int:
        return self.position + len(self.value)

    def __repr__(self):
        return f"Token({self.type}, '{self.value}', pos={self.position})"


class ArgumentLexer:
    """
    Splits an argument-list string into tokens.

    Quoted strings are single tokens, so commas and brackets inside
    them never affect splitting.
    """

    # (regex_pattern, token_type)
    TOKEN_SPECS = [
        (r'\s+', 'WHITESPACE'),
        (r"'(?:[^'\\]|\\.)*'", 'STRING'),
        (r'"(?:[^"\\]|\\.)*"', 'STRING'),
        # An opening quote that the patterns above could not close
        (r"['\"]", 'UNTERMINATED'),
        (r'=>', 'ARROW'),
        (r'[(\[{]', 'OPEN'),
        (r'[)\]}]', 'CLOSE'),
        (r',', 'COMMA'),
        (r'[A-Za-z_][A-Za-z0-9_]*', 'IDENTIFIER'),
        (r'[^\s\'"()\[\]{},=A-Za-z_]+|=', 'OTHER'),
    ]

    def __init__(self):
        self._compiled_patterns = [
            (re.compile(pattern, re.DOTALL), token_type)
            for pattern, token_type in self.TOKEN_SPECS
        ]

    def tokenize(self, text: str) -> List[Token]:
        """
        Tokenize an argument list.

        Args:
            text: Raw argument-list source

        Returns:
            Token list terminated by EOF

        Raises:
            SplitError: On an unterminated string literal
        """
        tokens: List[Token] = []
        position = 0

        while position < len(text):
            for pattern, token_type in self._compiled_patterns:
                match = pattern.match(text, position)
                if match:
                    break
            else:
                # unreachable: the token table covers every character
                raise SplitError("Failed to tokenize", position)

            value = match.group(0)
            if token_type == 'UNTERMINATED':
                raise SplitError(f"Unterminated string starting with {value}", position)

            tokens.append(Token(type=token_type, value=value, position=position))
            position = match.end()

        tokens.append(Token(type='EOF', value='', position=position))
        return tokens

    def tokenize_stream(self, text: str) -> Iterator[Token]:
        for token in self.tokenize(text):
            yield token


__all__ = ["Token", "ArgumentLexer"]
