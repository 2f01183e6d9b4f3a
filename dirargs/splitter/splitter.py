"""
Splitter for directive argument lists.

Turns ``'a', [1, 2], key => fn(x, y)`` into an ordered list of
ParsedArgument values. Only top-level commas separate arguments;
brackets must balance and quotes must be closed.

Grammar (informal):
arguments  → (argument ("," argument)* ","?)?
argument   → IDENTIFIER "=>" value | value
value      → any balanced token sequence without a top-level ","
"""

from __future__ import annotations

from typing import List, Optional

from .lexer import ArgumentLexer, Token
from ..errors import SplitError
from ..model import ParsedArgument

_PAIRS = {'(': ')', '[': ']', '{': '}'}


class ArgumentSplitter:
    """
    Splits a raw argument-list string into ParsedArgument values.

    Lexical order is preserved. Once a named argument has been seen,
    every following argument must be named too.
    """

    def __init__(self):
        self.lexer = ArgumentLexer()

    def split(self, source: str) -> List[ParsedArgument]:
        """
        Split an argument list.

        Args:
            source: Raw argument-list source

        Returns:
            Parsed arguments in lexical order; empty for blank input

        Raises:
            SplitError: On unbalanced brackets, unterminated strings,
                        empty arguments or positional-after-named arguments
        """
        tokens = self.lexer.tokenize(source)
        groups = self._group_top_level(tokens)

        # A single trailing comma leaves one empty group behind
        if len(groups) > 1 and not groups[-1] and groups[-2]:
            groups.pop()

        if len(groups) == 1 and not groups[0]:
            return []

        result: List[ParsedArgument] = []
        for index, group in enumerate(groups):
            if not group:
                raise SplitError(f"Empty argument #{index + 1}", self._group_position(groups, index, tokens))

            argument = self._build_argument(source, group)

            if not argument.is_named and result and result[-1].is_named:
                raise SplitError(
                    "Positional argument cannot follow a named argument",
                    group[0].position,
                )
            result.append(argument)

        return result

    def _group_top_level(self, tokens: List[Token]) -> List[List[Token]]:
        """Groups non-whitespace tokens by top-level commas."""
        groups: List[List[Token]] = [[]]
        stack: List[Token] = []

        for token in tokens:
            if token.type == 'EOF':
                break

            if token.type == 'OPEN':
                stack.append(token)
            elif token.type == 'CLOSE':
                if not stack:
                    raise SplitError(f"Unexpected '{token.value}'", token.position)
                opener = stack.pop()
                expected = _PAIRS[opener.value]
                if token.value != expected:
                    raise SplitError(
                        f"Mismatched '{token.value}', expected '{expected}'",
                        token.position,
                    )
            elif token.type == 'COMMA' and not stack:
                groups.append([])
                continue

            if token.type != 'WHITESPACE':
                groups[-1].append(token)

        if stack:
            opener = stack[-1]
            raise SplitError(f"Unclosed '{opener.value}'", opener.position)

        return groups

    def _build_argument(self, source: str, group: List[Token]) -> ParsedArgument:
        """Creates a ParsedArgument from the tokens of one argument."""
        name: Optional[str] = None
        value_tokens = group

        if len(group) >= 2 and group[0].type == 'IDENTIFIER' and group[1].type == 'ARROW':
            name = group[0].value
            value_tokens = group[2:]
            if not value_tokens:
                raise SplitError(f"Missing value for named argument '{name}'", group[1].end)

        value = source[value_tokens[0].position:value_tokens[-1].end]
        return ParsedArgument(value=value, name=name)

    @staticmethod
    def _group_position(groups: List[List[Token]], index: int, tokens: List[Token]) -> int:
        """Best-effort source position for an empty group."""
        for previous in reversed(groups[:index]):
            if previous:
                return previous[-1].end
        return tokens[0].position


_default_splitter = ArgumentSplitter()


def split(source: str) -> List[ParsedArgument]:
    """Convenience function for splitting with a shared splitter."""
    return _default_splitter.split(source)


__all__ = ["ArgumentSplitter", "split"]
