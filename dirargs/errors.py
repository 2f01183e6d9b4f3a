"""
Exception hierarchy for directive argument binding.

Errors that a template author can fix (a malformed argument list, an unknown
directive, a broken dialect file) inherit from DirectiveUserError.

Contract violations made by the code that registers directives
(duplicate parameter names, variadic handlers, defaults that cannot be
rendered as source) raise ParameterContractError. It is NOT a
DirectiveUserError and should propagate with a full traceback.
"""

from __future__ import annotations

from typing import List


class DirectiveUserError(Exception):
    """Base class for all user-facing errors in dirargs."""
    pass


class SplitError(DirectiveUserError):
    """Malformed directive argument list."""

    def __init__(self, message: str, position: int):
        self.message = message
        self.position = position
        super().__init__(f"Argument split error at position {position}: {message}")


class UnknownDirectiveError(DirectiveUserError):
    """Raised when rendering a directive that was never registered."""

    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.available = available
        msg = f"Unknown directive '{name}'"
        if available:
            msg += f". Registered: {', '.join(available)}"
        super().__init__(msg)


class DialectConfigError(DirectiveUserError):
    """Invalid dialect configuration."""
    pass


class ParameterContractError(ValueError):
    """Malformed parameter declaration (programming error)."""
    pass


__all__ = [
    "DirectiveUserError",
    "SplitError",
    "UnknownDirectiveError",
    "DialectConfigError",
    "ParameterContractError",
]
