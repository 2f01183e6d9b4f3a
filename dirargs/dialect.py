"""
Target-language dialect.

Describes the surface syntax of the code that directives generate:
the placeholder sigil, its escape marker, the absent-value literal,
the null-coalescing operator and how Python default values are
written as source text.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict

from .errors import DialectConfigError, ParameterContractError
from .model import Expression


@dataclass(frozen=True)
class Dialect:
    """
    Surface syntax used when binding and substituting arguments.

    Defaults follow PHP/Blade conventions: ``$name`` placeholders,
    ``\\$name`` escapes, ``null`` and the ``??`` operator.
    """
    sigil: str = "$"
    escape: str = "\\"
    null_literal: str = "null"
    coalesce: str = "??"
    true_literal: str = "true"
    false_literal: str = "false"
    # When set, "$value" does not match inside "$values".
    strict_boundaries: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Dialect:
        """Create Dialect from a YAML/JSON mapping."""
        if not isinstance(data, dict):
            raise DialectConfigError(f"Dialect must be a mapping, got {type(data).__name__}")

        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise DialectConfigError(
                f"Unknown dialect keys: {', '.join(map(str, unknown))}. "
                f"Expected: {', '.join(known)}"
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "strict_boundaries":
                if not isinstance(value, bool):
                    raise DialectConfigError("'strict_boundaries' must be a boolean")
            elif not isinstance(value, str) or not value:
                raise DialectConfigError(f"'{key}' must be a non-empty string")
            values[key] = value

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for YAML/JSON."""
        return asdict(self)

    def placeholder(self, name: str) -> str:
        """Placeholder token for a parameter, e.g. ``$name``."""
        return f"{self.sigil}{name}"

    def escaped_placeholder(self, name: str) -> str:
        """Escaped placeholder token, e.g. ``\\$name``."""
        return f"{self.escape}{self.sigil}{name}"

    def coalesce_expression(self, raw: str, default: str) -> str:
        """Expression that falls back to ``default`` when ``raw`` is absent."""
        return f"(({raw}) {self.coalesce} ({default}))"

    def render_literal(self, value: Any) -> str:
        """
        Render a Python default value as target-language source text.

        Raises:
            ParameterContractError: If the value has no source form
        """
        if isinstance(value, Expression):
            return value.source
        if value is None:
            return self.null_literal
        # bool before int: bool is an int subclass
        if isinstance(value, bool):
            return self.true_literal if value else self.false_literal
        if isinstance(value, int):
            return repr(value)
        if isinstance(value, float):
            if math.isnan(value) or math.isinf(value):
                raise ParameterContractError(f"Cannot render non-finite float {value!r}")
            return repr(value)
        if isinstance(value, str):
            return self._quote(value)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self.render_literal(v) for v in value) + "]"
        if isinstance(value, dict):
            items = (
                f"{self.render_literal(k)} => {self.render_literal(v)}"
                for k, v in value.items()
            )
            return "[" + ", ".join(items) + "]"
        raise ParameterContractError(
            f"Cannot render default value of type {type(value).__name__}; "
            f"wrap raw source in Expression(...)"
        )

    @staticmethod
    def _quote(text: str) -> str:
        escaped = text.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"


DEFAULT_DIALECT = Dialect()


__all__ = ["Dialect", "DEFAULT_DIALECT"]
