"""
Template compiler.

Replaces parameter placeholders (``$name``) in a handler's code template
with the expressions bound to them. Escaped placeholders (``\\$name``)
come out as the literal ``$name`` and are never substituted.

Compilation runs in three phases:
1. every escaped placeholder of every bound name is swapped for an
   opaque key that cannot occur in template text;
2. all unescaped placeholders are substituted in a single pass; the
   inserted expressions are not scanned again;
3. the keys are restored to the literal placeholder text.
"""

from __future__ import annotations

import hashlib
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .dialect import Dialect, DEFAULT_DIALECT
from .model import BoundArguments

logger = logging.getLogger(__name__)

# NUL never appears in template text, so framed keys cannot collide with it.
_KEY_FRAME = "\x00"

# No identifier character may follow a placeholder in strict mode.
_BOUNDARY = "(?![A-Za-z0-9_])"


def _escape_key(name: str) -> str:
    digest = hashlib.sha1(name.encode("utf-8")).hexdigest()
    return f"{_KEY_FRAME}{digest}{_KEY_FRAME}"


def compile_template(
    template: str,
    bindings: Mapping[str, Optional[str]],
    dialect: Dialect = DEFAULT_DIALECT,
) -> str:
    """
    Substitute bound expressions into a code template.

    Args:
        template: Code template returned by a directive handler
        bindings: Parameter name -> expression source; a None value marks
                  the parameter as absent (its placeholder is kept)
        dialect: Placeholder and escape syntax

    Returns:
        Compiled code
    """
    if not bindings:
        return template

    escaped: Dict[str, str] = {}
    for name in bindings:
        key = _escape_key(name)
        template = _replace_token(
            template, dialect.escaped_placeholder(name), key, dialect.strict_boundaries
        )
        escaped[key] = dialect.placeholder(name)

    replacements = {
        dialect.placeholder(name): expression
        for name, expression in bindings.items()
        if expression is not None
    }
    template = _replace_all(template, replacements, dialect.strict_boundaries)

    for key, literal in escaped.items():
        template = template.replace(key, literal)

    return template


def _replace_token(text: str, token: str, replacement: str, strict_boundaries: bool) -> str:
    """Replace one literal token, honoring identifier boundaries when strict."""
    if not strict_boundaries:
        return text.replace(token, replacement)
    pattern = re.compile(re.escape(token) + _BOUNDARY)
    return pattern.sub(lambda m: replacement, text)


def _replace_all(text: str, replacements: Dict[str, str], strict_boundaries: bool) -> str:
    """
    Replace literal substrings in one left-to-right pass.

    At each position the longest matching key wins. Replacement text is
    never rescanned.
    """
    if not replacements:
        return text

    alternatives = "|".join(
        re.escape(key) for key in sorted(replacements, key=len, reverse=True)
    )
    if strict_boundaries:
        pattern = re.compile(f"(?:{alternatives}){_BOUNDARY}")
    else:
        pattern = re.compile(alternatives)

    return pattern.sub(lambda m: replacements[m.group(0)], text)


@dataclass
class SubstitutionContext:
    """
    Per-invocation context handed to directive handlers.

    Holds the bound arguments of one directive call and compiles
    templates against them. Never shared between invocations.

    Attributes:
        parameters: Bound arguments (mapping, or list in positional-only mode)
        expression: Raw argument-list source of the call
        directive: Directive name
        dialect: Placeholder and escape syntax
    """
    parameters: BoundArguments = field(default_factory=dict)
    expression: Optional[str] = None
    directive: Optional[str] = None
    dialect: Dialect = DEFAULT_DIALECT

    @property
    def bindings(self) -> Dict[str, str]:
        """
        Name -> expression mapping used for compilation.

        Positional lists are keyed by index, so ``$0`` refers to the
        first argument.
        """
        if isinstance(self.parameters, list):
            return {str(index): value for index, value in enumerate(self.parameters)}
        return dict(self.parameters)

    def compile(self, template: str) -> str:
        """Compile a template against this context's bindings."""
        logger.debug("Compiling template for directive '%s'", self.directive)
        return compile_template(template, self.bindings, self.dialect)


__all__ = ["SubstitutionContext", "compile_template"]
