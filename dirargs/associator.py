"""
Argument association.

Binds the sub-expressions of a directive call to the parameters
declared by its handler.

Binding rules:
- Arguments before the first named one bind by position
- From the first named argument on, the remaining declared parameters
  bind by name only; leftover positions are never reused
- The first named argument with a given name wins
- Named arguments that match no remaining parameter are ignored
- Missing arguments become the null literal; parameters with a default
  are wrapped in a null-coalescing expression (name-keyed mode) or get
  the default inlined (positional-only mode)
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .dialect import Dialect, DEFAULT_DIALECT
from .model import (
    BoundArguments,
    BoundMapping,
    BoundSequence,
    ParameterDescriptor,
    ParsedArgument,
    validate_descriptors,
)

logger = logging.getLogger(__name__)


def find_named_start(parsed: Sequence[ParsedArgument]) -> Optional[int]:
    """Index of the first named argument, or None if all are positional."""
    for index, argument in enumerate(parsed):
        if argument.name is not None:
            return index
    return None


class ArgumentAssociator:
    """
    Associates parsed arguments with declared parameters.

    Two result shapes are supported:
    - name-keyed (default): parameter name -> final expression, one entry
      per declared parameter, defaults applied via the coalesce operator
    - positional-only: the raw expression list as the caller wrote it,
      with named matches and inlined defaults appended
    """

    def __init__(self, dialect: Dialect = DEFAULT_DIALECT):
        self.dialect = dialect

    def associate(
        self,
        declared: Iterable[ParameterDescriptor],
        parsed: Iterable[ParsedArgument],
        positional_only: bool = False,
    ) -> BoundArguments:
        """
        Bind parsed arguments to declared parameters.

        Args:
            declared: Handler parameters in declaration order
            parsed: Splitter output in lexical order
            positional_only: Return the raw expression list instead of
                             the defaulted name -> expression mapping

        Returns:
            Mapping or list of expression sources, see class docstring

        Raises:
            ParameterContractError: If declared names are not unique
        """
        declared_list = validate_descriptors(declared)
        parsed_list = list(parsed)

        if not declared_list:
            return [] if positional_only else {}

        named_start = find_named_start(parsed_list)
        if named_start is None:
            raw = [argument.value for argument in parsed_list]
        else:
            raw = self._bind_named(declared_list, parsed_list, named_start, positional_only)

        if positional_only:
            return raw

        return self._apply_defaults(declared_list, raw)

    def _bind_named(
        self,
        declared: List[ParameterDescriptor],
        parsed: List[ParsedArgument],
        named_start: int,
        positional_only: bool,
    ) -> BoundSequence:
        """Builds the raw list when named arguments are present."""
        positional = parsed[:named_start]
        named = parsed[named_start:]
        to_match = declared[named_start:]

        raw: BoundSequence = [argument.value for argument in positional]

        for parameter in to_match:
            match = next((arg for arg in named if arg.name == parameter.name), None)
            if match is not None:
                raw.append(match.value)
            elif positional_only and parameter.has_default:
                # No wrapping step follows in positional-only mode
                raw.append(parameter.default_expression)
            else:
                raw.append(self.dialect.null_literal)

        if logger.isEnabledFor(logging.DEBUG):
            self._log_ignored(to_match, named)

        return raw

    def _apply_defaults(self, declared: List[ParameterDescriptor], raw: BoundSequence) -> BoundMapping:
        """Builds the name-keyed mapping with default fallbacks."""
        result: BoundMapping = {}

        for index, parameter in enumerate(declared):
            value = raw[index] if index < len(raw) else self.dialect.null_literal

            if parameter.has_default:
                result[parameter.name] = self.dialect.coalesce_expression(
                    value, parameter.default_expression
                )
            else:
                result[parameter.name] = value

        logger.debug("Bound arguments: %s", result)
        return result

    @staticmethod
    def _log_ignored(to_match: List[ParameterDescriptor], named: List[ParsedArgument]) -> None:
        wanted = {parameter.name for parameter in to_match}
        seen = set()
        for argument in named:
            if argument.name not in wanted:
                logger.debug("Ignoring unmatched named argument '%s'", argument.name)
            elif argument.name in seen:
                logger.debug("Ignoring duplicate named argument '%s'", argument.name)
            seen.add(argument.name)


_default_associator = ArgumentAssociator()


def associate(
    declared: Iterable[ParameterDescriptor],
    parsed: Iterable[ParsedArgument],
    positional_only: bool = False,
    dialect: Optional[Dialect] = None,
) -> BoundArguments:
    """Convenience function for argument association."""
    associator = _default_associator if dialect is None else ArgumentAssociator(dialect)
    return associator.associate(declared, parsed, positional_only)


__all__ = ["ArgumentAssociator", "associate", "find_named_start"]
