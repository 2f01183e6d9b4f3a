"""
Parameter discovery for Python handlers.

Builds ParameterDescriptor lists from a callable's signature once,
at registration time. Defaults are rendered to source text through
the dialect.
"""

from __future__ import annotations

import inspect
from typing import Callable, Iterable, List, Union

from .dialect import Dialect, DEFAULT_DIALECT
from .errors import ParameterContractError
from .model import ParameterDescriptor, validate_descriptors

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def describe_callable(
    handler: Callable,
    skip: int = 0,
    dialect: Dialect = DEFAULT_DIALECT,
) -> List[ParameterDescriptor]:
    """
    Describe the parameters of a handler.

    Args:
        handler: Directive handler
        skip: Number of leading parameters to leave out (e.g. a context
              parameter that is not bound from the argument list)
        dialect: Dialect used to render default values

    Returns:
        Descriptors in declaration order

    Raises:
        ParameterContractError: For *args/**kwargs, positional-only
                                parameters, or unrenderable defaults
    """
    try:
        signature = inspect.signature(handler)
    except (TypeError, ValueError) as e:
        raise ParameterContractError(f"Cannot inspect handler {handler!r}: {e}") from e

    parameters = list(signature.parameters.values())
    if skip > len(parameters):
        raise ParameterContractError(
            f"Handler {getattr(handler, '__name__', handler)!r} declares "
            f"{len(parameters)} parameters, cannot skip {skip}"
        )

    descriptors: List[ParameterDescriptor] = []
    for parameter in parameters[skip:]:
        if parameter.kind in _VARIADIC:
            raise ParameterContractError(
                f"Variadic parameter '{parameter.name}' cannot be bound from a directive call"
            )
        if parameter.kind is inspect.Parameter.POSITIONAL_ONLY:
            # bound values are passed by keyword
            raise ParameterContractError(
                f"Positional-only parameter '{parameter.name}' cannot be bound by name"
            )

        if parameter.default is inspect.Parameter.empty:
            descriptors.append(ParameterDescriptor.required(parameter.name))
        else:
            descriptors.append(ParameterDescriptor.with_default(
                parameter.name, dialect.render_literal(parameter.default)
            ))

    return descriptors


def coerce_descriptors(items: Iterable[Union[str, ParameterDescriptor]]) -> List[ParameterDescriptor]:
    """Accept plain names alongside descriptors; validates uniqueness."""
    descriptors = [
        ParameterDescriptor.required(item) if isinstance(item, str) else item
        for item in items
    ]
    return validate_descriptors(descriptors)


__all__ = ["describe_callable", "coerce_descriptors"]
