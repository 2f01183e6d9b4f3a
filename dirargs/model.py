"""
Data model for directive argument binding.

Defines the values exchanged between the splitter, the associator
and the template compiler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from .errors import ParameterContractError


@dataclass(frozen=True)
class ParsedArgument:
    """
    One sub-expression of a directive argument list.

    Attributes:
        value: Source text of the argument, opaque to this library
        name: Argument name when written as ``name => value``, else None
    """
    value: str
    name: Optional[str] = None

    @property
    def is_named(self) -> bool:
        return self.name is not None

    def __str__(self) -> str:
        if self.name is None:
            return self.value
        return f"{self.name} => {self.value}"


@dataclass(frozen=True)
class Expression:
    """
    Raw source reference used as a parameter default.

    Rendered verbatim into generated code instead of being converted
    into a literal (e.g. ``Expression("PHP_EOL")``).
    """
    source: str

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    Static description of one declared handler parameter.

    Attributes:
        name: Parameter name, unique within a declared list
        has_default: Whether the parameter declares a default
        default_expression: Source text of the default
    """
    name: str
    has_default: bool = False
    default_expression: Optional[str] = None

    @classmethod
    def required(cls, name: str) -> ParameterDescriptor:
        return cls(name=name)

    @classmethod
    def with_default(cls, name: str, source: str) -> ParameterDescriptor:
        return cls(name=name, has_default=True, default_expression=source)

    def __post_init__(self):
        if not self.name:
            raise ParameterContractError("Parameter name must not be empty")
        if self.has_default and self.default_expression is None:
            raise ParameterContractError(
                f"Parameter '{self.name}' has a default but no default expression"
            )


# Name-keyed mode: parameter name -> final expression source.
BoundMapping = Dict[str, str]

# Position-keyed mode: raw expression sources in binding order.
BoundSequence = List[str]

BoundArguments = Union[BoundMapping, BoundSequence]


def validate_descriptors(declared: Iterable[ParameterDescriptor]) -> List[ParameterDescriptor]:
    """
    Check that a declared parameter list is well formed.

    Returns:
        The descriptors as a list, in declaration order

    Raises:
        ParameterContractError: On duplicate names or non-descriptor items
    """
    result: List[ParameterDescriptor] = []
    seen = set()
    for item in declared:
        if not isinstance(item, ParameterDescriptor):
            raise ParameterContractError(
                f"Expected ParameterDescriptor, got {type(item).__name__}"
            )
        if item.name in seen:
            raise ParameterContractError(f"Duplicate parameter name '{item.name}'")
        seen.add(item.name)
        result.append(item)
    return result


__all__ = [
    "ParsedArgument",
    "Expression",
    "ParameterDescriptor",
    "BoundMapping",
    "BoundSequence",
    "BoundArguments",
    "validate_descriptors",
]
