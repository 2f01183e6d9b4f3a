"""
Argument binding and template substitution for custom template directives.
"""

from __future__ import annotations

from .errors import (
    DirectiveUserError,
    SplitError,
    UnknownDirectiveError,
    DialectConfigError,
    ParameterContractError,
)

from .model import (
    ParsedArgument,
    Expression,
    ParameterDescriptor,
    BoundArguments,
)

from .dialect import Dialect, DEFAULT_DIALECT

from .config import load_dialect, load_dialect_from_env

from .splitter import ArgumentSplitter, split

from .associator import ArgumentAssociator, associate, find_named_start

from .compiler import SubstitutionContext, compile_template

from .introspection import describe_callable, coerce_descriptors

from .registry import DirectiveMode, Directive, DirectiveRegistry

__version__ = "0.1.0"

__all__ = [
    # Errors
    "DirectiveUserError",
    "SplitError",
    "UnknownDirectiveError",
    "DialectConfigError",
    "ParameterContractError",
    # Model
    "ParsedArgument",
    "Expression",
    "ParameterDescriptor",
    "BoundArguments",
    # Dialect
    "Dialect",
    "DEFAULT_DIALECT",
    "load_dialect",
    "load_dialect_from_env",
    # Splitter
    "ArgumentSplitter",
    "split",
    # Associator
    "ArgumentAssociator",
    "associate",
    "find_named_start",
    # Compiler
    "SubstitutionContext",
    "compile_template",
    # Introspection
    "describe_callable",
    "coerce_descriptors",
    # Registry
    "DirectiveMode",
    "Directive",
    "DirectiveRegistry",
]
