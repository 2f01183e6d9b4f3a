"""
Process-wide default registry.

Module-level shortcuts for applications that need a single set of
directives.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Union

from .model import ParameterDescriptor
from .registry import Directive, DirectiveRegistry

_registry = DirectiveRegistry()


def default_registry() -> DirectiveRegistry:
    return _registry


def set_default_registry(registry: DirectiveRegistry) -> DirectiveRegistry:
    """Replace the default registry; returns the previous one."""
    global _registry
    previous = _registry
    _registry = registry
    return previous


def params(
    name: str,
    handler: Callable[..., Any],
    parameters: Optional[Iterable[Union[str, ParameterDescriptor]]] = None,
) -> Directive:
    return _registry.params(name, handler, parameters)


def make(name: str, handler: Callable[..., Any], pass_context: bool = False) -> Directive:
    return _registry.make(name, handler, pass_context)


def compile(name: str, handler: Callable[..., Any], pass_context: bool = False) -> Directive:
    return _registry.compile(name, handler, pass_context)


def render(name: str, expression: str) -> Any:
    return _registry.render(name, expression)


__all__ = [
    "default_registry",
    "set_default_registry",
    "params",
    "make",
    "compile",
    "render",
]
