"""
Directive registry.

Registers directive handlers in one of three modes and turns each into
a callable ``directive(expression) -> result`` that a host templating
engine can invoke with the raw argument list of a call site.

Modes:
- params:  handler(expression, context), context.parameters is the raw
           positional list
- make:    handler(**bound), bound values are defaulted expressions
- compile: like make, then the returned template is compiled against
           the same bindings
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .associator import ArgumentAssociator
from .compiler import SubstitutionContext
from .dialect import Dialect, DEFAULT_DIALECT
from .errors import UnknownDirectiveError
from .introspection import coerce_descriptors, describe_callable
from .model import ParameterDescriptor
from .splitter import ArgumentSplitter

logger = logging.getLogger(__name__)

# Host engine hook: receives every registered directive.
HostHook = Callable[[str, "Directive"], None]


class DirectiveMode(enum.Enum):
    """Registration modes."""
    PARAMS = "params"
    MAKE = "make"
    COMPILE = "compile"


class Directive:
    """
    A registered directive.

    Parameters are captured once, at registration. Every call builds
    fresh bound arguments and a fresh SubstitutionContext.
    """

    def __init__(
        self,
        name: str,
        mode: DirectiveMode,
        handler: Callable[..., Any],
        parameters: Iterable[ParameterDescriptor],
        splitter: ArgumentSplitter,
        associator: ArgumentAssociator,
        pass_context: bool = False,
    ):
        self.name = name
        self.mode = mode
        self.handler = handler
        self.parameters: Tuple[ParameterDescriptor, ...] = tuple(parameters)
        self.splitter = splitter
        self.associator = associator
        self.pass_context = pass_context

    @property
    def dialect(self) -> Dialect:
        return self.associator.dialect

    def __call__(self, expression: str) -> Any:
        parsed = self.splitter.split(expression)

        if self.mode is DirectiveMode.PARAMS:
            bound = self.associator.associate(self.parameters, parsed, positional_only=True)
            context = self._context(bound, expression)
            return self.handler(expression, context)

        bound = self.associator.associate(self.parameters, parsed)
        context = self._context(bound, expression)

        if self.pass_context:
            result = self.handler(context, **bound)
        else:
            result = self.handler(**bound)

        if self.mode is DirectiveMode.COMPILE:
            if not isinstance(result, str):
                raise TypeError(
                    f"Compiled directive '{self.name}' must return a template string, "
                    f"got {type(result).__name__}"
                )
            return context.compile(result)

        return result

    def _context(self, bound, expression: str) -> SubstitutionContext:
        return SubstitutionContext(
            parameters=bound,
            expression=expression,
            directive=self.name,
            dialect=self.dialect,
        )

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self.parameters)
        return f"Directive({self.name!r}, {self.mode.value}, ({names}))"


class DirectiveRegistry:
    """
    Registry of directive handlers.

    Optionally forwards every registration to a host engine through
    the ``host`` hook.
    """

    def __init__(
        self,
        splitter: Optional[ArgumentSplitter] = None,
        dialect: Dialect = DEFAULT_DIALECT,
        host: Optional[HostHook] = None,
    ):
        self.splitter = splitter or ArgumentSplitter()
        self.associator = ArgumentAssociator(dialect)
        self.host = host
        self._directives: Dict[str, Directive] = {}

    @property
    def dialect(self) -> Dialect:
        return self.associator.dialect

    def params(
        self,
        name: str,
        handler: Callable[..., Any],
        parameters: Optional[Iterable[Union[str, ParameterDescriptor]]] = None,
    ) -> Directive:
        """
        Register a directive that receives the raw expression.

        The handler is called as ``handler(expression, context)``;
        ``context.parameters`` holds the positional-only binding.

        Args:
            name: Directive name
            handler: Directive handler
            parameters: Declared parameters; defaults to the handler's
                        full signature, so a plain (expression, context)
                        handler sees every positional argument
        """
        if parameters is None:
            descriptors = describe_callable(handler, dialect=self.dialect)
        else:
            descriptors = coerce_descriptors(parameters)
        return self._register(name, DirectiveMode.PARAMS, handler, descriptors)

    def make(self, name: str, handler: Callable[..., Any], pass_context: bool = False) -> Directive:
        """
        Register a directive whose handler receives bound expressions.

        Args:
            name: Directive name
            handler: Directive handler; its signature declares the parameters
            pass_context: Pass the SubstitutionContext as the first argument
        """
        descriptors = describe_callable(handler, skip=1 if pass_context else 0, dialect=self.dialect)
        return self._register(name, DirectiveMode.MAKE, handler, descriptors, pass_context)

    def compile(self, name: str, handler: Callable[..., Any], pass_context: bool = False) -> Directive:
        """
        Register a directive whose returned template is compiled.

        ``$param`` placeholders in the returned template are replaced with
        the bound expressions; ``\\$param`` yields a literal ``$param``.
        """
        descriptors = describe_callable(handler, skip=1 if pass_context else 0, dialect=self.dialect)
        return self._register(name, DirectiveMode.COMPILE, handler, descriptors, pass_context)

    def _register(
        self,
        name: str,
        mode: DirectiveMode,
        handler: Callable[..., Any],
        descriptors: List[ParameterDescriptor],
        pass_context: bool = False,
    ) -> Directive:
        if not name:
            raise ValueError("Directive name must not be empty")

        if name in self._directives:
            logger.warning(f"Directive '{name}' overwrites existing directive")

        directive = Directive(
            name=name,
            mode=mode,
            handler=handler,
            parameters=descriptors,
            splitter=self.splitter,
            associator=self.associator,
            pass_context=pass_context,
        )
        self._directives[name] = directive
        logger.debug("Registered %r", directive)

        if self.host is not None:
            self.host(name, directive)

        return directive

    def render(self, name: str, expression: str) -> Any:
        """
        Invoke a registered directive.

        Raises:
            UnknownDirectiveError: If no directive has this name
        """
        directive = self._directives.get(name)
        if directive is None:
            raise UnknownDirectiveError(name, self.names())
        return directive(expression)

    def get(self, name: str) -> Optional[Directive]:
        return self._directives.get(name)

    def names(self) -> List[str]:
        return sorted(self._directives)

    def __contains__(self, name: object) -> bool:
        return name in self._directives

    def __len__(self) -> int:
        return len(self._directives)


__all__ = ["DirectiveMode", "Directive", "DirectiveRegistry", "HostHook"]
