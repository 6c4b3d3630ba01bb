"""
Logger-form resolver.

Decides which logger a call site refers to from its raw argument list
and returns the logger plus the arguments it did not consume.

Dispatch on the first argument, in priority order:

    (nothing) / "message"   DEFAULT     namespace + enclosing functions,
                                        nothing consumed
    Keyword('worker')       KEYWORD     namespace:worker
    Literal(...) / Symbol   LITERAL     evaluated; a name -> namespace:name,
                                        a sequence -> joined as given
                                        (empty: the default name),
                                        anything else is the logger itself
    anything else           EXPRESSION  already a logger, passed through

Everything but DEFAULT consumes the first argument.
"""

import ast
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, NamedTuple, Optional, Sequence, Tuple

from .categories import (
    apply_case, apply_token_case, join_categories, render_component,
)
from .config import DEFAULT_CONFIG, NamingConfig, NamingOptions
from .diagnostics import get_diagnostics, trace
from .frames import LexicalContext, enclosing_names
from .levels import Level
from .namespaces import namespace_of, shortest_name
from .symbols import Keyword, Symbol, symbol_name


class ArgKind(Enum):
    DEFAULT = 'default'
    KEYWORD = 'keyword'
    LITERAL = 'literal'
    EXPRESSION = 'expression'


@dataclass(frozen=True)
class Literal:
    """A value known without running the call site's code.

    A string value is Python source: an identifier reads as a Symbol,
    anything else goes through ``ast.literal_eval``.  Other values are
    taken as already evaluated.
    """
    value: Any

    def evaluate(self):
        if not isinstance(self.value, str):
            return self.value
        node = ast.parse(self.value.strip(), mode='eval').body
        if isinstance(node, ast.Name):
            return Symbol(node.id)
        return ast.literal_eval(node)


class ResolvedCall(NamedTuple):
    logger: Any
    args: Tuple[Any, ...]


def classify_argument(args: Sequence[Any]) -> ArgKind:
    """Classify a call site by its first argument."""
    if not args or isinstance(args[0], str):
        return ArgKind.DEFAULT
    first = args[0]
    if isinstance(first, Keyword):
        return ArgKind.KEYWORD
    if isinstance(first, (Literal, Symbol)):
        return ArgKind.LITERAL
    return ArgKind.EXPRESSION


def _options_for(options, namespace) -> NamingOptions:
    if options is None:
        options = DEFAULT_CONFIG
    if isinstance(options, NamingConfig):
        return options.options_for(namespace)
    return options


def namespace_prefix(namespace, options: NamingOptions) -> str:
    return apply_case(shortest_name(namespace), options.category_case)


def default_logger_name(namespace, context: Optional[LexicalContext],
                        options: NamingOptions) -> str:
    """Namespace prefix followed by the enclosing function names."""
    case = options.category_case
    components = [namespace_prefix(namespace, options)]
    components.extend(apply_case(name, case) for name in enclosing_names(context))
    return join_categories(options.category_separator, components)


def child_logger_name(namespace, name: str, options: NamingOptions) -> str:
    """``<namespace><sep><name>``; the token name is lower-cased by default."""
    return join_categories(options.category_separator, [
        namespace_prefix(namespace, options),
        apply_token_case(name, options.category_case),
    ])


@trace
def resolve_logger_form(namespace, context: Optional[LexicalContext],
                        args: Sequence[Any] = (),
                        options=None,
                        obtain_logger: Callable[[str], Any] = logging.getLogger,
                        ) -> ResolvedCall:
    """Determine the logger a call site refers to.

    Args:
        namespace: Namespace, module, or module name of the call site.
        context: Lexical context of the call site (None for none).
        args: The call site's arguments, in order.
        options: NamingConfig or NamingOptions (default: colon separator,
            default case policy).
        obtain_logger: Get-or-create registry lookup by category name.

    Returns:
        ResolvedCall of the logger and the unconsumed arguments.  When a
        Literal evaluates to something that is neither a name nor a
        sequence, the *evaluated* value is returned as the logger, so
        ``Literal("42")`` resolves to ``42``, not to the Literal.  An
        empty sequence resolves like a call with no arguments but is
        still consumed.

    Errors from literal evaluation and from obtain_logger propagate
    unchanged.
    """
    namespace = namespace_of(namespace)
    opts = _options_for(options, namespace)
    args = tuple(args)
    kind = classify_argument(args)
    out = get_diagnostics()

    if kind is ArgKind.DEFAULT:
        name = default_logger_name(namespace, context, opts)
        out.emit(Level.DEBUG, "{kind}: {name}", channel='resolve',
                 kind=kind.value, name=name)
        return ResolvedCall(obtain_logger(name), args)

    first, rest = args[0], args[1:]

    if kind is ArgKind.KEYWORD:
        name = child_logger_name(namespace, first.name, opts)
        out.emit(Level.DEBUG, "{kind}: {name}", channel='resolve',
                 kind=kind.value, name=name)
        return ResolvedCall(obtain_logger(name), rest)

    if kind is ArgKind.LITERAL:
        value = first.evaluate() if isinstance(first, Literal) else first
        symbolic = symbol_name(value)
        if symbolic is None and isinstance(value, str):
            symbolic = value
        if symbolic is not None:
            name = child_logger_name(namespace, symbolic, opts)
        elif isinstance(value, (list, tuple)) and not value:
            # Nothing to join: fall back to the call site's default name
            name = default_logger_name(namespace, context, opts)
        elif isinstance(value, (list, tuple)):
            name = join_categories(
                opts.category_separator,
                [render_component(c, opts.category_case) for c in value],
            )
        else:
            out.emit(Level.DEBUG, "{kind}: passing through {value!r}",
                     channel='resolve', kind=kind.value, value=value)
            return ResolvedCall(value, rest)
        out.emit(Level.DEBUG, "{kind}: {name}", channel='resolve',
                 kind=kind.value, name=name)
        return ResolvedCall(obtain_logger(name), rest)

    out.emit(Level.DEBUG, "{kind}: passing through {value!r}",
             channel='resolve', kind=kind.value, value=first)
    return ResolvedCall(first, rest)
