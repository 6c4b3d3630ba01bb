"""Namespace identity: canonical module name plus aliases.

A namespace is a Python module.  Its canonical name is ``__name__``;
aliases are any other ``sys.modules`` keys bound to the same module
object (e.g. a package re-registering a submodule under a short name).
The shortest of these is used as the prefix of default logger names.
"""

import sys
from dataclasses import dataclass, field
from types import ModuleType
from typing import Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class Namespace:
    """A namespace's canonical name and its alternate names, in discovery order."""
    name: str
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, 'aliases', tuple(self.aliases))


def shortest_name(namespace: Namespace) -> str:
    """Return the shortest of the canonical name and the aliases.

    An alias only wins when it is strictly shorter than the current
    choice, so ties go to whichever name was seen first.
    """
    best = namespace.name
    for alias in namespace.aliases:
        if len(alias) < len(best):
            best = alias
    return best


def namespace_of(module: Union[ModuleType, str, Namespace],
                 modules: Optional[Mapping[str, object]] = None) -> Namespace:
    """Build the Namespace for a module object or module name.

    Args:
        module: A module, a module name, or an existing Namespace.
        modules: Mapping to search for aliases (default: sys.modules).

    Returns:
        Namespace with aliases listed in mapping order.
    """
    if isinstance(module, Namespace):
        return module
    if modules is None:
        modules = sys.modules

    if isinstance(module, str):
        name = module
        obj = modules.get(name)
    else:
        name = module.__name__
        obj = module

    if obj is None:
        return Namespace(name)
    aliases = tuple(key for key, value in list(modules.items())
                    if value is obj and key != name)
    return Namespace(name, aliases)
