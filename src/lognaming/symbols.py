"""Symbolic tokens used at logger call sites.

Python has no symbol type, so call sites that want to name a logger
without giving a message string use these small value objects:

    get_logger(Keyword('worker'))        # -> "<module>:worker"
    get_logger(Literal("('app', 'db')")) # -> "app:db"

A Symbol is a bare name.  A Keyword is the keyword-like form (written
with or without a leading colon) that the logger-form resolver treats
as "child of the current namespace".
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Symbol:
    """A bare symbolic name."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Keyword:
    """A keyword-like token. ``Keyword(':worker') == Keyword('worker')``."""
    name: str

    def __post_init__(self):
        if self.name.startswith(':'):
            object.__setattr__(self, 'name', self.name[1:])
        if not self.name:
            raise ValueError("keyword name must not be empty")

    def __str__(self) -> str:
        return f":{self.name}"


def symbol_name(value):
    """Return the name of a Symbol or Keyword, or None for anything else."""
    if isinstance(value, (Symbol, Keyword)):
        return value.name
    return None
