"""
Log level table and level descriptor parsing.

Levels are small integers.  Higher numbers are more verbose, and a
message is shown when ``message.level <= threshold``:

    ←── quieter ───────────────────────────────────── louder ──→
    0    1     2     3    4    5     6-9        10    11-15      16
    OFF  FATAL ERROR WARN INFO DEBUG USER1-4    TRACE USER5-9    UNSET

Descriptors accepted by parse_level():

    'debug', 'DEBUG', 'Deb'   full name or unambiguous prefix
    'd', 'D'                  one-letter shortcut
    '3'                       digit -> USER3
    5                         numeric value in [MIN_LEVEL, UNSET_LEVEL]
    Symbol('info')            symbolic name, parsed like a string

One-character input is looked up in a single shortcut string that holds
both the first letters and the user-level digits, indexed by level.
"""

from enum import IntEnum
from typing import Iterable, List, Optional

from .errors import AmbiguousLevel, InvalidLevel
from .symbols import symbol_name


class Level(IntEnum):
    """Default level table."""
    OFF = 0
    FATAL = 1
    ERROR = 2
    WARN = 3
    INFO = 4
    DEBUG = 5
    USER1 = 6
    USER2 = 7
    USER3 = 8
    USER4 = 9
    TRACE = 10
    USER5 = 11
    USER6 = 12
    USER7 = 13
    USER8 = 14
    USER9 = 15
    UNSET = 16


MIN_LEVEL = Level.OFF
UNSET_LEVEL = Level.UNSET


def _default_shortcut(name: str) -> str:
    # Numbered user levels are matched by their digit, everything else
    # by its first letter.
    return name[-1] if name[-1].isdigit() else name[0]


class LevelTable:
    """An ordered table of level names, indexed by numeric level.

    Args:
        names: Level names in numeric order; the last one is the unset level.
        shortcuts: One character per level. Derived from the names when omitted.
        min_level: Smallest numeric value accepted by parse().
    """

    def __init__(self, names: Iterable[str], shortcuts: Optional[str] = None,
                 min_level: int = 0):
        self.names = tuple(n.upper() for n in names)
        if not self.names:
            raise ValueError("level table must not be empty")
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"level names must be unique: {self.names}")
        if shortcuts is None:
            shortcuts = ''.join(_default_shortcut(n) for n in self.names)
        if len(shortcuts) != len(self.names):
            raise ValueError(
                f"need one shortcut per level ({len(self.names)}), "
                f"got {len(shortcuts)}"
            )
        self.shortcuts = shortcuts.upper()
        self.min_level = min_level

    @property
    def unset_level(self) -> int:
        return len(self.names) - 1

    def collisions(self) -> List[str]:
        """Shortcut characters shared by more than one level."""
        return sorted({c for c in self.shortcuts if self.shortcuts.count(c) > 1})

    def name_of(self, level: int) -> str:
        """Return the canonical name of a numeric level."""
        if isinstance(level, bool) or not isinstance(level, int):
            raise InvalidLevel(level)
        if not self.min_level <= level <= self.unset_level:
            raise InvalidLevel(level)
        return self.names[level]

    def parse(self, arg) -> int:
        """Translate a level descriptor into a numeric level.

        Raises:
            InvalidLevel: No level matches, or the value is out of range
                or of an unsupported type.
            AmbiguousLevel: A multi-character name prefixes several levels.
        """
        name = symbol_name(arg)
        if name is not None:
            arg = name
        if isinstance(arg, str):
            return self._parse_name(arg)
        if isinstance(arg, int) and not isinstance(arg, bool):
            if self.min_level <= arg <= self.unset_level:
                return arg
        raise InvalidLevel(arg)

    def _parse_name(self, arg: str) -> int:
        name = arg.strip().upper()
        if len(name) == 1:
            hits = [level for level, c in enumerate(self.shortcuts) if c == name]
            if len(hits) == 1:
                return hits[0]
            raise InvalidLevel(arg)
        if not name:
            raise InvalidLevel(arg)

        matches = [level for level, level_name in enumerate(self.names)
                   if level_name.startswith(name)]
        if len(matches) > 1:
            raise AmbiguousLevel(arg, [self.names[m] for m in matches])
        if not matches:
            raise InvalidLevel(arg)
        return matches[0]


DEFAULT_TABLE = LevelTable([level.name for level in Level])


def parse_level(arg, table: LevelTable = DEFAULT_TABLE) -> int:
    """Parse a level descriptor against ``table``.

    Returns a Level member when parsing against the default table, a
    plain int otherwise.
    """
    level = table.parse(arg)
    if table is DEFAULT_TABLE:
        level = Level(level)
        # Lazy import: diagnostics parses its own channel specs with us
        from .diagnostics import get_diagnostics
        get_diagnostics().emit(Level.DEBUG, "level {arg!r} -> {name}",
                               channel='level', arg=arg, name=level.name)
    return level


def level_name(level: int, table: LevelTable = DEFAULT_TABLE) -> str:
    """Return the canonical name for a numeric level."""
    return table.name_of(level)
