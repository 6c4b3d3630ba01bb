"""Exception types raised by lognaming.

Level parsing and configuration failures are reported as ValueError
subclasses so callers that only care about "bad input" can catch the
builtin type.
"""

from typing import Any, Sequence


class LevelError(ValueError):
    """Base class for level descriptor failures.

    Attributes:
        value: The descriptor that failed to parse.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidLevel(LevelError):
    """Descriptor matches no level, is out of range, or has an unsupported shape."""

    def __init__(self, value: Any):
        super().__init__(f"{value!r} does not match any log level", value)


class AmbiguousLevel(LevelError):
    """Descriptor is a prefix of more than one level name."""

    def __init__(self, value: Any, candidates: Sequence[str]):
        self.candidates = tuple(candidates)
        super().__init__(
            f"{value!r} matches more than one log level: "
            f"{', '.join(self.candidates)}",
            value,
        )


class ConfigError(ValueError):
    """A naming or diagnostics configuration value is invalid."""
