"""
Channel configuration and parsing for lognaming diagnostics.

Channels are named categories of internal diagnostic output.  Each
channel can carry its own threshold, overriding the global one.

Channel spec syntax:
    CHANNEL[:LEVEL]

    LEVEL is any level descriptor understood by parse_level():
        resolve           # enabled at DEBUG
        resolve:debug     # same
        frames:t          # TRACE shortcut
        config:4          # digit: USER4
        level:off         # silenced
"""

from dataclasses import dataclass

from ..errors import ConfigError
from ..levels import Level, parse_level


KNOWN_CHANNELS = {
    'resolve',      # Logger-form resolution decisions
    'frames',       # Lexical context walking
    'level',        # Level descriptor parsing
    'config',       # Naming configuration loading
    'trace',        # Function tracing (@trace decorator)
    'general',      # Default channel
}

# Channels that are OFF unless a spec names them explicitly
OPT_IN_CHANNELS = {
    'trace',
}


@dataclass
class ChannelConfig:
    """Threshold for a single diagnostics channel."""
    name: str
    level: int = Level.DEBUG


def parse_channel_spec(spec: str) -> ChannelConfig:
    """Parse ``CHANNEL[:LEVEL]`` into a ChannelConfig.

    Raises:
        ConfigError: If the channel name is empty or not a known channel.
        LevelError: If LEVEL is not a valid level descriptor.
    """
    name, _, level_text = spec.partition(':')
    name = name.strip()
    if not name:
        raise ConfigError(f"channel spec {spec!r} has no channel name")
    if name not in KNOWN_CHANNELS:
        known = ", ".join(sorted(KNOWN_CHANNELS))
        raise ConfigError(f"unknown channel {name!r} (expected one of: {known})")
    level = parse_level(level_text) if level_text.strip() else Level.DEBUG
    return ChannelConfig(name=name, level=level)

