"""
DiagnosticOutput — channel-gated internal output for lognaming.

The emit rule is: a message shows when message.level <= threshold,
where the threshold is the per-channel override if one is set and the
global threshold otherwise.  Thresholds and message levels use the
same level scale as everything else in the package:

    ←── quieter ──────────────────────────────── louder ──→
    OFF   FATAL  ERROR  WARN  INFO  DEBUG ... TRACE ... UNSET

A threshold of OFF is a hard wall: nothing on that channel is written.
"""

import sys
from typing import Any, Dict, Iterable, Optional, TextIO

from ..levels import Level, parse_level
from .channels import OPT_IN_CHANNELS, parse_channel_spec


class DiagnosticOutput:
    """Writes diagnostic lines to a file handle (default: stderr).

    Usage::

        out = DiagnosticOutput(threshold=Level.DEBUG)
        out.emit(Level.DEBUG, "resolved {name}", channel='resolve', name=name)
    """

    def __init__(self, threshold: int = Level.WARN,
                 channel_overrides: Optional[Dict[str, int]] = None,
                 file: Optional[TextIO] = None):
        self.threshold = int(threshold)
        self.channel_overrides: Dict[str, int] = dict(channel_overrides or {})
        self.file = file if file is not None else sys.stderr

    def threshold_for(self, channel: str) -> int:
        return self.channel_overrides.get(channel, self.threshold)

    def emit(self, level: int, message: str, *,
             channel: str = 'general', **kwargs: Any) -> None:
        """Write ``message`` if ``level`` passes the channel's threshold.

        Args:
            level: Message level (higher = more verbose)
            message: Format string (str.format with kwargs)
            channel: Channel name
            **kwargs: Values for template placeholders
        """
        threshold = self.threshold_for(channel)
        if threshold <= Level.OFF:
            return
        if level > threshold:
            return
        text = message.format(**kwargs) if kwargs else message
        print(f"[{channel}] {text}", file=self.file)

    def channel_active(self, channel: str, level: int = Level.DEBUG) -> bool:
        """True if a message at ``level`` on ``channel`` would be written."""
        threshold = self.threshold_for(channel)
        return threshold > Level.OFF and level <= threshold


# =============================================================================
# Module-level singleton
# =============================================================================

_diagnostics: Optional[DiagnosticOutput] = None


def init_diagnostics(threshold=Level.WARN, channels: Optional[Iterable[str]] = None,
                     file: Optional[TextIO] = None) -> DiagnosticOutput:
    """Initialize the module-level DiagnosticOutput.

    Args:
        threshold: Global threshold, any level descriptor ('warn', 'd', 5).
        channels: Channel specs, e.g. ['resolve:debug', 'trace'].
        file: Output handle (default: stderr).

    Returns:
        The new DiagnosticOutput.
    """
    global _diagnostics

    threshold = parse_level(threshold)
    channel_overrides = {ch: Level.OFF for ch in OPT_IN_CHANNELS}
    for spec in channels or []:
        cfg = parse_channel_spec(spec)
        channel_overrides[cfg.name] = cfg.level

    _diagnostics = DiagnosticOutput(
        threshold=threshold,
        channel_overrides=channel_overrides,
        file=file,
    )
    return _diagnostics


def get_diagnostics() -> DiagnosticOutput:
    """Get the module-level DiagnosticOutput, creating a default if needed."""
    global _diagnostics
    if _diagnostics is None:
        _diagnostics = DiagnosticOutput(
            channel_overrides={ch: Level.OFF for ch in OPT_IN_CHANNELS},
        )
    return _diagnostics


def configure_diagnostics(config, file: Optional[TextIO] = None) -> DiagnosticOutput:
    """Apply the ``diagnostics`` section of a loaded NamingConfig."""
    section = getattr(config, 'diagnostics', None) or {}
    return init_diagnostics(
        threshold=section.get('threshold', Level.WARN),
        channels=section.get('channels'),
        file=file,
    )
