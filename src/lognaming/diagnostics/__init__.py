"""
Diagnostics — channel-gated internal output for lognaming.

Public API:
    DiagnosticOutput      — threshold/channel gated writer
    init_diagnostics      — singleton initialization
    get_diagnostics       — access singleton
    configure_diagnostics — initialize from a NamingConfig
    ChannelConfig         — channel configuration
    parse_channel_spec    — parse CHANNEL[:LEVEL]
    KNOWN_CHANNELS        — set of recognized channel names
    trace                 — function tracing decorator
"""

from .manager import (
    DiagnosticOutput, init_diagnostics, get_diagnostics, configure_diagnostics,
)
from .channels import (
    ChannelConfig, parse_channel_spec, KNOWN_CHANNELS, OPT_IN_CHANNELS,
)
from .trace import trace

__all__ = [
    'DiagnosticOutput', 'init_diagnostics', 'get_diagnostics',
    'configure_diagnostics',
    'ChannelConfig', 'parse_channel_spec', 'KNOWN_CHANNELS',
    'OPT_IN_CHANNELS',
    'trace',
]
