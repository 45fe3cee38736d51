"""
Terminal Capability Components

Contains the capability snapshot, the resolver and the capability sources.
"""

from termprogress.terminal.capabilities import TerminalCapabilities
from termprogress.terminal.resolver import CapabilityResolver
from termprogress.terminal.sources import (
    CapabilitySource,
    CursesCapabilitySource,
    StaticCapabilitySource,
)

__all__ = [
    'TerminalCapabilities',
    'CapabilityResolver',
    'CapabilitySource',
    'CursesCapabilitySource',
    'StaticCapabilitySource',
]
