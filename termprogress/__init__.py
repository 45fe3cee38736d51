"""Terminal Progress Package"""

# Expose key components at package level for convenience

# Exceptions (centralized)
from termprogress.exceptions import TerminalError, TerminalSetupError, TerminalIncapableError

# Terminal
from termprogress.terminal import (
    CapabilityResolver,
    CapabilitySource,
    CursesCapabilitySource,
    StaticCapabilitySource,
    TerminalCapabilities,
)

# Progress
from termprogress.progress import (
    ProgressMode,
    ProgressRenderer,
    TerminalProgressBar,
    TqdmProgressBar,
    create_progress_renderer,
    parse_progress_mode,
)

# Config
from termprogress.config import ProgressConfig, get_config, set_config, update_config

__version__ = "0.1.0"
__all__ = [
    # Exceptions
    "TerminalError",
    "TerminalSetupError",
    "TerminalIncapableError",
    # Terminal
    "CapabilityResolver",
    "CapabilitySource",
    "CursesCapabilitySource",
    "StaticCapabilitySource",
    "TerminalCapabilities",
    # Progress
    "ProgressMode",
    "ProgressRenderer",
    "TerminalProgressBar",
    "TqdmProgressBar",
    "create_progress_renderer",
    "parse_progress_mode",
    # Config
    "ProgressConfig",
    "get_config",
    "set_config",
    "update_config",
]
