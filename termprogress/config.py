"""
Progress Configuration Module

Configuration dataclass for bar rendering with thread-safe global access.
"""

import logging
from dataclasses import dataclass
from threading import RLock

logger = logging.getLogger(__name__)

ESC = "\x1b"
CSI = f"{ESC}["  # Control Sequence Introducer


@dataclass
class ProgressConfig:
    """Configuration settings for progress bar rendering."""

    # Geometry
    fallback_width: int = 75  # Used when the terminal does not report cols
    bar_margin: int = 6  # Columns kept free so the bar line never wraps

    # Bar cells
    fill_char: str = "="
    empty_char: str = "-"

    # Color sequences are synthesized, terminfo rarely names them
    green: str = f"{CSI}32m"


# Global configuration instance
_config = ProgressConfig()
_config_lock = RLock()


def get_config() -> ProgressConfig:
    """Get the current global progress configuration."""
    with _config_lock:
        return _config


def set_config(config: ProgressConfig) -> None:
    """Set the global progress configuration."""
    global _config
    with _config_lock:
        _config = config


def update_config(**kwargs) -> None:
    """Update specific configuration values."""
    global _config
    with _config_lock:
        for key, value in kwargs.items():
            if hasattr(_config, key):
                setattr(_config, key, value)
                logger.debug(f"Progress config updated: {key}={value!r}")
            else:
                raise ValueError(f"Unknown configuration option: {key}")


def reset_config() -> None:
    """Restore the default configuration."""
    set_config(ProgressConfig())
