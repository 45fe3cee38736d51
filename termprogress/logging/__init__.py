"""
Logging Module - Progress-Aware Logging System

Keeps console log output from breaking an in-place progress bar redraw.
While progress mode is active, console logging is held back and file
logging continues unchanged.

Usage:
    from termprogress.logging import LoggingManager

    manager = LoggingManager.get_instance()
    manager.setup(log_file, console_level)

    with manager.progress_mode():
        # Console logging suppressed, errors shown on stderr
        pass
"""

from termprogress.logging.manager import LoggingManager
from termprogress.logging.handlers import ProgressAwareConsoleHandler
from termprogress.logging.critical_display import CriticalMessageDisplay

__all__ = [
    'LoggingManager',
    'ProgressAwareConsoleHandler',
    'CriticalMessageDisplay'
]
