"""
Progress-Aware Console Handler

Keeps console log lines from landing in the middle of an in-place bar redraw.
"""

import logging
import sys
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from termprogress.logging.manager import LoggingManager


class ProgressAwareConsoleHandler(logging.StreamHandler):
    """
    Stream handler that steps aside while a progress bar is drawn.

    With the bar on screen, errors are routed to the manager's stderr display,
    warnings are held by the manager until the bar is done, and anything
    quieter is dropped from the console (the file handler still has it).
    Without a bar it behaves like a plain StreamHandler.
    """

    def __init__(self, stream=None, logging_manager: Optional['LoggingManager'] = None) -> None:
        super().__init__(stream or sys.stdout)
        self._logging_manager = logging_manager
        self._bar_active = False

    @property
    def progress_mode(self) -> bool:
        return self._bar_active

    def set_progress_mode(self, enabled: bool) -> None:
        self._bar_active = enabled

    def emit(self, record: logging.LogRecord) -> None:
        if not self._bar_active:
            super().emit(record)
            return

        try:
            manager = self._logging_manager
            if record.levelno >= logging.ERROR:
                if manager is None:
                    sys.stderr.write(self.format(record) + "\n")
                    sys.stderr.flush()
                else:
                    manager.display_critical_error(record)
            elif record.levelno >= logging.WARNING and manager is not None:
                manager.buffer_warning(record)
        except Exception:
            self.handleError(record)
