"""
Logging Manager

Owns the root logger handlers for a run and switches the console into a
quiet mode while a progress bar is being redrawn.
"""

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Iterator, List, Optional, TextIO, Tuple

from termprogress.logging.critical_display import CriticalMessageDisplay
from termprogress.logging.handlers import ProgressAwareConsoleHandler

logger = logging.getLogger(__name__)


class LoggingManager:
    """
    Process-wide owner of the file and console log handlers.

    While a progress bar is on screen, console output is held back so it
    does not break the in-place redraw; file logging is unaffected. Errors
    still reach stderr right away, warnings wait for the bar to finish.
    """

    _global_lock = RLock()
    _instance: Optional['LoggingManager'] = None

    def __init__(self, critical_display: Optional[CriticalMessageDisplay] = None) -> None:
        self._lock = RLock()
        self._console_handler: Optional[ProgressAwareConsoleHandler] = None
        self._file_handler: Optional[logging.FileHandler] = None
        self._original_handlers: List[logging.Handler] = []

        self._progress_mode_active = False
        self._progress_mode_count = 0  # nesting depth

        self._buffered_warnings: List[Tuple[float, str, Dict[str, Any]]] = []
        self._max_buffered_messages = 50

        self._critical_display = critical_display

    @classmethod
    def get_instance(cls) -> 'LoggingManager':
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            with cls._global_lock:
                if cls._instance is None:
                    cls._instance = LoggingManager()
        return cls._instance

    @property
    def console_handler(self) -> Optional[ProgressAwareConsoleHandler]:
        return self._console_handler

    @property
    def buffered_warnings(self) -> List[str]:
        """Formatted warnings waiting for the end of progress mode."""
        with self._lock:
            return [message for _, message, _ in self._buffered_warnings]

    def setup(
        self,
        log_file: Optional[Path],
        console_level: int = logging.WARNING,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Install a DEBUG file handler and a progress-aware console handler.

        Args:
            log_file: Log file path, or None for console only
            console_level: Console threshold; INFO with --verbose, DEBUG with --debug
            stream: Console stream (default: sys.stdout)
        """
        with self._lock:
            root_logger = logging.getLogger()
            root_logger.setLevel(logging.DEBUG)
            self._original_handlers = root_logger.handlers.copy()
            root_logger.handlers.clear()

            if log_file is not None:
                log_file.parent.mkdir(parents=True, exist_ok=True)
                self._file_handler = logging.FileHandler(log_file)
                self._file_handler.setLevel(logging.DEBUG)
                self._file_handler.setFormatter(logging.Formatter(
                    '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
                ))
                root_logger.addHandler(self._file_handler)

            self._console_handler = ProgressAwareConsoleHandler(
                stream=stream or sys.stdout,
                logging_manager=self
            )
            self._console_handler.setLevel(console_level)
            self._console_handler.setFormatter(logging.Formatter(
                '%(levelname)s - %(message)s' if console_level >= logging.INFO
                else '%(message)s'
            ))
            root_logger.addHandler(self._console_handler)

            logger.debug("Logging manager setup complete")

    def enable_progress_mode(self) -> None:
        """Quiet the console for a progress bar. Calls may nest."""
        with self._lock:
            self._progress_mode_count += 1

            if not self._progress_mode_active:
                self._progress_mode_active = True

                if self._console_handler:
                    self._console_handler.set_progress_mode(True)
                else:
                    logger.warning("No console handler found when enabling progress mode")

                self._buffered_warnings.clear()
                logger.debug("Progress mode enabled - console logging suppressed")

    def disable_progress_mode(self) -> None:
        """
        Disable progress mode - restore console logging.

        Only takes effect once every nested enable has been matched.
        Buffered warnings are replayed on the console.
        """
        with self._lock:
            if self._progress_mode_count > 0:
                self._progress_mode_count -= 1

            if self._progress_mode_count == 0 and self._progress_mode_active:
                self._progress_mode_active = False

                if self._console_handler:
                    self._console_handler.set_progress_mode(False)

                self._display_buffered_warnings()
                logger.debug("Progress mode disabled - console logging restored")

    @contextmanager
    def progress_mode(self) -> Iterator[None]:
        """Keep the console quiet for the duration of the block."""
        self.enable_progress_mode()
        try:
            yield
        finally:
            self.disable_progress_mode()

    def is_progress_mode_active(self) -> bool:
        with self._lock:
            return self._progress_mode_active

    def buffer_warning(self, record: logging.LogRecord) -> None:
        """Hold a warning until progress mode ends, keeping the newest 50."""
        with self._lock:
            if len(self._buffered_warnings) >= self._max_buffered_messages:
                self._buffered_warnings.pop(0)

            formatted_message = (
                self._console_handler.format(record) if self._console_handler
                else record.getMessage()
            )
            self._buffered_warnings.append((
                time.time(),
                formatted_message,
                {
                    'level': record.levelno,
                    'name': record.name,
                    'funcName': record.funcName,
                    'lineno': record.lineno
                }
            ))

    def display_critical_error(self, record: logging.LogRecord) -> None:
        """Show an error on stderr without waiting for the bar to finish."""
        if self._critical_display is None:
            self._critical_display = CriticalMessageDisplay()
        self._critical_display.display_error(record)

    def _display_buffered_warnings(self) -> None:
        if not self._buffered_warnings:
            return

        stream = self._console_handler.stream if self._console_handler else sys.stdout
        try:
            stream.write(f"\n{len(self._buffered_warnings)} warning(s) occurred during progress:\n")
            stream.write("-" * 60 + "\n")
            for timestamp, message, _ in self._buffered_warnings:
                elapsed = time.time() - timestamp
                stream.write(f"[{elapsed:.1f}s ago] {message}\n")
            stream.write("-" * 60 + "\n")
            stream.flush()
        finally:
            self._buffered_warnings.clear()

    def cleanup(self) -> None:
        """Replay held warnings and put the original root handlers back."""
        with self._lock:
            self._progress_mode_active = False
            self._progress_mode_count = 0
            if self._console_handler:
                self._console_handler.set_progress_mode(False)

            self._display_buffered_warnings()

            root_logger = logging.getLogger()
            root_logger.handlers.clear()
            root_logger.handlers.extend(self._original_handlers)

            if self._file_handler:
                self._file_handler.close()
                self._file_handler = None

            self._console_handler = None
