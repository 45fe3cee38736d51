"""
Critical Message Display

Rich-based display for error messages raised while a progress bar is on
screen. Errors go to stderr so they never mix with the bar's stdout redraws.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.errors import ConsoleError
from rich.panel import Panel
from rich.text import Text


class CriticalMessageDisplay:
    """
    Display critical error messages during progress tracking.

    Provides Rich-styled error panels, with a plain stderr line as fallback
    when Rich cannot render to the console.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize critical message display.

        Args:
            console: Optional Rich console instance (defaults to a stderr console)
        """
        self.console = console or Console(stderr=True)

    def display_error(self, record: logging.LogRecord) -> None:
        """
        Display an error message immediately.

        Args:
            record: LogRecord containing error information
        """
        try:
            self.console.print(self.build_error_panel(record))
        except (ConsoleError, OSError):
            self._display_fallback_error(record)

    @staticmethod
    def build_error_panel(record: logging.LogRecord) -> Panel:
        """Build the Rich panel shown for an error record."""
        error_text = Text()
        error_text.append("ERROR", style="bold red")

        if record.name:
            error_text.append(f" ({record.name})", style="dim red")

        error_text.append(f": {record.getMessage()}", style="red")
        error_text.append(f"\nLocation: {record.funcName}() line {record.lineno}", style="dim")

        return Panel(
            error_text,
            title="Critical Error",
            border_style="red",
            padding=(0, 1),
            expand=False
        )

    @staticmethod
    def format_plain(record: logging.LogRecord) -> str:
        """Format an error record as a single plain-text line."""
        error_line = f"ERROR: {record.getMessage()}"
        if record.name:
            error_line += f" ({record.name})"
        error_line += f" [{record.funcName}:{record.lineno}]"
        return error_line

    def _display_fallback_error(self, record: logging.LogRecord) -> None:
        sys.stderr.write(f"{self.format_plain(record)}\n")
        sys.stderr.flush()
