"""
Terminfo Progress Bar

Redraws a two-line status block (bar line + free-text line) in place using
the control sequences resolved from the terminal's capability database.
"""

import logging
import os
import sys
from typing import Optional, TextIO, Tuple

from termprogress.config import get_config
from termprogress.exceptions import TerminalIncapableError
from termprogress.progress.base import ProgressRenderer
from termprogress.terminal import sources
from termprogress.terminal.resolver import CapabilityResolver
from termprogress.utils import clamp, format_percent, repeat

logger = logging.getLogger(__name__)


class TerminalProgressBar(ProgressRenderer):
    """
    In-place progress bar driven by terminfo capabilities.

    Layout on screen:

        <header>
        42% [=========-------------]
        <text>

    The header is printed once, on the first update. Every update moves back
    to the bar line, clears it and redraws both lines.

    Only one bar per terminal is supported; two bars updating the same
    terminal will corrupt each other's output.
    """

    def __init__(
        self,
        header: str,
        term: Optional[CapabilityResolver] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the bar and draw it at 0%.

        Args:
            header: Line printed once above the bar
            term: Capability resolver (defaults to a fresh one owned by this bar)
            stream: Output stream (defaults to stdout)

        Raises:
            TerminalSetupError: If the default resolver cannot open a session
            TerminalIncapableError: If the terminal cannot redraw in place
        """
        self.stream = stream or sys.stdout
        self._owns_term = term is None
        self.term = term or CapabilityResolver(stream=self.stream)

        if not self.term.can_redraw_in_place:
            if self._owns_term:
                self.term.close()
            raise TerminalIncapableError(
                "Terminal incapable of in-place redraw: "
                "no clear-to-eol, cursor-up or carriage return"
            )

        config = get_config()
        self.header = header
        self.fill_char = config.fill_char
        self.empty_char = config.empty_char
        self.margin = config.bar_margin

        if self.term.width is not None:
            self.width = self.term.width
        else:
            self.width = config.fallback_width

        # Without a known width or the xenl glitch, the previous draw's line
        # advance has to be undone by hand.
        self.auto_advances = self.term.width is not None and self.term.xn
        if self.auto_advances:
            self.bol = self.term.bol
            self.xnl = "\n"
        else:
            self.bol = self.term.up + self.term.bol
            self.xnl = ""

        self.is_clear = True  # nothing drawn yet
        logger.debug(
            f"Progress bar ready: width={self.width}, auto_advances={self.auto_advances}"
        )

        self.update(0, "")

    @classmethod
    def is_available(cls) -> bool:
        """Check that terminfo can be queried for the terminal named by TERM."""
        return sources.CURSES_AVAILABLE and bool(os.environ.get('TERM'))

    def measure(self, percent: int) -> Tuple[int, int]:
        """
        Compute the bar geometry for a percentage.

        Returns:
            (bar_width, filled) where 0 <= filled <= bar_width
        """
        prefix, suffix = self._frame(percent)
        bar_width = max(0, self.width - len(prefix) - len(suffix) - self.margin)
        filled = int(bar_width * clamp(percent, 0, 100) // 100)
        return bar_width, filled

    def render(self, percent: int, text: str) -> str:
        """Compose the redraw sequence for the bar and text lines."""
        term = self.term
        prefix, suffix = self._frame(percent)
        bar_width, filled = self.measure(percent)

        return (
            self.bol + term.up + term.clear_eol
            + prefix
            + repeat(self.fill_char, filled)
            + repeat(self.empty_char, bar_width - filled)
            + suffix
            + self.xnl + self.bol
            + term.clear_eol
            + text
        )

    def update(self, percent: int, text: str) -> None:
        """
        Redraw the bar at percent with text on the line below.

        Out-of-range percentages are shown as given; the fill is clamped.
        The text is written verbatim.
        """
        output = ""
        if self.is_clear:
            # Reserve the bar line below the header
            output = self.header + "\n" + "\n"
            self.is_clear = False

        output += self.render(percent, text)
        self.stream.write(output)

        if not self.auto_advances:
            self.stream.flush()

    def close(self) -> None:
        """Release the resolver if this bar created it."""
        if self._owns_term:
            self.term.close()

    def _frame(self, percent: int) -> Tuple[str, str]:
        term = self.term
        prefix = format_percent(percent) + term.green + "[" + term.bold
        suffix = term.normal + term.green + "]" + term.normal
        return prefix, suffix
