"""
Capability Sources

Low-level terminfo access. A source opens a terminal session and answers raw
queries using the curses return conventions:

- number(): -1 when absent, -2 when the name is not a numeric capability
- flag(): 1 when present, 0 when absent, -1 when not a boolean capability
- string(): bytes, or None when absent
"""

import logging
import os
import sys
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional, TextIO

try:
    import curses
    CURSES_AVAILABLE = True
except ImportError:
    curses = None
    CURSES_AVAILABLE = False

from termprogress.exceptions import TerminalSetupError

logger = logging.getLogger(__name__)

# Terminal type the process-wide terminfo session was set up for
_session_term: Optional[str] = None


class CapabilitySource(ABC):
    """Abstract base class for terminal capability sources."""

    @abstractmethod
    def open(self) -> None:
        """Establish the terminal session."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the terminal session."""
        pass

    @abstractmethod
    def number(self, name: str) -> int:
        """Query a numeric capability."""
        pass

    @abstractmethod
    def flag(self, name: str) -> int:
        """Query a boolean capability."""
        pass

    @abstractmethod
    def string(self, name: str) -> Optional[bytes]:
        """Query a string capability."""
        pass


class CursesCapabilitySource(CapabilitySource):
    """
    Capability source backed by the system terminfo database via curses.

    Binds to the file descriptor of the output stream and the terminal type
    named by TERM (or an explicit override).
    """

    def __init__(self, stream: Optional[TextIO] = None, term: Optional[str] = None) -> None:
        """
        Initialize curses capability source.

        Args:
            stream: Output stream the terminal is attached to (defaults to stdout)
            term: Terminal type override (defaults to the TERM environment value)
        """
        self.stream = stream or sys.stdout
        self.term = term
        self._is_open = False

    def open(self) -> None:
        if self._is_open:
            return

        if not CURSES_AVAILABLE:
            raise TerminalSetupError("curses is not available on this platform")

        term = self.term or os.environ.get('TERM')
        if not term:
            raise TerminalSetupError("TERM is not set, cannot determine terminal type")

        try:
            fd = self.stream.fileno()
        except (AttributeError, OSError, ValueError) as e:
            raise TerminalSetupError(f"Output stream has no file descriptor: {e}") from e

        # setupterm only takes effect once per process; later calls keep the
        # first terminal's capabilities
        global _session_term
        if _session_term is None:
            try:
                curses.setupterm(term, fd)
            except curses.error as e:
                raise TerminalSetupError(f"Cannot set up terminal '{term}': {e}") from e
            _session_term = term
        elif term != _session_term:
            raise TerminalSetupError(
                f"Terminal session already bound to '{_session_term}', cannot switch to '{term}'"
            )

        self._is_open = True
        logger.debug(f"Terminal session opened for '{term}' on fd {fd}")

    def close(self) -> None:
        if not self._is_open:
            return

        self._is_open = False
        try:
            self.stream.flush()
        except (OSError, ValueError) as e:
            logger.debug(f"Could not flush terminal stream on close: {e}")
        logger.debug("Terminal session closed")

    def number(self, name: str) -> int:
        self._require_open()
        return curses.tigetnum(name)

    def flag(self, name: str) -> int:
        self._require_open()
        return curses.tigetflag(name)

    def string(self, name: str) -> Optional[bytes]:
        self._require_open()
        return curses.tigetstr(name)

    def _require_open(self) -> None:
        if not self._is_open:
            raise TerminalSetupError("Terminal session is not open")


class StaticCapabilitySource(CapabilitySource):
    """
    Capability source answering from fixed mappings.

    Stands in for a real terminal wherever one is not attached. Names missing
    from the mappings are reported as absent.
    """

    def __init__(
        self,
        numbers: Optional[Mapping[str, int]] = None,
        flags: Optional[Mapping[str, bool]] = None,
        strings: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.numbers: Dict[str, int] = dict(numbers or {})
        self.flags: Dict[str, bool] = dict(flags or {})
        self.strings: Dict[str, str] = dict(strings or {})
        self.open_count = 0
        self.close_count = 0

    def open(self) -> None:
        self.open_count += 1

    def close(self) -> None:
        self.close_count += 1

    def number(self, name: str) -> int:
        return self.numbers.get(name, -1)

    def flag(self, name: str) -> int:
        if name not in self.flags:
            return 0
        return 1 if self.flags[name] else 0

    def string(self, name: str) -> Optional[bytes]:
        value = self.strings.get(name)
        if value is None:
            return None
        return value.encode('latin-1')
