"""
Capability Resolver

Opens a terminal session and resolves the fixed capability set the progress
bar needs into an immutable TerminalCapabilities snapshot. Terminal size
changes after construction are not tracked.
"""

import atexit
import logging
from threading import RLock
from typing import Optional, TextIO

from termprogress.config import get_config
from termprogress.terminal.capabilities import (
    HEIGHT_CAPABILITY,
    NEWLINE_GLITCH_CAPABILITY,
    STRING_CAPABILITIES,
    WIDTH_CAPABILITY,
    TerminalCapabilities,
)
from termprogress.terminal.sources import CapabilitySource, CursesCapabilitySource

logger = logging.getLogger(__name__)


class CapabilityResolver:
    """
    Read-only view of the active terminal's capabilities.

    Owns the terminal session for its lifetime. The session is released
    exactly once, either by close() (directly or on leaving a with block)
    or at interpreter exit.

    Capability values are exposed as attributes (width, height, xn, bol, up,
    clear_eol, ...) and remain readable after close().
    """

    def __init__(
        self,
        source: Optional[CapabilitySource] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize resolver and open the terminal session.

        Args:
            source: Capability source (defaults to curses bound to stream)
            stream: Output stream for the default source (defaults to stdout)

        Raises:
            TerminalSetupError: If no terminal session can be established
        """
        self._source = source or CursesCapabilitySource(stream=stream)
        self._lock = RLock()
        self._is_closed = False

        self._source.open()
        atexit.register(self.close)

        try:
            self._capabilities = self._resolve()
        except Exception:
            self.close()
            raise

        logger.debug(
            f"Resolved terminal capabilities: width={self._capabilities.width}, "
            f"height={self._capabilities.height}, xn={self._capabilities.xn}"
        )

    @property
    def capabilities(self) -> TerminalCapabilities:
        """The resolved capability snapshot."""
        return self._capabilities

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    def __getattr__(self, name: str):
        # Only reached for names not found normally; delegate to the snapshot
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self._capabilities, name)

    def _resolve(self) -> TerminalCapabilities:
        strings = {
            field: self._resolve_string(cap_name)
            for field, cap_name in STRING_CAPABILITIES.items()
        }
        return TerminalCapabilities(
            width=self._resolve_number(WIDTH_CAPABILITY),
            height=self._resolve_number(HEIGHT_CAPABILITY),
            xn=self._resolve_flag(NEWLINE_GLITCH_CAPABILITY),
            green=get_config().green,
            **strings,
        )

    def _resolve_number(self, name: str) -> Optional[int]:
        # -1 absent, -2 not a numeric capability
        value = self._source.number(name)
        if value is None or value < 0:
            logger.debug(f"Numeric capability '{name}' unavailable")
            return None
        return int(value)

    def _resolve_flag(self, name: str) -> bool:
        # -1 not a boolean capability, 0 absent
        value = self._source.flag(name)
        return value is not None and value > 0

    def _resolve_string(self, name: str) -> str:
        code = self._source.string(name)
        if not code:
            logger.debug(f"String capability '{name}' unavailable")
            return ""
        return code.decode('latin-1')

    def close(self) -> None:
        """Release the terminal session. Safe to call more than once."""
        with self._lock:
            if self._is_closed:
                return
            self._is_closed = True

        atexit.unregister(self.close)
        self._source.close()

    def __enter__(self) -> "CapabilityResolver":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
