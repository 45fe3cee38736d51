"""
Terminal Progress - Exceptions

Centralized exception hierarchy for terminal setup and rendering errors.
"""


class TerminalError(Exception):
    """Base exception for all terminal operations."""
    pass


class TerminalSetupError(TerminalError):
    """Exception for terminal session setup errors.

    Raised when:
    - Standard output has no usable file descriptor
    - TERM is unset or names an unknown terminal type
    - The terminfo database has no entry for the terminal
    """
    pass


class TerminalIncapableError(TerminalError):
    """Exception for terminals that cannot redraw a line in place.

    Raised when the terminal offers none of clear-to-end-of-line,
    cursor-up and carriage return.
    """
    pass
