"""
Terminal Capabilities Snapshot

Immutable record of the terminfo values the progress bar relies on.
"""

from dataclasses import dataclass
from typing import Optional


# terminfo names for each string capability, keyed by snapshot field
STRING_CAPABILITIES = {
    'bol': 'cr',
    'up': 'cuu1',
    'down': 'cud1',
    'left': 'cub1',
    'right': 'cuf1',
    'clear_screen': 'clear',
    'clear_eol': 'el',
    'clear_bol': 'el1',
    'clear_eos': 'ed',
    'bold': 'bold',
    'normal': 'sgr0',
}

WIDTH_CAPABILITY = 'cols'
HEIGHT_CAPABILITY = 'lines'
NEWLINE_GLITCH_CAPABILITY = 'xenl'


@dataclass(frozen=True)
class TerminalCapabilities:
    """
    Snapshot of a terminal's geometry, flags and control sequences.

    Numeric values are None when the terminal does not report them.
    String values are empty when the capability is unsupported.
    """

    width: Optional[int] = None
    height: Optional[int] = None

    # Newline ignored after the last column (xenl)
    xn: bool = False

    # Cursor movements
    bol: str = ""
    up: str = ""
    down: str = ""
    left: str = ""
    right: str = ""

    # Deletion
    clear_screen: str = ""
    clear_eol: str = ""
    clear_bol: str = ""
    clear_eos: str = ""

    # Attributes
    bold: str = ""
    normal: str = ""
    green: str = ""

    @property
    def can_redraw_in_place(self) -> bool:
        """False when clear-to-eol, cursor-up and carriage return are all missing."""
        return bool(self.clear_eol or self.up or self.bol)
