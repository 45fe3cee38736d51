"""
Progress Display Components

Contains the renderer interface, the terminfo bar and the tqdm fallback.
"""

from termprogress.progress.base import ProgressMode, ProgressRenderer
from termprogress.progress.terminal_bar import TerminalProgressBar
from termprogress.progress.tqdm_bar import TqdmProgressBar
from termprogress.progress.selection import create_progress_renderer, parse_progress_mode

__all__ = [
    'ProgressMode',
    'ProgressRenderer',
    'TerminalProgressBar',
    'TqdmProgressBar',
    'create_progress_renderer',
    'parse_progress_mode',
]
