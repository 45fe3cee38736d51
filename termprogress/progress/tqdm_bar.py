"""
tqdm Progress Renderer

Provides fallback progress display using tqdm when the terminal cannot be
driven through terminfo.
"""

import logging
import sys
from typing import Optional, TextIO

from tqdm import tqdm

from termprogress.progress.base import ProgressRenderer
from termprogress.utils import clamp

logger = logging.getLogger(__name__)


class TqdmProgressBar(ProgressRenderer):
    """
    tqdm-based progress renderer for compatibility.

    Shows the header as the bar description and the text as its postfix.
    """

    def __init__(
        self,
        header: str,
        stream: Optional[TextIO] = None,
        disable_on_non_tty: bool = True,
    ) -> None:
        """
        Initialize tqdm progress renderer.

        Args:
            header: Bar description
            stream: Output stream (defaults to stdout)
            disable_on_non_tty: Disable progress when not in TTY environment
        """
        self.file = stream or sys.stdout
        self.header = header

        disable_progress = (
            disable_on_non_tty and
            not self.file.isatty() if hasattr(self.file, 'isatty') else False
        )

        self._pbar = tqdm(
            desc=header,
            total=100,
            file=self.file,
            disable=disable_progress,
            ascii=True,  # For broader compatibility
            unit='%',
            dynamic_ncols=True,
        )
        self.update(0, "")

    @classmethod
    def is_available(cls) -> bool:
        """tqdm is a hard dependency, so this renderer always works."""
        return True

    @property
    def n(self) -> int:
        """Current position of the underlying bar."""
        return self._pbar.n

    @property
    def text(self) -> str:
        return self._pbar.postfix or ""

    def update(self, percent: int, text: str) -> None:
        self._pbar.n = clamp(percent, 0, 100)
        self._pbar.set_postfix_str(text, refresh=False)
        self._pbar.refresh()

    def close(self) -> None:
        self._pbar.close()
