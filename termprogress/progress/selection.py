"""
Progress Renderer Selection

Helper functions for creating the progress renderer for a display mode.
"""

import logging
from typing import Optional, TextIO

from termprogress.exceptions import TerminalError
from termprogress.progress.base import ProgressMode, ProgressRenderer
from termprogress.progress.terminal_bar import TerminalProgressBar
from termprogress.progress.tqdm_bar import TqdmProgressBar
from termprogress.terminal.resolver import CapabilityResolver

logger = logging.getLogger(__name__)


def parse_progress_mode(mode_str: str) -> ProgressMode:
    """
    Parse a progress mode string.

    Args:
        mode_str: Progress mode string ("auto", "on", "off")

    Returns:
        ProgressMode, AUTO for unrecognized values
    """
    try:
        return ProgressMode(mode_str.lower())
    except ValueError:
        logger.warning(f"Invalid progress mode '{mode_str}', using 'auto'")
        return ProgressMode.AUTO


def create_progress_renderer(
    header: str,
    mode: ProgressMode = ProgressMode.AUTO,
    term: Optional[CapabilityResolver] = None,
    stream: Optional[TextIO] = None,
) -> Optional[ProgressRenderer]:
    """
    Create the progress renderer for a display mode.

    Args:
        header: Header line shown above the bar
        mode: Progress display mode
        term: Capability resolver to draw with (defaults to a fresh one)
        stream: Output stream (defaults to stdout)

    Returns:
        Renderer instance, or None when mode is OFF

    Raises:
        TerminalSetupError, TerminalIncapableError: In ON mode only
    """
    if mode == ProgressMode.OFF:
        logger.debug("Progress display disabled")
        return None

    if mode == ProgressMode.ON:
        return TerminalProgressBar(header, term=term, stream=stream)

    # A caller-supplied resolver already holds a session
    if term is not None or TerminalProgressBar.is_available():
        try:
            renderer = TerminalProgressBar(header, term=term, stream=stream)
            logger.debug("Using terminfo progress bar")
            return renderer
        except TerminalError as e:
            logger.warning(f"Terminal progress bar unavailable ({e}), falling back to tqdm")
            logger.debug("Full error details:", exc_info=True)
    else:
        logger.warning("Terminfo is not available, falling back to tqdm")

    if not TqdmProgressBar.is_available():
        logger.warning("No suitable progress renderer available")
        return None

    return TqdmProgressBar(header, stream=stream)
