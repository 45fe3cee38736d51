#!/usr/bin/env python3
"""
Terminal Progress Bar - Main Entry Point

Runs the demo workflow:
1. Resolve the terminal's capabilities from terminfo
2. Draw a progress bar and redraw it in place from 0% to 100%
"""

import sys
import time
import logging
from typing import Callable, Optional

from termprogress.cli.config import parse_arguments
from termprogress.exceptions import TerminalIncapableError, TerminalSetupError
from termprogress.logging import LoggingManager
from termprogress.progress import (
    ProgressRenderer,
    TerminalProgressBar,
    create_progress_renderer,
    parse_progress_mode,
)
from termprogress.utils import log_section_header

logger = logging.getLogger(__name__)


def run_progress(
    renderer: Optional[ProgressRenderer],
    steps: int,
    delay: float,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Drive a renderer from 0% to 100% in the given number of steps.

    Args:
        renderer: Renderer to update, or None to only log progress
        steps: Number of updates after 0%
        delay: Seconds to wait between updates
        sleep: Sleep function
    """
    for i in range(steps + 1):
        percent = round(i * 100 / steps)
        text = f"{i} Testing"
        if renderer is not None:
            renderer.update(percent, text)
        logger.info(f"Progress: {percent}% {text}")
        if i < steps:
            sleep(delay)


def main(argv=None):
    """
    Main entry point - parse config and run the progress demo.

    Returns:
        Exit code: 0 for success, 2 for fatal errors, 130 when interrupted
    """
    args = parse_arguments(argv)

    logging_manager = LoggingManager.get_instance()
    logging_manager.setup(args.log_file, console_level=args.console_log_level)

    try:
        mode = parse_progress_mode(args.progress)
        renderer = create_progress_renderer(args.header, mode=mode)

        if renderer is None:
            log_section_header(args.header)
            run_progress(None, args.steps, args.delay)
            return 0

        try:
            with logging_manager.progress_mode():
                run_progress(renderer, args.steps, args.delay)
            # Leave the bar on screen, start the prompt on a fresh line;
            # tqdm ends its own line on close
            if isinstance(renderer, TerminalProgressBar):
                sys.stdout.write("\n")
                sys.stdout.flush()
        finally:
            renderer.close()

        return 0

    except TerminalSetupError as e:
        logger.error(f"Cannot open terminal: {e}")
        logger.error("Check that TERM is set and output goes to a terminal")
        logger.debug("Full error details:", exc_info=True)
        return 2

    except TerminalIncapableError as e:
        logger.error(f"Unsupported terminal: {e}")
        logger.error("Try --progress auto to fall back to a simple bar")
        logger.debug("Full error details:", exc_info=True)
        return 2

    except KeyboardInterrupt:
        sys.stdout.write("\n")
        logger.warning("Interrupted by user (Ctrl+C)")
        return 130  # Standard exit code for SIGINT

    finally:
        logging_manager.cleanup()


if __name__ == '__main__':
    sys.exit(main())
