"""
CLI Configuration Module

Handles command-line argument parsing and environment configuration for the
progress bar demo.
"""

import os
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_HEADER = 'Tests'
DEFAULT_DELAY = 0.5
DEFAULT_STEPS = 100
DEFAULT_LOG_FILE = './logs/progress.log'


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value '{raw}', using default {default}")
        return default
    if value < 0:
        logger.warning(f"{name} must not be negative, got {value}. Using default {default}.")
        return default
    return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {name} value '{raw}', using default {default}")
        return default
    if value < 1:
        logger.warning(f"{name} must be at least 1, got {value}. Using default {default}.")
        return default
    return value


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments and load environment configuration.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        argparse.Namespace: Parsed arguments with additional attributes:
            - log_file: Path
            - console_log_level: int
    """
    # Load environment variables from .env file (if present)
    load_dotenv()

    env_header = os.getenv('PROGRESS_HEADER', DEFAULT_HEADER)
    env_mode = os.getenv('PROGRESS_MODE', 'auto')
    env_log_file = os.getenv('LOG_FILE', DEFAULT_LOG_FILE)
    default_delay = _env_float('PROGRESS_DELAY', DEFAULT_DELAY)
    default_steps = _env_int('PROGRESS_STEPS', DEFAULT_STEPS)

    if env_mode not in ['auto', 'on', 'off']:
        logger.warning(f"Invalid PROGRESS_MODE value '{env_mode}', using default 'auto'")
        env_mode = 'auto'

    parser = argparse.ArgumentParser(
        description='Draw an in-place terminal progress bar'
    )
    parser.add_argument(
        '--header',
        type=str,
        default=env_header,
        help=f'Header line printed above the bar (default: {env_header})'
    )
    parser.add_argument(
        '--delay',
        type=float,
        default=default_delay,
        help=f'Seconds to wait between updates (default: {default_delay})'
    )
    parser.add_argument(
        '--steps',
        type=int,
        default=default_steps,
        help=f'Number of updates after the initial 0%% draw (default: {default_steps})'
    )
    parser.add_argument(
        '--progress',
        type=str,
        choices=['auto', 'on', 'off'],
        default=env_mode,
        help='Progress display: auto (terminfo, tqdm fallback), on (terminfo only), off'
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '--verbose',
        action='store_true',
        help='Show workflow steps on the console'
    )
    verbosity.add_argument(
        '--debug',
        action='store_true',
        help='Show all technical details on the console'
    )

    args = parser.parse_args(argv)

    if args.steps < 1:
        parser.error(f'--steps must be at least 1, got {args.steps}')
    if args.delay < 0:
        parser.error(f'--delay must not be negative, got {args.delay}')

    args.log_file = Path(env_log_file)
    if args.debug:
        args.console_log_level = logging.DEBUG
    elif args.verbose:
        args.console_log_level = logging.INFO
    else:
        args.console_log_level = logging.WARNING

    return args
