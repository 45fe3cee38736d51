"""
Progress Renderer Base Module

Abstract renderer interface and progress display modes.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum

logger = logging.getLogger(__name__)


class ProgressMode(Enum):
    """Progress display modes."""
    AUTO = "auto"      # Terminfo bar, falling back to tqdm
    ON = "on"          # Terminfo bar only, terminal errors are fatal
    OFF = "off"        # No progress display


class ProgressRenderer(ABC):
    """Abstract base class for progress renderers."""

    @abstractmethod
    def update(self, percent: int, text: str) -> None:
        """Redraw the progress display."""
        pass

    @classmethod
    @abstractmethod
    def is_available(cls) -> bool:
        """Check if this renderer can run in the current environment."""
        pass

    def close(self) -> None:
        """Release resources held by the renderer. Default no-op."""
        return

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()
