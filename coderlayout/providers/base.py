"""
Base provider interface for Coderlayout.

A provider connects the pure layout code to a terminal multiplexer: it
reads the current layout string of a window and applies a new one.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Provider(ABC):
    """Abstract base class for layout providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this provider is available in current environment."""
        pass

    @abstractmethod
    def fetch_current_layout_string(self, window_id: Optional[str] = None) -> str:
        """
        Get the layout string of a window.

        Args:
            window_id: Optional window identifier. Active window if None.

        Returns:
            Layout string in tmux's layout language.

        Raises:
            ProviderError: If the layout cannot be read.
        """
        pass

    @abstractmethod
    def apply_layout_string(self, layout: str, window_id: Optional[str] = None) -> bool:
        """
        Apply a layout string to a window.

        Args:
            layout: Layout string to apply.
            window_id: Optional window identifier. Active window if None.

        Returns:
            True if successful.
        """
        pass
