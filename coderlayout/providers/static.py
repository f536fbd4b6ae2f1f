"""
Static provider for Coderlayout.

A provider that works with a layout string supplied up front instead of a
live multiplexer. Useful for piping layouts through the CLI and for tests.
"""

from typing import Callable, Optional

from .base import Provider


class StaticProvider(Provider):
    """
    Provider backed by an in-memory layout string.

    Applied layouts replace the stored one, so a fetch after an apply sees
    the new layout.
    """

    @property
    def name(self) -> str:
        return "static"

    def __init__(
        self,
        layout: str,
        on_layout_applied: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize static provider.

        Args:
            layout: Layout string to serve.
            on_layout_applied: Callback when a layout is applied.
        """
        self._layout = layout
        self._on_layout_applied = on_layout_applied
        self.applied: list[str] = []

    def is_available(self) -> bool:
        """Always available."""
        return True

    def fetch_current_layout_string(self, window_id: Optional[str] = None) -> str:
        """Get stored layout."""
        return self._layout

    def apply_layout_string(self, layout: str, window_id: Optional[str] = None) -> bool:
        """Store layout and call callback."""
        self._layout = layout
        self.applied.append(layout)

        if self._on_layout_applied:
            self._on_layout_applied(layout)

        return True
