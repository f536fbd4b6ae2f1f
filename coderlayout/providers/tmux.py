"""
tmux provider for Coderlayout.

Reads window layouts with ``list-windows`` and applies new ones with
``select-layout``.
"""

import logging
import subprocess
from typing import Optional

from .base import Provider
from ..errors import ProviderError
from ..types import WindowInfo

logger = logging.getLogger(__name__)

WINDOW_FORMAT = "#{window_id}|#{window_name}|#{window_active}|#{window_layout}"


def parse_window_line(line: str) -> Optional[WindowInfo]:
    """
    Parse one line of ``list-windows -F WINDOW_FORMAT`` output.

    Window names may contain ``|``; ids, flags and layouts cannot, so the
    name is whatever sits between the first and the last two separators.

    Returns:
        WindowInfo, or None if the line is not in the expected format.
    """
    window_id, sep, rest = line.partition("|")
    parts = rest.rsplit("|", 2)
    if not sep or len(parts) != 3:
        return None
    name, active, layout = parts
    return WindowInfo(
        window_id=window_id,
        name=name,
        active=active == "1",
        layout_string=layout,
    )


class TmuxProvider(Provider):
    """Provider for tmux terminal multiplexer."""

    @property
    def name(self) -> str:
        return "tmux"

    def __init__(self, binary: str = "tmux", target: str = ""):
        """
        Initialize tmux provider.

        Args:
            binary: tmux executable.
            target: Default window target. Active window if empty.
        """
        self.binary = binary
        self.target = target

    def _run_tmux(self, *args: str) -> str:
        """Run tmux command and return output."""
        try:
            result = subprocess.run(
                [self.binary, *args],
                capture_output=True,
                text=True
            )
        except OSError as e:
            raise ProviderError(f"could not run {self.binary}: {e}") from e
        if result.returncode != 0:
            raise ProviderError(
                f"{self.binary} {args[0]} failed: {result.stderr.strip() or result.returncode}"
            )
        return result.stdout.strip()

    def is_available(self) -> bool:
        """Check if tmux is available and we're in a session."""
        try:
            result = subprocess.run(
                [self.binary, "display-message", "-p", "#{session_name}"],
                capture_output=True,
                timeout=5
            )
            return result.returncode == 0 and bool(result.stdout.strip())
        except (subprocess.TimeoutExpired, OSError):
            return False

    def list_windows(self, session: Optional[str] = None) -> list[WindowInfo]:
        """List windows of a session (current session if None)."""
        args = ["list-windows"]
        if session:
            args.extend(["-t", session])
        args.extend(["-F", WINDOW_FORMAT])

        windows = []
        for line in self._run_tmux(*args).split("\n"):
            if not line:
                continue
            window = parse_window_line(line)
            if window is None:
                logger.debug("Skipping unrecognised window line %r", line)
                continue
            windows.append(window)
        return windows

    def fetch_current_layout_string(self, window_id: Optional[str] = None) -> str:
        """Get the layout string of the requested or active window."""
        window_id = window_id or self.target
        windows = self.list_windows()

        if window_id:
            matches = [w for w in windows if w.window_id == window_id]
        else:
            matches = [w for w in windows if w.active]

        if not matches:
            raise ProviderError(
                f"no tmux window {window_id}" if window_id else "no active tmux window"
            )
        logger.debug("Window %s layout %s", matches[0].window_id, matches[0].layout_string)
        return matches[0].layout_string

    def apply_layout_string(self, layout: str, window_id: Optional[str] = None) -> bool:
        """Apply a layout with ``select-layout``."""
        window_id = window_id or self.target
        args = ["select-layout"]
        if window_id:
            args.extend(["-t", window_id])
        args.append(layout)

        try:
            self._run_tmux(*args)
            return True
        except ProviderError as e:
            logger.warning("Could not apply layout %s: %s", layout, e)
            return False
