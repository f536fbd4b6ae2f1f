"""
Coderlayout layout builder.

Rebuilds a window as a "coder" layout: editor panes on the left in one or
two rows, console panes stacked in a column on the right. Neighbouring
panes are separated by a one-cell border, which tmux counts as part of the
parent's size but not of any pane.
"""

import logging
from typing import Optional, Union

from .checksum import with_checksum
from .errors import DegenerateInputError, PartitionError
from .parser import parse
from .partition import partition
from .traversal import pane_ids as collect_pane_ids
from .types import LayoutString, Nesting, Orientation, PaneRef, Split

logger = logging.getLogger(__name__)


class CoderLayoutBuilder:
    """Builds editor/console layouts."""

    CONSOLE_MIN_WIDTH = 80
    CONSOLE_MAX_WIDTH = 120
    CONSOLE_RATIO = 4

    def __init__(
        self,
        console_min_width: int = CONSOLE_MIN_WIDTH,
        console_max_width: int = CONSOLE_MAX_WIDTH,
        console_ratio: int = CONSOLE_RATIO
    ):
        """
        Initialize builder.

        Args:
            console_min_width: Narrowest the console column may get.
            console_max_width: Widest the console column may get.
            console_ratio: Console column is 1/ratio of the window width.
        """
        self.console_min_width = console_min_width
        self.console_max_width = console_max_width
        self.console_ratio = console_ratio

    def distribute_horizontally(
        self,
        y: int,
        width: int,
        height: int,
        pane_ids: list[int]
    ) -> list[Split]:
        """Lay panes out left to right in a row at offset ``y``."""
        count = len(pane_ids)
        widths = partition(width - (count - 1), count)

        splits = []
        x = 0
        for pane_id, pane_width in zip(pane_ids, widths):
            splits.append(Split(pane_width, height, x, y, PaneRef(pane_id)))
            x += pane_width + 1
        return splits

    def distribute_vertically(
        self,
        x: int,
        width: int,
        height: int,
        pane_ids: list[int]
    ) -> list[Split]:
        """Stack panes top to bottom in a column at offset ``x``."""
        count = len(pane_ids)
        heights = partition(height - (count - 1), count)

        splits = []
        y = 0
        for pane_id, pane_height in zip(pane_ids, heights):
            splits.append(Split(width, pane_height, x, y, PaneRef(pane_id)))
            y += pane_height + 1
        return splits

    def build_editor_layout(self, width: int, height: int, pane_ids: list[int]) -> Split:
        """
        Build the editor region in the top-left corner.

        A single editor fills the region. Otherwise the first half of the
        editors (rounded down) forms a top row and the rest a bottom row,
        with one separator row between them.
        """
        if len(pane_ids) == 1:
            return Split(width, height, 0, 0, PaneRef(pane_ids[0]))

        top_height = height // 2
        bottom_y = top_height + 1
        bottom_height = height - top_height - 1
        half = len(pane_ids) // 2

        top = self._row(
            0, width, top_height,
            self.distribute_horizontally(0, width, top_height, pane_ids[:half])
        )
        bottom = self._row(
            bottom_y, width, bottom_height,
            self.distribute_horizontally(bottom_y, width, bottom_height, pane_ids[half:])
        )

        return Split(width, height, 0, 0, Nesting(Orientation.VERTICAL, (top, bottom)))

    def _row(self, y: int, width: int, height: int, splits: list[Split]) -> Split:
        if len(splits) == 1:
            return splits[0]
        return Split(width, height, 0, y, Nesting(Orientation.HORIZONTAL, tuple(splits)))

    def build_console_layout(
        self,
        x: int,
        width: int,
        height: int,
        pane_ids: list[int]
    ) -> Split:
        """Build the console column, always as a vertical nesting."""
        consoles = self.distribute_vertically(x, width, height, pane_ids)
        return Split(width, height, x, 0, Nesting(Orientation.VERTICAL, tuple(consoles)))

    def determine_console_width(self, total_width: int) -> int:
        """Console column takes a share of the window, clamped to the limits."""
        return max(
            self.console_min_width,
            min(total_width // self.console_ratio, self.console_max_width)
        )

    def build(
        self,
        editor_count: int,
        current: Union[LayoutString, str],
        pane_ids: Optional[list[int]] = None
    ) -> LayoutString:
        """
        Build the coder layout for a window.

        Args:
            editor_count: Number of panes to put in the editor region.
            current: The window's current layout.
            pane_ids: Panes in window order. Taken from ``current`` if None.

        Returns:
            New LayoutString with a valid checksum. A window with a single
            pane is returned unchanged.

        Raises:
            ParseError: If ``current`` is a string that does not parse.
            DegenerateInputError: If there are no panes.
            PartitionError: If either region would be left without panes,
                or the window is too small for the requested panes.
        """
        if isinstance(current, str):
            current = parse(current)
        if pane_ids is None:
            pane_ids = collect_pane_ids(current)

        if not pane_ids:
            raise DegenerateInputError("layout contains no panes")
        if len(pane_ids) == 1:
            logger.debug("Single pane %s, keeping layout", pane_ids[0])
            return current
        if not 0 < editor_count < len(pane_ids):
            raise PartitionError(
                f"editor count must be between 1 and {len(pane_ids) - 1}, got {editor_count}"
            )

        root = current.root
        total_width, total_height = root.dims
        editor_ids = pane_ids[:editor_count]
        console_ids = pane_ids[editor_count:]

        right_width = self.determine_console_width(total_width)
        left_width = total_width - right_width - 1
        if left_width < 1:
            raise PartitionError(
                f"window width {total_width} leaves no room for editors next to a "
                f"{right_width} column console"
            )

        logger.debug(
            "Editors %s in %dx%d, consoles %s in %dx%d",
            editor_ids, left_width, total_height,
            console_ids, right_width, total_height,
        )

        layout = Split(
            total_width, total_height, 0, 0,
            Nesting(Orientation.HORIZONTAL, (
                self.build_editor_layout(left_width, total_height, editor_ids),
                self.build_console_layout(left_width + 1, right_width, total_height, console_ids),
            ))
        )
        return with_checksum(layout)


def coder_layout(
    editor_count: int,
    current: Union[LayoutString, str],
    pane_ids: Optional[list[int]] = None
) -> LayoutString:
    """Build a coder layout with the default console width limits."""
    return CoderLayoutBuilder().build(editor_count, current, pane_ids)
