"""
tmux layout checksum.

tmux prefixes every layout string with a 16-bit rotating checksum of the
layout body and refuses layouts whose checksum does not match.
"""

from .serializer import render
from .types import LayoutString, Split


def layout_checksum(rendered: str) -> str:
    """
    Calculate tmux layout checksum.

    Args:
        rendered: Layout body, without the checksum prefix.

    Returns:
        Four lowercase hex digits.
    """
    csum = 0
    for c in rendered:
        csum = (csum >> 1) + ((csum & 1) << 15)
        csum += ord(c)
        csum &= 0xffff
    return f"{csum:04x}"


def with_checksum(root: Split) -> LayoutString:
    """Wrap a root Split in a LayoutString carrying its correct checksum."""
    return LayoutString(checksum=layout_checksum(render(root)), root=root)


def verify_checksum(layout: LayoutString) -> bool:
    """Check whether the stored checksum matches the layout body."""
    return layout.checksum == layout_checksum(render(layout.root))
