"""Read-only walks over layout trees."""

from typing import Callable

from .types import LayoutNode, LayoutString, Nesting, PaneRef, Split


def _children(node: LayoutNode) -> tuple:
    if isinstance(node, LayoutString):
        return (node.root,)
    if isinstance(node, Split):
        return (node.content,)
    if isinstance(node, Nesting):
        return node.children
    return ()


def visit(node: LayoutNode, callback: Callable[[LayoutNode], None]) -> None:
    """
    Walk a layout tree in pre-order.

    The callback sees each node before anything nested inside it, and
    siblings left to right (or top to bottom), which is the order tmux
    lists the panes of a window.

    Args:
        node: Root of the walk.
        callback: Called once per node.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        callback(current)
        stack.extend(reversed(_children(current)))


def pane_ids(node: LayoutNode) -> list[int]:
    """Get the pane ids of a layout, in document order."""
    ids = []

    def collect(current: LayoutNode) -> None:
        if isinstance(current, PaneRef):
            ids.append(current.id)

    visit(node, collect)
    return ids


def leaves(node: LayoutNode) -> list[Split]:
    """Get the Splits that hold a single pane, in document order."""
    found = []

    def collect(current: LayoutNode) -> None:
        if isinstance(current, Split) and current.is_pane:
            found.append(current)

    visit(node, collect)
    return found
