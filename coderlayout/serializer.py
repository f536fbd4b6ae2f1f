"""
Rendering of layout trees back into tmux's layout language.

    LayoutString -> {checksum},{root}
    Split        -> {width}x{height},{x},{y}{content}
    PaneRef      -> ,{id}
    Nesting      -> {a,b,...} (horizontal) or [a,b,...] (vertical)
"""

import re

from .types import LayoutNode, LayoutString, Nesting, Orientation, PaneRef, Split


BRACKETS = {
    Orientation.HORIZONTAL: ("{", "}"),
    Orientation.VERTICAL: ("[", "]"),
}


_HEADER_NUMBERS = re.compile(r"[x,]")


def _header_text(split: Split) -> str:
    # Parsed nodes keep their digits as written, leading zeros included,
    # unless the numbers were changed after parsing.
    if split.source is not None:
        numbers = tuple(int(n) for n in _HEADER_NUMBERS.split(split.source))
        if numbers == (split.width, split.height, split.x, split.y):
            return split.source
    return f"{split.width}x{split.height},{split.x},{split.y}"


def _pane_text(pane: PaneRef) -> str:
    if pane.source is not None and int(pane.source) == pane.id:
        return pane.source
    return str(pane.id)


def render(node: LayoutNode) -> str:
    """
    Render a layout node as tmux would print it.

    Uses an explicit stack, so arbitrarily deep trees render without
    hitting the recursion limit.

    Args:
        node: Any layout node.

    Returns:
        The node's string form. Nodes built in code render canonically;
        parsed nodes reproduce their input digits exactly.
    """
    parts: list[str] = []
    # Items are pending nodes or literal text; pushed in reverse order.
    stack: list = [node]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, LayoutString):
            stack.append(item.root)
            stack.append(f"{item.checksum},")
        elif isinstance(item, Split):
            stack.append(item.content)
            stack.append(_header_text(item))
        elif isinstance(item, PaneRef):
            parts.append(f",{_pane_text(item)}")
        elif isinstance(item, Nesting):
            opening, closing = BRACKETS[item.orientation]
            stack.append(closing)
            for i, child in enumerate(reversed(item.children)):
                stack.append(child)
                if i < len(item.children) - 1:
                    stack.append(",")
            stack.append(opening)
        else:
            raise TypeError(f"cannot render {type(item).__name__}")

    return "".join(parts)
