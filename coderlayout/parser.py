"""
Parser for tmux layout strings.

Grammar:

    layout_string := checksum "," layout whitespace*
    checksum      := 4 lowercase hex digits
    layout        := number "x" number "," number "," number tail
    tail          := "," number                   (pane)
                   | "{" layout ("," layout)* "}"  (horizontal nesting)
                   | "[" layout ("," layout)* "]"  (vertical nesting)

The parser keeps its own stack of open nestings instead of recursing, so
nesting depth is limited only by memory.
"""

from dataclasses import dataclass, field

from .errors import ParseError
from .types import LayoutString, Nesting, Orientation, PaneRef, Split


DIGITS = "0123456789"
HEX_DIGITS = "0123456789abcdef"
WHITESPACE = " \t\r\n"

OPENERS = {"{": Orientation.HORIZONTAL, "[": Orientation.VERTICAL}
CLOSERS = {Orientation.HORIZONTAL: "}", Orientation.VERTICAL: "]"}


@dataclass
class _OpenNesting:
    """A Split whose nesting has been opened but not yet closed."""

    width: int
    height: int
    x: int
    y: int
    orientation: Orientation
    source: str
    children: list[Split] = field(default_factory=list)

    def close(self) -> Split:
        return Split(
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            content=Nesting(self.orientation, tuple(self.children)),
            source=self.source,
        )


class LayoutParser:
    """Single-use parser over one input string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> LayoutString:
        """
        Parse the whole input.

        Returns:
            The parsed LayoutString.

        Raises:
            ParseError: If the input does not match the grammar.
        """
        checksum = self._checksum()
        self._expect(",")
        root = self.layout()
        while self._peek() and self._peek() in WHITESPACE:
            self.pos += 1
        if self.pos != len(self.text):
            raise self._error("end of input")
        return LayoutString(checksum=checksum, root=root)

    def layout(self) -> Split:
        """Parse one layout node, including everything nested inside it."""
        stack: list[_OpenNesting] = []

        while True:
            width, height, x, y, source = self._header()
            ch = self._peek()

            if ch == ",":
                self.pos += 1
                digits = self._digits("pane id")
                pane = PaneRef(int(digits), source=digits)
                node = Split(width, height, x, y, pane, source=source)
            elif ch and ch in OPENERS:
                self.pos += 1
                stack.append(_OpenNesting(width, height, x, y, OPENERS[ch], source))
                continue
            else:
                raise self._error("',', '{' or '['")

            # Attach the finished node to its parent, closing every nesting
            # that ends here, until another sibling follows.
            while stack:
                parent = stack[-1]
                parent.children.append(node)
                closer = CLOSERS[parent.orientation]
                ch = self._peek()
                if ch == ",":
                    self.pos += 1
                    break
                if ch == closer:
                    self.pos += 1
                    stack.pop()
                    node = parent.close()
                    continue
                raise self._error(f"',' or '{closer}'")
            else:
                return node

    def _header(self) -> tuple[int, int, int, int, str]:
        start = self.pos
        width = self._number("width")
        self._expect("x")
        height = self._number("height")
        self._expect(",")
        x = self._number("x offset")
        self._expect(",")
        y = self._number("y offset")
        return width, height, x, y, self.text[start:self.pos]

    def _checksum(self) -> str:
        start = self.pos
        for _ in range(4):
            ch = self._peek()
            if not ch or ch not in HEX_DIGITS:
                raise self._error("4 lowercase hex digit checksum")
            self.pos += 1
        return self.text[start:self.pos]

    def _number(self, what: str) -> int:
        return int(self._digits(what))

    def _digits(self, what: str) -> str:
        start = self.pos
        while self._peek() and self._peek() in DIGITS:
            self.pos += 1
        if self.pos == start:
            raise self._error(what)
        return self.text[start:self.pos]

    def _expect(self, literal: str) -> None:
        if self._peek() != literal:
            raise self._error(repr(literal))
        self.pos += 1

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _error(self, expected: str) -> ParseError:
        return ParseError(self.pos, expected, self.text)


def parse(text: str) -> LayoutString:
    """
    Parse a tmux layout string such as ``a1b2,80x24,0,0,1``.

    Args:
        text: Layout string, optionally followed by whitespace.

    Returns:
        LayoutString tree.

    Raises:
        ParseError: If the text is not a valid layout string.
    """
    return LayoutParser(text).parse()
