"""
Coderlayout exceptions.

Every error raised by the library derives from CoderLayoutError.
"""


class CoderLayoutError(Exception):
    """Base class for all coderlayout errors."""


class ParseError(CoderLayoutError, ValueError):
    """Input does not match the tmux layout grammar."""

    def __init__(self, position: int, expected: str, text: str = ""):
        self.position = position
        self.expected = expected
        self.text = text
        found = repr(text[position]) if position < len(text) else "end of input"
        super().__init__(f"expected {expected} at position {position}, found {found}")


class PartitionError(CoderLayoutError, ValueError):
    """A span cannot be split into the requested number of parts."""


class DegenerateInputError(CoderLayoutError, ValueError):
    """A layout has no panes to arrange."""


class ProviderError(CoderLayoutError):
    """The terminal multiplexer could not be queried."""
