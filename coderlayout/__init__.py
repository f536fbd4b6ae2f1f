"""
Coderlayout - editor/console pane layouts for tmux.

Parses tmux layout strings, and rebuilds a window with a number of "editor"
panes on the left and the remaining "console" panes stacked on the right.

Basic Usage:
    from coderlayout import coder_layout

    layout = coder_layout(2, "e1de,200x50,0,0{100x50,0,0,1,99x50,101,0[99x25,101,0,2,99x24,101,26,3]}")
    print(layout)  # feed to `tmux select-layout`

With Provider (e.g., tmux integration):
    from coderlayout import CoderLayoutBuilder
    from coderlayout.providers import TmuxProvider

    provider = TmuxProvider()
    current = provider.fetch_current_layout_string()
    layout = CoderLayoutBuilder().build(2, current)
    provider.apply_layout_string(str(layout))
"""

__version__ = "0.1.0"
__author__ = "Coderlayout Contributors"

# Core types
from .types import (
    Orientation,
    PaneRef,
    Nesting,
    Split,
    LayoutString,
    LayoutNode,
    WindowInfo,
)
from .errors import (
    CoderLayoutError,
    ParseError,
    PartitionError,
    DegenerateInputError,
    ProviderError,
)

# Core functions
from .parser import LayoutParser, parse
from .serializer import render
from .checksum import layout_checksum, with_checksum, verify_checksum
from .traversal import visit, pane_ids, leaves
from .partition import partition
from .builder import CoderLayoutBuilder, coder_layout

# Configuration
from .config import (
    CoderLayoutConfig,
    LayoutConfig,
    TmuxConfig,
    load_config,
    save_config,
    get_config_path,
)

from . import providers

__all__ = [
    # Version
    "__version__",

    # Types
    "Orientation",
    "PaneRef",
    "Nesting",
    "Split",
    "LayoutString",
    "LayoutNode",
    "WindowInfo",

    # Errors
    "CoderLayoutError",
    "ParseError",
    "PartitionError",
    "DegenerateInputError",
    "ProviderError",

    # Core
    "LayoutParser",
    "parse",
    "render",
    "layout_checksum",
    "with_checksum",
    "verify_checksum",
    "visit",
    "pane_ids",
    "leaves",
    "partition",
    "CoderLayoutBuilder",
    "coder_layout",

    # Configuration
    "CoderLayoutConfig",
    "LayoutConfig",
    "TmuxConfig",
    "load_config",
    "save_config",
    "get_config_path",

    # Submodules
    "providers",
]
