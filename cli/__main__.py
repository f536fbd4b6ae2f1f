#!/usr/bin/env python3
"""
Coderlayout CLI - editor/console pane layouts for tmux.

Usage:
    coderlayout [EDITOR_COUNT] [--layout=<s>] [--apply] [--json] [--verbose]
    coderlayout --init-config
    coderlayout --version
    coderlayout --help

Prints the new layout string; `tmux select-layout "$(coderlayout 2)"`
applies it, as does `coderlayout 2 --apply`.
"""

import argparse
import json
import logging
import sys

from coderlayout import (
    CoderLayoutBuilder,
    CoderLayoutConfig,
    CoderLayoutError,
    __version__,
    get_config_path,
    load_config,
    pane_ids,
    parse,
    save_config,
    verify_checksum,
)
from coderlayout.providers import Provider, StaticProvider, TmuxProvider

logger = logging.getLogger("coderlayout.cli")


def get_provider(args, config: CoderLayoutConfig) -> Provider:
    """Create the provider the layout is read from and applied to."""
    if args.layout:
        return StaticProvider(args.layout)
    return TmuxProvider(binary=config.tmux.binary, target=config.tmux.target)


def cmd_layout(args, config: CoderLayoutConfig) -> int:
    """Build and print (optionally apply) the coder layout."""
    editor_count = args.editor_count
    if editor_count is None:
        editor_count = config.layout.editor_count

    try:
        provider = get_provider(args, config)
        if not provider.is_available():
            print("Error: Not in a tmux session", file=sys.stderr)
            return 1

        current = parse(provider.fetch_current_layout_string())
        if not verify_checksum(current):
            logger.warning("Input layout checksum %s does not match its body", current.checksum)

        ids = pane_ids(current)
        builder = CoderLayoutBuilder(
            console_min_width=config.layout.console_min_width,
            console_max_width=config.layout.console_max_width,
            console_ratio=config.layout.console_ratio,
        )
        layout = str(builder.build(editor_count, current, ids))

        status = "calculated"
        if args.apply:
            if not provider.apply_layout_string(layout):
                print("Error: could not apply layout", file=sys.stderr)
                return 1
            status = "applied"

    except CoderLayoutError as e:
        if args.json:
            print(json.dumps({"status": "error", "message": str(e)}))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps({
            "status": status,
            "editor_count": editor_count,
            "input": str(current),
            "layout": layout,
            "panes": {
                "editor": ids[:editor_count] if len(ids) > 1 else ids,
                "console": ids[editor_count:] if len(ids) > 1 else [],
            },
        }, indent=2))
    else:
        print(layout)

    return 0


def cmd_init_config(args) -> int:
    """Write a default config file."""
    config_path = get_config_path()
    if config_path.exists():
        print(f"Config already exists: {config_path}")
        return 0
    if not save_config(CoderLayoutConfig(), config_path):
        print(f"Error: could not write {config_path}", file=sys.stderr)
        return 1
    print(f"Created: {config_path}")
    return 0


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="coderlayout",
        description="Arrange tmux panes as editors on the left and consoles on the right"
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("editor_count", type=int, nargs="?",
                        help="Number of editor panes (default from config)")
    parser.add_argument("-l", "--layout", help="Layout string to rearrange instead of the current tmux window")
    parser.add_argument("-a", "--apply", action="store_true", help="Apply the new layout")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--init-config", action="store_true", help="Write a default config file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )

    if args.init_config:
        return cmd_init_config(args)

    # Load config after logging is set up so config warnings are shown
    config = load_config()
    return cmd_layout(args, config)


if __name__ == "__main__":
    sys.exit(main())
