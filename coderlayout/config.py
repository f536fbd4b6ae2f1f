"""
Coderlayout configuration management.

Configuration priority (highest to lowest):
1. CLI arguments (editor count, --layout)
2. Environment variables (CODERLAYOUT_*)
3. Config file (~/.config/coderlayout/config.json or platform-specific)
4. Default values (zero-config)
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

import platformdirs

logger = logging.getLogger(__name__)


@dataclass
class LayoutConfig:
    """Coder layout settings."""

    editor_count: int = 1
    console_min_width: int = 80
    console_max_width: int = 120
    console_ratio: int = 4  # console column is 1/ratio of the window


@dataclass
class TmuxConfig:
    """tmux integration settings."""

    binary: str = "tmux"
    target: str = ""  # window target, empty for the active window


@dataclass
class CoderLayoutConfig:
    """Main configuration container."""

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    tmux: TmuxConfig = field(default_factory=TmuxConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "layout": asdict(self.layout),
            "tmux": asdict(self.tmux),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CoderLayoutConfig":
        """Create from dictionary."""
        return cls(
            layout=LayoutConfig(**data.get("layout", {})),
            tmux=TmuxConfig(**data.get("tmux", {})),
        )

    def apply_env_overrides(self) -> "CoderLayoutConfig":
        """
        Apply environment variable overrides.

        Environment variables:
            CODERLAYOUT_EDITOR_COUNT - default number of editor panes
            CODERLAYOUT_CONSOLE_MIN_WIDTH - narrowest console column
            CODERLAYOUT_CONSOLE_MAX_WIDTH - widest console column
            CODERLAYOUT_TMUX_TARGET - tmux window to rearrange
        """
        int_overrides = {
            "CODERLAYOUT_EDITOR_COUNT": "editor_count",
            "CODERLAYOUT_CONSOLE_MIN_WIDTH": "console_min_width",
            "CODERLAYOUT_CONSOLE_MAX_WIDTH": "console_max_width",
        }
        for var, attr in int_overrides.items():
            value = os.environ.get(var)
            if not value:
                continue
            try:
                setattr(self.layout, attr, int(value))
            except ValueError:
                logger.warning("Ignoring %s=%r: not an integer", var, value)

        if os.environ.get("CODERLAYOUT_TMUX_TARGET"):
            self.tmux.target = os.environ["CODERLAYOUT_TMUX_TARGET"]

        return self


def get_config_dir() -> Path:
    """Directory holding config.json, as chosen by platformdirs for "coderlayout"."""
    return Path(platformdirs.user_config_dir("coderlayout", appauthor=False))


def get_config_path() -> Path:
    """Where ``--init-config`` writes and load_config() reads by default."""
    return get_config_dir() / "config.json"


def load_config(path: Optional[Path] = None, apply_env: bool = True) -> CoderLayoutConfig:
    """
    Read the layout and tmux settings the CLI starts from.

    A missing file means defaults. A file that cannot be read, is not JSON,
    or names fields coderlayout does not know is logged as a warning and
    replaced by defaults as a whole, so one bad key never half-applies.

    Args:
        path: Config file to read instead of get_config_path().
        apply_env: Let CODERLAYOUT_* variables override the file.

    Returns:
        CoderLayoutConfig ready to feed CoderLayoutBuilder and TmuxProvider.
    """
    config_path = path or get_config_path()
    config = CoderLayoutConfig()

    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            config = CoderLayoutConfig.from_dict(data)
        except (OSError, json.JSONDecodeError, TypeError, KeyError, AttributeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", config_path, e)

    if apply_env:
        config.apply_env_overrides()

    return config


def save_config(config: CoderLayoutConfig, path: Optional[Path] = None) -> bool:
    """
    Write settings as indented JSON, creating the config directory if needed.

    Environment overrides applied to ``config`` are written too; callers
    that want a clean file pass a fresh CoderLayoutConfig.

    Returns:
        False (after logging a warning) if the file could not be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.warning("Could not write config %s: %s", config_path, e)
        return False
