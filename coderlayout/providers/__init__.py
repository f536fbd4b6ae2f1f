"""
Coderlayout providers.

Providers abstract the interaction with terminal multiplexers.
"""

from .base import Provider
from .tmux import TmuxProvider
from .static import StaticProvider

__all__ = ["Provider", "TmuxProvider", "StaticProvider"]
