"""Pytest configuration"""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CODERLAYOUT_* variables from the developer's shell out of tests"""
    for var in (
        "CODERLAYOUT_EDITOR_COUNT",
        "CODERLAYOUT_CONSOLE_MIN_WIDTH",
        "CODERLAYOUT_CONSOLE_MAX_WIDTH",
        "CODERLAYOUT_TMUX_TARGET",
    ):
        monkeypatch.delenv(var, raising=False)
