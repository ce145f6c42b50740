"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep UNDOABLE_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("UNDOABLE_"):
            monkeypatch.delenv(name)
