"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_chords.core import DurationTable, EventDefaults
from chuk_mcp_chords.workbench import EventManager


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def table() -> DurationTable:
    """The built-in duration table (384 ticks per quarter)."""
    return DurationTable()


@pytest.fixture
def manager() -> EventManager:
    """An event manager built on the built-in defaults."""
    return EventManager(EventDefaults())
