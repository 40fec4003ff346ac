"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_xen.config import NotationConfig


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for config files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def small_basis() -> NotationConfig:
    """Notation config with a 5-limit prime basis (2, 3, 5)."""
    return NotationConfig(number_of_components=3)
