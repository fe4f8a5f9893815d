"""Shared test configuration."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def missing_config(tmp_path: Path) -> Path:
    """Path to a config file that does not exist."""
    return tmp_path / "absent" / "config.json"
