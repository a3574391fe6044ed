"""
Repository-level pytest configuration.

Provides the repo root and safe environment defaults so a fresh clone runs
without any local setup. Live browser scenarios stay off unless
UI_RUN_LIVE=true is exported.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _env_defaults() -> Generator[None, None, None]:
    """Set environment defaults if not already provided by the user/CI."""
    defaults = {
        "UI_BASE_URL": "https://www.agoda.com",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
