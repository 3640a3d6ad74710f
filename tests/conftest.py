"""Pytest configuration - ensure consistent CWD and provide fixtures."""
from __future__ import annotations

import os
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parents[1]

def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def gui_dir():
    """Return path to src/gui directory."""
    return ROOT / "src" / "gui"


@pytest.fixture
def panel():
    """Fresh ParameterPanel with the stock config."""
    from src.model.panel import ParameterPanel
    return ParameterPanel()
