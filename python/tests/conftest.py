"""Pytest configuration and fixtures for mspdbg tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
PYTHON_SRC = REPO_ROOT / "python"
if str(PYTHON_SRC) not in sys.path:
    sys.path.append(str(PYTHON_SRC))

from mspdbg.commands import build_registry
from mspdbg.context import ShellContext


@pytest.fixture
def ctx() -> ShellContext:
    return ShellContext.create()


@pytest.fixture
def registry():
    return build_registry()
