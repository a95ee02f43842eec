from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures and configuration builders.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from structuregen.domain.config import StructureConfig, build_config  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create the reference project used across tree tests.

    Structure:
    /proj
      /sub
        b.txt
      a.txt
      z.txt
    """
    root = tmp_path / "proj"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / "z.txt").write_text("z", encoding="utf-8")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b", encoding="utf-8")
    return root


@pytest.fixture
def make_config() -> Callable[..., StructureConfig]:
    """
    Return a builder for StructureConfig rooted at a given path.

    Keyword arguments are forwarded to build_config as overrides.
    """
    def _make(path: Path, **overrides: Any) -> StructureConfig:
        return build_config(path=str(path), **overrides)

    return _make
