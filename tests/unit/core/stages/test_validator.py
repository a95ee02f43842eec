from __future__ import annotations

"""
Unit tests for the root path validation stage.
"""

import pytest

from structuregen.core.pipeline.stages.validator import validate_root
from structuregen.domain.errors import InvalidRootError


def test_valid_directory_returns_absolute_path(tmp_path):
    assert validate_root(str(tmp_path)) == str(tmp_path)


def test_missing_path_is_rejected(tmp_path):
    with pytest.raises(InvalidRootError, match="does not exist"):
        validate_root(str(tmp_path / "missing"))


def test_regular_file_is_rejected(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")

    with pytest.raises(InvalidRootError, match="not a directory"):
        validate_root(str(f))


def test_empty_path_is_rejected():
    with pytest.raises(InvalidRootError):
        validate_root("")
