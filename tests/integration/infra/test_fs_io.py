from __future__ import annotations

"""
Integration tests for FileSystem helpers.
"""

import os

from structuregen.infra.fs import ensure_parent_dir, normalize_path


def test_normalize_path_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert normalize_path("~/project", "/fallback") == os.path.join(str(tmp_path), "project")


def test_normalize_path_expands_variables(monkeypatch, tmp_path):
    monkeypatch.setenv("STRUCTGEN_ROOT", str(tmp_path))
    assert normalize_path("$STRUCTGEN_ROOT/app", "/fallback") == os.path.join(str(tmp_path), "app")


def test_normalize_path_uses_fallback_for_blank(tmp_path):
    assert normalize_path("   ", str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, str(tmp_path)) == str(tmp_path)


def test_ensure_parent_dir_creates_hierarchy(tmp_path):
    target = tmp_path / "a" / "b" / "file.md"

    ensure_parent_dir(str(target))
    ensure_parent_dir(str(target))

    assert (tmp_path / "a" / "b").is_dir()
    assert not target.exists()
