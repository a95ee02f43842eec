from __future__ import annotations

"""
Unit tests for the pipeline engine.

Verifies the happy path end to end in-process, and that validation and
write failures surface as failed results.
"""

import os
import sys
from datetime import datetime

import pytest

from structuregen.core.pipeline.engine import run_pipeline


def test_run_pipeline_writes_document(sample_project, make_config, tmp_path):
    out = tmp_path / "out" / "structure.md"
    config = make_config(sample_project, output=str(out))

    result = run_pipeline(config, now=datetime(2024, 5, 6, 14, 30))

    assert result.ok is True
    assert result.output_path == str(out)
    assert result.line_count == 4
    assert out.read_text(encoding="utf-8") == (
        "# Project Structure\n\n"
        "```\nproj/\n"
        "├── sub/\n"
        "│   └── b.txt\n"
        "├── a.txt\n"
        "└── z.txt\n"
        "```\n\n"
        "*Generated automatically on 05/06/2024, 14:30*\n"
    )


def test_run_pipeline_rejects_file_root(tmp_path, make_config):
    root_file = tmp_path / "not_a_dir.txt"
    root_file.write_text("x", encoding="utf-8")
    out = tmp_path / "structure.md"

    result = run_pipeline(make_config(root_file, output=str(out)))

    assert result.ok is False
    assert "not a directory" in result.error
    assert not out.exists()


def test_run_pipeline_keeps_existing_output_on_invalid_root(tmp_path, make_config):
    out = tmp_path / "structure.md"
    out.write_text("previous", encoding="utf-8")

    result = run_pipeline(make_config(tmp_path / "missing", output=str(out)))

    assert result.ok is False
    assert out.read_text(encoding="utf-8") == "previous"


def test_run_pipeline_reports_write_failure(sample_project, make_config, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")

    # Parent path is a regular file, so the output cannot be created
    result = run_pipeline(make_config(sample_project, output=str(blocker / "structure.md")))

    assert result.ok is False
    assert "Failed to write" in result.error


def test_run_pipeline_survives_undecodable_filename(tmp_path, make_config):
    if sys.platform == "win32":
        pytest.skip("Byte filenames are POSIX only")
    root = tmp_path / "proj"
    root.mkdir()
    try:
        with open(os.path.join(os.fsencode(str(root)), b"bad\xff.txt"), "wb"):
            pass
    except OSError:
        pytest.skip("Filesystem rejects non UTF-8 names")
    out = tmp_path / "structure.md"
    out.write_text("previous", encoding="utf-8")

    result = run_pipeline(make_config(root, output=str(out)), now=datetime(2024, 1, 2, 3, 4))

    assert result.ok is True
    content = out.read_text(encoding="utf-8")
    assert "└── bad�.txt\n" in content
    assert "previous" not in content
