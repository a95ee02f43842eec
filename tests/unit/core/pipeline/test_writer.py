from __future__ import annotations

"""
Unit tests for the document writer.

Verifies:
1. Physical file creation with UTF-8 glyphs.
2. Overwrite of an existing file.
3. Creation of missing parent directories.
"""

import pytest

from structuregen.core.pipeline.components.writer import write_document


def test_write_document_creates_file(tmp_path):
    target = tmp_path / "structure.md"

    written = write_document(str(target), "└── a.txt\n")

    assert written == str(target)
    assert target.read_text(encoding="utf-8") == "└── a.txt\n"


def test_write_document_overwrites(tmp_path):
    target = tmp_path / "structure.md"
    target.write_text("OLD CONTENT", encoding="utf-8")

    write_document(str(target), "NEW\n")

    assert target.read_text(encoding="utf-8") == "NEW\n"


def test_write_document_creates_parents(tmp_path):
    target = tmp_path / "docs" / "deep" / "tree.md"

    write_document(str(target), "x\n")

    assert target.exists()


def test_write_document_into_directory_fails(tmp_path):
    with pytest.raises(OSError):
        write_document(str(tmp_path), "x\n")


def test_write_document_replaces_lone_surrogates(tmp_path):
    target = tmp_path / "structure.md"
    target.write_text("previous", encoding="utf-8")

    write_document(str(target), "└── bad\udcff.txt\n")

    assert target.read_bytes() == "└── bad?.txt\n".encode("utf-8")
