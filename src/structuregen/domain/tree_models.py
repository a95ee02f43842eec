from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the entry type produced by a single directory listing.
Entries are read fresh on every traversal and never cached.
"""

import os
from dataclasses import dataclass

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirEntry:
    """
    Represents a child item of a scanned directory.

    Attributes:
        name: Base name of the entry.
        path: Full filesystem path to the entry.
        is_dir: True for real directories (symbolic links are not followed).
    """
    name: str
    path: str
    is_dir: bool

    @classmethod
    def from_scandir(cls, entry: os.DirEntry) -> "DirEntry":
        """Build a DirEntry from an os.scandir() result without following links."""
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        return cls(name=entry.name, path=entry.path, is_dir=is_dir)

    @property
    def display_name(self) -> str:
        """Printable name; undecodable filesystem bytes become U+FFFD."""
        raw = os.fsencode(self.name)
        return raw.decode("utf-8", errors="replace")

    @property
    def extension(self) -> str:
        """Lower-cased extension including the leading dot, or ''."""
        return os.path.splitext(self.name)[1].lower()
