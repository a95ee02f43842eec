from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the default ignore set, output naming,
and the glyphs used to draw the directory tree.
"""

from typing import Tuple

DEFAULT_OUTPUT_FILE = "structure.md"
DOCUMENT_TITLE = "# Project Structure"
TIMESTAMP_FORMAT = "%m/%d/%Y, %H:%M"

# Maximum listing depth (0 = unlimited)
DEFAULT_MAX_DEPTH = 0

# Recursion ceiling applied even when no max depth is requested
HARD_DEPTH_LIMIT = 256

# -----------------------------------------------------------------------------
# DEFAULT IGNORE SET
# -----------------------------------------------------------------------------

DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = (
    # Dependencies and caches
    "node_modules",
    ".cache",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".venv",
    # Build output
    ".next",
    "dist",
    "build",
    "coverage",
    ".nyc_output",
    ".turbo",
    "tmp",
    "temp",
    # Version control and editors
    ".git",
    ".vscode",
    ".idea",
    # OS metadata
    ".DS_Store",
    "Thumbs.db",
    # Logs and environment
    "*.log",
    ".env",
    ".env.local",
    ".env.production",
    ".env.development",
)

# Extensions to include (empty = include all)
DEFAULT_INCLUDE_EXTENSIONS: Tuple[str, ...] = ()

# -----------------------------------------------------------------------------
# TREE GLYPHS
# -----------------------------------------------------------------------------

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
CONTINUATION_MIDDLE = "│   "
CONTINUATION_LAST = "    "
DIR_SUFFIX = "/"
