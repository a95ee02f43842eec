from __future__ import annotations

"""
Directory Tree Generator.

Walks a project recursively and renders every surviving entry as an
indented text line. Directories are listed before files, each group in
locale collation order. Unreadable directories are logged and skipped
so that a partial tree is still produced.
"""

import locale
import logging
import os
from typing import List, Optional, Sequence

from structuregen.core.pipeline.components.filters import (
    IgnoreMatcher,
    compile_ignore_patterns,
    filter_entries,
)
from structuregen.domain.config import StructureConfig
from structuregen.domain.constants import (
    BRANCH_LAST,
    BRANCH_MIDDLE,
    CONTINUATION_LAST,
    CONTINUATION_MIDDLE,
    DIR_SUFFIX,
    HARD_DEPTH_LIMIT,
)
from structuregen.domain.tree_models import DirEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(config: StructureConfig) -> str:
    """
    Generate the tree text for the configured root.

    Compiles the ignore rules once and starts the recursion with the
    root's children at depth 1.

    Args:
        config: Resolved run configuration.

    Returns:
        str: Tree lines, each terminated by a newline.
    """
    logger.info(f"Generating directory tree for: {config.path}")
    matchers = compile_ignore_patterns(config.ignore)
    tree_text = generate_tree(config.path, "", 1, config, matchers)
    line_count = tree_text.count("\n")
    logger.debug(f"Tree generated with {line_count} lines")
    return tree_text


def generate_tree(
        dir_path: str,
        prefix: str,
        depth: int,
        config: StructureConfig,
        matchers: Optional[Sequence[IgnoreMatcher]] = None,
) -> str:
    """
    Render the subtree rooted at dir_path.

    Args:
        dir_path: Directory whose children are listed.
        prefix: Continuation prefix inherited from the ancestors.
        depth: Depth of the listed children (root children = 1).
        config: Resolved run configuration.
        matchers: Precompiled ignore rules; compiled from config if omitted.

    Returns:
        str: The rendered lines for this subtree, possibly empty.
    """
    if config.depth_limited and depth > config.max_depth:
        return ""
    if depth > HARD_DEPTH_LIMIT:
        logger.warning(f"Depth ceiling ({HARD_DEPTH_LIMIT}) reached, skipping: {dir_path}")
        return ""

    if matchers is None:
        matchers = compile_ignore_patterns(config.ignore)

    result = ""
    try:
        entries = list_entries(dir_path)
    except OSError as e:
        logger.error(f"Error reading directory {dir_path}: {e.strerror or e}")
        return result

    visible = sort_entries(filter_entries(entries, matchers, config.include_extensions))
    total = len(visible)

    for i, entry in enumerate(visible):
        is_last = (i == total - 1)
        connector = BRANCH_LAST if is_last else BRANCH_MIDDLE

        if entry.is_dir:
            result += f"{prefix}{connector}{entry.display_name}{DIR_SUFFIX}\n"
            new_prefix = prefix + (CONTINUATION_LAST if is_last else CONTINUATION_MIDDLE)
            result += generate_tree(entry.path, new_prefix, depth + 1, config, matchers)
        else:
            result += f"{prefix}{connector}{entry.display_name}\n"

    return result

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (LISTING AND ORDERING)
# -----------------------------------------------------------------------------

def list_entries(dir_path: str) -> List[DirEntry]:
    """
    Read the immediate children of a directory.

    Raises:
        OSError: If the directory cannot be listed.
    """
    with os.scandir(dir_path) as it:
        return [DirEntry.from_scandir(e) for e in it]


def sort_entries(entries: Sequence[DirEntry]) -> List[DirEntry]:
    """
    Order entries directories-first, then by locale collation.

    The raw name is the final tie-breaker, which keeps the order total
    when the collation treats two distinct names as equal.
    """
    return sorted(entries, key=lambda e: (not e.is_dir, _collation_key(e.display_name), e.name))


def _collation_key(name: str) -> str:
    try:
        return locale.strxfrm(name)
    except ValueError:
        # embedded NUL characters
        return name
