from __future__ import annotations

"""
Root Path Validation Stage.

Gatekeeper for the pipeline: the scan root must exist and be a directory
before any traversal or output happens.
"""

import logging
import os

from structuregen.domain.errors import InvalidRootError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_root(path: str) -> str:
    """
    Verify that the scan root is an existing directory.

    Args:
        path: Candidate root directory.

    Returns:
        str: The absolute root path.

    Raises:
        InvalidRootError: If the path is missing or not a directory.
    """
    if not path or not os.path.exists(path):
        raise InvalidRootError(path, "Path does not exist")
    if not os.path.isdir(path):
        raise InvalidRootError(path, "Provided path is not a directory")

    logger.debug(f"Root path validated: {path}")
    return os.path.abspath(path)
