from __future__ import annotations

"""
Output Persistence.

Writes the assembled document to its destination, replacing any
existing file.
"""

import logging
import os

from structuregen.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_document(output_path: str, text: str) -> str:
    """
    Persist the document as UTF-8, overwriting the target.

    The text is encoded before the target is opened, so an existing file
    is only replaced by a fully encoded document. Lone surrogates that
    UTF-8 cannot carry are written as '?'.

    Args:
        output_path: Destination file path.
        text: Full document content.

    Returns:
        str: Absolute path of the written file.

    Raises:
        OSError: If the parent directory cannot be created or the file written.
    """
    target = os.path.abspath(output_path)
    ensure_parent_dir(target)

    payload = text.encode("utf-8", errors="replace")

    with open(target, "wb") as out:
        out.write(payload)

    logger.info(f"Structure saved to file: {target}")
    return target
