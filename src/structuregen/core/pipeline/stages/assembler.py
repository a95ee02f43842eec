from __future__ import annotations

"""
Document Assembler Stage.

Wraps the rendered tree in the Markdown document: title, fenced block
headed by the root directory name, and a generation timestamp.
"""

import os
from datetime import datetime
from typing import Optional

from structuregen.domain.constants import DIR_SUFFIX, DOCUMENT_TITLE, TIMESTAMP_FORMAT

FENCE = "```"

# -----------------------------------------------------------------------------
# CORE ASSEMBLY LOGIC
# -----------------------------------------------------------------------------

def assemble_document(root_path: str, tree_text: str, now: Optional[datetime] = None) -> str:
    """
    Build the final Markdown document.

    Args:
        root_path: Scanned root directory; its base name heads the block.
        tree_text: Output of the tree generator (newline terminated lines).
        now: Timestamp override, local time if omitted.

    Returns:
        str: Complete document text ending with a newline.
    """
    root_name = root_display_name(root_path)
    stamp = format_timestamp(now or datetime.now())

    document = f"{DOCUMENT_TITLE}\n\n"
    document += f"{FENCE}\n{root_name}{DIR_SUFFIX}\n"
    document += tree_text
    document += f"{FENCE}\n\n"
    document += f"*Generated automatically on {stamp}*\n"
    return document


def format_timestamp(moment: datetime) -> str:
    """Render a timestamp as MM/DD/YYYY, HH:MM (24-hour)."""
    return moment.strftime(TIMESTAMP_FORMAT)


def root_display_name(root_path: str) -> str:
    """Base name of the root; falls back to the path itself for '/' or drives."""
    name = os.path.basename(os.path.normpath(root_path)) or root_path
    return os.fsencode(name).decode("utf-8", errors="replace")
