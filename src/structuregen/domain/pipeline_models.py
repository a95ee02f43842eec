from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result structure and factory functions used to communicate
execution outcomes between the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Result object of a complete generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        root_path: Normalized root directory scanned.
        output_path: Absolute path of the written document ('' if none).
        tree_text: Rendered tree lines.
        line_count: Number of lines in the tree text.
        summary: Execution metadata.
    """
    ok: bool
    error: str
    root_path: str
    output_path: str = ""
    tree_text: str = ""
    line_count: int = 0
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        root_path: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """Create a failed pipeline result instance."""
    return PipelineResult(
        ok=False,
        error=error,
        root_path=root_path,
        summary=summary_extra or {},
    )


def create_success_result(
        root_path: str,
        output_path: str,
        tree_text: str,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> PipelineResult:
    """Create a successful pipeline result instance."""
    return PipelineResult(
        ok=True,
        error="",
        root_path=root_path,
        output_path=output_path,
        tree_text=tree_text,
        line_count=tree_text.count("\n"),
        summary=summary_extra or {},
    )
