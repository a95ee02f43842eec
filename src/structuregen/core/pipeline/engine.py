from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a generation run:
1. Validates the scan root.
2. Builds the directory tree text.
3. Assembles the Markdown document.
4. Writes the document to its destination.
"""

import logging
from datetime import datetime
from typing import Optional

from structuregen.core.analysis.tree_generator import generate_directory_tree
from structuregen.core.pipeline.components.writer import write_document
from structuregen.core.pipeline.stages.assembler import assemble_document
from structuregen.core.pipeline.stages.validator import validate_root
from structuregen.domain.config import StructureConfig
from structuregen.domain.errors import StructureGeneratorError
from structuregen.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_pipeline(config: StructureConfig, *, now: Optional[datetime] = None) -> PipelineResult:
    """
    Execute the full structure generation pipeline.

    Invalid roots and write failures are reported through the result
    object; nothing is written when validation fails.

    Args:
        config: Resolved run configuration.
        now: Timestamp override for the document footer.

    Returns:
        PipelineResult: Outcome of the run.
    """
    # 1. Root validation
    try:
        root = validate_root(config.path)
    except StructureGeneratorError as e:
        logger.error(str(e))
        return create_error_result(str(e), config.path)

    # 2-3. Tree generation and assembly
    tree_text = generate_directory_tree(config)
    document = assemble_document(root, tree_text, now=now)

    # 4. Persistence
    try:
        output_path = write_document(config.output, document)
    except (OSError, UnicodeError) as e:
        msg = f"Failed to write '{config.output}': {getattr(e, 'strerror', None) or e}"
        logger.error(msg)
        return create_error_result(msg, root)

    return create_success_result(
        root,
        output_path,
        tree_text,
        summary_extra={
            "max_depth": config.max_depth,
            "ignore_patterns": len(config.ignore),
        },
    )
