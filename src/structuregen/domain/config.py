from __future__ import annotations

"""
Configuration Domain Management.

Defines the immutable run configuration and the merge logic that layers
command-line overrides on top of the domain defaults.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Tuple

from structuregen.domain.constants import (
    DEFAULT_IGNORE_PATTERNS,
    DEFAULT_INCLUDE_EXTENSIONS,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_FILE,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONFIGURATION MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructureConfig:
    """
    Resolved configuration for a single generation run.

    Attributes:
        show_help: Show usage and exit without scanning.
        output: Destination path of the Markdown document.
        path: Absolute root directory to scan.
        ignore: Ordered ignore patterns (defaults first, then user additions).
        include_extensions: Lower-cased extensions kept for files (empty = all).
        max_depth: Listing depth cutoff counted from the root (0 = unlimited).
        debug: Elevate logging verbosity to DEBUG.
        log_file: Optional path for a persistent rotating log.
    """
    show_help: bool = False
    output: str = DEFAULT_OUTPUT_FILE
    path: str = field(default_factory=os.getcwd)
    ignore: Tuple[str, ...] = DEFAULT_IGNORE_PATTERNS
    include_extensions: Tuple[str, ...] = DEFAULT_INCLUDE_EXTENSIONS
    max_depth: int = DEFAULT_MAX_DEPTH
    debug: bool = False
    log_file: Optional[str] = None

    @property
    def depth_limited(self) -> bool:
        return self.max_depth > 0


def get_default_config() -> StructureConfig:
    """
    Generate the default runtime configuration.

    Returns:
        StructureConfig: Defaults rooted at the current working directory.
    """
    return StructureConfig(ignore=tuple(DEFAULT_IGNORE_PATTERNS))

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def build_config(
        base: Optional[StructureConfig] = None,
        *,
        extra_ignore: Iterable[str] = (),
        **overrides: Any,
) -> StructureConfig:
    """
    Merge override values onto a base configuration.

    None-valued overrides are dropped so that unset flags keep their
    defaults. Extra ignore patterns are appended after the base set,
    preserving order and skipping duplicates.

    Args:
        base: Starting configuration (defaults if omitted).
        extra_ignore: Additional ignore patterns to append.
        **overrides: Field values to replace.

    Returns:
        StructureConfig: A new configuration instance.

    Raises:
        TypeError: If an override names an unknown field.
    """
    conf = base if base is not None else get_default_config()

    clean: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}

    ignore = list(clean.pop("ignore", conf.ignore))
    for pattern in extra_ignore:
        if pattern and pattern not in ignore:
            ignore.append(pattern)
    clean["ignore"] = tuple(ignore)

    if "include_extensions" in clean:
        clean["include_extensions"] = normalize_extensions(clean["include_extensions"])

    logger.debug(f"Configuration overrides applied: {sorted(clean)}")
    return replace(conf, **clean)


def normalize_extensions(extensions: Iterable[str]) -> Tuple[str, ...]:
    """
    Normalize user supplied extensions to lower-case with a leading dot.

    Args:
        extensions: Raw extensions such as 'py', '.MD'.

    Returns:
        Tuple[str, ...]: Ordered unique extensions.
    """
    out = []
    for ext in extensions:
        e = (ext or "").strip().lower()
        if not e:
            continue
        if not e.startswith("."):
            e = "." + e
        if e not in out:
            out.append(e)
    return tuple(out)
