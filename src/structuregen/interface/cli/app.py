from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument resolution, logging bootstrap,
pipeline execution, and result rendering with the matching exit code.
"""

import locale
import sys
from typing import List, Optional

from structuregen.core.pipeline.engine import run_pipeline
from structuregen.domain.pipeline_models import PipelineResult
from structuregen.infra.logging import LoggingConfig, configure_logging, get_logger
from structuregen.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    raw_args = list(sys.argv[1:] if argv is None else argv)

    # 1. Console logging bootstrap (ahead of argument parsing)
    log_level = "DEBUG" if "--debug" in raw_args else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True))

    # 2. Argument resolution
    config = cli_args.parse_options(raw_args)

    if config.show_help:
        print(cli_args.format_help())
        return EXIT_OK

    if config.log_file:
        configure_logging(
            LoggingConfig(level=log_level, console=True, log_file=config.log_file),
            force=True,
        )
    _activate_user_collation()

    logger.debug(f"Resolved configuration: {config}")

    # 3. Pipeline execution
    print(f"Scanning project: {config.path}")
    print(f"Output file: {config.output}")
    try:
        result = run_pipeline(config)
    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Structure generation failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

    # 4. Output rendering
    _print_human_summary(result)
    return EXIT_OK if result.ok else EXIT_FAILURE

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    """
    Print the execution result to the terminal.

    Args:
        result: The pipeline result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print("Structure file generated successfully!")
    print(f"File saved: {result.output_path} ({result.line_count} entries)")


def _activate_user_collation() -> None:
    """Switch name collation to the user's locale for the tree ordering."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.debug(f"User locale unavailable, keeping default collation: {e}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
