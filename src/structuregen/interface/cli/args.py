from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates raw argument lists into
an immutable StructureConfig. Parsing is lenient: unknown flags are
ignored, bare arguments select the scan root, and a malformed depth
falls back to unlimited.
"""

import argparse
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from structuregen.domain.config import StructureConfig, build_config, get_default_config
from structuregen.domain.constants import DEFAULT_OUTPUT_FILE
from structuregen.infra.fs import normalize_path

logger = logging.getLogger(__name__)

PROG_NAME = "generate-structure"

_EPILOG = """\
Examples:
  generate-structure
  generate-structure --output README.md
  generate-structure ~/my-project --ignore "*.temp"
  generate-structure --max-depth 3

Automatically generates a directory tree structure in Markdown format.
"""

# Flags that consume the following token as their value, by canonical long form
_VALUE_FLAGS: Dict[str, str] = {
    "-o": "--output", "--output": "--output",
    "-p": "--path", "--path": "--path",
    "-i": "--ignore", "--ignore": "--ignore",
    "-d": "--max-depth", "--max-depth": "--max-depth",
    "-e": "--ext", "--ext": "--ext",
    "--log-file": "--log-file",
}

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the structure generator CLI.

    Help handling is disabled in argparse so that '--help' becomes a
    configuration flag instead of an immediate exit.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=PROG_NAME,
        usage=f"{PROG_NAME} [options] [path]",
        description="Project Structure Generator",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )

    p.add_argument(
        "-h", "--help",
        dest="show_help",
        action="store_true",
        help="Show this help message",
    )

    # --- Path Management ---
    p.add_argument(
        "-o", "--output",
        dest="output",
        metavar="<file>",
        default=None,
        help=f"Output file name (default: {DEFAULT_OUTPUT_FILE})",
    )
    p.add_argument(
        "-p", "--path",
        dest="path",
        metavar="<path>",
        default=None,
        help="Project path to scan (default: current directory)",
    )

    # --- Filtering ---
    p.add_argument(
        "-i", "--ignore",
        dest="ignore",
        metavar="<pattern>",
        action="append",
        default=None,
        help="Add ignore pattern (can be used multiple times)",
    )
    p.add_argument(
        "-d", "--max-depth",
        dest="max_depth",
        metavar="<num>",
        default=None,
        help="Maximum depth to scan (default: unlimited)",
    )
    p.add_argument(
        "-e", "--ext",
        dest="extensions",
        metavar="<list>",
        action="append",
        default=None,
        help="Comma-separated file extensions to include (default: all)",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="<file>",
        default=None,
        help="Also write diagnostics to a rotating log file.",
    )

    return p


def format_help() -> str:
    return build_parser().format_help()

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def parse_options(argv: Optional[Sequence[str]] = None) -> StructureConfig:
    """
    Resolve a raw argument list into a StructureConfig.

    Args:
        argv: Arguments without the program name.

    Returns:
        StructureConfig: Defaults merged with the parsed overrides.
    """
    tokens = _bind_flag_values(list(argv or []))

    parser = build_parser()
    args, extras = parser.parse_known_args(tokens)

    if extras:
        logger.debug(f"Ignoring unrecognized flags: {extras}")

    return build_config(get_default_config(), **args_to_overrides(args))


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Overrides for build_config (None = keep default).
    """
    overrides: Dict[str, Any] = {}

    overrides["show_help"] = True if args.show_help else None
    overrides["output"] = args.output
    overrides["path"] = normalize_path(args.path, os.getcwd()) if args.path else None
    overrides["extra_ignore"] = list(args.ignore or [])
    overrides["max_depth"] = parse_max_depth(args.max_depth)

    if args.extensions:
        exts: List[str] = []
        for chunk in args.extensions:
            exts.extend(_split_csv(chunk) or [])
        overrides["include_extensions"] = exts

    overrides["debug"] = True if args.debug else None
    overrides["log_file"] = args.log_file

    return overrides


def parse_max_depth(raw: Optional[str]) -> Optional[int]:
    """
    Interpret the --max-depth value.

    Non-numeric or negative input is treated as unlimited (0).

    Args:
        raw: Raw flag value, None when the flag was not given.

    Returns:
        Optional[int]: Depth limit, or None to keep the default.
    """
    if raw is None:
        return None
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning(f"Invalid --max-depth value '{raw}'; scanning without a depth limit.")
        return 0
    if value < 0:
        logger.warning(f"Negative --max-depth value '{raw}'; scanning without a depth limit.")
        return 0
    return value

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _bind_flag_values(tokens: List[str]) -> List[str]:
    """
    Rewrite the argument list into explicit '--flag=value' tokens.

    A value flag always takes the next token, even one starting with '-'.
    Bare arguments become '--path=...' so that the last root given wins,
    whether it came from '-p' or a positional. A value flag with nothing
    after it is dropped.
    """
    bound: List[str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _VALUE_FLAGS:
            if i + 1 >= len(tokens):
                logger.debug(f"Flag '{token}' has no value; using its default.")
                break
            bound.append(f"{_VALUE_FLAGS[token]}={tokens[i + 1]}")
            i += 2
            continue
        if token and not token.startswith("-"):
            bound.append(f"--path={token}")
        else:
            bound.append(token)
        i += 1
    return bound


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
