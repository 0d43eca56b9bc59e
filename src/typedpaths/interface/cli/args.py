from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the typedpaths tool and translates the
parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the typedpaths CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="typedpaths",
        description="Check a path for absoluteness and show its typed forms.",
    )

    p.add_argument(
        "path",
        help="Path text to wrap, or a JSON document when --from-json is given.",
    )

    # --- Typed Forms ---
    p.add_argument(
        "--dir",
        dest="show_directory",
        action="store_true",
        help="Also show the directory form (trailing separator).",
    )
    p.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip the absoluteness check.",
    )
    p.add_argument(
        "--sep",
        dest="separator",
        type=_separator,
        default=None,
        help="Separator used for the directory form (default '/').",
    )

    # --- Serialization ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the serialized form instead of plain text.",
    )
    p.add_argument(
        "--from-json",
        action="store_true",
        help="Deserialize PATH from a JSON document produced by --json.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="Settings file to load instead of the user config.json.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore persisted settings.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )

    return p


def _separator(value: str) -> str:
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"separator must be a single character, got {value!r}")
    return value


# -----------------------------------------------------------------------------
# NAMESPACE MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Convert parsed arguments into configuration overrides.

    None means "not given on the command line" and is skipped by the merge.

    Args:
        args: Parsed namespace.

    Returns:
        Dict[str, Any]: Override values keyed like the configuration.
    """
    return {
        "validate": False if args.no_validate else None,
        "separator": args.separator,
        "log_level": "DEBUG" if args.debug else None,
    }
