from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, resolves settings (defaults, persisted file, command
line overrides), builds the typed path values and renders them as text or
JSON.
"""

import sys
from typing import Any, Dict, List, Optional

from typedpaths.domain.config import get_default_config, load_config
from typedpaths.domain.errors import TypedPathsError
from typedpaths.domain.file_types import AbsolutePath, Directory
from typedpaths.infra.logging import LoggingConfig, configure_logging, get_logger
from typedpaths.infra.platform import is_absolute_path
from typedpaths.infra.serialization import JsonReader, dumps
from typedpaths.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 if the path is absolute (or validation is off), 1 if it was
        reported as not absolute, 2 on a malformed JSON input.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(args.config_file)
    conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    configure_logging(LoggingConfig(level=conf["log_level"], log_file=conf["log_file"]))
    logger.debug(f"Resolved settings: {conf}")

    validate = bool(conf["validate"])
    try:
        value = _build_value(args.path, args.from_json, validate)
    except TypedPathsError as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    directory = Directory(value, conf["separator"]) if args.show_directory else None

    if args.json_output:
        print(dumps(value, directory) if directory else dumps(value))
    else:
        print(value)
        if directory:
            print(directory)

    if validate and not is_absolute_path(str(value)):
        return 1
    return 0


# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _build_value(raw: str, from_json: bool, validate: bool) -> AbsolutePath:
    """
    Build the AbsolutePath for the CLI input.

    Deserialized text is not validated by the reader, so it is re-wrapped
    here to run the check explicitly.
    """
    if from_json:
        decoded = AbsolutePath.read(JsonReader(raw))
        return AbsolutePath(str(decoded), validate=validate)
    return AbsolutePath(raw, validate=validate)


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None overrides into the base settings."""
    out = dict(base)
    for k in ("validate", "separator", "log_level", "log_file"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
