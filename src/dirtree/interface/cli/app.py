from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration loading
and merging, logging bootstrap, tree generation and the mapping of
failures to stderr messages and exit codes. Standard output only ever
receives the rendered tree.
"""

import sys
from typing import Any, Dict, List, Optional

from dirtree.core.services.tree_service import generate_directory_tree
from dirtree.domain.config import load_config, validate_config
from dirtree.domain.errors import ListingError, WriteError
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger
from dirtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if hasattr(sys.stdout, "reconfigure"):
        if sys.platform == "win32":
            sys.stdout.reconfigure(encoding="utf-8")
        # Undecodable entry names come back from os.scandir as surrogate
        # escapes; write them out as the original bytes.
        sys.stdout.reconfigure(errors="surrogateescape")

    # 1. Argument parsing (usage errors exit with status 2)
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy: defaults < config file < command line
    raw_conf = _merge_config(load_config(), cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf)

    # 3. Logging bootstrap (stderr, optional rotating file)
    configure_logging(LoggingConfig(level=conf["log_level"], log_file=conf["log_file"]))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    logger.debug(f"CLI execution initiated with configuration: {conf}")

    # 4. Tree generation
    try:
        generate_directory_tree(sys.stdout, args.path, include_files=conf["include_files"])
    except (ListingError, WriteError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    return EXIT_OK


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of non-None override values into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
