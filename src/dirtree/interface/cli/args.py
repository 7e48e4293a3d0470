from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (one directory path and the optional
'-f' switch) and translates the parsed namespace into configuration
overrides.
"""

import argparse
from typing import Any, Dict


class _IncludeFilesFlag(argparse.Action):
    """
    Store_true action for '-f' that only accepts it once, after the path.

    The command line is exactly '<path> [-f]'.
    """

    def __init__(self, option_strings, dest, default=False, required=False, help=None):
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            default=default,
            required=required,
            help=help,
        )

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, "path", None) is None:
            parser.error(f"{option_string} must follow the path")
        if getattr(namespace, self.dest, False):
            parser.error(f"{option_string} may only be given once")
        setattr(namespace, self.dest, True)


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirtree",
        usage="%(prog)s path [-f]",
        description="Print a directory hierarchy as a text tree.",
        epilog=(
            "Files are also listed without -f when the config file "
            "(~/.dirtree/config.json, or $DIRTREE_CONFIG) sets \"include_files\": true."
        ),
    )
    p.add_argument(
        "path",
        help="Root directory to display.",
    )
    p.add_argument(
        "-f",
        dest="include_files",
        action=_IncludeFilesFlag,
        help="Include regular files with their sizes "
             "(default: the config file's include_files, normally off).",
    )
    return p


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    '-f' can only switch file listing on; its absence leaves the
    configured value untouched.
    """
    overrides: Dict[str, Any] = {}
    if args.include_files:
        overrides["include_files"] = True
    return overrides
