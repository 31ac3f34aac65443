"""Document command argument parser for docmark CLI.

docmark only recognizes its own long options. Every other token is kept, in
order, and forwarded either to xcodebuild or, with --skip-xcodebuild, to
SourceKit as compiler arguments.
"""

import argparse
from collections.abc import Sequence
from typing import NoReturn

from docmark.core.config.build_config import BuildConfig
from docmark.core.config.oracle_config import OracleConfig
from docmark.core.exceptions import CliUsageError
from docmark.version import __version__


class _DocmarkArgumentParser(argparse.ArgumentParser):
    """Report malformed options to the caller instead of exiting with usage."""

    def error(self, message: str) -> NoReturn:
        raise CliUsageError(message)


def create_parser() -> argparse.ArgumentParser:
    parser = _DocmarkArgumentParser(
        prog="docmark",
        allow_abbrev=False,
        add_help=False,
        description=(
            "Print XML documentation for a Swift project, combining "
            "'// MARK:' sections with SourceKit symbol documentation.\n"
            "Unrecognized arguments are passed to xcodebuild, or used as "
            "compiler arguments with --skip-xcodebuild."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # No -h: single-dash xcodebuild flags such as -hideShellScriptEnvironment
    # would be read as -h with an attached value
    parser.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit",
    )

    parser.add_argument(
        "--skip-xcodebuild",
        action="store_true",
        help="Use the remaining arguments as compiler arguments instead of running xcodebuild",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"docmark {__version__}",
    )

    BuildConfig.add_cli_arguments(parser)
    OracleConfig.add_cli_arguments(parser)

    return parser


def parse_cli_args(
    argv: Sequence[str] | None = None,
) -> tuple[argparse.Namespace, list[str]]:
    """Split argv into docmark options and pass-through arguments."""
    parser = create_parser()
    return parser.parse_known_args(list(argv) if argv is not None else None)


__all__: list[str] = ["create_parser", "parse_cli_args"]
