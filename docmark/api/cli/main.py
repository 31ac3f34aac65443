"""docmark CLI entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from docmark.core.config.config import Config
from docmark.core.exceptions import (
    CliUsageError,
    CompilerArgumentsNotFoundError,
    DocmarkError,
)
from docmark.services.build_runner import run_xcodebuild

from .commands.document import BuildRunner, OracleFactory, document_command
from .parsers.document_parser import parse_cli_args
from .utils.logging import setup_logging
from .utils.oracle import create_oracle


def run(
    argv: Sequence[str] | None = None,
    oracle_factory: OracleFactory = create_oracle,
    build_runner: BuildRunner = run_xcodebuild,
) -> int:
    """Run docmark and return the process exit status."""
    try:
        args, passthrough = parse_cli_args(argv)
    except CliUsageError as e:
        setup_logging()
        logger.error(f"docmark: {e}")
        return 1
    setup_logging(verbose=args.verbose)

    try:
        config = Config.load(args)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        logger.error(f"Invalid configuration for {location}: {first['msg']}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    if config.verbose and not args.verbose:
        setup_logging(verbose=True)

    try:
        output = document_command(
            args, passthrough, config, oracle_factory, build_runner
        )
    except CompilerArgumentsNotFoundError as e:
        logger.debug(f"xcodebuild output:\n{e.build_output}")
        logger.error(str(e))
        return 1
    except DocmarkError as e:
        logger.error(str(e))
        return 1

    sys.stdout.write(output + "\n")
    sys.stdout.flush()
    return 0


def main() -> None:
    """Entry point for the docmark console script."""
    raise SystemExit(run())


if __name__ == "__main__":
    main()
