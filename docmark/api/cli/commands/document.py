"""Document command: resolve compiler arguments and print the documentation."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from loguru import logger
from rich.console import Console
from rich.progress import Progress

from docmark.core.config.build_config import BuildConfig
from docmark.core.config.config import Config
from docmark.core.config.oracle_config import OracleConfig
from docmark.core.exceptions import CompilerArgumentsNotFoundError
from docmark.interfaces.oracle_provider import OracleProvider
from docmark.parsers.compiler_arguments import (
    extract_compiler_arguments,
    swift_files_from,
)
from docmark.services.build_runner import run_xcodebuild
from docmark.services.documentation_service import DocumentationService

OracleFactory = Callable[[OracleConfig], OracleProvider]
BuildRunner = Callable[[Sequence[str], BuildConfig], str]


def resolve_inputs(
    skip_xcodebuild: bool,
    passthrough: Sequence[str],
    config: BuildConfig,
    build_runner: BuildRunner = run_xcodebuild,
) -> tuple[list[str], list[str]]:
    """Return (files, compiler arguments) for the documentation run.

    With skip_xcodebuild the pass-through arguments are the compiler
    arguments. Otherwise xcodebuild is dry-run and only a fixed prefix of the
    extracted arguments plus the source files is kept, which is enough for
    SourceKit on typical projects and noticeably faster.

    Raises:
        BuildOutputError: If xcodebuild output is unusable
    """
    if skip_xcodebuild:
        arguments = list(passthrough)
        return swift_files_from(arguments, config.source_suffix), arguments

    output = build_runner(passthrough, config)
    extracted = extract_compiler_arguments(
        output, config.compiler_path, config.excluded_flags
    )
    if extracted is None:
        raise CompilerArgumentsNotFoundError(output)

    files = swift_files_from(extracted, config.source_suffix)
    arguments = [*extracted[: config.argument_prefix_count], *files]
    logger.debug(f"Extracted {len(extracted)} compiler arguments, {len(files)} files")
    return files, arguments


def document_command(
    args: argparse.Namespace,
    passthrough: Sequence[str],
    config: Config,
    oracle_factory: OracleFactory,
    build_runner: BuildRunner = run_xcodebuild,
) -> str:
    """Run one documentation pass and return the serialized document."""
    files, arguments = resolve_inputs(
        bool(getattr(args, "skip_xcodebuild", False)),
        passthrough,
        config.build,
        build_runner,
    )
    if not files:
        logger.debug("No Swift files found in the compiler arguments")

    oracle = oracle_factory(config.oracle)
    try:
        if config.progress:
            console = Console(stderr=True)
            with Progress(console=console, transient=True) as progress:
                service = DocumentationService(oracle, config.oracle, progress=progress)
                return service.document(files, arguments)

        service = DocumentationService(oracle, config.oracle)
        return service.document(files, arguments)
    finally:
        oracle.close()
