"""Run `xcodebuild clean build -dry-run` and capture its output."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

from loguru import logger

from docmark.core.config.build_config import BuildConfig
from docmark.core.exceptions import BuildOutputError


def run_xcodebuild(arguments: Sequence[str], config: BuildConfig | None = None) -> str:
    """Run xcodebuild with the user's arguments plus the dry-run actions.

    Args:
        arguments: Arguments forwarded verbatim to xcodebuild
        config: Build settings (executable path and appended actions)

    Returns:
        Combined stdout and stderr of xcodebuild

    Raises:
        BuildOutputError: If xcodebuild cannot be started or its output
            cannot be decoded
    """
    config = config or BuildConfig()
    cmd = [str(config.xcodebuild_path), *arguments, *config.build_actions]
    logger.debug(f"Running {' '.join(cmd)}")

    try:
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as e:
        raise BuildOutputError(f"Xcode build output could not be read: {e}") from e

    # A failing dry run can still print the compiler invocation
    if proc.returncode != 0:
        logger.debug(f"xcodebuild exited with status {proc.returncode}")

    try:
        return proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise BuildOutputError(f"Xcode build output could not be read: {e}") from e
