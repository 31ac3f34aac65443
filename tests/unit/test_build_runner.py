"""Tests for running xcodebuild and capturing its output."""

import os
import sys
from pathlib import Path

import pytest

from docmark.core.config.build_config import BuildConfig
from docmark.core.exceptions import BuildOutputError
from docmark.services.build_runner import run_xcodebuild

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="uses a shell script")


def _fake_xcodebuild(tmp_path: Path, body: str) -> Path:
    script = tmp_path / "xcodebuild"
    script.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    os.chmod(script, 0o755)
    return script


def test_forwards_arguments_and_merges_streams(tmp_path: Path):
    script = _fake_xcodebuild(
        tmp_path,
        'echo "args: $*"\n'
        'echo "warning: on stderr" >&2\n'
        "exit 65\n",
    )

    output = run_xcodebuild(["-scheme", "App"], BuildConfig(xcodebuild_path=script))

    assert "args: -scheme App clean build -dry-run" in output
    assert "warning: on stderr" in output


def test_missing_executable_is_fatal(tmp_path: Path):
    config = BuildConfig(xcodebuild_path=tmp_path / "no-such-xcodebuild")
    with pytest.raises(BuildOutputError, match="could not be read"):
        run_xcodebuild([], config)


def test_undecodable_output_is_fatal(tmp_path: Path):
    script = _fake_xcodebuild(tmp_path, "printf '\\377\\376'\n")
    with pytest.raises(BuildOutputError, match="could not be read"):
        run_xcodebuild([], BuildConfig(xcodebuild_path=script))
