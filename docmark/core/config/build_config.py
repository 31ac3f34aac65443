"""Build configuration for docmark.

Controls how xcodebuild is invoked and how the Swift compiler arguments are
recovered from its dry-run output.
"""

import argparse
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


class BuildConfig(BaseModel):
    """xcodebuild invocation and compiler argument extraction settings.

    Configuration can be provided via:
    - Environment variables (DOCMARK_BUILD__*)
    - CLI arguments
    - Default values
    """

    xcodebuild_path: Path = Field(
        default=Path("/usr/bin/xcodebuild"),
        description="Path to the xcodebuild executable",
    )

    build_actions: list[str] = Field(
        default_factory=lambda: ["clean", "build", "-dry-run"],
        description="Arguments appended to the user's xcodebuild arguments",
    )

    compiler_path: str = Field(
        default="/usr/bin/swiftc",
        description="Compiler executable path that starts the invocation line",
    )

    excluded_flags: list[str] = Field(
        default_factory=lambda: ["-parseable-output"],
        description="Compiler flags dropped from the extracted arguments",
    )

    argument_prefix_count: int = Field(
        default=7,
        ge=0,
        description="Number of leading compiler arguments forwarded to SourceKit",
    )

    source_suffix: str = Field(
        default=".swift",
        description="Suffix identifying source files among the arguments",
    )

    @field_validator("source_suffix")
    def validate_source_suffix(cls, v: str) -> str:
        """Reject an empty suffix, which would select every argument."""
        if not v:
            raise ValueError("source_suffix must not be empty")
        return v

    @field_validator("compiler_path")
    def validate_compiler_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("compiler_path must not be empty")
        return v

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add build-related CLI arguments."""
        parser.add_argument(
            "--xcodebuild",
            dest="xcodebuild_path",
            type=Path,
            help="xcodebuild executable (default: /usr/bin/xcodebuild)",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load build config from environment variables."""
        config: dict[str, Any] = {}
        if xcodebuild := os.getenv("DOCMARK_BUILD__XCODEBUILD_PATH"):
            config["xcodebuild_path"] = Path(xcodebuild)
        if compiler := os.getenv("DOCMARK_BUILD__COMPILER_PATH"):
            config["compiler_path"] = compiler
        if prefix := os.getenv("DOCMARK_BUILD__ARGUMENT_PREFIX_COUNT"):
            config["argument_prefix_count"] = int(prefix)
        if suffix := os.getenv("DOCMARK_BUILD__SOURCE_SUFFIX"):
            config["source_suffix"] = suffix
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract build config from CLI arguments."""
        overrides = {}
        if hasattr(args, "xcodebuild_path") and args.xcodebuild_path:
            overrides["xcodebuild_path"] = args.xcodebuild_path
        return overrides
