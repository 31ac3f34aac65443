"""Documentation oracle configuration for docmark."""

import argparse
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

ProbeStrategy = Literal["character", "identifier"]


class OracleConfig(BaseModel):
    """SourceKit oracle settings.

    Configuration can be provided via:
    - Environment variables (DOCMARK_ORACLE__*)
    - CLI arguments
    - Default values
    """

    library_path: Path | None = Field(
        default=None,
        description="Path to the sourcekitd library (default: platform lookup)",
    )

    probe_strategy: ProbeStrategy = Field(
        default="character",
        description=(
            "Offsets probed inside a candidate range: every character "
            "(character) or only identifier starts (identifier)"
        ),
    )

    @field_validator("library_path")
    def validate_library_path(cls, v: Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if v is not None and not isinstance(v, Path):
            return Path(v)
        return v

    @field_validator("probe_strategy")
    def validate_probe_strategy(cls, v: str) -> str:
        valid = ["character", "identifier"]
        if v not in valid:
            raise ValueError(f"Invalid probe strategy: {v}. Must be one of {valid}")
        return v

    @classmethod
    def add_cli_arguments(cls, parser: argparse.ArgumentParser) -> None:
        """Add oracle-related CLI arguments."""
        parser.add_argument(
            "--sourcekitd",
            dest="sourcekitd_path",
            type=Path,
            help="Path to the sourcekitd library",
        )
        parser.add_argument(
            "--probe-strategy",
            choices=["character", "identifier"],
            help="Offsets to query inside each candidate range (default: character)",
        )

    @classmethod
    def load_from_env(cls) -> dict[str, Any]:
        """Load oracle config from environment variables."""
        config: dict[str, Any] = {}
        if library := os.getenv("DOCMARK_ORACLE__LIBRARY_PATH"):
            config["library_path"] = Path(library)
        if strategy := os.getenv("DOCMARK_ORACLE__PROBE_STRATEGY"):
            config["probe_strategy"] = strategy
        return config

    @classmethod
    def extract_cli_overrides(cls, args: Any) -> dict[str, Any]:
        """Extract oracle config from CLI arguments."""
        overrides = {}
        if hasattr(args, "sourcekitd_path") and args.sourcekitd_path:
            overrides["library_path"] = args.sourcekitd_path
        if hasattr(args, "probe_strategy") and args.probe_strategy:
            overrides["probe_strategy"] = args.probe_strategy
        return overrides

    def __repr__(self) -> str:
        return (
            f"OracleConfig(library_path={self.library_path}, "
            f"probe_strategy={self.probe_strategy})"
        )
