"""Top-level docmark configuration.

Precedence, lowest to highest: defaults, environment variables, CLI arguments.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

from .build_config import BuildConfig
from .oracle_config import OracleConfig


def _env_true(val: str | None) -> bool:
    if not val:
        return False
    return str(val).strip().lower() in ("1", "true", "yes", "on")


class Config(BaseModel):
    """Aggregated configuration for one docmark run."""

    build: BuildConfig = Field(default_factory=BuildConfig)
    oracle: OracleConfig = Field(default_factory=OracleConfig)
    verbose: bool = Field(default=False, description="Enable debug logging")
    progress: bool = Field(
        default=False, description="Show a progress bar on stderr"
    )

    @classmethod
    def load(cls, args: Any | None = None) -> Config:
        """Build a config from the environment, then apply CLI overrides."""
        build: dict[str, Any] = BuildConfig.load_from_env()
        oracle: dict[str, Any] = OracleConfig.load_from_env()
        verbose = _env_true(os.getenv("DOCMARK_DEBUG"))
        progress = _env_true(os.getenv("DOCMARK_PROGRESS"))

        if args is not None:
            build.update(BuildConfig.extract_cli_overrides(args))
            oracle.update(OracleConfig.extract_cli_overrides(args))
            verbose = verbose or bool(getattr(args, "verbose", False))
            progress = progress or bool(getattr(args, "progress", False))

        return cls(
            build=BuildConfig(**build),
            oracle=OracleConfig(**oracle),
            verbose=verbose,
            progress=progress,
        )
