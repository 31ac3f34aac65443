"""Configuration models for docmark."""

from .build_config import BuildConfig
from .config import Config
from .oracle_config import OracleConfig

__all__ = ["BuildConfig", "Config", "OracleConfig"]
