"""Abstract interfaces implemented by docmark providers."""

from .oracle_provider import OracleProvider, OracleResponse

__all__ = ["OracleProvider", "OracleResponse"]
