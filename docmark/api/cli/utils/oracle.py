"""Oracle construction for CLI commands."""

from docmark.core.config.oracle_config import OracleConfig
from docmark.interfaces.oracle_provider import OracleProvider


def create_oracle(config: OracleConfig) -> OracleProvider:
    """Create the SourceKit oracle described by the configuration.

    The library is only loaded when the oracle is initialized.
    """
    from docmark.providers.oracle.sourcekitd_provider import SourceKitdProvider

    return SourceKitdProvider(library_path=config.library_path)
