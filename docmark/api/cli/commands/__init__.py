"""docmark CLI commands."""

from .document import OracleFactory, BuildRunner, document_command, resolve_inputs

__all__ = ["BuildRunner", "OracleFactory", "document_command", "resolve_inputs"]
