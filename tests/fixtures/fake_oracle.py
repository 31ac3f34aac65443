"""Scripted documentation oracle for tests."""

from __future__ import annotations

from collections.abc import Sequence

from docmark.interfaces.oracle_provider import OracleProvider, OracleResponse


def doc_xml(name: str, file: str) -> str:
    """Build a cursor-info style documentation blob attributed to `file`."""
    return (
        f'<Class file="{file}" line="1" column="1"><Name>{name}</Name>'
        f"<Abstract><Para>{name} docs</Para></Abstract></Class>"
    )


class FakeOracle(OracleProvider):
    """Answers from a table keyed by (file, offset); errors elsewhere."""

    def __init__(
        self,
        responses: dict[tuple[str, int], OracleResponse] | None = None,
        offset_encoding: str | None = None,
    ) -> None:
        self.responses = dict(responses or {})
        self.offset_encoding = offset_encoding
        self.initialize_calls = 0
        self.closed = False
        self.queries: list[tuple[int, str, tuple[str, ...]]] = []

    def initialize(self) -> None:
        self.initialize_calls += 1

    def query(
        self, offset: int, file: str, arguments: Sequence[str]
    ) -> OracleResponse:
        self.queries.append((offset, file, tuple(arguments)))
        return self.responses.get((file, offset), OracleResponse.error())

    def close(self) -> None:
        self.closed = True

    def queried_offsets(self, file: str) -> list[int]:
        return [offset for offset, queried_file, _ in self.queries if queried_file == file]
