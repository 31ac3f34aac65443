"""Documentation oracle interface.

An oracle answers "what is documented at this offset of this file?" given the
compiler arguments of the module the file belongs to. Queries are blocking and
issued one at a time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class OracleResponse:
    """Result of one oracle query.

    `xml` is None when the query failed or nothing is documented at the offset.
    """

    is_error: bool
    xml: str | None = None

    @classmethod
    def error(cls) -> OracleResponse:
        return cls(is_error=True)

    @classmethod
    def documentation(cls, xml: str | None) -> OracleResponse:
        return cls(is_error=False, xml=xml)


class OracleProvider(ABC):
    """Base class for documentation oracles.

    Subclasses must implement:
    - initialize(): one-time process-wide setup, called before the first query
    - query(): one blocking documentation lookup
    """

    # Unit of the offsets the oracle expects. None means Python string
    # indices; otherwise the name of the codec whose byte offsets are used.
    offset_encoding: str | None = None

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the oracle. Called exactly once per run."""

    @abstractmethod
    def query(
        self, offset: int, file: str, arguments: Sequence[str]
    ) -> OracleResponse:
        """Return the documentation at `offset` of `file`."""

    def close(self) -> None:
        """Release oracle resources. The default does nothing."""
        return None
