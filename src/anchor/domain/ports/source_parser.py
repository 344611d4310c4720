"""Source parser port.

The graph engine never parses source itself. A parser turns a source tree
into one DependencyRecord per unit; the engine consumes the records.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pathlib import Path

    from anchor.domain.model.dependency_record import DependencyRecord


class SourceParserPort(Protocol):
    """Contract for reference extraction over a source tree."""

    @property
    def root_path(self) -> Path:
        """Source root module names are computed against."""
        ...

    def parse_file(self, path: Path) -> DependencyRecord:
        """Extract record of one source file.

        Raises:
            ParsingError: If the file cannot be read or parsed
        """
        ...

    def parse_directory(self) -> tuple[DependencyRecord, ...]:
        """Extract records of every source file under root_path.

        Raises:
            ParsingError: If any file cannot be read or parsed
        """
        ...
