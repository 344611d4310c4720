"""Domain ports (interfaces for external dependencies)."""

from anchor.domain.ports.reporter import ReporterProtocol
from anchor.domain.ports.source_parser import SourceParserPort

__all__ = [
    "SourceParserPort",
    "ReporterProtocol",
]
