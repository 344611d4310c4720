"""AST analyzers for reference extraction."""

from anchor.infrastructure.analyzers.base import (
    dotted_chain,
    is_package_file,
    is_type_checking_guard,
    module_id_for,
    resolve_relative_import,
)
from anchor.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer

__all__ = [
    "ReferenceAnalyzer",
    "module_id_for",
    "is_package_file",
    "resolve_relative_import",
    "dotted_chain",
    "is_type_checking_guard",
]
