"""Application services."""

from anchor.application.services.checker import DependencyChecker
from anchor.application.services.graph_builder import analyze_directory, build_graph

__all__ = [
    "DependencyChecker",
    "analyze_directory",
    "build_graph",
]
