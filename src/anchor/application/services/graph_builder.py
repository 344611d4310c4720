"""Graph construction service: source tree → ModuleGraph.

The graph is built once per analysis run and shared read-only by every
check of that run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.domain.model.module_graph import ModuleGraph
from anchor.infrastructure.adapters.ast_parser import ASTSourceParser

if TYPE_CHECKING:
    from pathlib import Path

    from anchor.domain.model.configuration import DependencyConfig
    from anchor.domain.ports.source_parser import SourceParserPort


def build_graph(parser: SourceParserPort) -> ModuleGraph:
    """Build module graph from every unit the parser extracts.

    Raises:
        ParsingError: Any source file cannot be parsed
    """
    return ModuleGraph.build(parser.parse_directory())


def analyze_directory(root_path: Path, config: DependencyConfig) -> ModuleGraph:
    """Parse source tree with the AST parser and build its module graph.

    Args:
        root_path: Directory holding the top-level packages
        config: Supplies exclude list and TYPE_CHECKING policy

    Returns:
        ModuleGraph of the source tree

    Raises:
        ParsingError: Any source file cannot be parsed
    """
    parser = ASTSourceParser(
        root_path,
        exclude=config.exclude,
        ignore_type_checking=config.ignore_type_checking,
    )
    return build_graph(parser)
