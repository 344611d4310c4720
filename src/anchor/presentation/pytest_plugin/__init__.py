"""pytest plugin for anchor.

Provides fixtures for dependency-rule tests:
    anchor_config: Rules (nearest .anchor.yml; override in conftest.py)
    anchor_graph: ModuleGraph of the configured source directory
    anchor_checker: DependencyChecker over anchor_graph and anchor_config

Configuration (pytest.ini or pyproject.toml):
    anchor_source_dir: Source directory to analyze (default: "src")

Example:
    def test_domain_is_pure(anchor_checker):
        anchor_checker.assert_check()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.presentation.pytest_plugin.fixtures import (
    anchor_checker,
    anchor_config,
    anchor_graph,
    anchor_source_root,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "anchor_checker",
    "anchor_config",
    "anchor_graph",
    "anchor_source_root",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "anchor_source_dir",
        help="Source directory analyzed by anchor fixtures (default: src)",
        default="src",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register marker for dependency-rule tests."""
    config.addinivalue_line(
        "markers",
        "anchor: mark test as dependency-rule test",
    )
