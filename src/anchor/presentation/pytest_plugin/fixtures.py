"""pytest fixtures for dependency-rule testing.

Fixtures are session scoped: the graph is built once per test session and
shared read-only by every test.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from anchor.application.services import DependencyChecker, analyze_directory
from anchor.infrastructure.adapters.yaml_config import find_config, load_config

if TYPE_CHECKING:
    from anchor.domain.model.configuration import DependencyConfig
    from anchor.domain.model.module_graph import ModuleGraph


@pytest.fixture(scope="session")
def anchor_source_root(request: pytest.FixtureRequest) -> Path:
    """Source directory from the anchor_source_dir ini option.

    Raises:
        FileNotFoundError: If the directory does not exist
    """
    root_dir = Path(str(request.config.rootpath))
    source_dir = str(request.config.getini("anchor_source_dir") or "src")
    source_path = root_dir / source_dir

    if not source_path.is_dir():
        raise FileNotFoundError(
            f"anchor_source_dir '{source_path}' does not exist. "
            f"Configure anchor_source_dir in pytest.ini or pyproject.toml."
        )

    return source_path


@pytest.fixture(scope="session")
def anchor_config(request: pytest.FixtureRequest) -> DependencyConfig:
    """Configuration from the nearest .anchor.yml above the rootdir.

    Override in conftest.py to define rules in Python instead.
    """
    return load_config(find_config(Path(str(request.config.rootpath))))


@pytest.fixture(scope="session")
def anchor_graph(anchor_source_root: Path, anchor_config: DependencyConfig) -> ModuleGraph:
    """Module graph of the source directory, built once per session."""
    return analyze_directory(anchor_source_root, anchor_config)


@pytest.fixture(scope="session")
def anchor_checker(
    anchor_source_root: Path,
    anchor_graph: ModuleGraph,
    anchor_config: DependencyConfig,
) -> DependencyChecker:
    """DependencyChecker running every configured rule."""
    return DependencyChecker.from_config(
        anchor_graph,
        anchor_config,
        source_root=anchor_source_root,
    )
