"""AST-based source parser adapter.

Implements SourceParserPort using Python AST.
Discovers every .py file under the source root, computes the module each
declares, and extracts one DependencyRecord per file.

FAIL-FIRST: raises ParsingError on unreadable files and syntax errors.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from anchor.domain.exceptions.parsing import ParsingError
from anchor.domain.model.configuration import DEFAULT_EXCLUDES
from anchor.domain.ports.source_parser import SourceParserPort
from anchor.infrastructure.analyzers.base import is_package_file, module_id_for
from anchor.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.module_id import ModuleID


class ASTSourceParser(SourceParserPort):
    """Parser using Python AST to extract module references.

    Stateless between parse_file() calls.
    """

    def __init__(
        self,
        root_path: Path,
        *,
        exclude: frozenset[str] = DEFAULT_EXCLUDES,
        ignore_type_checking: bool = False,
    ) -> None:
        """Initialize parser.

        Args:
            root_path: Directory holding the top-level packages
            exclude: Directory names to skip
            ignore_type_checking: Skip imports under `if TYPE_CHECKING:`

        Raises:
            TypeError: If root_path is None
            ValueError: If root_path is not a directory
        """
        if root_path is None:
            raise TypeError("root_path must not be None")
        if not root_path.is_dir():
            raise ValueError(f"root_path must be a directory: {root_path}")

        self._root_path = root_path
        self._exclude = exclude
        self._ignore_type_checking = ignore_type_checking

    @property
    def root_path(self) -> Path:
        """Source root."""
        return self._root_path

    def discover_sources(self) -> tuple[Path, ...]:
        """Find all .py files under root, skipping excluded directories.

        Returns:
            Paths sorted for deterministic processing
        """
        return tuple(sorted(_find_python_files(self._root_path, self._exclude)))

    def parse_file(
        self,
        path: Path,
        known_modules: frozenset[ModuleID] = frozenset(),
    ) -> DependencyRecord:
        """Parse single file into DependencyRecord.

        Args:
            path: Path to .py file under root_path
            known_modules: Modules of the whole source set

        Returns:
            Record of the file (owner None if the path is not importable)

        Raises:
            ParsingError: Unreadable file or invalid syntax
        """
        owner = module_id_for(path, self._root_path)

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ParsingError(path, str(e)) from e

        try:
            tree = ast.parse(content, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, str(e)) from e

        analyzer = ReferenceAnalyzer(
            known_modules,
            ignore_type_checking=self._ignore_type_checking,
        )
        return analyzer.analyze(tree, path, owner, is_package=is_package_file(path))

    def parse_directory(self) -> tuple[DependencyRecord, ...]:
        """Parse every source file under root_path.

        Module names are computed for all files first, so each file knows
        which dotted names are modules of the source set.

        Returns:
            One record per file, in discovery order

        Raises:
            ParsingError: Any file unreadable or invalid
        """
        files = self.discover_sources()

        known: set[ModuleID] = set()
        for path in files:
            module = module_id_for(path, self._root_path)
            if module is not None:
                known.add(module)

        known_modules = frozenset(known)
        return tuple(self.parse_file(path, known_modules) for path in files)


def _find_python_files(root: Path, exclude: frozenset[str]) -> list[Path]:
    """Find all .py files in directory, excluding specified directories."""
    result: list[Path] = []

    for item in root.iterdir():
        if item.is_dir():
            if item.name not in exclude:
                result.extend(_find_python_files(item, exclude))
        elif item.is_file() and item.suffix == ".py":
            result.append(item)

    return result
