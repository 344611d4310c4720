"""Module reference analyzer.

Extracts a DependencyRecord from one parsed module:
- imports (absolute and relative) are direct dependencies
- qualified names through an imported module (pkg.sub.func()) reference the
  longest prefix that is a known module of the source set, or for modules
  outside it the name up to its last attribute
- class bases resolved through imports are activations
"""

from __future__ import annotations

import ast
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from anchor.domain.exceptions.parsing import ParsingError
from anchor.domain.model.dependency_record import DependencyRecord
from anchor.domain.model.module_id import ModuleID
from anchor.infrastructure.analyzers.base import (
    DEFAULT_TYPE_CHECKING_NAMES,
    dotted_chain,
    is_type_checking_guard,
    resolve_relative_import,
    type_checking_names,
)

if TYPE_CHECKING:
    from pathlib import Path

# compiler directive, not a dependency
_FUTURE = "__future__"


class ReferenceAnalyzer:
    """Extracts module references from Python AST.

    Stateless between analyze() calls.

    Attributes:
        known_modules: Modules of the analyzed source set, used to tell
            submodules apart from attributes
        ignore_type_checking: Skip imports under `if TYPE_CHECKING:`
    """

    def __init__(
        self,
        known_modules: frozenset[ModuleID] = frozenset(),
        *,
        ignore_type_checking: bool = False,
    ) -> None:
        self.known_modules = known_modules
        self.ignore_type_checking = ignore_type_checking

    def analyze(
        self,
        tree: ast.Module,
        path: Path,
        owner: ModuleID | None,
        *,
        is_package: bool = False,
    ) -> DependencyRecord:
        """Extract dependency record of one module.

        Args:
            tree: Parsed AST module
            path: Source file path
            owner: Module the file declares, None if not importable
            is_package: File is a package __init__.py

        Returns:
            DependencyRecord for the file

        Raises:
            ParsingError: If a relative import escapes the top-level package
        """
        visitor = _ReferenceVisitor(
            path=path,
            owner=owner,
            is_package=is_package,
            known_modules=self.known_modules,
            ignore_type_checking=self.ignore_type_checking,
        )
        visitor.run(tree)

        return DependencyRecord(
            owner=owner,
            direct_dependencies=frozenset(visitor.lines),
            activations=frozenset(visitor.activations),
            path=path,
            reference_lines=MappingProxyType(dict(visitor.lines)),
        )


@dataclass(frozen=True, slots=True)
class _Binding:
    """What a local name refers to after an import.

    module: the module itself (is_module) or the module the name came from
    """

    module: ModuleID
    is_module: bool


class _ReferenceVisitor(ast.NodeVisitor):
    """Collects references, activations and first reference lines."""

    def __init__(
        self,
        *,
        path: Path,
        owner: ModuleID | None,
        is_package: bool,
        known_modules: frozenset[ModuleID],
        ignore_type_checking: bool,
    ) -> None:
        self.path = path
        self.owner = owner
        self.is_package = is_package
        self.known_modules = known_modules
        self.ignore_type_checking = ignore_type_checking

        self.bindings: dict[str, _Binding] = {}
        self.lines: dict[ModuleID, int] = {}
        self.activations: set[ModuleID] = set()
        self.guard_names = DEFAULT_TYPE_CHECKING_NAMES
        self._resolving = False

    def run(self, tree: ast.Module) -> None:
        """Two passes: bind imported names, then resolve uses of them.

        Binding first makes the record independent of where in the file
        a name is used relative to its import.
        """
        if self.ignore_type_checking:
            self.guard_names = type_checking_names(tree)
        self.visit(tree)
        self._resolving = True
        self.visit(tree)

    def visit_Import(self, node: ast.Import) -> None:
        """Handle: import a.b, import a.b as c."""
        if self._resolving:
            return
        for alias in node.names:
            module = ModuleID.parse(alias.name)
            self._reference(module, node.lineno)

            if alias.asname is not None:
                self.bindings[alias.asname] = _Binding(module, is_module=True)
            else:
                root = ModuleID(module.parts[:1])
                self.bindings[root.name] = _Binding(root, is_module=True)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        """Handle: from a import b, from . import b."""
        if self._resolving:
            return
        if node.level == 0 and node.module == _FUTURE:
            return
        if node.level == 0 and node.module is not None:
            base = ModuleID.parse(node.module)
        elif self.owner is None:
            # relative import without a package to anchor it
            return
        else:
            base = self._resolve_relative(node, self.owner)

        self._reference(base, node.lineno)

        for alias in node.names:
            if alias.name == "*":
                continue

            local = alias.asname or alias.name
            candidate = base.child(alias.name)

            if candidate in self.known_modules:
                self._reference(candidate, node.lineno)
                self.bindings[local] = _Binding(candidate, is_module=True)
            else:
                self.bindings[local] = _Binding(base, is_module=False)

    def visit_Attribute(self, node: ast.Attribute) -> None:
        """Handle qualified references: alias.sub.name."""
        if not self._resolving:
            return

        chain = dotted_chain(node)
        if chain is None:
            self.generic_visit(node)
            return

        module = self._module_of_chain(chain)
        if module is not None:
            self._reference(module, node.lineno)
        # chain is only Attribute/Name nodes, nothing left to visit

    def visit_ClassDef(self, node: ast.ClassDef) -> None:
        """Record modules whose classes this class extends."""
        if self._resolving:
            for base in node.bases:
                module = self._module_of_base(base)
                if module is None or module == self.owner:
                    continue
                self._reference(module, base.lineno)
                self.activations.add(module)

        self.generic_visit(node)

    def visit_If(self, node: ast.If) -> None:
        """Skip TYPE_CHECKING bodies when configured to."""
        if self.ignore_type_checking and is_type_checking_guard(node, self.guard_names):
            for stmt in node.orelse:
                self.visit(stmt)
            return

        self.generic_visit(node)

    def _resolve_relative(self, node: ast.ImportFrom, owner: ModuleID) -> ModuleID:
        """Resolve relative ImportFrom target against owner."""
        try:
            return resolve_relative_import(
                node.module,
                node.level,
                owner,
                is_package=self.is_package,
            )
        except ValueError as e:
            raise ParsingError(self.path, f"line {node.lineno}: {e}") from e

    def _module_of_chain(self, chain: tuple[str, ...]) -> ModuleID | None:
        """Module named by a chain rooted at an imported module.

        Inside the source set this is the longest known module prefix.
        Outside it, submodules cannot be told apart from attributes, so the
        chain up to its last attribute is taken as the module:
        sqlalchemy.orm.Session → sqlalchemy.orm.
        """
        binding = self.bindings.get(chain[0])
        if binding is None or not binding.is_module:
            return None

        parts = (*binding.module.parts, *chain[1:])
        for end in range(len(parts), len(binding.module.parts), -1):
            candidate = ModuleID(parts[:end])
            if candidate in self.known_modules:
                return candidate

        if binding.module in self.known_modules or len(chain) == 1:
            return binding.module
        return ModuleID(parts[:-1])

    def _module_of_base(self, base: ast.expr) -> ModuleID | None:
        """Module a class base comes from, None if defined locally."""
        if isinstance(base, ast.Subscript):
            # Generic[T], Base[int]
            return self._module_of_base(base.value)

        chain = dotted_chain(base)
        if chain is None:
            return None

        binding = self.bindings.get(chain[0])
        if binding is None:
            return None
        if len(chain) == 1 or not binding.is_module:
            return binding.module

        return self._module_of_chain(chain)

    def _reference(self, module: ModuleID, line: int) -> None:
        """Record reference, keeping the first line."""
        if module == self.owner:
            return
        known = self.lines.get(module)
        if known is None or line < known:
            self.lines[module] = line
