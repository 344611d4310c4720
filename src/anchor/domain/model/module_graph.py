"""Whole-program module dependency graph."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.module_id import ModuleID


@dataclass(frozen=True, slots=True, eq=False)
class ModuleGraph:
    """Module dependencies of one analysis run.

    Nodes: module ids
    Edges: A → B means module A references module B

    Edge targets that are not keys are external leaves (third-party or
    stdlib modules outside the analyzed source set) with no outgoing edges.

    Invariants (FAIL-FIRST):
    - records[m].owner == m for every key m

    Attributes:
        records: Module → record it was extracted from
    """

    records: Mapping[ModuleID, DependencyRecord]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for module, record in self.records.items():
            if record.owner != module:
                raise ValueError(f"record for '{module}' is owned by '{record.owner}'")

    def record_of(self, module: ModuleID) -> DependencyRecord | None:
        """Get record of module, None for external modules. O(1)."""
        return self.records.get(module)

    def dependencies_of(self, module: ModuleID) -> frozenset[ModuleID]:
        """Get direct dependencies. Empty for external modules. O(1)."""
        record = self.records.get(module)
        if record is None:
            return frozenset()
        return record.direct_dependencies

    def activations_of(self, module: ModuleID) -> frozenset[ModuleID]:
        """Get activations. Empty for external modules. O(1)."""
        record = self.records.get(module)
        if record is None:
            return frozenset()
        return record.activations

    def has_module(self, module: ModuleID) -> bool:
        """Check if module was analyzed. O(1)."""
        return module in self.records

    def has_dependency(self, from_module: ModuleID, to_module: ModuleID) -> bool:
        """Check if from_module directly references to_module. O(1)."""
        return to_module in self.dependencies_of(from_module)

    def is_external(self, module: ModuleID) -> bool:
        """Check if module is outside the analyzed source set."""
        return module not in self.records

    @property
    def modules(self) -> frozenset[ModuleID]:
        """All analyzed modules."""
        return frozenset(self.records)

    @property
    def module_count(self) -> int:
        """Number of analyzed modules."""
        return len(self.records)

    @property
    def dependency_count(self) -> int:
        """Total number of dependency edges."""
        return sum(len(r.direct_dependencies) for r in self.records.values())

    @classmethod
    def build(cls, records: Iterable[DependencyRecord]) -> ModuleGraph:
        """Build graph from per-unit records.

        Records without an owner are skipped. When several records share an
        owner the last one in iteration order wins. Never fails.

        Args:
            records: One record per source unit, any order

        Returns:
            ModuleGraph keyed by record owner

        Time: O(N) where N=records
        """
        by_owner: dict[ModuleID, DependencyRecord] = {}
        for record in records:
            if record.owner is None:
                continue
            by_owner[record.owner] = record
        return cls(records=MappingProxyType(by_owner))

    @classmethod
    def empty(cls) -> ModuleGraph:
        """Create empty graph."""
        return cls(records=MappingProxyType({}))
