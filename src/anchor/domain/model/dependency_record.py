"""Per-unit dependency extraction result."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from anchor.domain.model.module_id import ModuleID


@dataclass(frozen=True, slots=True, eq=False)
class DependencyRecord:
    """Modules referenced by one source unit.

    Invariants (FAIL-FIRST):
    - owner never appears in its own direct_dependencies
    - activations ⊆ direct_dependencies
    - reference_lines keys ⊆ direct_dependencies, all lines > 0

    Attributes:
        owner: Module declared by the unit, None if the unit declares none
        direct_dependencies: Modules referenced anywhere in the unit
        activations: Modules the owner adopts (subclasses from)
        path: Source file the record was extracted from
        reference_lines: Dependency → first line it is referenced on
    """

    owner: ModuleID | None
    direct_dependencies: frozenset[ModuleID]
    activations: frozenset[ModuleID] = frozenset()
    path: Path | None = None
    reference_lines: Mapping[ModuleID, int] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.direct_dependencies, frozenset):
            raise TypeError("direct_dependencies must be frozenset")
        if not isinstance(self.activations, frozenset):
            raise TypeError("activations must be frozenset")

        if self.owner is not None and self.owner in self.direct_dependencies:
            raise ValueError(f"module '{self.owner}' must not depend on itself")

        stray = self.activations - self.direct_dependencies
        if stray:
            names = sorted(str(m) for m in stray)
            raise ValueError(f"activations {names} are not direct dependencies")

        for module, line in self.reference_lines.items():
            if module not in self.direct_dependencies:
                raise ValueError(f"reference line for '{module}' which is not a dependency")
            if line <= 0:
                raise ValueError(f"line must be > 0, got {line} for '{module}'")

    def line_of(self, module: ModuleID) -> int | None:
        """First line referencing module, None if unknown."""
        return self.reference_lines.get(module)

    def depends_on(self, module: ModuleID) -> bool:
        """Check if module is a direct dependency. O(1)."""
        return module in self.direct_dependencies

    def activates(self, module: ModuleID) -> bool:
        """Check if module is an activation. O(1)."""
        return module in self.activations
