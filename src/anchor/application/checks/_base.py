"""Base class for dependency checks.

Defines the interface every check implements and the helpers they share.
Concrete checks inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from anchor.domain.model.location import Location
from anchor.domain.model.reachability import ClosureCache

if TYPE_CHECKING:
    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.enums import RuleType
    from anchor.domain.model.module_graph import ModuleGraph
    from anchor.domain.model.module_id import ModuleID
    from anchor.domain.model.rule import DependencyRule
    from anchor.domain.model.violation import Violation

_UNKNOWN_FILE = Path("<unknown>")


@dataclass(frozen=True, slots=True)
class CheckContext:
    """Run-scoped, read-only state shared by every check of one run.

    Attributes:
        graph: Module graph built once for the run
        closures: Transitive closures memoized for the run
    """

    graph: ModuleGraph
    closures: ClosureCache

    @classmethod
    def for_graph(cls, graph: ModuleGraph) -> CheckContext:
        """Create fresh context for one run over graph."""
        return cls(graph=graph, closures=ClosureCache(graph))


class BaseCheck(ABC):
    """Base class for checks.

    Concrete checks must:
    1. Set `rule_type` class attribute
    2. Implement `check()`

    Example:
        class NoSelfishImports(BaseCheck):
            rule_type = RuleType.NO_DIRECT_DEPENDENCY

            def check(self, record, rules, context):
                return ()
    """

    rule_type: ClassVar[RuleType]
    """Rules of this type are handed to check()."""

    @abstractmethod
    def check(
        self,
        record: DependencyRecord,
        rules: tuple[DependencyRule, ...],
        context: CheckContext,
    ) -> tuple[Violation, ...]:
        """Check one subject module against its applicable rules.

        Args:
            record: Record of the subject module (owner is set)
            rules: Rules of this check's type that apply to the subject
            context: Run-scoped graph and closure cache

        Returns:
            Tuple of violations found (empty if valid)
        """


def subject_of(record: DependencyRecord) -> ModuleID:
    """Owner of a record that is in a graph. FAIL-FIRST on ownerless records."""
    if record.owner is None:
        raise ValueError("record without owner cannot be a check subject")
    return record.owner


def location_of(record: DependencyRecord, module: ModuleID | None = None) -> Location:
    """Location of the first reference to module, or of the file start."""
    file = record.path if record.path is not None else _UNKNOWN_FILE
    line = record.line_of(module) if module is not None else None
    return Location(file=file, line=line or 1)
