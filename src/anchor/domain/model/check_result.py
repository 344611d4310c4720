"""Check result aggregate."""

from dataclasses import dataclass

from anchor.domain.model.check_stats import CheckStats
from anchor.domain.model.enums import Severity
from anchor.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of one dependency check run.

    Attributes:
        violations: All violations found, ordered by subject module
        stats: Run statistics
    """

    violations: tuple[Violation, ...]
    stats: CheckStats

    @property
    def passed(self) -> bool:
        """Check if run passed (no ERROR violations)."""
        return self.error_count == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity violations."""
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)

    @classmethod
    def empty(cls) -> "CheckResult":
        """Create empty result (passed, no violations)."""
        return cls(violations=(), stats=CheckStats.empty())
