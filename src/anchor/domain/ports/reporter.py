"""Reporter port for check results.

Output format and destination are up to the implementation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from anchor.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Example:
        class CountReporter:
            def report(self, result: CheckResult) -> None:
                print(f"{result.violation_count} violation(s)")
    """

    def report(self, result: CheckResult) -> None:
        """Report check result."""
        ...
