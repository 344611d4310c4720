"""Reporter base class.

Reporters receive the finished CheckResult of a run. DependencyChecker calls
them once per check(); they never influence the result.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from anchor.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Abstract reporter satisfying ReporterProtocol.

    Example:
        class ExitCodeReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                self.failed = not result.passed
    """

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Render one run's result.

        Args:
            result: Violations and stats of the run
        """
