"""Plain text reporter.

Writes violations grouped by subject module to any text stream. No
styling, so the output is stable for logs and CI annotations.
"""

from __future__ import annotations

import sys
from itertools import groupby
from typing import TYPE_CHECKING, TextIO

from anchor.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from anchor.domain.model.check_result import CheckResult
    from anchor.domain.model.violation import Violation

_INDENT = "  "


class PlainTextReporter(BaseReporter):
    """Plain text reporter.

    Example output:
        anchor: dependency check
          modules: 3  dependencies: 4  rules applied: 2  (0.4 ms)

        shop.domain.order
          [ERROR] domain-pure at src/shop/domain/order.py:3
            Module has transitive dependency on forbidden module ...
            expected: No dependency path to shop.infrastructure
            actual: shop.domain.order -> shop.services -> shop.infrastructure

        FAILED: 1 error(s), 0 warning(s)
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: CheckResult) -> None:
        """Report check result as plain text."""
        stats = result.stats
        self._write("anchor: dependency check")
        self._write(
            f"{_INDENT}modules: {stats.modules_analyzed}"
            f"  dependencies: {stats.dependencies_analyzed}"
            f"  rules applied: {stats.rules_applied}"
            f"  ({stats.analysis_time_ms:.1f} ms)"
        )

        # violations arrive ordered by subject
        for subject, violations in groupby(result.violations, key=lambda v: v.subject):
            self._write()
            self._write(subject)
            for violation in violations:
                self._write_violation(violation)

        self._write()
        status = "PASSED" if result.passed else "FAILED"
        self._write(f"{status}: {result.error_count} error(s), {result.warning_count} warning(s)")

    def _write(self, text: str = "") -> None:
        print(text, file=self._output)

    def _write_violation(self, violation: Violation) -> None:
        detail = _INDENT * 2
        self._write(
            f"{_INDENT}[{violation.severity.name}] {violation.rule_name} at {violation.location}"
        )
        self._write(f"{detail}{violation.message}")
        self._write(f"{detail}expected: {violation.expected}")
        self._write(f"{detail}actual: {violation.actual}")
        if violation.suggestion:
            self._write(f"{detail}suggestion: {violation.suggestion}")
