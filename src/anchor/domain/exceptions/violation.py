"""Raised when a run breaks dependency rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.domain.exceptions.base import AnchorError

if TYPE_CHECKING:
    from anchor.domain.model.violation import Violation


class ArchitectureViolationError(AnchorError):
    """Run finished with ERROR violations.

    Raised by DependencyChecker.assert_check(), so a dependency rule can
    fail a pytest test directly.

    Attributes:
        violations: Every violation of the run, warnings included
    """

    def __init__(self, violations: tuple[Violation, ...]) -> None:
        if not violations:
            raise ValueError("ArchitectureViolationError requires at least one violation")
        self.violations = violations
        body = "\n".join(str(v) for v in violations)
        super().__init__(f"Found {len(violations)} dependency violation(s):\n{body}")
