"""Forbidden direct dependency check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.application.checks._base import BaseCheck, CheckContext, location_of, subject_of
from anchor.domain.model.enums import RuleType
from anchor.domain.model.violation import Violation

if TYPE_CHECKING:
    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.rule import DependencyRule


class NoDirectDependencyCheck(BaseCheck):
    """Subjects must not reference forbidden modules directly.

    One violation per (forbidden module, matching dependency), located at
    the first line referencing the dependency.
    """

    rule_type = RuleType.NO_DIRECT_DEPENDENCY

    def check(
        self,
        record: DependencyRecord,
        rules: tuple[DependencyRule, ...],
        context: CheckContext,
    ) -> tuple[Violation, ...]:
        subject = subject_of(record)
        violations: list[Violation] = []

        for rule in rules:
            for forbidden, dep in rule.forbidden_in(record.direct_dependencies):
                violations.append(
                    Violation(
                        rule_name=rule.rule_name,
                        message=f"Module has forbidden direct dependency on {dep}",
                        location=location_of(record, dep),
                        severity=rule.severity,
                        category=rule.category,
                        subject=str(subject),
                        expected=f"No dependency on {forbidden}",
                        actual=f"Imports {dep}",
                        chain=(subject, dep),
                        suggestion="Remove the reference or move the code to a layer allowed to use it",
                    )
                )

        return tuple(violations)
