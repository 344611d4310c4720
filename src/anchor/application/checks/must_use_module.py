"""Required module adoption check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.application.checks._base import BaseCheck, CheckContext, location_of, subject_of
from anchor.domain.model.enums import RuleType
from anchor.domain.model.violation import Violation

if TYPE_CHECKING:
    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.rule import DependencyRule


class MustUseModuleCheck(BaseCheck):
    """Subjects must activate (subclass from) every required module."""

    rule_type = RuleType.MUST_USE_MODULE

    def check(
        self,
        record: DependencyRecord,
        rules: tuple[DependencyRule, ...],
        context: CheckContext,
    ) -> tuple[Violation, ...]:
        subject = subject_of(record)
        activated = sorted(str(m) for m in record.activations)
        violations: list[Violation] = []

        for rule in rules:
            for required in rule.missing_from(record.activations):
                violations.append(
                    Violation(
                        rule_name=rule.rule_name,
                        message=f"Module must use {required}",
                        location=location_of(record),
                        severity=rule.severity,
                        category=rule.category,
                        subject=str(subject),
                        expected=f"A class extending a class from {required}",
                        actual=f"Uses: {activated}" if activated else "Uses no module",
                        suggestion=f"Subclass a base class provided by {required}",
                    )
                )

        return tuple(violations)
