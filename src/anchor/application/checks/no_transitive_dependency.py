"""Forbidden transitive dependency check.

A subject violates the rule when a forbidden module is reachable from it
through any chain of references. The subject itself is excluded from its
own closure before matching.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.application.checks._base import BaseCheck, CheckContext, location_of, subject_of
from anchor.domain.model.enums import RuleType
from anchor.domain.model.reachability import find_path
from anchor.domain.model.violation import Violation

if TYPE_CHECKING:
    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.module_id import ModuleID
    from anchor.domain.model.rule import DependencyRule

CHAIN_SEPARATOR = " -> "


def format_chain(chain: tuple[ModuleID, ...] | None) -> str:
    """Render chain for messages.

    Chains of two modules or fewer say nothing a direct dependency would
    not, so they render empty.

    Examples:
        (a, b, c) → " (dependency chain: a -> b -> c)"
        (a, b) → ""
    """
    if chain is None or len(chain) <= 2:
        return ""
    return f" (dependency chain: {CHAIN_SEPARATOR.join(str(m) for m in chain)})"


class NoTransitiveDependencyCheck(BaseCheck):
    """Subjects must not reach forbidden modules through any chain.

    Closures come from the run's ClosureCache, so a subject checked by
    several rules is resolved once. One violation per forbidden module; it
    carries a witness chain and is located at the subject's reference to
    the first hop.
    """

    rule_type = RuleType.NO_TRANSITIVE_DEPENDENCY

    def check(
        self,
        record: DependencyRecord,
        rules: tuple[DependencyRule, ...],
        context: CheckContext,
    ) -> tuple[Violation, ...]:
        subject = subject_of(record)
        reachable = context.closures.dependencies_of(subject)
        violations: list[Violation] = []

        for rule in rules:
            reported: set[ModuleID] = set()
            for forbidden, dep in rule.forbidden_in(reachable):
                # one witness per forbidden module: the first match in sorted order
                if forbidden in reported:
                    continue
                reported.add(forbidden)

                chain = find_path(context.graph, subject, dep)
                first_hop = chain[1] if chain is not None and len(chain) > 1 else None

                violations.append(
                    Violation(
                        rule_name=rule.rule_name,
                        message=(
                            f"Module has transitive dependency on forbidden module "
                            f"{dep}{format_chain(chain)}"
                        ),
                        location=location_of(record, first_hop),
                        severity=rule.severity,
                        category=rule.category,
                        subject=str(subject),
                        expected=f"No dependency path to {forbidden}",
                        actual=CHAIN_SEPARATOR.join(str(m) for m in chain or (subject, dep)),
                        chain=chain or (),
                        suggestion="Break the chain by depending on an abstraction instead",
                    )
                )

        return tuple(violations)
