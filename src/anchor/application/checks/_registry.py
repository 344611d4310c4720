"""Check registry.

Maps every rule type to the check that evaluates it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.application.checks.must_use_module import MustUseModuleCheck
from anchor.application.checks.no_dependency import NoDirectDependencyCheck
from anchor.application.checks.no_transitive_dependency import NoTransitiveDependencyCheck

if TYPE_CHECKING:
    from anchor.application.checks._base import BaseCheck
    from anchor.domain.model.configuration import DependencyConfig

# Order matters: checks are run in this order
_ALL_CHECKS: tuple[type[BaseCheck], ...] = (
    NoDirectDependencyCheck,
    NoTransitiveDependencyCheck,
    MustUseModuleCheck,
)


def default_checks() -> tuple[BaseCheck, ...]:
    """Instantiate every built-in check."""
    return tuple(check_cls() for check_cls in _ALL_CHECKS)


def checks_from_config(config: DependencyConfig) -> tuple[BaseCheck, ...]:
    """Instantiate checks that have at least one configured rule."""
    enabled = config.rule_types
    return tuple(check_cls() for check_cls in _ALL_CHECKS if check_cls.rule_type in enabled)
