"""Run configuration.

User-provided rules plus extraction settings. Passed explicitly to every
run; there is no process-wide configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from anchor.domain.model.enums import RuleType
from anchor.domain.model.rule import DependencyRule

DEFAULT_EXCLUDES = frozenset(
    {
        "__pycache__",
        ".venv",
        "venv",
        ".git",
        ".hg",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
        "node_modules",
        ".tox",
        ".nox",
        "build",
        "dist",
        ".eggs",
    },
)


@dataclass(frozen=True, slots=True)
class DependencyConfig:
    """Immutable configuration DTO.

    Attributes:
        rules: Rules in configuration order
        ignore_type_checking: Skip imports guarded by TYPE_CHECKING
        exclude: Directory names skipped during source discovery
    """

    rules: tuple[DependencyRule, ...] = ()
    ignore_type_checking: bool = False
    exclude: frozenset[str] = DEFAULT_EXCLUDES

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.rules, tuple):
            raise TypeError("rules must be tuple")
        for rule in self.rules:
            if not isinstance(rule, DependencyRule):
                raise TypeError(f"expected DependencyRule, got {type(rule).__name__}")
        if not isinstance(self.ignore_type_checking, bool):
            raise TypeError("ignore_type_checking must be bool")

    def rules_of(self, rule_type: RuleType) -> tuple[DependencyRule, ...]:
        """Rules of one type, configuration order kept."""
        return tuple(r for r in self.rules if r.rule_type is rule_type)

    @property
    def rule_types(self) -> frozenset[RuleType]:
        """Rule types with at least one configured rule."""
        return frozenset(r.rule_type for r in self.rules)

    @classmethod
    def empty(cls) -> DependencyConfig:
        """Configuration with no rules."""
        return cls()
