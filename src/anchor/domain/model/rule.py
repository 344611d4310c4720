"""Dependency rule definition."""

from __future__ import annotations

from dataclasses import dataclass, field

from anchor.domain.exceptions.validation import RuleValidationError
from anchor.domain.model.enums import RuleCategory, RuleType, Severity
from anchor.domain.model.module_id import ModuleID
from anchor.domain.model.module_pattern import ModulePattern, compile_patterns, matches_any
from anchor.domain.model.path_pattern import PathPattern, compile_path_patterns


@dataclass(frozen=True, slots=True)
class DependencyRule:
    """One configured dependency constraint.

    Subjects are selected by module name patterns, by file glob patterns
    (relative to the source root, see path_pattern) or both; a module is
    a subject when any selector matches.

    Invariants (FAIL-FIRST, RuleValidationError):
    - at least one selector
    - forbidden_modules non-empty for no_direct/no_transitive rules
    - required_modules non-empty for must_use_module rules

    Attributes:
        rule_type: Kind of check
        modules: Module name patterns selecting subjects
        paths: File glob patterns selecting subjects
        forbidden_modules: Modules subjects must not depend on
        required_modules: Modules subjects must activate
        name: Display name, defaults to the rule type value
        severity: Severity of reported violations
        category: Category of reported violations
        recursive: Whether "**" in path globs spans directory levels
    """

    rule_type: RuleType
    modules: tuple[str, ...] = ()
    paths: tuple[str, ...] = ()
    forbidden_modules: frozenset[ModuleID] = frozenset()
    required_modules: frozenset[ModuleID] = frozenset()
    name: str | None = None
    severity: Severity = Severity.ERROR
    category: RuleCategory = RuleCategory.DESIGN
    recursive: bool = True
    _patterns: tuple[ModulePattern, ...] = field(
        init=False, repr=False, compare=False, default=()
    )
    _path_patterns: tuple[PathPattern, ...] = field(
        init=False, repr=False, compare=False, default=()
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.rule_type, RuleType):
            raise TypeError(f"rule_type must be RuleType, got {type(self.rule_type).__name__}")

        if not self.modules and not self.paths:
            raise RuleValidationError(self.rule_name, "needs at least one of modules or paths")

        match self.rule_type:
            case RuleType.NO_DIRECT_DEPENDENCY | RuleType.NO_TRANSITIVE_DEPENDENCY:
                if not self.forbidden_modules:
                    raise RuleValidationError(self.rule_name, "forbidden_modules is empty")
            case RuleType.MUST_USE_MODULE:
                if not self.required_modules:
                    raise RuleValidationError(self.rule_name, "required_modules is empty")

        try:
            patterns = compile_patterns(self.modules)
            path_patterns = compile_path_patterns(self.paths, recursive=self.recursive)
        except ValueError as e:
            raise RuleValidationError(self.rule_name, str(e)) from e
        object.__setattr__(self, "_patterns", patterns)
        object.__setattr__(self, "_path_patterns", path_patterns)

    @property
    def rule_name(self) -> str:
        """Name used in violations."""
        return self.name or self.rule_type.value

    def applies_to(self, module: ModuleID, file: str | None = None) -> bool:
        """Check if module is a subject of this rule.

        Args:
            module: Candidate subject
            file: Its source file as posix path relative to the source root

        Returns:
            True if any module pattern or path glob matches
        """
        if matches_any(module.name, self._patterns):
            return True
        if file is None:
            return False
        return any(p.match(file) for p in self._path_patterns)

    def forbidden_in(
        self,
        dependencies: frozenset[ModuleID],
    ) -> tuple[tuple[ModuleID, ModuleID], ...]:
        """Pair each forbidden module with the dependencies it matches.

        A dependency matches a forbidden module when it equals it or is
        nested inside it.

        Returns:
            Sorted (forbidden, dependency) pairs
        """
        return tuple(
            (forbidden, dep)
            for forbidden in sorted(self.forbidden_modules)
            for dep in sorted(dependencies)
            if dep.is_within(forbidden)
        )

    def missing_from(self, activations: frozenset[ModuleID]) -> tuple[ModuleID, ...]:
        """Required modules not covered by any activation, sorted."""
        return tuple(
            required
            for required in sorted(self.required_modules)
            if not any(act.is_within(required) for act in activations)
        )
