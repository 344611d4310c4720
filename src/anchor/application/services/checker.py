"""Main facade for dependency checking.

DependencyChecker runs the configured checks over every module of one
ModuleGraph and produces a CheckResult.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Self

from anchor.application.checks import CheckContext, checks_from_config
from anchor.domain.exceptions.violation import ArchitectureViolationError
from anchor.domain.model.check_result import CheckResult
from anchor.domain.model.check_stats import CheckStats

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from anchor.application.checks import BaseCheck
    from anchor.domain.model.configuration import DependencyConfig
    from anchor.domain.model.dependency_record import DependencyRecord
    from anchor.domain.model.module_graph import ModuleGraph
    from anchor.domain.model.violation import Violation
    from anchor.domain.ports.reporter import ReporterProtocol


class DependencyChecker:
    """Main facade for dependency checking.

    Composition-based: accepts checks and reporter as dependencies.
    One call to check() is one run: a fresh CheckContext (closure cache)
    is created per call and discarded afterwards.

    Example:
        graph = analyze_directory(Path("src"), config)
        checker = DependencyChecker.from_config(graph, config, source_root=Path("src"))
        result = checker.check()
        if not result.passed:
            print(f"Violations: {result.violation_count}")
    """

    def __init__(
        self,
        graph: ModuleGraph,
        config: DependencyConfig,
        *,
        checks: Sequence[BaseCheck] = (),
        source_root: Path | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            graph: Module graph of the run
            config: Rules to apply
            checks: Checks to run
            source_root: Root that `paths` selectors are relative to
            reporter: Optional reporter called with every result
        """
        if graph is None:
            raise TypeError("graph must not be None")
        if config is None:
            raise TypeError("config must not be None")

        self._graph = graph
        self._config = config
        self._checks = tuple(checks)
        self._source_root = source_root
        self._reporter = reporter

    @classmethod
    def from_config(
        cls,
        graph: ModuleGraph,
        config: DependencyConfig,
        *,
        source_root: Path | None = None,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker running a check per configured rule type."""
        return cls(
            graph,
            config,
            checks=checks_from_config(config),
            source_root=source_root,
            reporter=reporter,
        )

    @property
    def checks(self) -> tuple[BaseCheck, ...]:
        """Checks run by this checker."""
        return self._checks

    def check(self) -> CheckResult:
        """Run every check over every module of the graph.

        Subjects are visited in sorted order, so violations come out in a
        stable order.

        Returns:
            CheckResult with violations and stats
        """
        start = time.perf_counter()
        context = CheckContext.for_graph(self._graph)
        violations: list[Violation] = []
        rules_applied = 0

        for module, record in sorted(self._graph.records.items(), key=lambda item: item[0]):
            file = self._relative_file(record)

            for check in self._checks:
                rules = tuple(
                    rule
                    for rule in self._config.rules_of(check.rule_type)
                    if rule.applies_to(module, file)
                )
                if not rules:
                    continue
                rules_applied += len(rules)
                violations.extend(check.check(record, rules, context))

        elapsed_ms = (time.perf_counter() - start) * 1000
        result = CheckResult(
            violations=tuple(violations),
            stats=CheckStats(
                modules_analyzed=self._graph.module_count,
                dependencies_analyzed=self._graph.dependency_count,
                rules_applied=rules_applied,
                analysis_time_ms=elapsed_ms,
            ),
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def assert_check(self) -> CheckResult:
        """Run check() and fail on ERROR violations.

        Raises:
            ArchitectureViolationError: If the run did not pass
        """
        result = self.check()
        if not result.passed:
            raise ArchitectureViolationError(result.violations)
        return result

    def _relative_file(self, record: DependencyRecord) -> str | None:
        """Source file as posix path relative to source_root."""
        if record.path is None:
            return None
        if self._source_root is None:
            return record.path.as_posix()
        try:
            return record.path.relative_to(self._source_root).as_posix()
        except ValueError:
            return record.path.as_posix()
