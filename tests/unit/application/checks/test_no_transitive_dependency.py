"""Tests for application/checks/no_transitive_dependency.py."""

from pathlib import Path

from anchor.application.checks import CheckContext, NoTransitiveDependencyCheck, format_chain
from anchor.domain.model.enums import RuleType
from anchor.domain.model.module_graph import ModuleGraph
from anchor.domain.model.rule import DependencyRule
from anchor.domain.model.violation import Violation
from tests.factories import make_record, make_rule, mid


def forbid(*names: str) -> DependencyRule:
    """Transitive rule over every module forbidding names."""
    return make_rule(RuleType.NO_TRANSITIVE_DEPENDENCY, forbidden=names)


class TestFormatChain:
    """Tests for format_chain."""

    def test_none(self) -> None:
        assert format_chain(None) == ""

    def test_direct_edge_renders_empty(self) -> None:
        assert format_chain((mid("a"), mid("b"))) == ""

    def test_longer_chain(self) -> None:
        chain = (mid("a"), mid("b"), mid("c"))
        assert format_chain(chain) == " (dependency chain: a -> b -> c)"


class TestNoTransitiveDependencyCheck:
    """Tests for NoTransitiveDependencyCheck."""

    def _graph(self) -> ModuleGraph:
        return ModuleGraph.build(
            [
                make_record(
                    "A",
                    ["B"],
                    path=Path("src/A.py"),
                    lines={"B": 3},
                ),
                make_record("B", ["C", "D"]),
                make_record("C"),
                make_record("D"),
            ]
        )

    def _check(
        self, graph: ModuleGraph, subject: str, *rules: DependencyRule
    ) -> tuple[Violation, ...]:
        record = graph.record_of(mid(subject))
        assert record is not None
        return NoTransitiveDependencyCheck().check(record, rules, CheckContext.for_graph(graph))

    def test_rule_type(self) -> None:
        assert NoTransitiveDependencyCheck.rule_type is RuleType.NO_TRANSITIVE_DEPENDENCY

    def test_reachable_forbidden(self) -> None:
        (violation,) = self._check(self._graph(), "A", forbid("D"))

        assert violation.message == (
            "Module has transitive dependency on forbidden module D"
            " (dependency chain: A -> B -> D)"
        )
        assert violation.chain == (mid("A"), mid("B"), mid("D"))
        assert violation.actual == "A -> B -> D"
        assert violation.expected == "No dependency path to D"
        assert violation.location.file == Path("src/A.py")
        assert violation.location.line == 3

    def test_direct_dependency_also_reported(self) -> None:
        (violation,) = self._check(self._graph(), "B", forbid("D"))
        assert violation.message == "Module has transitive dependency on forbidden module D"
        assert violation.chain == (mid("B"), mid("D"))

    def test_unreachable_clean(self) -> None:
        assert self._check(self._graph(), "C", forbid("D")) == ()

    def test_subject_never_its_own_violation(self) -> None:
        graph = ModuleGraph.build([make_record("A", ["B"]), make_record("B", ["A"])])
        (violation,) = self._check(graph, "A", forbid("A", "B"))
        assert violation.actual == "A -> B"

    def test_cycle_terminates(self) -> None:
        graph = ModuleGraph.build([make_record("A", ["B"]), make_record("B", ["A", "C"])])
        (violation,) = self._check(graph, "A", forbid("C"))
        assert violation.chain == (mid("A"), mid("B"), mid("C"))

    def test_external_forbidden_package(self) -> None:
        graph = ModuleGraph.build(
            [
                make_record("app.domain", ["app.repo"]),
                make_record("app.repo", ["sqlalchemy.orm"]),
            ]
        )
        (violation,) = self._check(graph, "app.domain", forbid("sqlalchemy"))
        assert violation.chain == (mid("app.domain"), mid("app.repo"), mid("sqlalchemy.orm"))
        assert violation.expected == "No dependency path to sqlalchemy"

    def test_closures_shared_across_calls(self) -> None:
        graph = self._graph()
        context = CheckContext.for_graph(graph)
        check = NoTransitiveDependencyCheck()
        for name in ("A", "B"):
            record = graph.record_of(mid(name))
            assert record is not None
            check.check(record, (forbid("D"),), context)
        # A's closure and B's closure
        assert len(context.closures) == 2

    def test_one_violation_per_forbidden_module(self) -> None:
        graph = ModuleGraph.build(
            [
                make_record("app", ["infra"]),
                make_record("infra", ["infra.db", "infra.cache"]),
            ]
        )
        (violation,) = self._check(graph, "app", forbid("infra"))
        assert violation.chain == (mid("app"), mid("infra"))
