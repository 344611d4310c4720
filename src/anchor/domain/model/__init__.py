"""Domain model entities."""

from anchor.domain.model.check_result import CheckResult
from anchor.domain.model.check_stats import CheckStats
from anchor.domain.model.configuration import DEFAULT_EXCLUDES, DependencyConfig
from anchor.domain.model.dependency_record import DependencyRecord
from anchor.domain.model.enums import RuleCategory, RuleType, Severity
from anchor.domain.model.location import Location
from anchor.domain.model.module_graph import ModuleGraph
from anchor.domain.model.module_id import ModuleID
from anchor.domain.model.module_pattern import ModulePattern, compile_patterns, matches_any
from anchor.domain.model.reachability import ClosureCache, find_path, transitive_closure
from anchor.domain.model.rule import DependencyRule
from anchor.domain.model.violation import Violation

__all__ = [
    # Enums
    "Severity",
    "RuleCategory",
    "RuleType",
    # Value objects
    "ModuleID",
    "Location",
    "ModulePattern",
    # Graph
    "DependencyRecord",
    "ModuleGraph",
    "ClosureCache",
    "transitive_closure",
    "find_path",
    # Rules
    "DependencyRule",
    "DependencyConfig",
    "DEFAULT_EXCLUDES",
    "Violation",
    "CheckResult",
    "CheckStats",
    "compile_patterns",
    "matches_any",
]
