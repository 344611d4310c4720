"""Check statistics."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Statistics from one check run.

    Attributes:
        modules_analyzed: Modules in the graph
        dependencies_analyzed: Dependency edges in the graph
        rules_applied: (module, rule) pairs evaluated
        analysis_time_ms: Wall time of the run in milliseconds
    """

    modules_analyzed: int
    dependencies_analyzed: int
    rules_applied: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.modules_analyzed < 0:
            raise ValueError(f"modules_analyzed must be >= 0, got {self.modules_analyzed}")
        if self.dependencies_analyzed < 0:
            raise ValueError(
                f"dependencies_analyzed must be >= 0, got {self.dependencies_analyzed}"
            )
        if self.rules_applied < 0:
            raise ValueError(f"rules_applied must be >= 0, got {self.rules_applied}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> "CheckStats":
        """Stats of a run that analyzed nothing."""
        return cls(
            modules_analyzed=0,
            dependencies_analyzed=0,
            rules_applied=0,
            analysis_time_ms=0.0,
        )
