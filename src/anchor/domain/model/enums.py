"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Rule violation severity."""

    ERROR = auto()  # check fails
    WARNING = auto()  # check passes, warning shown
    INFO = auto()


class RuleCategory(Enum):
    """Rule category for grouping violations."""

    DESIGN = auto()
    CUSTOM = auto()


class RuleType(Enum):
    """Dependency rule kinds, valued by their configuration name."""

    NO_DIRECT_DEPENDENCY = "no_direct_dependency"
    NO_TRANSITIVE_DEPENDENCY = "no_transitive_dependency"
    MUST_USE_MODULE = "must_use_module"
