"""anchor domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, re, collections.abc
"""

from anchor.domain.exceptions import (
    AnchorError,
    ArchitectureViolationError,
    ConfigurationError,
    ParsingError,
    RuleValidationError,
)
from anchor.domain.model import (
    CheckResult,
    DependencyConfig,
    DependencyRecord,
    DependencyRule,
    Location,
    ModuleGraph,
    ModuleID,
    RuleCategory,
    RuleType,
    Severity,
    Violation,
)

__all__ = [
    # Exceptions
    "AnchorError",
    "ParsingError",
    "ConfigurationError",
    "RuleValidationError",
    "ArchitectureViolationError",
    # Model
    "ModuleID",
    "DependencyRecord",
    "ModuleGraph",
    "DependencyRule",
    "DependencyConfig",
    "RuleType",
    "Severity",
    "RuleCategory",
    "Location",
    "Violation",
    "CheckResult",
]
