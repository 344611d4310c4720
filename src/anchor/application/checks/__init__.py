"""Dependency checks.

Checks evaluate one subject module at a time against the rules that apply
to it:
- NoDirectDependencyCheck: forbidden direct references
- NoTransitiveDependencyCheck: forbidden modules reachable through chains
- MustUseModuleCheck: required module adoption
"""

from anchor.application.checks._base import BaseCheck, CheckContext
from anchor.application.checks._registry import checks_from_config, default_checks
from anchor.application.checks.must_use_module import MustUseModuleCheck
from anchor.application.checks.no_dependency import NoDirectDependencyCheck
from anchor.application.checks.no_transitive_dependency import (
    NoTransitiveDependencyCheck,
    format_chain,
)

__all__ = [
    # Base
    "BaseCheck",
    "CheckContext",
    # Checks
    "NoDirectDependencyCheck",
    "NoTransitiveDependencyCheck",
    "MustUseModuleCheck",
    # Factory functions
    "default_checks",
    "checks_from_config",
    "format_chain",
]
