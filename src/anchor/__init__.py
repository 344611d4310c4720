"""anchor - architecture constraints over a module dependency graph."""

__version__ = "0.1.0"

from anchor.application.services.checker import DependencyChecker
from anchor.domain.model.module_graph import ModuleGraph
from anchor.domain.model.module_id import ModuleID
from anchor.domain.model.reachability import find_path, transitive_closure

__all__ = [
    "DependencyChecker",
    "ModuleGraph",
    "ModuleID",
    "__version__",
    "find_path",
    "transitive_closure",
]
