"""Infrastructure adapters."""

from anchor.infrastructure.adapters.ast_parser import ASTSourceParser
from anchor.infrastructure.adapters.yaml_config import (
    CONFIG_FILENAME,
    find_config,
    load_config,
    parse_config,
)

__all__ = [
    "ASTSourceParser",
    "CONFIG_FILENAME",
    "find_config",
    "load_config",
    "parse_config",
]
