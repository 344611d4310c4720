"""Domain exceptions."""

from anchor.domain.exceptions.base import AnchorError
from anchor.domain.exceptions.configuration import ConfigurationError
from anchor.domain.exceptions.parsing import ParsingError
from anchor.domain.exceptions.validation import RuleValidationError
from anchor.domain.exceptions.violation import ArchitectureViolationError

__all__ = [
    "AnchorError",
    "ParsingError",
    "ConfigurationError",
    "RuleValidationError",
    "ArchitectureViolationError",
]
