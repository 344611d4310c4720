"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from anchor.domain.exceptions.base import AnchorError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(AnchorError):
    """Configuration file cannot be loaded.

    Attributes:
        path: Configuration file
        reason: What is wrong with it
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration {path}: {reason}")
