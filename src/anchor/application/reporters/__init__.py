"""Reporters for dependency check results."""

from anchor.application.reporters._base import BaseReporter
from anchor.application.reporters.console import ConsoleConfig, ConsoleReporter
from anchor.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "ConsoleReporter",
    "ConsoleConfig",
]
