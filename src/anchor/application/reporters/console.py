"""Console reporter: CheckResult → rich tables."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from anchor.application.reporters._base import BaseReporter
from anchor.domain.model.enums import Severity

if TYPE_CHECKING:
    from anchor.domain.model.check_result import CheckResult
    from anchor.domain.model.violation import Violation

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_chain: Show dependency chains under transitive violations.
        show_suggestion: Show fix suggestions column.
        width: Console width. None = detect from terminal.
        force_terminal: Emit colors even when output is not a TTY.
    """

    show_chain: bool = True
    show_suggestion: bool = False
    width: int | None = None
    force_terminal: bool | None = None


class ConsoleReporter(BaseReporter):
    """Console reporter: violations grouped per rule in rich tables."""

    def __init__(
        self,
        output: TextIO | None = None,
        config: ConsoleConfig | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()
        self._console = Console(
            file=output if output is not None else sys.stdout,
            width=self._config.width,
            force_terminal=self._config.force_terminal,
            highlight=False,
        )

    def report(self, result: CheckResult) -> None:
        """Render check result."""
        console = self._console

        console.print()
        console.rule("[bold]DEPENDENCY CHECK[/bold]")
        console.print()

        stats = result.stats
        console.print(
            f"[bold]Modules:[/bold] {stats.modules_analyzed}  "
            f"[bold]Dependencies:[/bold] {stats.dependencies_analyzed}  "
            f"[bold]Rules applied:[/bold] {stats.rules_applied}  "
            f"[dim]({stats.analysis_time_ms:.1f} ms)[/dim]"
        )
        console.print()

        for rule_name, violations in self._group_by_rule(result.violations).items():
            console.print(f"[bold]{escape(rule_name)}[/bold] ({len(violations)})")
            console.print(self._table(violations))
            console.print()

        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print(f"[bold red]FAILED[/bold red] ({result.error_count} error(s))")

    def _group_by_rule(self, violations: tuple[Violation, ...]) -> dict[str, list[Violation]]:
        grouped: dict[str, list[Violation]] = {}
        for violation in violations:
            grouped.setdefault(violation.rule_name, []).append(violation)
        return grouped

    def _table(self, violations: list[Violation]) -> Table:
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Severity")
        table.add_column("Location", style="cyan")
        table.add_column("Module")
        table.add_column("Problem")
        if self._config.show_suggestion:
            table.add_column("Suggestion", style="dim")

        for violation in violations:
            expected = escape(violation.expected)
            actual = escape(violation.actual)
            if self._config.show_chain and len(violation.chain) > 2:
                problem = f"{expected}\n[dim]{actual}[/dim]"
            else:
                problem = f"{expected}\n[dim]found: {actual}[/dim]"

            style = _SEVERITY_STYLE[violation.severity]
            row = [
                f"[{style}]{violation.severity.name}[/{style}]",
                escape(str(violation.location)),
                escape(violation.subject),
                problem,
            ]
            if self._config.show_suggestion:
                row.append(escape(violation.suggestion or "-"))
            table.add_row(*row)

        return table
