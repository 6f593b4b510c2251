"""Console reporter for consistency check results using Rich."""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from neo4j_assertions.consistency.checker import ConsistencyReport, PassResult


_STATUS_CONFIG: dict[bool, tuple[str, str, str]] = {
    True: ("✓", "green", "PASSED"),
    False: ("✗", "red", "FAILED"),
}


class ConsistencyConsoleReporter:
    """Print consistency check results with Rich formatting."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        self.console = console or Console(file=sys.__stdout__)
        self.verbosity = verbosity

    def report(self, report: ConsistencyReport) -> None:
        self._print_section_header("CONSISTENCY CHECK")
        for result in report.results:
            self.print_pass(result)
        passed = sum(1 for result in report.results if result.passed)
        color = "green" if report.passed else "red"
        self.console.print(f"[{color}]{passed}/{len(report.results)} passes succeeded[/{color}]")

    def print_pass(self, result: PassResult) -> None:
        symbol, color, label = _STATUS_CONFIG[result.passed]
        sizes = f"[dim]({result.expected_size} entry points, {result.actual_size} factories)[/dim]"
        self.console.print(f"  • {result.name} {sizes} [{color}]{symbol} {label}[/{color}]")

        if result.error_type is not None:
            self.console.print(self._build_error_panel(result))
        elif not result.passed:
            self.console.print(self._build_diff_table(result))
        elif self.verbosity >= 1:
            self.console.print(self._build_mapping_table(result))

    def _print_section_header(self, title: str) -> None:
        width = self.console.width
        header_title = f" {title} "
        fill = max(width - len(header_title), 0)
        left = fill // 2
        right = fill - left
        self.console.print("=" * left + header_title + "=" * right)

    def _build_error_panel(self, result: PassResult) -> Panel:
        return Panel(
            escape(result.error_message or ""),
            title=result.error_type,
            title_align="left",
            border_style="yellow",
            expand=True,
            padding=(1, 1),
        )

    def _build_diff_table(self, result: PassResult) -> Table:
        table = Table(title=f"{result.name} mismatches", title_justify="left")
        table.add_column("Status")
        table.add_column("Input type")
        table.add_column("Assertion type")
        for entry in result.missing:
            table.add_row("[red]missing[/red]", escape(entry.input_type), escape(entry.output_type))
        for entry in result.extra:
            table.add_row("[magenta]extra[/magenta]", escape(entry.input_type), escape(entry.output_type))
        return table

    def _build_mapping_table(self, result: PassResult) -> Table:
        table = Table(title=f"{result.name} mappings", title_justify="left")
        table.add_column("Input type")
        table.add_column("Assertion type")
        for entry in result.expected:
            table.add_row(escape(entry.input_type), escape(entry.output_type))
        return table
