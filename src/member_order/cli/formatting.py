"""Output formatting for member order CLI commands."""

from __future__ import annotations

import json
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.table import Table

from member_order.models import FindingModel

console = Console()


class OutputFormatter:
    """Handles formatting CLI output for different commands."""

    def format_findings(self, findings: Sequence[FindingModel]) -> None:
        """Print findings as a table followed by a summary line."""
        if not findings:
            console.print("[green]✅ No member order violations found[/green]")
            return

        table = Table(title="Member Order Violations")
        table.add_column("Location", style="cyan")
        table.add_column("Class", style="magenta")
        table.add_column("Member", style="bold")
        table.add_column("Category", style="yellow")
        table.add_column("Declared After", style="dim")

        for finding in findings:
            table.add_row(
                f"{finding.file_path}:{finding.line}:{finding.column}",
                finding.class_name,
                finding.member_name or "-",
                finding.category,
                finding.previous_category,
            )

        console.print(table)
        console.print(
            f"[red]❌ {len(findings)} member order violation(s) found[/red]"
        )

    def format_findings_json(self, findings: Sequence[FindingModel]) -> None:
        """Print findings as a JSON array on stdout."""
        payload = [finding.model_dump() for finding in findings]
        typer.echo(json.dumps(payload, indent=2))

    def format_order(self, order: Sequence[str], title: str) -> None:
        """Print a category order as a ranked table."""
        table = Table(title=title)
        table.add_column("Rank", justify="right", style="cyan")
        table.add_column("Category", style="bold")

        for rank, category in enumerate(order, start=1):
            table.add_row(str(rank), category)

        console.print(table)
