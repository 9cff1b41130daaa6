# src/clusterforge/cli/formatter.py
from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from clusterforge.smelter.context import SplitResult

# Shared Rich console for all CLI output
console = Console()


class ForgeFormatter:
    """
    ForgeFormatter: the visual side of the CLI.
    Renders split reports, cast summaries and errors.
    """

    def __init__(self, out: Console = None):
        self.console = out or console

    def print_header(self, subtitle: str, version: str):
        self.console.print(Panel.fit(
            f"[bold cyan]Cluster Forge v{version}[/bold cyan]",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def print_split_report(self, result: SplitResult):
        """One row per retained document, in stream order."""
        title = f"Smelted: {result.config.name}"
        if result.dry_run:
            title += " (dry run)"
        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Kind")
        table.add_column("Name", style="cyan")
        table.add_column("Namespace")
        table.add_column("Output", style="dim")

        for doc in result.documents:
            identity = doc.identity
            if doc.cluster_scoped:
                namespace = "[dim](cluster)[/dim]"
            elif doc.namespace_injected:
                namespace = f"[green]{identity.namespace}[/green] [dim](injected)[/dim]"
            else:
                namespace = identity.namespace or ""
            output = str(doc.output_path) if doc.output_path else "-"
            table.add_row(str(doc.index), identity.kind, identity.name, namespace, output)

        self.console.print(table)
        self.console.print(
            f" • Documents: {len(result.documents)}"
            f"   • Files: {len(result.written_files)}"
            f"   • Namespaces injected: {result.injected_count}"
        )

    def print_cast_summary(self, tools: List[str]):
        """Boxed completion note listing the prepared tools."""
        self.console.print(Panel(
            f"[bold]Cluster Forge[/bold]\n\nCompleted: [magenta]{english_join(tools)}[/magenta].",
            width=40,
            border_style="blue",
            padding=(1, 2),
        ))

    def print_error(self, message: str):
        self.console.print(f"[bold red]Error:[/bold red] {message}")


def english_join(items: List[str]) -> str:
    """['a', 'b', 'c'] -> 'a, b, and c'"""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"
