"""Output formatting using Rich for terminal output."""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from taskforge.agents.protocol import Worker
from taskforge.agents.registry import RegistryStats
from taskforge.orchestration.models import TaskResponse

TASKFORGE_THEME = Theme(
    {
        "status.idle": "blue",
        "status.working": "yellow",
        "status.completed": "green",
        "status.error": "red",
        "success": "green",
        "error": "red bold",
        "warning": "yellow",
        "info": "blue",
        "metadata": "dim",
    }
)


class OutputFormatter:
    """Handles all output formatting for taskforge."""

    def __init__(self, color: bool = True, verbose: bool = False) -> None:
        self.console = Console(theme=TASKFORGE_THEME, no_color=not color, highlight=False)
        self.verbose = verbose

    def print_error(self, message: str, agent_id: str | None = None) -> None:
        """Print an error message."""
        prefix = f"[{agent_id}] " if agent_id else ""
        self.console.print(f"[error]{escape(prefix)}Error: {escape(message)}[/error]")

    def print_success(self, message: str) -> None:
        self.console.print(f"[success]{message}[/success]")

    def print_info(self, message: str) -> None:
        self.console.print(f"[info]{message}[/info]")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[warning]{message}[/warning]")

    def print_json(self, data: Any) -> None:
        self.console.print_json(data=data, default=str)

    def print_response(self, response: TaskResponse) -> None:
        """Print a dispatch response."""
        if not response.success:
            self.print_error(response.error or "Unknown error", response.agent_id or None)
            return

        body = json.dumps(response.data, indent=2, default=str) if response.data is not None else ""
        self.console.print(Panel(
            Text(body),
            title=f"[success]{response.agent_id}[/success]",
            subtitle=f"[metadata]{response.execution_time_ms:.0f}ms[/metadata]",
            border_style="success",
        ))

        if response.recommendations:
            self.console.print("[info]Recommendations:[/info]")
            for recommendation in response.recommendations:
                self.console.print(f"  - {recommendation}", markup=False)

    def print_worker_list(self, workers: list[Worker], title: str = "Workers") -> None:
        """Print workers with status and performance."""
        table = Table(title=title)
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        table.add_column("Category")
        table.add_column("Status", justify="center")
        table.add_column("Tasks", justify="right")
        table.add_column("Success %", justify="right")
        table.add_column("Avg ms", justify="right")

        for worker in workers:
            status = worker.status.value
            perf = worker.performance
            table.add_row(
                worker.id,
                worker.name,
                worker.category.value,
                f"[status.{status}]{status}[/status.{status}]",
                str(perf.tasks_completed),
                f"{perf.success_rate:.1f}",
                f"{perf.avg_execution_time_ms:.0f}",
            )

        self.console.print(table)

    def print_stats(self, stats: RegistryStats) -> None:
        """Print aggregate registry statistics."""
        table = Table(title="Worker Statistics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Total", str(stats.total))
        table.add_row("Working", str(stats.active))
        table.add_row("Idle", str(stats.idle))
        table.add_row("Completed", str(stats.completed))
        table.add_row("Error", str(stats.error))
        table.add_row("Avg success rate", f"{stats.avg_success_rate:.1f}%")
        table.add_row("Tasks completed", str(stats.total_tasks_completed))

        self.console.print(table)


# Global formatter instance
_formatter: OutputFormatter | None = None


def get_formatter(color: bool = True, verbose: bool = False) -> OutputFormatter:
    """Get or create the global formatter instance."""
    global _formatter
    if _formatter is None:
        _formatter = OutputFormatter(color=color, verbose=verbose)
    return _formatter


def reset_formatter() -> None:
    """Forget the global formatter so the next call builds a fresh one."""
    global _formatter
    _formatter = None
