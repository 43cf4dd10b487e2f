"""Utility functions for CLI operations."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from youtube_podcaster.domain.models.processing import ChannelProcessingResult

console = Console()


def create_spinner() -> Progress:
    """Create a Rich spinner for steps with no known length."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
    )


def channel_status(channel_result: ChannelProcessingResult, idle_label: str = "Done") -> str:
    """Render the status cell of a channel row."""
    if channel_result.is_skipped:
        return f"[yellow]⏭️ {escape(channel_result.skip_reason)}[/yellow]"
    if channel_result.has_errors:
        return "[red]❌ Error[/red]"
    if channel_result.stats.videos_processed > 0:
        return "[green]✅ Published[/green]"
    return f"[dim]✅ {idle_label}[/dim]"


def display_error_summary(errors: list[str]) -> None:
    """Display configuration or processing errors."""
    if not errors:
        return

    console.print(Panel(
        "\n".join(f"• {escape(error)}" for error in errors),
        title=f"[red]❌ {len(errors)} Error(s) Found[/red]",
        border_style="red"
    ))


def display_success_message(message: str) -> None:
    """Display a success message."""
    console.print(Panel(f"[green]{escape(message)}[/green]", title="[green]✅ Success[/green]", border_style="green"))


def display_warning_message(message: str) -> None:
    """Display a warning message."""
    console.print(Panel(f"[yellow]{escape(message)}[/yellow]", title="[yellow]⚠️ Warning[/yellow]", border_style="yellow"))
