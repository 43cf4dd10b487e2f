"""Main CLI interface for YouTube Podcaster."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from youtube_podcaster import __version__
from youtube_podcaster.application.use_cases.validate_config import ValidateConfigUseCase
from youtube_podcaster.cli.utils import (
    channel_status,
    console,
    create_spinner,
    display_error_summary,
    display_success_message,
    display_warning_message,
)
from youtube_podcaster.domain.exceptions import ConfigurationError, PodcasterError
from youtube_podcaster.domain.models.processing import BatchProcessingResult
from youtube_podcaster.infrastructure.container import (
    Container,
    create_container,
    get_configuration_provider,
    get_podcast_service,
)
from youtube_podcaster.infrastructure.logging_setup import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="YouTube Podcaster")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default="config/config.yml",
    help="Path to configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx: click.Context, config: Path, verbose: bool) -> None:
    """
    YouTube Podcaster - Turn YouTube channels into numbered podcast seasons.

    Downloads new videos with yt-dlp, numbers them as episodes, fetches their
    thumbnails, announces each one through Pushover and sweeps old downloads.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    if verbose:
        console.print(f"[dim]Using configuration: {config}[/dim]")


def _bootstrap(ctx: click.Context) -> Container:
    """Load configuration and configure logging for a command."""
    container = create_container(ctx.obj["config_path"])
    logging_config = get_configuration_provider(container).get_logging_config()
    setup_logging(logging_config, verbose=ctx.obj["verbose"], console=console)
    return container


@cli.command()
@click.option(
    "--channels",
    multiple=True,
    help="Process only specific channel IDs (can be used multiple times)",
)
@click.pass_context
def process(ctx: click.Context, channels: tuple[str, ...]) -> None:
    """Download new videos and publish them as episodes."""
    verbose = ctx.obj["verbose"]

    try:
        container = _bootstrap(ctx)
        podcast_service = get_podcast_service(container)

        if channels:
            console.print(f"\n[cyan]🎯 Processing {len(channels)} specific channels...[/cyan]")
            result = podcast_service.process_specific_channels(list(channels))
        else:
            console.print("\n[cyan]📺 Processing all configured channels...[/cyan]")
            result = podcast_service.process_all_channels()

    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except PodcasterError as e:
        console.print(f"[red]❌ Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]❌ Unexpected Error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_processing_results(result, verbose)
    if result.has_errors:
        sys.exit(1)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration and check channel readiness."""
    verbose = ctx.obj["verbose"]

    console.print(Panel(
        "[blue]🔍 Configuration Validation[/blue]\n"
        "Checking configuration file, folders, downloader and channels...",
        title="Validation",
        border_style="blue"
    ))

    try:
        container = _bootstrap(ctx)
        config_provider = get_configuration_provider(container)
        use_case = ValidateConfigUseCase(config_provider)

        console.print("\n[cyan]📋 Configuration Check[/cyan]")
        channels = config_provider.get_channels()
        console.print(f"✅ Found {len(channels)} configured channels")
        console.print(f"✅ Media folder: {config_provider.get_media_folder()}")
        console.print(f"✅ Config directory: {config_provider.get_config_dir()}")
        console.print(f"✅ Playlist items: {config_provider.get_playlist_items()}")
        console.print(f"✅ Retention: {config_provider.get_retention_hours()} hours")

        console.print("\n[cyan]📺 Channel Check[/cyan]")
        for channel in channels:
            label = channel.name or channel.channel_id or "<unnamed channel>"
            warning = use_case.channel_warning(channel.channel_id) if channel.channel_id else "Missing channel_id"
            if warning is None:
                console.print(f"✅ {escape(label)}: ready")
            else:
                console.print(f"[yellow]⏭️  {escape(label)}: {escape(warning)}[/yellow]")

        errors = use_case.execute()

    except ConfigurationError as e:
        console.print(f"\n[red]❌ Configuration Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]❌ Validation failed:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if errors:
        display_error_summary(errors)
        sys.exit(1)

    console.print("\n[green]✅ Validation complete![/green]")


@cli.command()
@click.option(
    "--channels",
    multiple=True,
    help="Sweep only specific channel IDs (can be used multiple times)",
)
@click.pass_context
def sweep(ctx: click.Context, channels: tuple[str, ...]) -> None:
    """Delete downloads older than the retention window."""
    verbose = ctx.obj["verbose"]

    try:
        container = _bootstrap(ctx)
        podcast_service = get_podcast_service(container)

        with create_spinner() as progress:
            task = progress.add_task("Sweeping expired downloads...", total=None)
            result = podcast_service.sweep_all_channels(list(channels) if channels else None)
            progress.update(task, description="Sweep complete!")

    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]❌ Unexpected Error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    table = Table(title="🧹 Retention Sweep")
    table.add_column("Channel", style="cyan")
    table.add_column("Files Deleted", justify="right")
    table.add_column("Status", justify="center")
    for channel_result in result.channel_results.values():
        table.add_row(
            escape(channel_result.channel_name),
            str(len(channel_result.swept_files)),
            channel_status(channel_result),
        )
    console.print(table)

    if result.has_errors:
        errors = [result.global_error] if result.global_error else []
        errors.extend(f"{cr.channel_name}: {cr.error_message}" for cr in result.failed_channels)
        display_error_summary(errors)
        sys.exit(1)
    display_success_message(f"Deleted {result.overall_stats.files_swept} expired files.")


def _display_processing_results(result: BatchProcessingResult, verbose: bool) -> None:
    """Display the results of a processing run."""
    stats = result.overall_stats

    table = Table(title="📊 Processing Results")
    table.add_column("Channel", style="cyan")
    table.add_column("Episodes", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Files Swept", justify="right")
    table.add_column("Status", justify="center")

    for channel_result in result.channel_results.values():
        channel_stats = channel_result.stats
        table.add_row(
            escape(channel_result.channel_name),
            str(channel_stats.videos_processed),
            str(channel_stats.videos_failed),
            str(channel_stats.files_swept),
            channel_status(channel_result, idle_label="Up to date"),
        )

    console.print(table)

    console.print("\n[bold]📈 Overall Summary:[/bold]")
    console.print(f"🏢 Channels processed: {stats.channels_processed}")
    console.print(f"⏭️ Channels skipped: {stats.channels_skipped}")
    console.print(f"🎙️ Episodes published: {stats.videos_processed}")
    console.print(f"❌ Episodes failed: {stats.videos_failed}")
    console.print(f"🧹 Files swept: {stats.files_swept}")
    console.print(f"⏱️ Processing time: {stats.processing_time_seconds:.1f} seconds")

    if verbose:
        for channel_result in result.channel_results.values():
            for episode in channel_result.results:
                console.print(f"  - {escape(channel_result.channel_name)}: {escape(str(episode))}")

    if result.has_errors:
        console.print("\n[red]⚠️ Errors occurred during processing:[/red]")

        if result.global_error:
            console.print(f"• Global error: {escape(result.global_error)}")
        if result.is_aborted:
            console.print("• Remaining channels were not processed")

        for channel_result in result.failed_channels:
            if channel_result.error_message:
                console.print(f"• {escape(channel_result.channel_name)}: {escape(channel_result.error_message)}")
        return

    if stats.videos_processed > 0:
        display_success_message(f"Published {stats.videos_processed} new episodes!")
    elif stats.channels_processed > 0:
        display_success_message("All channels are up to date. No new episodes.")
    else:
        display_warning_message("No channels were processed. Check your channel configuration.")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
