"""
Functions for formatting and displaying data in the console using Rich.
"""

from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ytpick.models.media import MediaDescriptor
from ytpick.models.selection import CommandSpec, SelectionResult
from ytpick.utils.formatting import format_duration


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "SchemaError": [
            "• yt-dlp may have changed its info JSON format.",
            "• Update yt-dlp and try again.",
        ],
        "EmptyCatalogError": [
            "• The extractor returned no downloadable formats.",
            "• The media may be region locked, private, or still processing.",
        ],
        "SelectionError": [
            "• The catalog has nothing suitable for this preset.",
            "• Try the 'best' or 'manual' preset instead.",
            "• Set classification_policy = loose to include muxed formats.",
        ],
        "ProbeError": [
            "• Check that the URL is correct and reachable.",
            "• Make sure yt-dlp is installed, or set ytdlp_path in the config.",
            "• Run `ytpick diagnose` to check your setup.",
        ],
        "DownloadError": [
            "• yt-dlp reported an error; its output is shown above.",
            "• Post-processing options may need ffmpeg on your PATH.",
        ],
        "ConfigurationError": [
            "• Check the values in your configuration file.",
            "• Run `ytpick init --force` to recreate it with defaults.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Run the command with -vv for detailed logs."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_config(config_path: Path, config_data: dict[str, Any], console: Console):
    """Displays the current configuration."""
    content = ""
    for key, value in config_data.items():
        if isinstance(value, list):
            value = ", ".join(value)
        content += f"{key} = {value}\n"

    console.print(
        Panel(
            escape(content.strip()),
            title=f"Configuration ([dim]{escape(str(config_path))}[/dim])",
            border_style="cyan",
        )
    )


def print_media_header(descriptor: MediaDescriptor, console: Console):
    """Shows what is about to be downloaded."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Title:", escape(descriptor.title))
    if descriptor.uploader:
        table.add_row("Uploader:", escape(descriptor.uploader))
    if descriptor.duration:
        table.add_row("Duration:", format_duration(descriptor.duration))
    table.add_row("Source:", escape(descriptor.extractor_key))
    table.add_row("Formats:", str(len(descriptor.formats)))

    console.print(Panel(table, border_style="cyan", expand=False))


def print_selection_summary(
    result: SelectionResult, spec: CommandSpec, console: Console
):
    """Displays the chosen preset, selector and flags before downloading."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold cyan")
    table.add_column()

    table.add_row("Preset:", result.preset.label)
    table.add_row("Formats:", f"[green]{escape(spec.selector)}[/green]")
    table.add_row("Output:", f"[dim]{escape(spec.output_template)}[/dim]")
    table.add_row("Flags:", escape(" ".join(spec.flag_args())))

    console.print(
        Panel(
            table,
            title="[bold green]✓ Selection[/bold green]",
            border_style="green",
            expand=False,
        )
    )
