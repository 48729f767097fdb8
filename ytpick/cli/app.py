"""
Defines the command-line interface for the application using Typer.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ytpick import __version__
from ytpick.core.command import (
    assemble_command_spec,
    build_download_args,
    build_probe_args,
)
from ytpick.core.selection_flow import resolve_selection
from ytpick.exceptions import SelectionAborted, YtPickError
from ytpick.media import (
    download,
    find_tool,
    probe,
    thumbnail_helper_available,
    workspace,
)
from ytpick.models.config import AppConfig
from ytpick.models.media import load_descriptor
from ytpick.models.selection import Preset
from ytpick.storage.config_manager import ConfigManager
from ytpick.utils.path import get_config_dir, get_media_dir

from .formatters import (
    format_error_with_suggestions,
    print_config,
    print_media_header,
    print_selection_summary,
)
from .prompts import RichPrompter

console = Console()

logging.basicConfig(
    level="WARNING",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("ytpick")

app = typer.Typer(
    name="ytpick",
    help=(
        "Pick yt-dlp formats interactively and download them with a single"
        " command. Use 'ytpick <command> --help' for more info."
    ),
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)

CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.ini"


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v shows executed commands, -vv for debug).",
    ),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", is_eager=True
    ),
    show_config: bool = typer.Option(
        False, "--show-config", help="Display the current configuration."
    ),
):
    """ytpick: interactive format picker for yt-dlp"""
    if version:
        console.print(f"[bold]ytpick[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()

    log_level = "WARNING"
    if verbose >= 2:
        log_level = "DEBUG"
    elif verbose == 1:
        log_level = "INFO"
    logging.getLogger("ytpick").setLevel(log_level)

    if show_config:
        if CONFIG_FILE.is_file():
            config_data = ConfigManager(CONFIG_FILE).get_config_as_dict()
        else:
            console.print(
                "[yellow]No config file found, showing defaults.[/yellow] Run"
                " [cyan]ytpick init[/cyan] to create one."
            )
            config_data = AppConfig().model_dump(exclude={"config_path"}, mode="json")
        print_config(CONFIG_FILE, config_data, console)
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


@app.command()
def init(
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite an existing file without asking."
    ),
):
    """Write a configuration file with default values."""
    if (
        CONFIG_FILE.exists()
        and not force
        and not typer.confirm("Configuration file already exists. Overwrite it?")
    ):
        raise typer.Abort()

    try:
        ConfigManager(CONFIG_FILE).save_new_config()
    except YtPickError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[bold green]✓ Configuration saved to '{CONFIG_FILE}'[/bold green]")


@app.command(name="download")
def download_command(
    url: str = typer.Argument(..., help="URL of the media to download."),
    extras: list[str] | None = typer.Argument(  # noqa: B008
        None,
        help="Extra arguments passed to yt-dlp, after '--'.",
        metavar="[-- EXTRA...]",
    ),
    preset: Preset | None = typer.Option(
        None,
        "-p",
        "--preset",
        case_sensitive=False,
        help="Use this preset instead of asking.",
    ),
    quiet: bool | None = typer.Option(
        None, "--quiet/--no-quiet", help="Make yt-dlp output quiet."
    ),
    dirs: bool | None = typer.Option(
        None,
        "-d",
        "--dirs/--no-dirs",
        help="Save into the user's Music (best audio) or Videos directory.",
    ),
):
    """Probe a URL, pick formats interactively and download them."""
    cli_options = {
        key: value
        for key, value in {"quiet": quiet, "use_dirs": dirs}.items()
        if value is not None
    }
    extras = extras or []

    try:
        config = ConfigManager(CONFIG_FILE).load_config(cli_options)
        with workspace() as workdir:
            sidecar = probe(
                build_probe_args(
                    url,
                    workdir,
                    binary=config.ytdlp_path,
                    quiet=config.quiet,
                    extras=extras,
                ),
                workdir,
            )
            descriptor = load_descriptor(sidecar)
            print_media_header(descriptor, console)

            result = resolve_selection(
                descriptor,
                RichPrompter(console),
                preset,
                policy=config.classification_policy,
                thumbnail_helper_available=thumbnail_helper_available(
                    config.thumbnail_helper
                ),
                sponsorblock_extractors=config.sponsorblock_extractors,
            )
            spec = assemble_command_spec(result, config.sponsorblock_categories)
            print_selection_summary(result, spec, console)

            output_dir = None
            if config.use_dirs:
                output_dir = get_media_dir(audio=result.preset is Preset.BEST_AUDIO)
            download(
                build_download_args(
                    spec,
                    sidecar,
                    binary=config.ytdlp_path,
                    quiet=config.quiet,
                    output_dir=output_dir,
                    extras=extras,
                )
            )
    except SelectionAborted:
        log.debug("Selection cancelled, nothing downloaded.")
        raise typer.Exit() from None
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️  Operation cancelled by user.[/yellow]")
        raise typer.Exit() from None
    except YtPickError as e:
        console.print(format_error_with_suggestions(e))
        raise typer.Exit(code=1) from e

    console.print("[bold green]✓ Download complete.[/bold green]")


@app.command()
def diagnose():
    """Diagnose common configuration and tooling issues."""
    console.print("\n[bold cyan]Running diagnostics...[/bold cyan]\n")
    issues_found = False

    if CONFIG_FILE.is_file():
        console.print(f"[green]✓[/] Config file exists at: [dim]{CONFIG_FILE}[/dim]")
    else:
        console.print("[yellow]○[/] No config file, defaults are in use.")

    try:
        config = ConfigManager(CONFIG_FILE).load_config()
        console.print("[green]✓[/] Configuration is valid.")
    except YtPickError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        config = AppConfig()
        issues_found = True

    if ytdlp := find_tool(config.ytdlp_path):
        console.print(f"[green]✓[/] yt-dlp found at: [dim]{ytdlp}[/dim]")
    else:
        console.print(
            f"[red]✗ yt-dlp not found[/] ('{config.ytdlp_path}'). Install it or"
            " set ytdlp_path."
        )
        issues_found = True

    if helper := find_tool(config.thumbnail_helper):
        console.print(f"[green]✓[/] Thumbnail helper found at: [dim]{helper}[/dim]")
    else:
        console.print(
            f"[yellow]○[/] Thumbnail helper '{config.thumbnail_helper}' not found;"
            " thumbnail embedding will default to off."
        )

    console.print()
    if not issues_found:
        console.print(
            "[bold green]✓ All checks passed! Your setup looks good.[/bold green]\n"
        )
    else:
        console.print(
            "[bold red]✗ Some issues were found. "
            "Please review the messages above.[/bold red]\n"
        )
        raise typer.Exit(code=1)
