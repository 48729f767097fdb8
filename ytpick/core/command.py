"""
Turns a completed selection into the stream selector and flags for yt-dlp.

Nothing here spawns a process; the functions build immutable values that the
invocation layer merges with its own boilerplate.
"""

from collections.abc import Sequence
from pathlib import Path

from ytpick.exceptions import EmptySelectionError
from ytpick.models.selection import CommandSpec, Flag, Preset, SelectionResult


def build_selector(ids: Sequence[str]) -> str:
    """
    Joins format ids into a yt-dlp stream selector (``"137+140"``).

    Raises:
        EmptySelectionError: If no id was given.
    """
    if not ids:
        raise EmptySelectionError("Cannot build a stream selector from no formats.")
    return "+".join(ids)


def _toggle(enabled: bool, name: str) -> Flag:
    return Flag(f"--{name}") if enabled else Flag(f"--no-{name}")


def build_option_flags(
    result: SelectionResult, sponsorblock_categories: str = "default"
) -> list[Flag]:
    """
    Maps every selection option to its yt-dlp flags. Each option always yields
    either its enabling or its disabling form, so the outcome never depends on
    yt-dlp's own defaults or config files.
    """
    options = result.options
    flags: list[Flag] = []

    if result.preset is Preset.BEST_AUDIO:
        flags.append(Flag("-x"))

    flags.append(_toggle(options.embed_thumbnail, "embed-thumbnail"))
    flags.append(_toggle(options.embed_chapters, "embed-chapters"))

    if options.embed_subtitles:
        flags.append(Flag("--embed-subs"))
        flags.append(Flag("--sub-langs", ",".join(sorted(options.embed_subtitles))))
    else:
        flags.append(Flag("--no-embed-subs"))

    if options.remove_sponsor_segments:
        flags.append(Flag("--sponsorblock-remove", sponsorblock_categories))
    else:
        flags.append(Flag("--no-sponsorblock"))

    return flags


def assemble_command_spec(
    result: SelectionResult, sponsorblock_categories: str = "default"
) -> CommandSpec:
    return CommandSpec(
        selector=build_selector(result.format_ids),
        output_template=result.options.output_template,
        flags=tuple(build_option_flags(result, sponsorblock_categories)),
    )


def build_probe_args(
    url: str,
    workdir: Path,
    *,
    binary: str = "yt-dlp",
    quiet: bool = False,
    extras: Sequence[str] = (),
) -> list[str]:
    """Arguments asking yt-dlp to write the info JSON sidecar into ``workdir``."""
    args = [binary]
    if quiet:
        args.append("--quiet")
    args += [
        "--write-info-json",
        "--skip-download",
        "--no-playlist",
        "-P",
        str(workdir),
        url,
    ]
    args.extend(extras)
    return args


def build_download_args(
    spec: CommandSpec,
    sidecar: Path,
    *,
    binary: str = "yt-dlp",
    quiet: bool = False,
    output_dir: Path | None = None,
    extras: Sequence[str] = (),
) -> list[str]:
    """Arguments downloading the selection described by ``spec`` from ``sidecar``."""
    args = [binary]
    if quiet:
        args.append("--quiet")
    if output_dir is not None:
        args += ["-P", str(output_dir)]
    args += spec.flag_args()
    args += [
        "--load-info-json",
        str(sidecar),
        "--no-playlist",
        "-o",
        spec.output_template,
        "-f",
        spec.selector,
    ]
    args.extend(extras)
    return args
