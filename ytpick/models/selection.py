"""
Value types produced by the selection flow and consumed by the command assembler.
"""

from dataclasses import dataclass
from enum import Enum


class Preset(str, Enum):
    """A named strategy for choosing formats."""

    MANUAL = "manual"
    CUSTOM = "custom"
    BEST = "best"
    BEST_AUDIO = "best-audio"
    BEST_VIDEO = "best-video"

    @property
    def label(self) -> str:
        return PRESET_LABELS[self]


PRESET_LABELS = {
    Preset.MANUAL: "manual",
    Preset.CUSTOM: "custom",
    Preset.BEST: "best",
    Preset.BEST_AUDIO: "best audio",
    Preset.BEST_VIDEO: "best video",
}

# Selector tokens understood by yt-dlp for presets that need no record pick
PRESET_SELECTORS = {
    Preset.BEST: "bv*+ba/b",
    Preset.BEST_AUDIO: "bestaudio",
    Preset.BEST_VIDEO: "bestvideo",
}


class ClassificationPolicy(str, Enum):
    """
    Decides which records the video and audio pickers offer.

    STRICT shows only video-only / audio-only records. LOOSE shows every record
    carrying a video / audio stream, so muxed formats appear in both pickers.
    """

    STRICT = "strict"
    LOOSE = "loose"


DEFAULT_CLASSIFICATION_POLICY = ClassificationPolicy.STRICT


@dataclass(frozen=True)
class SelectionOptions:
    """Post-selection choices made by the user."""

    output_template: str
    embed_thumbnail: bool = False
    embed_chapters: bool = False
    embed_subtitles: frozenset[str] | None = None
    remove_sponsor_segments: bool = False


@dataclass(frozen=True)
class SelectionResult:
    """The outcome of a completed selection flow."""

    preset: Preset
    format_ids: tuple[str, ...]
    options: SelectionOptions


@dataclass(frozen=True)
class Flag:
    """A single yt-dlp option, optionally followed by its value."""

    name: str
    value: str | None = None

    def as_args(self) -> list[str]:
        return [self.name] if self.value is None else [self.name, self.value]


@dataclass(frozen=True)
class CommandSpec:
    """Everything the download invocation needs from a selection."""

    selector: str
    output_template: str
    flags: tuple[Flag, ...] = ()

    def flag_args(self) -> list[str]:
        args: list[str] = []
        for flag in self.flags:
            args.extend(flag.as_args())
        return args
