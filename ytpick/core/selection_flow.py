"""
The interactive selection state machine.

The flow walks a fixed sequence of states (preset, format picks, options) and
produces an immutable SelectionResult. A cancelled prompt at any point moves
the flow to ABORTED and nothing it collected so far is returned.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from ytpick.exceptions import EmptyCatalogError, SelectionAborted, SelectionError
from ytpick.models.media import FormatRecord, MediaDescriptor
from ytpick.models.selection import (
    DEFAULT_CLASSIFICATION_POLICY,
    PRESET_SELECTORS,
    ClassificationPolicy,
    Preset,
    SelectionOptions,
    SelectionResult,
)
from ytpick.utils.formatting import audio_label, video_label
from ytpick.utils.path import output_template

from .classifier import audio_choices, video_choices
from .presets import presets_for
from .prompts import Cancelled, Prompter

log = logging.getLogger(__name__)

DEFAULT_SPONSORBLOCK_EXTRACTORS = ("Youtube",)


class FlowState(Enum):
    RESOLVE_PRESET = "resolve-preset"
    SELECT_VIDEO = "select-video"
    SELECT_AUDIO = "select-audio"
    ENTER_MANUAL = "enter-manual"
    CONFIGURE_OPTIONS = "configure-options"
    COMPLETE = "complete"
    ABORTED = "aborted"


TERMINAL_STATES = (FlowState.COMPLETE, FlowState.ABORTED)


class SelectionFlow:
    """
    Drives the prompts for one media item.

    Args:
        descriptor: The media item and its catalog.
        prompter: Asks the questions; every answer may be a cancellation.
        preset_override: A preset chosen up front, skipping the preset prompt.
        policy: Which records the video and audio pickers offer.
        thumbnail_helper_available: Whether the host can tag thumbnails; only
            used as the default of the embed-thumbnail question.
        sponsorblock_extractors: Extractor keys SponsorBlock knows about.
    """

    def __init__(
        self,
        descriptor: MediaDescriptor,
        prompter: Prompter,
        preset_override: Preset | None = None,
        *,
        policy: ClassificationPolicy = DEFAULT_CLASSIFICATION_POLICY,
        thumbnail_helper_available: bool = False,
        sponsorblock_extractors: Iterable[str] = DEFAULT_SPONSORBLOCK_EXTRACTORS,
    ):
        self.descriptor = descriptor
        self.prompter = prompter
        self.preset_override = preset_override
        self.policy = policy
        self.thumbnail_helper_available = thumbnail_helper_available
        self.sponsorblock_extractors = frozenset(sponsorblock_extractors)

        self.state = FlowState.RESOLVE_PRESET
        self._preset: Preset | None = None
        self._video: FormatRecord | None = None
        self._format_ids: list[str] = []
        self._result: SelectionResult | None = None

    def run(self) -> SelectionResult:
        """
        Runs the flow to completion.

        Raises:
            EmptyCatalogError: If the media item has no formats.
            SelectionError: If a picker has nothing to offer.
            SelectionAborted: If the user cancelled a prompt.
        """
        if not self.descriptor.formats:
            raise EmptyCatalogError(
                f"No formats are available for '{self.descriptor.title}'."
            )

        handlers = {
            FlowState.RESOLVE_PRESET: self._resolve_preset,
            FlowState.SELECT_VIDEO: self._select_video,
            FlowState.SELECT_AUDIO: self._select_audio,
            FlowState.ENTER_MANUAL: self._enter_manual,
            FlowState.CONFIGURE_OPTIONS: self._configure_options,
        }
        while self.state not in TERMINAL_STATES:
            next_state = handlers[self.state]()
            log.debug(f"Selection flow: {self.state.value} -> {next_state.value}")
            self.state = next_state

        if self.state is FlowState.ABORTED:
            self._format_ids.clear()
            raise SelectionAborted("Selection cancelled by user.")
        return self._result

    def _resolve_preset(self) -> FlowState:
        if self.preset_override is not None:
            self._preset = self.preset_override
        else:
            presets, default = presets_for(self.descriptor)
            answer = self.prompter.select(
                "Which preset do you want to use?",
                [p.label for p in presets],
                default=default,
            )
            if isinstance(answer, Cancelled):
                return FlowState.ABORTED
            self._preset = presets[answer.value]

        if self._preset is Preset.CUSTOM:
            return FlowState.SELECT_VIDEO
        if self._preset is Preset.MANUAL:
            return FlowState.ENTER_MANUAL
        self._format_ids.append(PRESET_SELECTORS[self._preset])
        return FlowState.CONFIGURE_OPTIONS

    def _select_video(self) -> FlowState:
        choices = video_choices(self.descriptor.formats, self.policy)
        if not choices:
            raise SelectionError("No video formats are available for a custom pick.")

        answer = self.prompter.select(
            "Which video format do you want?", [video_label(r) for r in choices]
        )
        if isinstance(answer, Cancelled):
            return FlowState.ABORTED

        self._video = choices[answer.value]
        self._format_ids.append(self._video.id)
        if self._video.has_audio:
            log.debug(f"Format {self._video.id} already carries audio")
            return FlowState.CONFIGURE_OPTIONS
        return FlowState.SELECT_AUDIO

    def _select_audio(self) -> FlowState:
        choices = audio_choices(self.descriptor.formats, self.policy)
        if not choices:
            raise SelectionError("No audio formats are available for a custom pick.")

        answer = self.prompter.select(
            "Which audio format do you want?", [audio_label(r) for r in choices]
        )
        if isinstance(answer, Cancelled):
            return FlowState.ABORTED

        self._format_ids.append(choices[answer.value].id)
        return FlowState.CONFIGURE_OPTIONS

    def _enter_manual(self) -> FlowState:
        answer = self.prompter.text("Format?")
        if isinstance(answer, Cancelled):
            return FlowState.ABORTED
        if not answer.value.strip():
            raise SelectionError("A format expression is required for a manual pick.")

        self._format_ids.append(answer.value.strip())
        return FlowState.CONFIGURE_OPTIONS

    def _configure_options(self) -> FlowState:
        preset = self._preset
        audio_only = preset is Preset.BEST_AUDIO

        title = self.prompter.text("Title?", default=self.descriptor.title)
        if isinstance(title, Cancelled):
            return FlowState.ABORTED

        thumbnail = self.prompter.confirm(
            "Embed thumbnail?",
            default=(
                preset in (Preset.BEST_AUDIO, Preset.BEST_VIDEO)
                and self.thumbnail_helper_available
            ),
        )
        if isinstance(thumbnail, Cancelled):
            return FlowState.ABORTED

        embed_chapters = False
        if not audio_only:
            chapters = self.prompter.confirm(
                "Embed chapters?",
                default=preset in (Preset.BEST, Preset.BEST_VIDEO),
            )
            if isinstance(chapters, Cancelled):
                return FlowState.ABORTED
            embed_chapters = chapters.value

        embed_subtitles = None
        tracks = self.descriptor.subtitle_tracks()
        if not audio_only and tracks:
            langs = list(tracks)
            picked = self.prompter.select_many(
                "Which subtitles do you want to embed?",
                [self.descriptor.subtitle_label(lang) for lang in langs],
            )
            if isinstance(picked, Cancelled):
                return FlowState.ABORTED
            embed_subtitles = frozenset(langs[i] for i in picked.value) or None

        remove_sponsors = False
        if (
            not audio_only
            and self.descriptor.extractor_key in self.sponsorblock_extractors
        ):
            sponsors = self.prompter.confirm(
                "Remove sponsor segments? (this forces the video to be re-encoded)",
                default=False,
            )
            if isinstance(sponsors, Cancelled):
                return FlowState.ABORTED
            remove_sponsors = sponsors.value

        self._result = SelectionResult(
            preset=preset,
            format_ids=tuple(self._format_ids),
            options=SelectionOptions(
                output_template=output_template(
                    title.value, fallback=self.descriptor.id
                ),
                embed_thumbnail=thumbnail.value,
                embed_chapters=embed_chapters,
                embed_subtitles=embed_subtitles,
                remove_sponsor_segments=remove_sponsors,
            ),
        )
        return FlowState.COMPLETE


def resolve_selection(
    descriptor: MediaDescriptor,
    prompter: Prompter,
    preset_override: Preset | None = None,
    **kwargs,
) -> SelectionResult:
    """Runs a SelectionFlow for the descriptor; see SelectionFlow for the options."""
    return SelectionFlow(descriptor, prompter, preset_override, **kwargs).run()
