"""
Computes which presets can be offered for a media item, in which order, and
where the preset prompt's cursor should start.
"""

from ytpick.models.media import MediaDescriptor
from ytpick.models.selection import Preset

from .classifier import has_audio_only_variant, has_video_only_variant, is_music_like

# Audio-oriented presets come first for music, video-oriented ones otherwise
MUSIC_ORDER = (
    Preset.BEST_AUDIO,
    Preset.CUSTOM,
    Preset.BEST,
    Preset.BEST_VIDEO,
    Preset.MANUAL,
)
VIDEO_ORDER = (
    Preset.CUSTOM,
    Preset.BEST,
    Preset.BEST_VIDEO,
    Preset.BEST_AUDIO,
    Preset.MANUAL,
)


def offerable_presets(has_audio_only: bool, has_video_only: bool) -> set[Preset]:
    presets = {Preset.MANUAL, Preset.CUSTOM, Preset.BEST}
    if has_audio_only:
        presets.add(Preset.BEST_AUDIO)
    if has_video_only:
        presets.add(Preset.BEST_VIDEO)
    return presets


def resolve_presets(
    has_audio_only: bool, has_video_only: bool, music_like: bool
) -> tuple[list[Preset], int]:
    """
    Returns the ordered offerable presets and the index the prompt should
    start highlighted at.
    """
    offerable = offerable_presets(has_audio_only, has_video_only)
    order = MUSIC_ORDER if music_like else VIDEO_ORDER
    presets = [p for p in order if p in offerable]

    if music_like and Preset.BEST_AUDIO in offerable:
        default = Preset.BEST_AUDIO
    else:
        default = Preset.BEST
    return presets, presets.index(default)


def presets_for(descriptor: MediaDescriptor) -> tuple[list[Preset], int]:
    """Classifies the descriptor's catalog and resolves its presets."""
    return resolve_presets(
        has_audio_only_variant(descriptor.formats),
        has_video_only_variant(descriptor.formats),
        is_music_like(descriptor),
    )
