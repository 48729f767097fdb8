"""
Pure predicates that partition a catalog into audio-only, video-only and muxed
variants, plus the filters and orderings used by the interactive pickers.
"""

from collections.abc import Iterable, Sequence

from ytpick.models.media import FormatRecord, MediaDescriptor
from ytpick.models.selection import DEFAULT_CLASSIFICATION_POLICY, ClassificationPolicy

MUSIC_CATEGORY = "music"


def is_audio_only(record: FormatRecord) -> bool:
    return record.has_audio and not record.has_video


def is_video_only(record: FormatRecord) -> bool:
    return record.has_video and not record.has_audio


def is_muxed(record: FormatRecord) -> bool:
    return record.has_audio and record.has_video


def has_audio_only_variant(catalog: Iterable[FormatRecord]) -> bool:
    return any(is_audio_only(r) for r in catalog)


def has_video_only_variant(catalog: Iterable[FormatRecord]) -> bool:
    return any(is_video_only(r) for r in catalog)


def is_music_like(descriptor: MediaDescriptor) -> bool:
    """True if any category of the media item is "music", ignoring case."""
    if not descriptor.categories:
        return False
    return any(cat.casefold() == MUSIC_CATEGORY for cat in descriptor.categories)


def _descending(records: Iterable[FormatRecord], key) -> list[FormatRecord]:
    """
    Sorts a copy by a descending optional key. Records without the key go last,
    equal keys keep their catalog order.
    """
    return sorted(
        records,
        key=lambda r: (key(r) is None, -(key(r) or 0)),
    )


def video_choices(
    catalog: Sequence[FormatRecord],
    policy: ClassificationPolicy = DEFAULT_CLASSIFICATION_POLICY,
) -> list[FormatRecord]:
    """Records offered by the video picker, widest first."""
    if policy is ClassificationPolicy.STRICT:
        candidates = (r for r in catalog if is_video_only(r))
    else:
        candidates = (r for r in catalog if is_video_only(r) or is_muxed(r))
    return _descending(candidates, key=lambda r: r.width)


def audio_choices(
    catalog: Sequence[FormatRecord],
    policy: ClassificationPolicy = DEFAULT_CLASSIFICATION_POLICY,
) -> list[FormatRecord]:
    """Records offered by the audio picker, highest sample rate first."""
    if policy is ClassificationPolicy.STRICT:
        candidates = (r for r in catalog if is_audio_only(r))
    else:
        candidates = (r for r in catalog if is_audio_only(r) or is_muxed(r))
    return _descending(candidates, key=lambda r: r.audio_sample_rate)
