"""
Pydantic models for the yt-dlp info JSON sidecar.

Only the fields the selection logic and the pickers need are modelled; every
other key in the sidecar is ignored. yt-dlp spells "no codec" as the literal
string ``"none"``; the models turn it into ``None`` on construction so nothing
downstream ever sees the sentinel.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from ytpick.exceptions import ProbeError, SchemaError

log = logging.getLogger(__name__)

NONE_SENTINEL = "none"


def _strip_sentinel(value: Any) -> Any:
    if isinstance(value, str) and value == NONE_SENTINEL:
        return None
    return value


class FormatRecord(BaseModel):
    """One encoded variant of the media item, as listed under ``formats``."""

    id: str = Field(alias="format_id")
    ext: str
    protocol: str
    audio_codec: str | None = Field(default=None, alias="acodec")
    video_codec: str | None = Field(default=None, alias="vcodec")
    width: int | None = None
    height: int | None = None
    resolution: str | None = None
    frame_rate: float | None = Field(default=None, alias="fps")
    audio_sample_rate: int | None = Field(default=None, alias="asr")
    file_size: int | None = Field(default=None, alias="filesize")
    file_size_approx: int | None = Field(default=None, alias="filesize_approx")
    note: str | None = Field(default=None, alias="format_note")
    container: str | None = None

    # Informational only
    tbr: float | None = None
    abr: float | None = None
    vbr: float | None = None
    audio_channels: int | None = None
    dynamic_range: str | None = None

    class Config:
        """Pydantic model configuration."""

        frozen = True
        populate_by_name = True

    @field_validator("audio_codec", "video_codec", "resolution", mode="before")
    @classmethod
    def normalize_sentinel(cls, v: Any) -> Any:
        """Maps the literal ``"none"`` to an absent value."""
        return _strip_sentinel(v)

    @field_validator(
        "width", "height", "audio_sample_rate", "file_size", "file_size_approx",
        mode="before",
    )
    @classmethod
    def truncate_float(cls, v: Any) -> Any:
        """Some extractors report integral quantities as floats."""
        if isinstance(v, float):
            return int(v)
        return v

    @property
    def size(self) -> int | None:
        """The exact file size when known, otherwise the approximate one."""
        return self.file_size if self.file_size is not None else self.file_size_approx

    @property
    def has_audio(self) -> bool:
        return self.audio_codec is not None

    @property
    def has_video(self) -> bool:
        return self.video_codec is not None


class SubtitleVariant(BaseModel):
    """One downloadable rendition of a subtitle track."""

    ext: str
    url: str | None = None
    name: str | None = None
    # Only live chat / live caption variants carry a protocol
    protocol: str | None = None

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @property
    def is_live_caption(self) -> bool:
        return self.protocol is not None


class MediaDescriptor(BaseModel):
    """The media item described by the sidecar, with its catalog of formats."""

    id: str
    title: str
    extractor_key: str
    formats: tuple[FormatRecord, ...]
    duration: float | None = None
    categories: tuple[str, ...] | None = None
    subtitles: dict[str, tuple[SubtitleVariant, ...]] = Field(default_factory=dict)
    webpage_url: str | None = None
    thumbnail: str | None = None
    uploader: str | None = None
    extractor: str | None = None

    class Config:
        """Pydantic model configuration."""

        frozen = True

    @field_validator("subtitles", mode="before")
    @classmethod
    def default_subtitles(cls, v: Any) -> Any:
        return {} if v is None else v

    def subtitle_tracks(self) -> dict[str, tuple[SubtitleVariant, ...]]:
        """
        Returns the subtitle tracks that can be embedded, i.e. every track
        except the ones made of live caption variants, in sidecar order.
        """
        return {
            lang: variants
            for lang, variants in self.subtitles.items()
            if variants and not any(v.is_live_caption for v in variants)
        }

    def subtitle_label(self, lang: str) -> str:
        """The human-readable name of a subtitle track, or its language code."""
        for variant in self.subtitles.get(lang, ()):
            if variant.name:
                return variant.name
        return lang


def _describe_validation_error(error: ValidationError, what: str) -> str:
    """Renders a pydantic error with the dotted path of every offending field."""
    details = []
    for err in error.errors():
        path = ".".join(str(p) for p in err["loc"]) if err["loc"] else "root"
        details.append(f"  {path}: {err['msg']}")
    return f"{what} does not match the expected schema:\n" + "\n".join(details)


def normalize(raw: Mapping[str, Any] | FormatRecord) -> FormatRecord:
    """
    Builds a normalized FormatRecord from a raw ``formats`` entry.

    Passing an already normalized record yields an equal record.

    Raises:
        SchemaError: If ``format_id``, ``ext`` or ``protocol`` is missing or a
        field has the wrong type.
    """
    if isinstance(raw, FormatRecord):
        raw = raw.model_dump(by_alias=True)
    try:
        return FormatRecord.model_validate(raw)
    except ValidationError as e:
        raise SchemaError(_describe_validation_error(e, "Format record")) from e


def parse_descriptor(data: Any) -> MediaDescriptor:
    """
    Validates a decoded sidecar document.

    Raises:
        SchemaError: If the document does not match the expected schema.
    """
    try:
        return MediaDescriptor.model_validate(data)
    except ValidationError as e:
        raise SchemaError(_describe_validation_error(e, "Info JSON")) from e


def load_descriptor(path: Path) -> MediaDescriptor:
    """
    Reads and validates the info JSON sidecar written by yt-dlp.

    Raises:
        ProbeError: If the file cannot be read.
        SchemaError: If the file is not valid JSON or does not match the schema.
    """
    log.debug(f"Loading info JSON from '{path}'")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SchemaError(f"Info JSON '{path.name}' is not valid JSON: {e}") from e
    except OSError as e:
        raise ProbeError(f"Unable to read the info JSON file '{path}': {e}") from e
    return parse_descriptor(data)
