from collections.abc import Sequence
from typing import Any

import pytest

from ytpick.core.prompts import Cancelled, Choice
from ytpick.models.media import parse_descriptor


def make_format(format_id: str, acodec: str = "none", vcodec: str = "none", **extra):
    raw = {
        "format_id": format_id,
        "ext": extra.pop("ext", "webm"),
        "protocol": extra.pop("protocol", "https"),
        "acodec": acodec,
        "vcodec": vcodec,
    }
    raw.update(extra)
    return raw


def make_descriptor(formats: list[dict[str, Any]], **extra):
    data = {
        "id": "dQw4w9WgXcQ",
        "title": "Some Video",
        "extractor_key": "Youtube",
        "duration": 212.0,
        "formats": formats,
    }
    data.update(extra)
    return parse_descriptor(data)


class ScriptedPrompter:
    """Answers prompts from a script and records every question asked."""

    def __init__(self, answers: Sequence[Any]):
        self.answers = list(answers)
        self.calls: list[dict[str, Any]] = []

    def _next(self, kind: str, message: str, **details):
        self.calls.append({"kind": kind, "message": message, **details})
        if not self.answers:
            raise AssertionError(f"Unexpected {kind} prompt: {message}")
        answer = self.answers.pop(0)
        if isinstance(answer, Cancelled):
            return answer
        return Choice(answer)

    def select(self, message, labels, default=0):
        return self._next("select", message, labels=list(labels), default=default)

    def select_many(self, message, labels):
        return self._next("select_many", message, labels=list(labels))

    def text(self, message, default=""):
        return self._next("text", message, default=default)

    def confirm(self, message, default):
        return self._next("confirm", message, default=default)

    def messages(self) -> list[str]:
        return [c["message"] for c in self.calls]


@pytest.fixture
def youtube_formats():
    return [
        make_format("sb0", ext="mhtml", protocol="mhtml", format_note="storyboard"),
        make_format("140", acodec="mp4a.40.2", asr=44100, filesize=3_400_000,
                    ext="m4a", format_note="medium"),
        make_format("251", acodec="opus", asr=48000, filesize=3_600_000,
                    format_note="medium"),
        make_format("18", acodec="mp4a.40.2", vcodec="avc1.42001E", width=640,
                    height=360, resolution="640x360", asr=44100, ext="mp4"),
        make_format("136", vcodec="avc1.4d401f", width=1280, height=720,
                    resolution="1280x720", filesize_approx=25_000_000, ext="mp4"),
        make_format("247", vcodec="vp9", width=1280, height=720,
                    resolution="1280x720", format_note="720p"),
        make_format("137", vcodec="avc1.640028", width=1920, height=1080,
                    resolution="1920x1080", ext="mp4", protocol="m3u8_native"),
    ]


@pytest.fixture
def descriptor(youtube_formats):
    return make_descriptor(youtube_formats)
