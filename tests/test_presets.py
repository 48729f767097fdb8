import itertools

import pytest

from conftest import make_descriptor, make_format
from ytpick.core.presets import offerable_presets, presets_for, resolve_presets
from ytpick.models.selection import Preset

ALWAYS = {Preset.MANUAL, Preset.CUSTOM, Preset.BEST}
FLAGS = list(itertools.product([False, True], repeat=3))


@pytest.mark.parametrize(("audio", "video", "music"), FLAGS)
def test_offerable_set(audio, video, music):
    presets, default = resolve_presets(audio, video, music)
    expected = set(ALWAYS)
    if audio:
        expected.add(Preset.BEST_AUDIO)
    if video:
        expected.add(Preset.BEST_VIDEO)
    assert set(presets) == expected
    assert len(presets) == len(expected)
    assert 0 <= default < len(presets)


@pytest.mark.parametrize(("audio", "video", "music"), FLAGS)
def test_adding_variants_never_removes_presets(audio, video, music):
    base, _ = resolve_presets(audio, video, music)
    richer, _ = resolve_presets(True, video, music)
    assert set(base) <= set(richer)
    richer, _ = resolve_presets(audio, True, music)
    assert set(base) <= set(richer)


def test_music_puts_audio_presets_first():
    presets, default = resolve_presets(True, True, True)
    assert presets.index(Preset.BEST_AUDIO) < presets.index(Preset.BEST_VIDEO)
    assert presets[0] is Preset.BEST_AUDIO
    assert presets[default] is Preset.BEST_AUDIO


def test_non_music_puts_video_presets_first():
    presets, default = resolve_presets(True, True, False)
    assert presets == [
        Preset.CUSTOM,
        Preset.BEST,
        Preset.BEST_VIDEO,
        Preset.BEST_AUDIO,
        Preset.MANUAL,
    ]
    assert presets[default] is Preset.BEST


def test_music_without_audio_only_defaults_to_best():
    presets, default = resolve_presets(False, True, True)
    assert Preset.BEST_AUDIO not in presets
    assert presets[default] is Preset.BEST


def test_order_is_a_reordering_of_the_same_set():
    music, _ = resolve_presets(True, True, True)
    video, _ = resolve_presets(True, True, False)
    assert set(music) == set(video)
    assert music != video


def test_presets_for_music_descriptor():
    descriptor = make_descriptor(
        [
            make_format("251", acodec="opus"),
            make_format("137", vcodec="avc1"),
        ],
        categories=["Music"],
    )
    presets, default = presets_for(descriptor)
    assert presets.index(Preset.BEST_AUDIO) < presets.index(Preset.BEST_VIDEO)
    assert presets[default] is Preset.BEST_AUDIO


def test_presets_for_muxed_only_catalog():
    descriptor = make_descriptor([make_format("18", acodec="mp4a", vcodec="avc1")])
    presets, _ = presets_for(descriptor)
    assert set(presets) == ALWAYS


def test_offerable_presets_helper():
    assert offerable_presets(False, False) == ALWAYS
