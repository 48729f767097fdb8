import json

import pytest
from typer.testing import CliRunner

from conftest import ScriptedPrompter
from ytpick import __version__
from ytpick.cli import app as cli_app
from ytpick.core.prompts import Cancelled
from ytpick.exceptions import ProbeError

runner = CliRunner()
URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config" / "config.ini"
    monkeypatch.setattr(cli_app, "CONFIG_FILE", path)
    return path


@pytest.fixture
def fake_ytdlp(monkeypatch, youtube_formats):
    """Replaces both yt-dlp invocations and records what they were given."""
    calls = {"probe": [], "download": [], "workdirs": []}

    def fake_probe(args, workdir):
        calls["probe"].append(list(args))
        calls["workdirs"].append(workdir)
        sidecar = workdir / "Some Video [dQw4w9WgXcQ].info.json"
        sidecar.write_text(
            json.dumps(
                {
                    "id": "dQw4w9WgXcQ",
                    "title": "Some Video",
                    "extractor_key": "Youtube",
                    "duration": 212,
                    "formats": youtube_formats,
                }
            ),
            encoding="utf-8",
        )
        return sidecar

    def fake_download(args):
        calls["download"].append(list(args))

    monkeypatch.setattr(cli_app, "probe", fake_probe)
    monkeypatch.setattr(cli_app, "download", fake_download)
    monkeypatch.setattr(cli_app, "thumbnail_helper_available", lambda helper: False)
    return calls


def _script(monkeypatch, answers):
    prompter = ScriptedPrompter(answers)
    monkeypatch.setattr(cli_app, "RichPrompter", lambda console: prompter)
    return prompter


def test_version():
    result = runner.invoke(cli_app.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_download_runs_both_invocations(config_file, fake_ytdlp, monkeypatch):
    _script(monkeypatch, [1, "Rick", False, True, False])
    result = runner.invoke(
        cli_app.app, ["download", URL, "--quiet", "--", "--cookies", "c.txt"]
    )
    assert result.exit_code == 0, result.output

    probe_args = fake_ytdlp["probe"][0]
    assert probe_args[:3] == ["yt-dlp", "--quiet", "--write-info-json"]
    assert probe_args[-3:] == [URL, "--cookies", "c.txt"]

    download_args = fake_ytdlp["download"][0]
    assert download_args[0] == "yt-dlp"
    assert "--embed-chapters" in download_args
    assert download_args[-6:] == [
        "-o",
        "Rick.%(ext)s",
        "-f",
        "bv*+ba/b",
        "--cookies",
        "c.txt",
    ]
    assert not fake_ytdlp["workdirs"][0].exists()


def test_abort_at_preset_downloads_nothing(config_file, fake_ytdlp, monkeypatch):
    prompter = _script(monkeypatch, [Cancelled()])
    result = runner.invoke(cli_app.app, ["download", URL])

    assert result.exit_code == 0
    assert fake_ytdlp["download"] == []
    assert len(prompter.calls) == 1
    assert not fake_ytdlp["workdirs"][0].exists()


def test_preset_option_skips_preset_prompt(config_file, fake_ytdlp, monkeypatch):
    prompter = _script(monkeypatch, ["Song", False])
    result = runner.invoke(cli_app.app, ["download", URL, "-p", "best-audio"])

    assert result.exit_code == 0, result.output
    assert prompter.messages() == ["Title?", "Embed thumbnail?"]
    download_args = fake_ytdlp["download"][0]
    assert download_args[1] == "-x"
    assert download_args[-2:] == ["-f", "bestaudio"]


def test_dirs_targets_music_dir(config_file, fake_ytdlp, monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_MUSIC_DIR", str(tmp_path / "music"))
    _script(monkeypatch, ["Song", False])
    result = runner.invoke(cli_app.app, ["download", URL, "-p", "best-audio", "-d"])

    assert result.exit_code == 0, result.output
    download_args = fake_ytdlp["download"][0]
    assert download_args[1:3] == ["-P", str(tmp_path / "music")]


def test_probe_failure_exits_with_error(config_file, monkeypatch):
    def failing_probe(args, workdir):
        raise ProbeError("yt-dlp exited with status 1")

    monkeypatch.setattr(cli_app, "probe", failing_probe)
    result = runner.invoke(cli_app.app, ["download", URL])
    assert result.exit_code == 1
    assert "ProbeError" in result.output


def test_invalid_config_exits_with_error(config_file, fake_ytdlp):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nclassification_policy = sometimes\n")
    result = runner.invoke(cli_app.app, ["download", URL])
    assert result.exit_code == 1
    assert "ConfigurationError" in result.output
    assert fake_ytdlp["probe"] == []


def test_init_writes_config(config_file):
    result = runner.invoke(cli_app.app, ["init"])
    assert result.exit_code == 0
    assert "classification_policy = strict" in config_file.read_text()


def test_init_refuses_to_overwrite_without_confirmation(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nquiet = true\n")
    result = runner.invoke(cli_app.app, ["init"], input="n\n")
    assert result.exit_code != 0
    assert config_file.read_text() == "[DEFAULT]\nquiet = true\n"


def test_show_config_without_file_shows_defaults(config_file):
    result = runner.invoke(cli_app.app, ["--show-config"])
    assert result.exit_code == 0
    assert "ytdlp_path = yt-dlp" in result.output


def test_diagnose_reports_missing_ytdlp(config_file, monkeypatch):
    monkeypatch.setattr(cli_app, "find_tool", lambda name: None)
    result = runner.invoke(cli_app.app, ["diagnose"])
    assert result.exit_code == 1
    assert "yt-dlp not found" in result.output


def test_diagnose_passes_with_tools(config_file, monkeypatch, tmp_path):
    monkeypatch.setattr(cli_app, "find_tool", lambda name: tmp_path / name)
    result = runner.invoke(cli_app.app, ["diagnose"])
    assert result.exit_code == 0
    assert "All checks passed" in result.output


def test_ctrl_c_during_download_exits_0(config_file, fake_ytdlp, monkeypatch):
    def interrupted(args):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli_app, "download", interrupted)
    _script(monkeypatch, ["Song", False])
    result = runner.invoke(cli_app.app, ["download", URL, "-p", "best-audio"])

    assert result.exit_code == 0
    assert "Operation cancelled by user" in result.output
    assert not fake_ytdlp["workdirs"][0].exists()


def test_diagnose_reports_bad_boolean(config_file, monkeypatch, tmp_path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nquiet = maybe\n")
    monkeypatch.setattr(cli_app, "find_tool", lambda name: tmp_path / name)
    result = runner.invoke(cli_app.app, ["diagnose"])
    assert result.exit_code == 1
    assert "Configuration validation failed" in result.output
