"""
Utilities for building output paths handed to yt-dlp.
"""

import os
from pathlib import Path

from pathvalidate import sanitize_filename

# yt-dlp fills in the extension once the final container is known
EXT_PLACEHOLDER = "%(ext)s"


def output_template(title: str, fallback: str = "download") -> str:
    """
    Builds the yt-dlp output template ``"<title>.%(ext)s"`` from a user-chosen
    title. The title is sanitized for the filesystem and its ``%`` signs are
    doubled so yt-dlp does not read them as template fields.
    """
    safe = sanitize_filename(title.strip(), platform="auto").strip() or fallback
    return f"{safe.replace('%', '%%')}.{EXT_PLACEHOLDER}"


def get_config_dir() -> Path:
    if os.name == "nt":
        base_dir = Path(os.getenv("APPDATA", "~\\AppData\\Roaming"))
    else:
        base_dir = Path(os.getenv("XDG_CONFIG_HOME", "~/.config"))
    return base_dir.expanduser() / "ytpick"


def _read_user_dirs() -> dict[str, str]:
    """
    Parses ``$XDG_CONFIG_HOME/user-dirs.dirs``, the file xdg-user-dirs writes
    with lines such as ``XDG_MUSIC_DIR="$HOME/Musik"``.
    """
    config_home = Path(os.getenv("XDG_CONFIG_HOME", "~/.config")).expanduser()
    try:
        text = (config_home / "user-dirs.dirs").read_text(encoding="utf-8")
    except OSError:
        return {}

    home = str(Path.home())
    user_dirs = {}
    for line in text.splitlines():
        key, sep, value = line.strip().partition("=")
        if not sep or key.startswith("#"):
            continue
        user_dirs[key] = value.strip().strip('"').replace("$HOME", home)
    return user_dirs


def get_media_dir(audio: bool) -> Path:
    """
    The user's music directory for audio downloads, video directory otherwise.
    An exported ``XDG_*_DIR`` variable wins over ``user-dirs.dirs``.
    """
    if audio:
        key, default = "XDG_MUSIC_DIR", "~/Music"
    else:
        key, default = "XDG_VIDEOS_DIR", "~/Videos"
    media_dir = os.getenv(key) or _read_user_dirs().get(key) or default
    return Path(media_dir).expanduser()
