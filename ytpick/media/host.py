"""
Checks for external tools installed on the host.
"""

import logging
import shutil
from pathlib import Path

log = logging.getLogger(__name__)


def find_tool(name_or_path: str) -> Path | None:
    """
    Locates an executable given either a bare name (looked up on PATH) or a
    path to the file itself.
    """
    if not name_or_path:
        return None
    candidate = Path(name_or_path).expanduser()
    if candidate.parent != Path(".") and candidate.is_file():
        return candidate
    if which_path := shutil.which(name_or_path):
        return Path(which_path)
    return None


def thumbnail_helper_available(helper: str) -> bool:
    """Whether the tool yt-dlp uses to tag thumbnails into audio files is installed."""
    found = find_tool(helper)
    log.debug(f"Thumbnail helper '{helper}': {found or 'not found'}")
    return found is not None
