"""
External Tools Layer.

This package is responsible for everything that touches processes and the
host: running yt-dlp, locating its sidecar, and detecting helper binaries.
"""

from .host import find_tool, thumbnail_helper_available
from .ytdlp import download, find_sidecar, probe, workspace

__all__ = [
    "download",
    "find_sidecar",
    "find_tool",
    "probe",
    "thumbnail_helper_available",
    "workspace",
]
