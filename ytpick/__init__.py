"""
ytpick: pick formats interactively and hand a single command to yt-dlp.
"""

__version__ = "0.4.0"
