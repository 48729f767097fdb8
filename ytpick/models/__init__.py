"""
Data Models Layer.

This package contains the Pydantic models describing the yt-dlp sidecar and
the configuration, plus the value types exchanged between the selection flow
and the command assembler.
"""

from .config import AppConfig
from .media import FormatRecord, MediaDescriptor, SubtitleVariant
from .selection import (
    ClassificationPolicy,
    CommandSpec,
    Flag,
    Preset,
    SelectionOptions,
    SelectionResult,
)

__all__ = [
    "AppConfig",
    "ClassificationPolicy",
    "CommandSpec",
    "Flag",
    "FormatRecord",
    "MediaDescriptor",
    "Preset",
    "SelectionOptions",
    "SelectionResult",
    "SubtitleVariant",
]
