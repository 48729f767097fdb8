"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class YtPickError(Exception):
    """Base exception for all application-specific errors."""


class SchemaError(YtPickError):
    """Raised when the info JSON sidecar is malformed or misses a required field."""


class EmptyCatalogError(YtPickError):
    """Raised when the media item reports no formats at all."""


class FlowError(YtPickError):
    """Base class for errors raised by the interactive selection flow."""


class SelectionAborted(FlowError):
    """
    Raised when the user cancels a prompt. This is not a failure: callers exit
    cleanly without running a download.
    """


class SelectionError(FlowError):
    """Raised when a selection cannot be completed with the available formats."""


class EmptySelectionError(YtPickError):
    """Raised when a stream selector is built from no format ids."""


class ConfigurationError(YtPickError):
    """Raised for issues related to configuration loading or validation."""


class ProbeError(YtPickError):
    """Raised when yt-dlp fails to produce the info JSON sidecar."""


class DownloadError(YtPickError):
    """Raised when the final yt-dlp download invocation exits with an error."""
