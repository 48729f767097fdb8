"""
Helper functions for formatting data into human-readable strings.
"""

from ytpick.models.media import FormatRecord


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable binary size string (e.g., '145.3 MiB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KiB", "MiB", "GiB", "TiB"]
    size = float(bytes_size)
    i = 0
    while size >= 1024 and i < len(units) - 1:
        size /= 1024
        i += 1
    if i == 0:
        return f"{bytes_size} B"
    return f"{size:.1f} {units[i]}"


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2h 34m 12s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def format_sample_rate(hertz: int) -> str:
    """Formats a sample rate in kHz, truncated (e.g., 48000 -> '48k')."""
    return f"{hertz // 1000}k"


def video_label(record: FormatRecord) -> str:
    """Picker label for a video-bearing record: codec, resolution, size, note, protocol."""
    parts = [record.id]
    if record.video_codec:
        parts.append(f"{record.video_codec[:4]:<4}")
    if record.resolution:
        parts.append(record.resolution)
    if (size := record.size) is not None:
        parts.append(format_size(size))
    if record.note:
        parts.append(record.note)
    parts.append(record.protocol)
    return " ".join(parts)


def audio_label(record: FormatRecord) -> str:
    """Picker label for an audio-bearing record: codec, sample rate, size, note."""
    parts = [record.id]
    if record.audio_codec:
        parts.append(f"{record.audio_codec[:4]:<4}")
    if record.audio_sample_rate is not None:
        parts.append(format_sample_rate(record.audio_sample_rate))
    if (size := record.size) is not None:
        parts.append(format_size(size))
    if record.note:
        parts.append(record.note)
    return " ".join(parts)
