from dataclasses import dataclass


@dataclass(frozen=True)
class MediaMetadata:
    """Stream metadata recovered by probing a loaded media file."""

    duration: str | None = None  # HH:MM:SS, e.g. "00:01:05"
    codec: str | None = None  # e.g. "h264"
