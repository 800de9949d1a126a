"""Media stream data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MediaStreamType(str, Enum):
    """Kinds of stream stored for a library item."""

    AUDIO = "audio"
    VIDEO = "video"
    SUBTITLE = "subtitle"
    EMBEDDED_IMAGE = "embedded_image"


@dataclass
class MediaStream:
    """Represents a single stream stored for a library item."""

    type: MediaStreamType
    index: int = 0  # Stream index within the file
    codec: Optional[str] = None  # Codec name (e.g., "flac", "mp3")
    language: Optional[str] = None  # ISO 639-2 language code
    bitrate: Optional[int] = None  # Bitrate in bits/second
    channels: Optional[int] = None  # Number of audio channels

    def __str__(self) -> str:
        """Human-readable representation."""
        codec_part = f" {self.codec}" if self.codec else ""
        bitrate_part = f" @ {self.bitrate} bps" if self.bitrate else ""
        return f"Stream {self.index}: {self.type.value}{codec_part}{bitrate_part}"
