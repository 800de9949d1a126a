"""Media source data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from audiokeys.models.stream import MediaStream


class MediaProtocol(str, Enum):
    """Protocol a playback client uses to reach a media source."""

    FILE = "file"
    HTTP = "http"


@dataclass
class MediaSource:
    """A resolved, playable version of a library item."""

    id: str  # 32 hex digits, no hyphens
    protocol: MediaProtocol
    media_streams: list[MediaStream] = field(default_factory=list)
    name: Optional[str] = None
    path: Optional[str] = None
    run_time_ticks: Optional[int] = None
    container: str = ""
    size: Optional[int] = None
    bitrate: Optional[int] = None  # Only set when strictly positive
    formats: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to plain JSON-compatible types."""
        return {
            "id": self.id,
            "protocol": self.protocol.value,
            "media_streams": [
                {
                    "type": s.type.value,
                    "index": s.index,
                    "codec": s.codec,
                    "language": s.language,
                    "bitrate": s.bitrate,
                    "channels": s.channels,
                }
                for s in self.media_streams
            ],
            "name": self.name,
            "path": self.path,
            "run_time_ticks": self.run_time_ticks,
            "container": self.container,
            "size": self.size,
            "bitrate": self.bitrate,
            "formats": list(self.formats),
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        bitrate_part = f", {self.bitrate} bps" if self.bitrate else ""
        return f"{self.name} ({self.protocol.value}, {self.container or 'unknown'}{bitrate_part})"
