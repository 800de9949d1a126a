"""Audio bitrate aggregation over stored media streams."""

from typing import Iterable, Optional

from audiokeys.models.stream import MediaStream, MediaStreamType


def total_audio_bitrate(
    declared_bitrate: Optional[int], streams: Iterable[MediaStream]
) -> int:
    """Total bitrate of an item.

    A declared bitrate is returned unchanged, whatever its value. Otherwise
    the bitrates of all audio streams are summed, a missing stream bitrate
    counting as zero.

    Args:
        declared_bitrate: Bitrate recorded on the item, if any
        streams: Streams stored for the item

    Returns:
        Declared or summed bitrate (zero when there are no audio streams)
    """
    if declared_bitrate is not None:
        return declared_bitrate

    return sum(s.bitrate or 0 for s in streams if s.type == MediaStreamType.AUDIO)
