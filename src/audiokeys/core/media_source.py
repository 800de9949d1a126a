"""Media source resolution for audio items."""

from typing import Optional

from audiokeys.core.container import resolve_container
from audiokeys.core.library import MediaLibrary
from audiokeys.core.streams import total_audio_bitrate
from audiokeys.models.item import AudioItem, LocationType
from audiokeys.models.source import MediaProtocol, MediaSource
from audiokeys.utils.logger import get_logger
from audiokeys.utils.path_mapper import PathMapper

logger = get_logger(__name__)


def split_formats(format_name: Optional[str]) -> list[str]:
    """Split a comma-separated format name, dropping empty segments."""
    return [part for part in (format_name or "").split(",") if part]


class MediaSourceBuilder:
    """Build playable media sources for audio items."""

    def __init__(self, library: MediaLibrary, path_mapper: PathMapper):
        """Initialize media source builder.

        Args:
            library: Library holding the stream store
            path_mapper: Path substitution rules
        """
        self.library = library
        self.path_mapper = path_mapper

    def get_media_sources(
        self, item: AudioItem, enable_path_substitution: bool
    ) -> list[MediaSource]:
        """Media sources for an item. Audio items have a single version."""
        return [self.build(item, enable_path_substitution)]

    def build(self, item: AudioItem, enable_path_substitution: bool) -> MediaSource:
        """Resolve the media source for an audio item.

        Args:
            item: Audio item to resolve
            enable_path_substitution: Apply path mappings to the item path

        Returns:
            Resolved MediaSource
        """
        location_type = item.location_type
        streams = self.library.get_media_streams(item.id)

        if enable_path_substitution:
            path = self.path_mapper.map_path(item.path, location_type)
        else:
            path = item.path

        source = MediaSource(
            id=item.id.hex,
            protocol=MediaProtocol.HTTP
            if location_type == LocationType.REMOTE
            else MediaProtocol.FILE,
            media_streams=streams,
            name=item.name,
            path=path,
            run_time_ticks=item.run_time_ticks,
            container=resolve_container(item.container, item.path, location_type),
            size=item.size,
            formats=split_formats(item.format_name),
        )

        bitrate = total_audio_bitrate(item.total_bitrate, streams)
        if bitrate > 0:
            source.bitrate = bitrate

        logger.debug(
            "Media source resolved",
            item_id=source.id,
            protocol=source.protocol.value,
            container=source.container,
            bitrate=source.bitrate,
            stream_count=len(streams),
        )

        return source
