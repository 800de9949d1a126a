"""Unit tests for media source resolution."""

import pytest

from audiokeys.config import PathMapping
from audiokeys.core.library import MediaLibrary
from audiokeys.core.media_source import MediaSourceBuilder, split_formats
from audiokeys.models.item import LocationType
from audiokeys.models.source import MediaProtocol
from audiokeys.models.stream import MediaStream, MediaStreamType
from audiokeys.utils.path_mapper import PathMapper


@pytest.fixture
def builder(library, path_mapper):
    """Create a builder over the sample library."""
    return MediaSourceBuilder(library, path_mapper)


class TestSplitFormats:
    """Test format name splitting."""

    def test_splits_on_commas(self):
        """Should keep segment order."""
        assert split_formats("mp3,alt") == ["mp3", "alt"]

    def test_drops_empty_segments(self):
        """Should drop empty segments but keep duplicates."""
        assert split_formats(",mov,,mp4,mov,") == ["mov", "mp4", "mov"]

    @pytest.mark.parametrize("format_name", [None, "", ","])
    def test_empty(self, format_name):
        """Should return no formats for empty input."""
        assert split_formats(format_name) == []


class TestMediaSourceBuilder:
    """Test MediaSourceBuilder."""

    def test_local_track(self, builder, track, audio_streams):
        """Should resolve every field for a local track."""
        source = builder.build(track, enable_path_substitution=False)

        assert source.id == "0000000a00000000000000000000000b"
        assert source.protocol == MediaProtocol.FILE
        assert source.media_streams == audio_streams
        assert source.name == track.name
        assert source.path == track.path
        assert source.run_time_ticks == track.run_time_ticks
        assert source.container == "flac"
        assert source.size == track.size
        assert source.bitrate == 900_000
        assert source.formats == ["flac"]

    def test_id_is_hex_without_hyphens(self, builder, track):
        """Should render the id as 32 hex digits."""
        source = builder.build(track, enable_path_substitution=False)

        assert len(source.id) == 32
        assert "-" not in source.id
        assert int(source.id, 16) == track.id.int

    def test_path_substitution(self, builder, track):
        """Should apply path mappings only when enabled."""
        mapped = builder.build(track, enable_path_substitution=True)
        raw = builder.build(track, enable_path_substitution=False)

        assert mapped.path == (
            "/mnt/nas/music/Radiohead/OK Computer/03 Subterranean Homesick Alien.flac"
        )
        assert raw.path == track.path

    def test_container_resolved_from_raw_path(self, library, track):
        """Should infer the container from the catalog path, not the mapped one."""
        mapper = PathMapper([PathMapping(remote="/music", local="/mnt/music.d")])
        track.path = "/music/song.ogg"

        source = MediaSourceBuilder(library, mapper).build(track, enable_path_substitution=True)

        assert source.path == "/mnt/music.d/song.ogg"
        assert source.container == "ogg"

    def test_remote_track(self, builder, loose_track):
        """Should use http and skip extension inference for remote items."""
        source = builder.build(loose_track, enable_path_substitution=True)

        assert source.protocol == MediaProtocol.HTTP
        assert source.path == loose_track.path
        assert source.container == ""
        assert source.media_streams == []
        assert source.bitrate is None
        assert source.formats == []

    def test_virtual_track_uses_file_protocol(self, builder, track):
        """Should use the file protocol for anything that is not remote."""
        track.location_type = LocationType.VIRTUAL

        source = builder.build(track, enable_path_substitution=True)

        assert source.protocol == MediaProtocol.FILE
        assert source.container == ""
        assert source.path == track.path

    def test_declared_bitrate_overrides_streams(self, builder, track):
        """Should prefer the declared bitrate over the stream sum."""
        track.total_bitrate = 320_000

        source = builder.build(track, enable_path_substitution=False)

        assert source.bitrate == 320_000

    @pytest.mark.parametrize("declared", [0, -1])
    def test_non_positive_declared_bitrate_omitted(self, builder, track, declared):
        """Should leave bitrate unset rather than store a non-positive value."""
        track.total_bitrate = declared

        source = builder.build(track, enable_path_substitution=False)

        assert source.bitrate is None

    def test_zero_stream_total_omitted(self, library, path_mapper, track):
        """Should leave bitrate unset when streams carry no bitrate."""
        library.set_media_streams(
            track.id, [MediaStream(type=MediaStreamType.AUDIO, index=0)]
        )

        source = MediaSourceBuilder(library, path_mapper).build(track, False)

        assert source.bitrate is None

    def test_single_source_per_item(self, builder, track):
        """Should produce exactly one media source."""
        sources = builder.get_media_sources(track, enable_path_substitution=True)

        assert len(sources) == 1
        assert sources[0].id == track.id.hex

    def test_does_not_mutate_item(self, builder, track):
        """Should leave the item untouched."""
        before = repr(track)

        builder.build(track, enable_path_substitution=True)

        assert repr(track) == before

    def test_stream_store_failure_propagates(self, path_mapper, track):
        """Should not swallow stream store errors."""

        class BrokenLibrary(MediaLibrary):
            def get_media_streams(self, item_id):
                raise ConnectionError("stream store offline")

        builder = MediaSourceBuilder(BrokenLibrary(), path_mapper)

        with pytest.raises(ConnectionError, match="offline"):
            builder.build(track, enable_path_substitution=False)

    def test_to_dict(self, builder, track):
        """Should serialize to JSON-compatible types."""
        data = builder.build(track, enable_path_substitution=False).to_dict()

        assert data["protocol"] == "file"
        assert data["bitrate"] == 900_000
        assert data["media_streams"][0]["type"] == "audio"
        assert data["formats"] == ["flac"]
