"""Shared pytest fixtures for AudioKeys tests."""

from uuid import UUID

import pytest

from audiokeys.config import PathMapping
from audiokeys.core.library import MediaLibrary
from audiokeys.models.item import AudioItem, Folder, LocationType, MusicAlbum
from audiokeys.models.stream import MediaStream, MediaStreamType
from audiokeys.utils.path_mapper import PathMapper

ARTIST_FOLDER_ID = UUID("11111111-1111-1111-1111-111111111111")
ALBUM_ID = UUID("22222222-2222-2222-2222-222222222222")
TRACK_ID = UUID("0000000a-0000-0000-0000-00000000000b")
LOOSE_TRACK_ID = UUID("33333333-3333-3333-3333-333333333333")


@pytest.fixture
def artist_folder():
    """Create a plain folder holding an album."""
    return Folder(id=ARTIST_FOLDER_ID, name="Radiohead")


@pytest.fixture
def album():
    """Create an album without provider ids."""
    return MusicAlbum(
        id=ALBUM_ID,
        name="OK Computer",
        parent_id=ARTIST_FOLDER_ID,
        album_artists=["Radiohead"],
        production_year=1997,
    )


@pytest.fixture
def track():
    """Create a local track on disc 1 of the album."""
    return AudioItem(
        id=TRACK_ID,
        name="Subterranean Homesick Alien",
        path="/music/Radiohead/OK Computer/03 Subterranean Homesick Alien.flac",
        format_name="flac",
        size=32_000_000,
        index_number=3,
        parent_index_number=1,
        run_time_ticks=2_670_000_000,
        album="OK Computer",
        artists=["Radiohead"],
        album_artists=["Radiohead"],
        parent_id=ALBUM_ID,
    )


@pytest.fixture
def loose_track():
    """Create a remote track outside any album."""
    return AudioItem(
        id=LOOSE_TRACK_ID,
        name="Live Stream",
        path="https://radio.example.com/stream.mp3",
        location_type=LocationType.REMOTE,
    )


@pytest.fixture
def audio_streams():
    """Create stored streams for a track with cover art."""
    return [
        MediaStream(type=MediaStreamType.AUDIO, index=0, codec="flac", bitrate=900_000),
        MediaStream(type=MediaStreamType.EMBEDDED_IMAGE, index=1, codec="mjpeg", bitrate=50_000),
    ]


@pytest.fixture
def library(artist_folder, album, track, loose_track, audio_streams):
    """Create a library holding the sample hierarchy."""
    lib = MediaLibrary()
    lib.add(artist_folder)
    lib.add(album)
    lib.add(track)
    lib.add(loose_track)
    lib.set_media_streams(track.id, audio_streams)
    return lib


@pytest.fixture
def path_mapper():
    """Create a path mapper for the sample music root."""
    return PathMapper([PathMapping(remote="/music", local="/mnt/nas/music")])


CATALOG_YAML = """
folders:
  - id: 11111111-1111-1111-1111-111111111111
    name: Radiohead
albums:
  - id: 22222222-2222-2222-2222-222222222222
    name: OK Computer
    parent_id: 11111111-1111-1111-1111-111111111111
    provider_ids:
      MusicBrainzReleaseGroup: b1392450-e666-3926-a536-22c65f834433
tracks:
  - id: 0000000a-0000-0000-0000-00000000000b
    name: Subterranean Homesick Alien
    path: /music/Radiohead/OK Computer/03.flac
    format_name: flac
    index_number: 3
    parent_index_number: 1
    artists: [Radiohead]
    parent_id: 22222222-2222-2222-2222-222222222222
    streams:
      - type: audio
        codec: flac
        bitrate: 900000
      - type: embedded_image
        index: 1
  - id: 33333333-3333-3333-3333-333333333333
    name: Live Stream
    path: https://radio.example.com/stream.mp3
    location_type: remote
"""


@pytest.fixture
def catalog_file(tmp_path):
    """Write a sample catalog."""
    path = tmp_path / "catalog.yaml"
    path.write_text(CATALOG_YAML)
    return path
