"""Audio library item data models."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Optional
from uuid import UUID

ARCHIVE_EXTENSIONS = (".zip", ".rar", ".7z")


class LocationType(str, Enum):
    """Where an item's media lives."""

    FILESYSTEM = "filesystem"
    REMOTE = "remote"
    VIRTUAL = "virtual"


class UserDataKeyKind(str, Enum):
    """Rule used to derive an entity's user data key."""

    IDENTITY = "identity"
    ALBUM = "album"
    TRACK = "track"


@dataclass
class Folder:
    """A plain container in the library hierarchy."""

    id: UUID
    name: str
    parent_id: Optional[UUID] = None
    provider_ids: dict[str, str] = field(default_factory=dict)

    @property
    def is_album_like(self) -> bool:
        return False

    @property
    def user_data_key_kind(self) -> UserDataKeyKind:
        return UserDataKeyKind.IDENTITY


@dataclass
class MusicAlbum(Folder):
    """An album grouping tracks; the anchor for track user data keys."""

    album_artists: list[str] = field(default_factory=list)
    production_year: Optional[int] = None

    @property
    def is_album_like(self) -> bool:
        return True

    @property
    def user_data_key_kind(self) -> UserDataKeyKind:
        return UserDataKeyKind.ALBUM


@dataclass
class SongInfo:
    """Lookup info handed to metadata providers for a track."""

    name: str
    year: Optional[int] = None
    index_number: Optional[int] = None
    parent_index_number: Optional[int] = None
    album: Optional[str] = None
    artists: list[str] = field(default_factory=list)
    album_artists: list[str] = field(default_factory=list)
    provider_ids: dict[str, str] = field(default_factory=dict)


@dataclass
class AudioItem:
    """Represents a catalogued audio track."""

    id: UUID
    name: str
    path: Optional[str] = None
    container: Optional[str] = None
    total_bitrate: Optional[int] = None  # Declared bitrate, kept as recorded
    format_name: Optional[str] = None  # Comma-separated, e.g. "mp3,alt"
    size: Optional[int] = None  # Bytes
    location_type: LocationType = LocationType.FILESYSTEM
    index_number: Optional[int] = None  # Track number
    parent_index_number: Optional[int] = None  # Disc number
    run_time_ticks: Optional[int] = None
    production_year: Optional[int] = None
    album: Optional[str] = None
    artists: list[str] = field(default_factory=list)
    album_artists: list[str] = field(default_factory=list)
    parent_id: Optional[UUID] = None
    provider_ids: dict[str, str] = field(default_factory=dict)

    media_type = "Audio"

    @property
    def is_album_like(self) -> bool:
        return False

    @property
    def user_data_key_kind(self) -> UserDataKeyKind:
        return UserDataKeyKind.TRACK

    @property
    def all_artists(self) -> list[str]:
        """Album artists followed by track artists."""
        return [*self.album_artists, *self.artists]

    def has_artist(self, name: str) -> bool:
        """Check whether any artist matches name, ignoring case."""
        folded = name.casefold()
        return any(artist.casefold() == folded for artist in self.all_artists)

    @property
    def is_archive(self) -> bool:
        if not self.path or not self.path.strip():
            return False
        return PurePath(self.path).suffix.lower() in ARCHIVE_EXTENSIONS

    @property
    def supports_adding_to_playlist(self) -> bool:
        return self.location_type == LocationType.FILESYSTEM and self.run_time_ticks is not None

    def lookup_info(self) -> SongInfo:
        """Build the provider lookup info for this track."""
        return SongInfo(
            name=self.name,
            year=self.production_year,
            index_number=self.index_number,
            parent_index_number=self.parent_index_number,
            album=self.album,
            artists=self.artists,
            album_artists=self.album_artists,
            provider_ids=dict(self.provider_ids),
        )

    def __str__(self) -> str:
        """Human-readable representation."""
        artist_part = f"{', '.join(self.artists)} - " if self.artists else ""
        return f"{artist_part}{self.name} ({self.location_type.value})"
