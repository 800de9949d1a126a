"""YAML catalog loading into a MediaLibrary."""

from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional
from uuid import UUID

import yaml
from pydantic import BaseModel, Field, ValidationError

from audiokeys.core.library import AudioKeysError, MediaLibrary
from audiokeys.models.item import AudioItem, Folder, LocationType, MusicAlbum
from audiokeys.models.stream import MediaStream, MediaStreamType
from audiokeys.utils.logger import get_logger

logger = get_logger(__name__)


class CatalogError(AudioKeysError):
    """Raised when a catalog file cannot be read or validated."""


class StreamEntry(BaseModel):
    """A stored media stream."""

    type: MediaStreamType
    index: int = 0
    codec: Optional[str] = None
    language: Optional[str] = None
    bitrate: Optional[int] = Field(default=None, ge=0)
    channels: Optional[int] = None


class FolderEntry(BaseModel):
    """A plain folder."""

    id: UUID
    name: str
    parent_id: Optional[UUID] = None
    provider_ids: Dict[str, str] = Field(default_factory=dict)


class AlbumEntry(FolderEntry):
    """A music album."""

    album_artists: List[str] = Field(default_factory=list)
    production_year: Optional[int] = None


class TrackEntry(BaseModel):
    """An audio track and its stored streams."""

    id: UUID
    name: str
    path: Optional[str] = None
    container: Optional[str] = None
    total_bitrate: Optional[int] = None
    format_name: Optional[str] = None
    size: Optional[int] = None
    location_type: LocationType = LocationType.FILESYSTEM
    index_number: Optional[int] = None
    parent_index_number: Optional[int] = None
    run_time_ticks: Optional[int] = None
    production_year: Optional[int] = None
    album: Optional[str] = None
    artists: List[str] = Field(default_factory=list)
    album_artists: List[str] = Field(default_factory=list)
    parent_id: Optional[UUID] = None
    provider_ids: Dict[str, str] = Field(default_factory=dict)
    streams: List[StreamEntry] = Field(default_factory=list)


class Catalog(BaseModel):
    """Top-level catalog document."""

    folders: List[FolderEntry] = Field(default_factory=list)
    albums: List[AlbumEntry] = Field(default_factory=list)
    tracks: List[TrackEntry] = Field(default_factory=list)

    def to_library(self) -> MediaLibrary:
        """Build the in-memory library arena."""
        library = MediaLibrary()

        counts = Counter(e.id for e in (*self.folders, *self.albums, *self.tracks))
        duplicates = sorted(str(i) for i, n in counts.items() if n > 1)
        if duplicates:
            raise CatalogError(f"Duplicate ids in catalog: {', '.join(duplicates)}")

        for entry in self.folders:
            library.add(Folder(**entry.model_dump()))

        for entry in self.albums:
            library.add(MusicAlbum(**entry.model_dump()))

        for entry in self.tracks:
            fields = entry.model_dump(exclude={"streams"})
            item = library.add(AudioItem(**fields))
            library.set_media_streams(
                item.id, [MediaStream(**s.model_dump()) for s in entry.streams]
            )

        return library


def load_catalog(path: str | Path) -> MediaLibrary:
    """Load a catalog file.

    Args:
        path: Path to YAML catalog

    Returns:
        Populated MediaLibrary

    Raises:
        CatalogError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogError(f"Invalid YAML in catalog {path}: {e}") from e

    try:
        catalog = Catalog(**(raw or {}))
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e

    library = catalog.to_library()

    logger.info(
        "Catalog loaded",
        path=str(path),
        folders=len(catalog.folders),
        albums=len(catalog.albums),
        tracks=len(catalog.tracks),
    )

    return library
