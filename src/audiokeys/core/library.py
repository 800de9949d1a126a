"""In-memory library arena: items indexed by id plus their media streams."""

from typing import Callable, Iterator, Optional, Union
from uuid import UUID

from audiokeys.models.item import AudioItem, Folder, MusicAlbum
from audiokeys.models.stream import MediaStream
from audiokeys.utils.logger import get_logger

logger = get_logger(__name__)

LibraryEntity = Union[AudioItem, Folder]

UNKNOWN_ALBUM_NAME = "Unknown Album"


class AudioKeysError(Exception):
    """Base class for library lookup failures."""


class ItemNotFoundError(AudioKeysError):
    """Raised when an id is not present in the library."""

    def __init__(self, item_id: UUID):
        super().__init__(f"Item not found: {item_id}")
        self.item_id = item_id


class HierarchyCycleError(AudioKeysError):
    """Raised when following parent links revisits an item."""

    def __init__(self, item_id: UUID):
        super().__init__(f"Parent hierarchy contains a cycle at {item_id}")
        self.item_id = item_id


class MediaLibrary:
    """Arena of library entities and the stream store keyed by item id."""

    def __init__(self):
        self._items: dict[UUID, LibraryEntity] = {}
        self._streams: dict[UUID, list[MediaStream]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: UUID) -> bool:
        return item_id in self._items

    def add(self, entity: LibraryEntity) -> LibraryEntity:
        """Register an entity, replacing any previous one with the same id."""
        self._items[entity.id] = entity
        return entity

    def set_media_streams(self, item_id: UUID, streams: list[MediaStream]) -> None:
        self._streams[item_id] = list(streams)

    def get_item(self, item_id: UUID) -> LibraryEntity:
        """Look up an entity by id.

        Raises:
            ItemNotFoundError: If the id is unknown
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise ItemNotFoundError(item_id) from None

    def get_media_streams(self, item_id: UUID) -> list[MediaStream]:
        """Return the stored streams for an item, in stored order."""
        return list(self._streams.get(item_id, ()))

    def parents(self, entity: LibraryEntity) -> Iterator[LibraryEntity]:
        """Yield ancestors of an entity, nearest first.

        Raises:
            ItemNotFoundError: If a parent link points at an unknown id
            HierarchyCycleError: If the parent chain loops
        """
        seen = {entity.id}
        parent_id = entity.parent_id
        while parent_id is not None:
            if parent_id in seen:
                raise HierarchyCycleError(parent_id)
            seen.add(parent_id)

            parent = self.get_item(parent_id)
            yield parent
            parent_id = parent.parent_id

    def find_parent(
        self, entity: LibraryEntity, predicate: Callable[[LibraryEntity], bool]
    ) -> Optional[LibraryEntity]:
        """Return the nearest ancestor matching predicate, or None."""
        return next((p for p in self.parents(entity) if predicate(p)), None)

    def nearest_album_ancestor(self, entity: LibraryEntity) -> Optional[MusicAlbum]:
        album = self.find_parent(entity, lambda p: p.is_album_like)
        logger.debug(
            "Resolved album ancestor",
            item_id=str(entity.id),
            album_id=str(album.id) if album else None,
        )
        return album

    def index_container(self, entity: LibraryEntity) -> Folder:
        """Album to group an item under in indices.

        Items outside any album are grouped under a placeholder album.
        """
        album = self.nearest_album_ancestor(entity)
        if album is not None:
            return album
        return MusicAlbum(id=UUID(int=0), name=UNKNOWN_ALBUM_NAME)
