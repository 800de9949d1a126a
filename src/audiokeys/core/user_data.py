"""User data key resolution.

User data keys correlate play state across rescans and duplicate imports of
the same logical track, so every derivation here must be deterministic for
unchanged item state.
"""

from audiokeys.core.keys import album_user_data_key, generic_user_data_key
from audiokeys.core.library import LibraryEntity, MediaLibrary
from audiokeys.core.sort_name import index_prefix
from audiokeys.models.item import AudioItem, UserDataKeyKind
from audiokeys.utils.logger import get_logger

logger = get_logger(__name__)


class UserDataKeyResolver:
    """Resolve user data keys for library entities."""

    def __init__(self, library: MediaLibrary):
        """Initialize resolver.

        Args:
            library: Library used for hierarchy traversal
        """
        self.library = library

    def get_user_data_key(self, entity: LibraryEntity) -> str:
        """Key for any library entity."""
        kind = entity.user_data_key_kind
        if kind == UserDataKeyKind.TRACK:
            return self.track_key(entity)
        if kind == UserDataKeyKind.ALBUM:
            return album_user_data_key(entity)
        return generic_user_data_key(entity)

    def track_key(self, item: AudioItem) -> str:
        """Key for an audio track.

        Tracks inside an album with a known track number share a key with
        every other copy of the same disc and track of that album. Anything
        else falls back to the identity key.

        Args:
            item: Audio item

        Returns:
            User data key
        """
        album = self.library.nearest_album_ancestor(item)

        if album is None or item.index_number is None:
            key = generic_user_data_key(item)
            logger.debug(
                "Using identity user data key",
                item_id=str(item.id),
                has_album=album is not None,
                index_number=item.index_number,
            )
            return key

        song_key = index_prefix(item.parent_index_number) + index_prefix(item.index_number)
        key = self.get_user_data_key(album) + song_key
        logger.debug(
            "Using album user data key",
            item_id=str(item.id),
            album_id=str(album.id),
            key=key,
        )
        return key
