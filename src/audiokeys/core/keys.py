"""Base user data key derivation for library entities."""

from audiokeys.models.item import MusicAlbum

MUSICBRAINZ_RELEASE_GROUP = "MusicBrainzReleaseGroup"
MUSICBRAINZ_ALBUM = "MusicBrainzAlbum"


def generic_user_data_key(entity) -> str:
    """Identity-based key: the entity id in hyphenated UUID form."""
    return str(entity.id)


def album_user_data_key(album: MusicAlbum) -> str:
    """Key for an album, preferring MusicBrainz ids over identity.

    Albums re-imported from a different folder keep their play state as long
    as a MusicBrainz id is tagged.
    """
    release_group = album.provider_ids.get(MUSICBRAINZ_RELEASE_GROUP)
    if release_group and release_group.strip():
        return f"MusicAlbum-MusicBrainzReleaseGroup-{release_group}"

    album_id = album.provider_ids.get(MUSICBRAINZ_ALBUM)
    if album_id and album_id.strip():
        return f"MusicAlbum-Musicbrainz-{album_id}"

    return generic_user_data_key(album)
