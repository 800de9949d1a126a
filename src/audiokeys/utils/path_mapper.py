"""Path substitution for media source paths."""

from pathlib import PurePosixPath
from typing import List, Optional

from audiokeys.config import PathMapping
from audiokeys.models.item import LocationType
from audiokeys.utils.logger import get_logger

logger = get_logger(__name__)


class PathMapper:
    """Map catalog paths to the paths playback clients should open."""

    def __init__(self, mappings: List[PathMapping]):
        """Initialize path mapper.

        Args:
            mappings: List of PathMapping objects
        """
        self.mappings = [(PurePosixPath(m.remote), PurePosixPath(m.local)) for m in mappings]

    def map_path(self, path: Optional[str], location_type: LocationType) -> Optional[str]:
        """Translate a catalog path for playback.

        Only filesystem paths are substituted. Tries each mapping in order,
        first matching prefix wins. If no mapping matches, returns the
        original path.

        Args:
            path: Path as stored in the catalog
            location_type: Where the item lives

        Returns:
            Substituted path, or the original path

        Example:
            mapper = PathMapper([
                PathMapping(remote="/music", local="/mnt/nas/music"),
            ])

            mapper.map_path("/music/Album/01.flac", LocationType.FILESYSTEM)
            # Returns: /mnt/nas/music/Album/01.flac
        """
        if not path or location_type != LocationType.FILESYSTEM:
            return path

        original = PurePosixPath(path)

        for remote_prefix, local_prefix in self.mappings:
            try:
                relative = original.relative_to(remote_prefix)
            except ValueError:
                continue

            local_path = str(local_prefix / relative)

            logger.debug(
                "Path mapped",
                path=path,
                remote_prefix=str(remote_prefix),
                local_prefix=str(local_prefix),
                local_path=local_path,
            )

            return local_path

        if self.mappings:
            logger.warning(
                "No path mapping found, using original path",
                path=path,
                configured_mappings=[(str(r), str(l)) for r, l in self.mappings],
            )
        return path
