"""Container format resolution."""

from pathlib import PurePath
from typing import Optional

from audiokeys.models.item import LocationType


def resolve_container(
    declared_container: Optional[str],
    path: Optional[str],
    location_type: LocationType,
) -> str:
    """Resolve the container format for an item.

    Falls back to the file extension only for items on the local
    filesystem. Remote and virtual paths are never inspected.

    Args:
        declared_container: Container recorded on the item
        path: Item path
        location_type: Where the item lives

    Returns:
        Container name without a leading dot, or "" if unknown
    """
    if declared_container:
        return declared_container

    if (
        path
        and path.strip()
        and location_type not in (LocationType.REMOTE, LocationType.VIRTUAL)
    ):
        return PurePath(path).suffix.lstrip(".")

    return ""
