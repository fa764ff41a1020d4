"""Track change detection."""

from typing import Optional

from ..models.snapshot import MetadataSnapshot


def is_unchanged(new: MetadataSnapshot, previous: Optional[MetadataSnapshot]) -> bool:
    """Check whether a snapshot describes the same track as the previous one.

    Only title, artists and album are compared. The first observation
    (no previous snapshot) always counts as a change.

    Args:
        new: Snapshot from the current poll
        previous: Snapshot last published, if any

    Returns:
        True if nothing needs to be published
    """
    if previous is None:
        return False
    return new.key == previous.key
