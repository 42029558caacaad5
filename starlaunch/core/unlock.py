"""Unlock rules over the level catalog."""

from __future__ import annotations

from typing import Optional

from starlaunch.core.levels import Direction, LevelCatalog, LevelDescriptor


def is_unlocked(descriptor: LevelDescriptor, highest_unlocked_ordinal: int) -> bool:
    return descriptor.ordinal <= highest_unlocked_ordinal


def reachable_neighbor(
    catalog: LevelCatalog,
    descriptor: LevelDescriptor,
    direction: Direction,
    highest_unlocked_ordinal: int,
) -> Optional[LevelDescriptor]:
    """Neighbor in *direction* if it exists and is unlocked.

    A locked level is reported exactly like a missing one, so callers hide the
    arrow instead of offering a move that would be rejected.
    """
    candidate = catalog.neighbor(descriptor, direction)
    if candidate is None or not is_unlocked(candidate, highest_unlocked_ordinal):
        return None
    return candidate
