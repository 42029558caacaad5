from __future__ import annotations

import logging
from typing import Callable, Optional

from starlaunch.core.launcher import Presentation, SessionStarter
from starlaunch.core.levels import Direction, LevelCatalog, LevelDescriptor
from starlaunch.core.unlock import is_unlocked, reachable_neighbor

logger = logging.getLogger(__name__)


class SelectionController:
    """Cursor over the level catalog that never stops on a locked level.

    ``progression`` is read again on every call so unlocks made elsewhere show
    up the next time the screen is refreshed.
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        progression: Callable[[], int],
        presentation: Presentation,
        starter: SessionStarter,
    ) -> None:
        self._catalog = catalog
        self._progression = progression
        self._presentation = presentation
        self._starter = starter
        self._current: Optional[LevelDescriptor] = None
        self.initialize()

    @property
    def current(self) -> Optional[LevelDescriptor]:
        return self._current

    def initialize(self) -> None:
        self._current = self._catalog.first()
        self._apply()

    def refresh(self) -> None:
        """Re-apply the current level, or start over if nothing is selected yet."""
        if self._current is None:
            self.initialize()
        else:
            self._apply()

    def navigate(self, direction: Direction) -> bool:
        """Move one level in *direction*. Returns False when the move is not possible."""
        if self._current is None:
            return False
        candidate = self._catalog.neighbor(self._current, direction)
        if candidate is None or not is_unlocked(candidate, self._progression()):
            logger.debug("No reachable level %s of %s", direction.name.lower(), self._current.id)
            return False
        self._current = candidate
        logger.debug("Selected %s", candidate.id)
        self._apply()
        return True

    def previous(self) -> bool:
        return self.navigate(Direction.PREVIOUS)

    def next(self) -> bool:
        return self.navigate(Direction.NEXT)

    def start(self) -> None:
        if self._current is None:
            self.initialize()
        self._starter.start(self._current)

    def back(self) -> None:
        self._starter.back()

    def _apply(self) -> None:
        current = self._current
        highest = self._progression()
        show_previous = reachable_neighbor(self._catalog, current, Direction.PREVIOUS, highest) is not None
        show_next = reachable_neighbor(self._catalog, current, Direction.NEXT, highest) is not None
        self._presentation.apply_selection(show_previous, show_next, current.display_name, current.preview_key)
