from __future__ import annotations

import logging
import math
from typing import Callable, Optional

logger = logging.getLogger(__name__)

COUNTDOWN_SECONDS = 60.0

# Frame deltas rarely sum to the duration exactly; smaller remainders count as zero.
_EPSILON = 1e-9


class ExpiryTimer:
    """Per-frame countdown that runs a default action once it reaches zero.

    The timer never owns a loop: whoever drives the frames calls ``tick`` with
    the elapsed seconds. ``halt`` stops it without firing, ``reset`` rearms it.
    """

    def __init__(
        self,
        on_expire: Callable[[], None],
        on_update: Optional[Callable[[int], None]] = None,
        duration: float = COUNTDOWN_SECONDS,
    ) -> None:
        if duration <= 0:
            raise ValueError(f"Countdown duration must be positive, got {duration}")
        self._on_expire = on_expire
        self._on_update = on_update
        self._duration = float(duration)
        self._remaining = self._duration
        self._expired = False

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def remaining(self) -> float:
        return self._remaining

    @property
    def expired(self) -> bool:
        return self._expired

    @property
    def display_seconds(self) -> int:
        """Whole seconds left, rounded up."""
        return int(math.ceil(self._remaining))

    def tick(self, delta: float) -> None:
        if self._expired:
            return
        self._remaining = max(0.0, self._remaining - max(0.0, delta))
        if self._remaining <= _EPSILON:
            self._remaining = 0.0
        if self._on_update is not None:
            self._on_update(self.display_seconds)
        if self._remaining <= 0:
            logger.info("Countdown expired, running default action")
            self._on_expire()
            # The action may rearm the timer; this period still ends here.
            self._expired = True

    def reset(self) -> None:
        self._remaining = self._duration
        self._expired = False

    def halt(self) -> None:
        self._expired = True
