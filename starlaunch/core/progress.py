from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ProgressStore:
    """Stores the highest unlocked level ordinal. Persists to disk across game restarts.
    File: ~/.starlaunch/progress.json by default. Level 0 is always unlocked."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._highest_unlocked = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def highest_unlocked_ordinal(self) -> int:
        return self._highest_unlocked

    def unlock(self, ordinal: int) -> None:
        """Unlock every level up to *ordinal*. Never locks levels again."""
        if ordinal <= self._highest_unlocked:
            return
        logger.info("Unlocked levels up to ordinal %d", ordinal)
        self._highest_unlocked = ordinal
        self._save()

    def reset(self) -> None:
        """Lock everything except the first level."""
        self._highest_unlocked = 0
        self._save()

    def save(self) -> None:
        """Persist current state to disk (e.g. on exit)."""
        self._save()

    def _load(self) -> int:
        if not self._file_path.exists():
            return 0
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load progress from %s: %s", self._file_path, e)
            return 0
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed progress file %s", self._file_path)
            return 0
        try:
            return max(0, int(payload.get("highest_unlocked", 0)))
        except (TypeError, ValueError) as e:
            logger.warning("Invalid highest_unlocked in %s: %s", self._file_path, e)
            return 0

    def _save(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"highest_unlocked": self._highest_unlocked}
        try:
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save progress to %s: %s", self._file_path, e)
