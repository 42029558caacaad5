"""Runtime configuration read from ``STARLAUNCH_*`` environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_NICKNAME = "Player"
DEFAULT_TIMEOUT = 30.0
DEFAULT_FALLBACK_MAP = "maps/level1.tmx"


def _default_progress_file() -> Path:
    return Path.home() / ".starlaunch" / "progress.json"


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, "").strip() == "1"


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %s", name, raw, default)
        return default
    return value


@dataclass(frozen=True)
class Settings:
    nickname: str = DEFAULT_NICKNAME
    registration_timeout: float = DEFAULT_TIMEOUT
    multiplayer: bool = False
    unlock_all: bool = False
    fallback_map: str = DEFAULT_FALLBACK_MAP
    progress_file: Path = field(default_factory=_default_progress_file)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from *env* (defaults to ``os.environ``)."""
        if env is None:
            env = os.environ
        progress_file = env.get("STARLAUNCH_PROGRESS_FILE", "").strip()
        return cls(
            nickname=env.get("STARLAUNCH_NICKNAME", "").strip() or DEFAULT_NICKNAME,
            registration_timeout=_float(env, "STARLAUNCH_TIMEOUT", DEFAULT_TIMEOUT),
            multiplayer=_flag(env, "STARLAUNCH_MULTIPLAYER"),
            unlock_all=_flag(env, "STARLAUNCH_UNLOCK_ALL"),
            fallback_map=env.get("STARLAUNCH_FALLBACK_MAP", "").strip() or DEFAULT_FALLBACK_MAP,
            progress_file=Path(progress_file).expanduser() if progress_file else _default_progress_file(),
        )
