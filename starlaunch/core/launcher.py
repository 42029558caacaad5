from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Tuple

from starlaunch.core.countdown import ExpiryTimer
from starlaunch.core.levels import LevelCatalog, LevelDescriptor
from starlaunch.core.settings import Settings

logger = logging.getLogger(__name__)


class Presentation(Protocol):
    """What the level selection screen needs from the UI around it."""

    def apply_selection(self, show_previous: bool, show_next: bool, name: str, preview_key: str) -> None: ...

    def show_countdown(self, seconds: int) -> None: ...

    def return_to_previous_context(self) -> None: ...

    def show_cutscene_then_load(self, cutscene_id: str, map_reference: str) -> None: ...

    def load_level(self, map_reference: str) -> None: ...


class NetworkAdapter(Protocol):
    """Fire-and-forget matchmaking calls."""

    def register(self, nickname: str, timeout: float, session_token: str) -> None: ...

    def reset(self) -> None: ...


class LoggingNetworkAdapter:
    """NetworkAdapter that only records and logs requests.

    Used when the game runs without a matchmaking transport.
    """

    def __init__(self) -> None:
        self.registrations: List[Tuple[str, float, str]] = []
        self.resets = 0

    def register(self, nickname: str, timeout: float, session_token: str) -> None:
        logger.info("Registration request: nickname=%s timeout=%s token=%r", nickname, timeout, session_token)
        self.registrations.append((nickname, timeout, session_token))

    def reset(self) -> None:
        logger.info("Registration reset")
        self.resets += 1


def session_token(descriptor: LevelDescriptor) -> str:
    """Token sent with a registration: display name and map, space separated."""
    return f"{descriptor.display_name} {descriptor.map_reference}"


class SessionStarter:
    """Decides how a chosen level gets started.

    Single-player launches go straight to the presentation, through the intro
    cutscene when the level has one. Multiplayer launches send a registration
    request and return to the previous screen; an unattended multiplayer screen
    registers for the fallback level once the countdown runs out.
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        presentation: Presentation,
        settings: Settings,
        network: Optional[NetworkAdapter] = None,
    ) -> None:
        self._catalog = catalog
        self._presentation = presentation
        self._settings = settings
        self._network = network
        self._countdown: Optional[ExpiryTimer] = None
        if settings.multiplayer:
            if network is None:
                raise ValueError("Multiplayer mode needs a network adapter")
            self._countdown = ExpiryTimer(
                on_expire=self._on_countdown_expired,
                on_update=presentation.show_countdown,
            )

    @property
    def multiplayer(self) -> bool:
        return self._settings.multiplayer

    @property
    def countdown(self) -> Optional[ExpiryTimer]:
        return self._countdown

    def fallback_level(self) -> LevelDescriptor:
        level = self._catalog.by_map_reference(self._settings.fallback_map)
        if level is None:
            logger.warning(
                "Fallback map %s is not in the catalog, using %s",
                self._settings.fallback_map,
                self._catalog.first().map_reference,
            )
            return self._catalog.first()
        return level

    def start(self, descriptor: LevelDescriptor) -> None:
        if self._countdown is not None and self._network is not None:
            self._register(descriptor, self._network, self._countdown)
        elif descriptor.intro_cutscene_id is not None:
            logger.info("Starting %s after cutscene %s", descriptor.id, descriptor.intro_cutscene_id)
            self._presentation.show_cutscene_then_load(descriptor.intro_cutscene_id, descriptor.map_reference)
        else:
            logger.info("Starting %s", descriptor.id)
            self._presentation.load_level(descriptor.map_reference)

    def back(self) -> None:
        """Leave the selection screen, dropping any pending registration."""
        self._presentation.return_to_previous_context()
        if self._countdown is not None:
            if self._network is not None:
                self._network.reset()
            self._countdown.reset()

    def rearm(self) -> None:
        """Restart the countdown, e.g. when the selection screen is shown again."""
        if self._countdown is not None:
            self._countdown.reset()

    def tick(self, delta: float) -> None:
        if self._countdown is not None:
            self._countdown.tick(delta)

    def _register(self, descriptor: LevelDescriptor, network: NetworkAdapter, countdown: ExpiryTimer) -> None:
        token = session_token(descriptor)
        logger.info("Registering %s for %s", self._settings.nickname, token)
        network.register(self._settings.nickname, self._settings.registration_timeout, token)
        countdown.halt()
        countdown.reset()
        self._presentation.return_to_previous_context()

    def _on_countdown_expired(self) -> None:
        self.start(self.fallback_level())
