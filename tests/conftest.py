"""Shared fixtures and recording fakes for the starlaunch tests."""

from __future__ import annotations

from typing import List, Tuple

import pytest

from starlaunch.core.launcher import LoggingNetworkAdapter
from starlaunch.core.levels import LevelCatalog, LevelDescriptor
from starlaunch.core.settings import Settings


class RecordingPresentation:
    """Presentation that remembers every call in order."""

    def __init__(self) -> None:
        self.calls: List[Tuple] = []

    def apply_selection(self, show_previous: bool, show_next: bool, name: str, preview_key: str) -> None:
        self.calls.append(("apply_selection", show_previous, show_next, name, preview_key))

    def show_countdown(self, seconds: int) -> None:
        self.calls.append(("show_countdown", seconds))

    def return_to_previous_context(self) -> None:
        self.calls.append(("return_to_previous_context",))

    def show_cutscene_then_load(self, cutscene_id: str, map_reference: str) -> None:
        self.calls.append(("show_cutscene_then_load", cutscene_id, map_reference))

    def load_level(self, map_reference: str) -> None:
        self.calls.append(("load_level", map_reference))

    def named(self, name: str) -> List[Tuple]:
        return [c for c in self.calls if c[0] == name]

    @property
    def last_selection(self) -> Tuple:
        return self.named("apply_selection")[-1]


@pytest.fixture()
def catalog() -> LevelCatalog:
    return LevelCatalog(
        [
            LevelDescriptor("tutorial", "maps/tutorial.tmx", "tutorial", "Tutorial", 0, "intro"),
            LevelDescriptor("level_1", "maps/level1.tmx", "level1", "Level_1", 1),
            LevelDescriptor("level_2", "maps/level2.tmx", "level2", "Level_2", 2, "level2_intro"),
            LevelDescriptor("level_3", "maps/level3.tmx", "level3", "Level_3", 3, "level3_intro"),
        ]
    )


@pytest.fixture()
def presentation() -> RecordingPresentation:
    return RecordingPresentation()


@pytest.fixture()
def network() -> LoggingNetworkAdapter:
    return LoggingNetworkAdapter()


@pytest.fixture()
def single_settings(tmp_path) -> Settings:
    return Settings(nickname="Alice", progress_file=tmp_path / "progress.json")


@pytest.fixture()
def multi_settings(tmp_path) -> Settings:
    return Settings(
        nickname="Alice",
        registration_timeout=15.0,
        multiplayer=True,
        progress_file=tmp_path / "progress.json",
    )
