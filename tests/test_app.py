"""Tests for starlaunch.app and starlaunch.ui.main_window – progression wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets")

from starlaunch.app import progression_for  # noqa: E402
from starlaunch.core.progress import ProgressStore  # noqa: E402
from starlaunch.core.settings import Settings  # noqa: E402
from starlaunch.ui.main_window import next_unlock  # noqa: E402


class TestProgressionFor:
    def test_reads_store(self, catalog, tmp_path: Path):
        store = ProgressStore(tmp_path / "progress.json")
        progression = progression_for(Settings(progress_file=store.file_path), catalog, store)
        assert progression() == 0
        store.unlock(2)
        assert progression() == 2

    def test_unlock_all(self, catalog, tmp_path: Path):
        store = ProgressStore(tmp_path / "progress.json")
        settings = Settings(unlock_all=True, progress_file=store.file_path)
        assert progression_for(settings, catalog, store)() == 3


class TestNextUnlock:
    def test_unlocks_following_level(self, catalog, tmp_path: Path):
        store = ProgressStore(tmp_path / "progress.json")
        store.unlock(next_unlock(catalog, "maps/tutorial.tmx"))
        assert store.highest_unlocked_ordinal() == 1
        progression = progression_for(Settings(progress_file=store.file_path), catalog, store)
        assert progression() == 1

    def test_last_level_unlocks_nothing(self, catalog):
        assert next_unlock(catalog, "maps/level3.tmx") is None

    def test_unknown_map(self, catalog):
        assert next_unlock(catalog, "maps/bonus.tmx") is None
