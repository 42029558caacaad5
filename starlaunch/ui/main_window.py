from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from starlaunch.core.levels import LevelCatalog
from starlaunch.core.progress import ProgressStore
from starlaunch.ui.level_selector import LevelSelectorWidget

logger = logging.getLogger(__name__)


def next_unlock(catalog: LevelCatalog, map_reference: str) -> Optional[int]:
    """Ordinal unlocked by finishing the level on *map_reference*, if any."""
    level = catalog.by_map_reference(map_reference)
    if level is None or level.ordinal + 1 >= len(catalog):
        return None
    return level.ordinal + 1


class MainWindow(QMainWindow):
    """Screen stack around the level selector.

    The home screen opens level selection; launch intents switch to a status
    screen that stands in for the game's loading and cutscene screens and
    reports the level as completed.
    """

    def __init__(
        self,
        selector: LevelSelectorWidget,
        catalog: LevelCatalog,
        progress_store: ProgressStore,
    ) -> None:
        super().__init__()
        self._catalog = catalog
        self._progress_store = progress_store
        self._selector = selector
        self._running_map: Optional[str] = None

        self._stack = QStackedWidget()
        self._home_screen = self._build_home_screen()
        self._status_screen = QWidget()
        self._status_label = QLabel("")
        self._status_label.setAlignment(Qt.AlignCenter)
        status_layout = QVBoxLayout(self._status_screen)
        status_layout.addWidget(self._status_label, 1)
        complete_button = QPushButton("Level complete")
        complete_button.clicked.connect(self._complete_level)
        status_layout.addWidget(complete_button, 0, Qt.AlignHCenter)
        home_button = QPushButton("Home")
        home_button.clicked.connect(self._show_home_screen)
        status_layout.addWidget(home_button, 0, Qt.AlignHCenter)

        self._stack.addWidget(self._home_screen)
        self._stack.addWidget(self._selector)
        self._stack.addWidget(self._status_screen)
        self.setCentralWidget(self._stack)

        selector.back_requested.connect(self._show_home_screen)
        selector.level_requested.connect(self._on_level_requested)
        selector.cutscene_requested.connect(self._on_cutscene_requested)

    def _build_home_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.addStretch(1)
        select_button = QPushButton("Select level")
        select_button.clicked.connect(self._show_selector)
        layout.addWidget(select_button, 0, Qt.AlignHCenter)
        reset_button = QPushButton("Reset progress")
        reset_button.clicked.connect(self._reset_progress)
        layout.addWidget(reset_button, 0, Qt.AlignHCenter)
        layout.addStretch(1)
        return screen

    def _show_home_screen(self) -> None:
        self._running_map = None
        self._stack.setCurrentWidget(self._home_screen)

    def _show_selector(self) -> None:
        self._stack.setCurrentWidget(self._selector)
        self._selector.setFocus()

    def _on_level_requested(self, map_reference: str) -> None:
        logger.info("Loading %s", map_reference)
        self._running_map = map_reference
        self._status_label.setText(f"Loading {map_reference}")
        self._stack.setCurrentWidget(self._status_screen)

    def _on_cutscene_requested(self, cutscene_id: str, map_reference: str) -> None:
        logger.info("Playing cutscene %s before %s", cutscene_id, map_reference)
        self._running_map = map_reference
        self._status_label.setText(f"Cutscene {cutscene_id}, then loading {map_reference}")
        self._stack.setCurrentWidget(self._status_screen)

    def _complete_level(self) -> None:
        """Unlock the level after the one that was just played."""
        if self._running_map is not None:
            ordinal = next_unlock(self._catalog, self._running_map)
            if ordinal is not None:
                self._progress_store.unlock(ordinal)
        self._show_home_screen()

    def _reset_progress(self) -> None:
        logger.info("Resetting progress")
        self._progress_store.reset()

    def closeEvent(self, event: QCloseEvent) -> None:
        """Persist progress when closing the game."""
        self._progress_store.save()
        super().closeEvent(event)
