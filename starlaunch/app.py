"""Application entry point and setup for the Starlaunch level selector."""

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QApplication

from starlaunch.core.launcher import LoggingNetworkAdapter, SessionStarter
from starlaunch.core.levels import LevelCatalog
from starlaunch.core.progress import ProgressStore
from starlaunch.core.selection import SelectionController
from starlaunch.core.settings import Settings
from starlaunch.ui.level_selector import LevelSelectorWidget
from starlaunch.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def progression_for(settings: Settings, catalog: LevelCatalog, store: ProgressStore) -> Callable[[], int]:
    """Accessor for the highest unlocked ordinal, honouring ``unlock_all``."""
    if settings.unlock_all:
        last = catalog.last().ordinal
        return lambda: last
    return store.highest_unlocked_ordinal


def load_preview(preview_key: str) -> Optional[QPixmap]:
    """Look up ``assets/previews/<key>.png``; None when there is no picture."""
    path = Path(__file__).parent / "assets" / "previews" / f"{preview_key}.png"
    if not path.exists():
        return None
    return QPixmap(str(path))


def run() -> None:
    """Load settings, catalog and progress, then show the level selector."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Starlaunch")
    app.setApplicationDisplayName("Starlaunch")

    settings = Settings.from_env()
    catalog = LevelCatalog.default()
    progress_store = ProgressStore(settings.progress_file)
    network = LoggingNetworkAdapter() if settings.multiplayer else None
    logging.info(
        "Loaded %d levels, highest unlocked %d, multiplayer=%s",
        len(catalog),
        progress_store.highest_unlocked_ordinal(),
        settings.multiplayer,
    )

    selector = LevelSelectorWidget(preview_resolver=load_preview)
    starter = SessionStarter(catalog, selector, settings, network=network)
    controller = SelectionController(catalog, progression_for(settings, catalog, progress_store), selector, starter)
    selector.bind(controller, starter)

    window = MainWindow(selector, catalog, progress_store)
    window.resize(960, 640)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
