"""Level selection UI: preview with arrows, start and back buttons, countdown."""

from __future__ import annotations

import time
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from starlaunch.core.launcher import SessionStarter
from starlaunch.core.selection import SelectionController
from starlaunch.ui.models import SelectionView

_BACKGROUND = "#0b1026"
_ACCENT = "#ffb74d"
_TEXT = "#f5f7ff"

FRAME_INTERVAL_MS = 33


class LevelSelectorWidget(QWidget):
    """Screen that shows one level at a time and launches it.

    Implements the presentation side of SelectionController/SessionStarter:
    launch intents are re-emitted as signals for the screen stack to handle.
    """

    level_requested = Signal(str)
    cutscene_requested = Signal(str, str)
    back_requested = Signal()

    def __init__(
        self,
        preview_resolver: Optional[Callable[[str], Optional[QPixmap]]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._preview_resolver = preview_resolver
        self._view = SelectionView()
        self._controller: Optional[SelectionController] = None
        self._starter: Optional[SessionStarter] = None
        self._last_frame: Optional[float] = None

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)

        self.setObjectName("levelSelector")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(
            f"""
            QWidget#levelSelector {{ background: {_BACKGROUND}; }}
            QLabel {{ color: {_TEXT}; }}
            QLabel#levelTitle {{ font-size: 32px; font-weight: 700; }}
            QLabel#countdownLabel {{ color: {_ACCENT}; font-size: 28px; }}
            QPushButton {{
                color: {_TEXT}; background: transparent; border: none; font-size: 28px;
            }}
            QPushButton#startButton {{ color: {_ACCENT}; font-weight: 700; }}
            """
        )

        self._title = QLabel("")
        self._title.setObjectName("levelTitle")
        self._title.setAlignment(Qt.AlignCenter)

        self._previous_button = QPushButton("◀")
        self._previous_button.setCursor(Qt.PointingHandCursor)
        self._previous_button.clicked.connect(self._on_previous)

        self._preview = QLabel("")
        self._preview.setAlignment(Qt.AlignCenter)
        self._preview.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._preview.setMinimumSize(320, 200)

        self._next_button = QPushButton("▶")
        self._next_button.setCursor(Qt.PointingHandCursor)
        self._next_button.clicked.connect(self._on_next)

        self._start_button = QPushButton("Start")
        self._start_button.setObjectName("startButton")
        self._start_button.setCursor(Qt.PointingHandCursor)
        self._start_button.clicked.connect(self._on_start)

        self._back_button = QPushButton("Back")
        self._back_button.setCursor(Qt.PointingHandCursor)
        self._back_button.clicked.connect(self._on_back)

        self._countdown_label = QLabel("")
        self._countdown_label.setObjectName("countdownLabel")
        self._countdown_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self._countdown_label.setVisible(False)

        preview_row = QHBoxLayout()
        preview_row.addWidget(self._previous_button, 0, Qt.AlignVCenter)
        preview_row.addWidget(self._preview, 1)
        preview_row.addWidget(self._next_button, 0, Qt.AlignVCenter)

        bottom_row = QHBoxLayout()
        bottom_row.addWidget(self._back_button, 0, Qt.AlignLeft)
        bottom_row.addStretch(1)
        bottom_row.addWidget(self._start_button, 0, Qt.AlignCenter)
        bottom_row.addStretch(1)
        bottom_row.addWidget(self._countdown_label, 0, Qt.AlignRight)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(16)
        layout.addWidget(self._title)
        layout.addLayout(preview_row, 1)
        layout.addLayout(bottom_row)

    @property
    def view(self) -> SelectionView:
        return self._view

    def bind(self, controller: SelectionController, starter: SessionStarter) -> None:
        """Attach the controller driving this screen."""
        self._controller = controller
        self._starter = starter
        self._countdown_label.setVisible(starter.countdown is not None)
        if starter.countdown is not None:
            self.show_countdown(starter.countdown.display_seconds)

    # Presentation

    def apply_selection(self, show_previous: bool, show_next: bool, name: str, preview_key: str) -> None:
        self._view.show_previous = show_previous
        self._view.show_next = show_next
        self._view.name = name
        self._view.preview_key = preview_key
        # Keep the arrows' space so the preview doesn't shift
        self._previous_button.setEnabled(show_previous)
        self._previous_button.setText("◀" if show_previous else "")
        self._next_button.setEnabled(show_next)
        self._next_button.setText("▶" if show_next else "")
        self._title.setText(name)
        pixmap = self._preview_resolver(preview_key) if self._preview_resolver else None
        if pixmap is not None and not pixmap.isNull():
            self._preview.setPixmap(pixmap)
        else:
            self._preview.clear()
            self._preview.setText(preview_key)

    def show_countdown(self, seconds: int) -> None:
        self._view.countdown = seconds
        self._countdown_label.setText(str(seconds))

    def return_to_previous_context(self) -> None:
        self.back_requested.emit()

    def show_cutscene_then_load(self, cutscene_id: str, map_reference: str) -> None:
        self.cutscene_requested.emit(cutscene_id, map_reference)

    def load_level(self, map_reference: str) -> None:
        self.level_requested.emit(map_reference)

    # Qt events

    def showEvent(self, event) -> None:
        """Resync with progression and restart the countdown when shown."""
        super().showEvent(event)
        if self._controller is not None:
            self._controller.refresh()
        if self._starter is not None and self._starter.countdown is not None:
            self._starter.rearm()
            self.show_countdown(self._starter.countdown.display_seconds)
            self._last_frame = time.monotonic()
            self._frame_timer.start()

    def hideEvent(self, event) -> None:
        """Stop ticking while hidden."""
        self._frame_timer.stop()
        self._last_frame = None
        super().hideEvent(event)

    def keyPressEvent(self, event) -> None:
        """Arrow keys navigate, Enter starts, Escape goes back."""
        key = event.key()
        if key == Qt.Key_Left:
            self._on_previous()
        elif key == Qt.Key_Right:
            self._on_next()
        elif key in (Qt.Key_Return, Qt.Key_Enter):
            self._on_start()
        elif key == Qt.Key_Escape:
            self._on_back()
        else:
            super().keyPressEvent(event)

    def _on_frame(self) -> None:
        if self._starter is None:
            return
        now = time.monotonic()
        delta = now - self._last_frame if self._last_frame is not None else 0.0
        self._last_frame = now
        self._starter.tick(delta)

    def _on_previous(self) -> None:
        if self._controller is not None:
            self._controller.previous()

    def _on_next(self) -> None:
        if self._controller is not None:
            self._controller.next()

    def _on_start(self) -> None:
        if self._controller is not None:
            self._controller.start()

    def _on_back(self) -> None:
        if self._controller is not None:
            self._controller.back()
