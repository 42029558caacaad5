"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class SelectionView:
    """What the level selector currently displays."""

    name: str = ""
    preview_key: str = ""
    show_previous: bool = False
    show_next: bool = False
    countdown: Optional[int] = None
