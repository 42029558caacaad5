from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Sequence

import yaml


class Direction(enum.Enum):
    PREVIOUS = -1
    NEXT = 1


@dataclass(frozen=True)
class LevelDescriptor:
    id: str
    map_reference: str
    preview_key: str
    display_name: str
    ordinal: int
    intro_cutscene_id: Optional[str] = None


class LevelCatalog:
    """Fixed, totally ordered list of levels.

    Ordinals must be exactly 0..N-1 in list order. All lookups are pure and
    return ``None`` instead of raising for unknown input.
    """

    def __init__(self, levels: Sequence[LevelDescriptor]) -> None:
        if not levels:
            raise ValueError("A level catalog needs at least one level")
        for index, level in enumerate(levels):
            if level.ordinal != index:
                raise ValueError(
                    f"{level.id}: ordinal {level.ordinal} does not match catalog position {index}"
                )
        self._levels = tuple(levels)
        self._by_id: Dict[str, LevelDescriptor] = {}
        self._by_map: Dict[str, LevelDescriptor] = {}
        for level in self._levels:
            if level.id in self._by_id:
                raise ValueError(f"Duplicate level id: {level.id}")
            if level.map_reference in self._by_map:
                raise ValueError(f"Duplicate map reference: {level.map_reference}")
            self._by_id[level.id] = level
            self._by_map[level.map_reference] = level

    @classmethod
    def default(cls) -> "LevelCatalog":
        """The catalog shipped with the game."""
        return cls.from_directory(Path(__file__).resolve().parent.parent / "data" / "levels")

    @classmethod
    def from_directory(cls, base_dir: Path) -> "LevelCatalog":
        if not base_dir.exists():
            raise FileNotFoundError(f"Levels directory not found: {base_dir}")

        def _sort_key(p: Path) -> tuple[int, str]:
            m = re.match(r"^level(\d+)$", p.stem)
            if m:
                return (int(m.group(1)), p.stem)
            return (10**9, p.stem)

        levels: List[LevelDescriptor] = []
        for level_path in sorted(base_dir.glob("level*.yaml"), key=_sort_key):
            raw = yaml.safe_load(level_path.read_text(encoding="utf-8"))
            if not raw or not isinstance(raw, dict):
                raise ValueError(f"{level_path.name}: expected YAML with 'id', 'title' and 'map'")
            fields = {}
            for name in ("id", "title", "map"):
                value = raw.get(name)
                if not value or not isinstance(value, str):
                    raise ValueError(f"{level_path.name}: missing or invalid '{name}'")
                fields[name] = value.strip()
            cutscene = raw.get("cutscene")
            if cutscene is not None and not isinstance(cutscene, str):
                raise ValueError(f"{level_path.name}: 'cutscene' must be a string")
            levels.append(
                LevelDescriptor(
                    id=fields["id"],
                    map_reference=fields["map"],
                    # preview defaults to the level id
                    preview_key=str(raw.get("preview") or fields["id"]).strip(),
                    display_name=fields["title"],
                    ordinal=len(levels),
                    intro_cutscene_id=cutscene.strip() if cutscene else None,
                )
            )

        if not levels:
            raise ValueError(f"No level files (level*.yaml) found in {base_dir}")
        return cls(levels)

    def all(self) -> List[LevelDescriptor]:
        return list(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[LevelDescriptor]:
        return iter(self._levels)

    def first(self) -> LevelDescriptor:
        return self._levels[0]

    def last(self) -> LevelDescriptor:
        return self._levels[-1]

    def get(self, level_id: str) -> Optional[LevelDescriptor]:
        return self._by_id.get(level_id)

    def by_map_reference(self, map_reference: str) -> Optional[LevelDescriptor]:
        return self._by_map.get(map_reference)

    def contains_map(self, map_reference: str) -> bool:
        """Tell whether *map_reference* belongs to one of the catalog levels."""
        return self.by_map_reference(map_reference) is not None

    def contains(self, descriptor: LevelDescriptor) -> bool:
        return (
            0 <= descriptor.ordinal < len(self._levels)
            and self._levels[descriptor.ordinal] == descriptor
        )

    def neighbor(self, descriptor: LevelDescriptor, direction: Direction) -> Optional[LevelDescriptor]:
        """Adjacent level in *direction*, or None at the ends or for foreign descriptors."""
        if not self.contains(descriptor):
            return None
        index = descriptor.ordinal + direction.value
        if 0 <= index < len(self._levels):
            return self._levels[index]
        return None
