from dataclasses import dataclass, field
from typing import Any, Optional

from sprite_atlas.table import AtlasCatalog

RawTable = dict[str, dict[str, Any]]


def make_scenario_table() -> RawTable:
    """Global table shared across scopes: one hero sprite, one enemy sprite."""
    return {
        "hero_walk": {"url": "a.png", "x": "0", "y": "0", "w": "32", "h": "48"},
        "enemy_idle": {"url": "b.png", "x": "0", "y": "0", "w": "16", "h": "16"},
    }


def make_group_catalog() -> AtlasCatalog:
    """Per-group tables: ``hero`` and ``enemy`` partitions."""
    return AtlasCatalog.from_groups(
        {
            "hero": {
                "hero_walk": {"url": "a.png", "x": "0", "y": "0", "w": "32", "h": "48"},
                "hero_jump": {"url": "a.png", "x": 32, "y": 0, "w": 32, "h": 48},
            },
            "enemy": {
                "enemy_idle": {"url": "b.png", "x": "0", "y": "0", "w": "16", "h": "16"},
            },
        }
    )


@dataclass
class RecordingNode:
    """Node double that records every call made by the factory."""

    x: float
    y: float
    url: str
    name: str = ""
    slices: list[tuple[int, int, int, int, bool]] = field(default_factory=list)

    def set_slice(self, x: int, y: int, w: int, h: int, authoritative: bool) -> None:
        self.slices.append((x, y, w, h, authoritative))

    @property
    def last_slice(self) -> Optional[tuple[int, int, int, int, bool]]:
        return self.slices[-1] if self.slices else None
