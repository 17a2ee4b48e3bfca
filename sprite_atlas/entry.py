"""Atlas entry value objects and strict parsing.

Raw atlas tables come from a build step and store rectangle fields either as
numbers or as strings (``{"x": "0", "w": "32", ...}``). ``parse_entry``
converts one raw value into an :class:`AtlasEntry` and refuses anything that
is not a clean integer, so a broken entry never renders as a 0x0 or
mispositioned sprite.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Mapping

from sprite_atlas.errors import MalformedEntryError
from sprite_atlas.types import ImageUrl, RawEntry, SpriteName

_INTEGER_RE = re.compile(r"[+-]?\d+", re.ASCII)

RECT_FIELDS = ("x", "y", "w", "h")


@dataclass(frozen=True)
class Rect:
    """Pixel rectangle within an atlas image.

    Attributes:
        x: Left offset, ``>= 0``.
        y: Top offset, ``>= 0``.
        w: Width, ``> 0``.
        h: Height, ``> 0``.
    """

    x: int
    y: int
    w: int
    h: int

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)

    def box(self) -> tuple[int, int, int, int]:
        """Return ``(left, upper, right, lower)`` as Pillow expects for crops."""
        return (self.x, self.y, self.x + self.w, self.y + self.h)


@dataclass(frozen=True)
class AtlasEntry:
    """One packed sprite: the source image and the region cut from it."""

    url: ImageUrl
    rect: Rect

    @property
    def x(self) -> int:
        return self.rect.x

    @property
    def y(self) -> int:
        return self.rect.y

    @property
    def w(self) -> int:
        return self.rect.w

    @property
    def h(self) -> int:
        return self.rect.h


def parse_coordinate(value: Any) -> int:
    """Parse a rectangle field as an integer.

    Accepts ints, integral finite floats and decimal strings (``"10"``,
    ``" 10 "``). Raises ``ValueError`` for anything else, including ``"NaN"``,
    ``"1.5"``, empty strings, ``None`` and booleans.
    """
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got boolean {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return int(value)
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.fullmatch(text):
            return int(text)
        raise ValueError(f"expected an integer, got {value!r}")
    raise ValueError(f"expected an integer, got {type(value).__name__}")


def parse_entry(name: SpriteName, raw: RawEntry) -> AtlasEntry:
    """Convert a raw atlas value into an :class:`AtlasEntry`.

    Args:
        name: Sprite identifier, used in error messages.
        raw: Mapping with ``url``, ``x``, ``y``, ``w`` and ``h`` keys.

    Returns:
        AtlasEntry: The validated entry.

    Raises:
        MalformedEntryError: If a field is missing, not an integer, or out of
            range (negative offset, non-positive size).
    """
    if not isinstance(raw, Mapping):
        raise MalformedEntryError(
            name, None, f"expected a mapping, got {type(raw).__name__}"
        )

    url = raw.get("url")
    if not isinstance(url, str) or not url:
        raise MalformedEntryError(name, "url", "missing or empty image url")

    values: dict[str, int] = {}
    for field in RECT_FIELDS:
        if field not in raw:
            raise MalformedEntryError(name, field, "missing")
        try:
            values[field] = parse_coordinate(raw[field])
        except ValueError as exc:
            raise MalformedEntryError(name, field, str(exc)) from exc

    for field in ("x", "y"):
        if values[field] < 0:
            raise MalformedEntryError(name, field, f"negative offset {values[field]}")
    for field in ("w", "h"):
        if values[field] <= 0:
            raise MalformedEntryError(name, field, f"non-positive size {values[field]}")

    return AtlasEntry(url=url, rect=Rect(**values))
