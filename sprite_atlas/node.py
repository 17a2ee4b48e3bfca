"""Renderable node contract and the default node implementation.

The factory only depends on a constructor taking ``(x, y, url)`` and on the
returned node exposing ``set_slice`` and a writable ``name``. Any renderer
that satisfies :class:`RenderableSpriteNode` can be plugged in.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from sprite_atlas.entry import Rect
from sprite_atlas.types import ImageUrl


@runtime_checkable
class RenderableSpriteNode(Protocol):
    name: str

    def set_slice(
        self, x: int, y: int, w: int, h: int, authoritative: bool
    ) -> None: ...


NodeConstructor = Callable[[float, float, ImageUrl], RenderableSpriteNode]


@dataclass
class ImageNode:
    """Positioned, image-backed drawable cut to a slice of its source image.

    Attributes:
        x: Placement x coordinate (screen / world space).
        y: Placement y coordinate (screen / world space).
        url: Source image the slice is cut from.
        slice: Region of ``url`` to render; ``None`` renders the whole image.
        authoritative: If True the slice overrides the natural image bounds.
        name: Logical sprite name, used for hit-testing and debugging.
    """

    x: float
    y: float
    url: ImageUrl
    slice: Optional[Rect] = None
    authoritative: bool = False
    name: str = ""

    def set_slice(self, x: int, y: int, w: int, h: int, authoritative: bool) -> None:
        self.slice = Rect(x, y, w, h)
        self.authoritative = authoritative

    @property
    def size(self) -> Optional[tuple[int, int]]:
        """Rendered size when it is known without decoding the image."""
        if self.slice is None or not self.authoritative:
            return None
        return (self.slice.w, self.slice.h)


@dataclass(frozen=True)
class Placement:
    """Where a materialized node is anchored, independent of the atlas rect."""

    x: float
    y: float


def as_placement(data: Any) -> Placement:
    """Coerce placement data into a :class:`Placement`.

    Accepts a ``Placement``, a mapping with ``x`` / ``y`` keys, an ``(x, y)``
    pair or any object exposing ``x`` / ``y`` attributes.

    Raises:
        ValueError: If no ``x`` / ``y`` coordinates can be found.
    """
    if isinstance(data, Placement):
        return data
    if isinstance(data, Mapping):
        if "x" not in data or "y" not in data:
            raise ValueError(f"Placement requires 'x' and 'y': {data!r}")
        return Placement(x=data["x"], y=data["y"])
    if isinstance(data, (tuple, list)):
        if len(data) != 2:
            raise ValueError(f"Placement pair must have two items: {data!r}")
        return Placement(x=data[0], y=data[1])
    if hasattr(data, "x") and hasattr(data, "y"):
        return Placement(x=data.x, y=data.y)
    raise ValueError(f"Unsupported placement data: {data!r}")
