"""Pillow compositing for materialized sprite nodes.

Decoding and caching source images is the caller's job: ``image_lookup``
receives an image url and returns a decoded ``PIL.Image``.
"""

from typing import Callable, Iterable

from PIL import Image

from sprite_atlas.node import ImageNode
from sprite_atlas.types import ImageUrl

ImageLookup = Callable[[ImageUrl], Image.Image]


def crop_sprite(image: Image.Image, node: ImageNode) -> Image.Image:
    """Cut ``node``'s slice out of its source image as RGBA.

    An authoritative slice is taken as is, even past the image bounds (the
    overflow is transparent). A non-authoritative slice is clipped to them and
    may come out empty.
    """
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    if node.slice is None:
        return image
    left, upper, right, lower = node.slice.box()
    if not node.authoritative:
        left = min(left, image.width)
        upper = min(upper, image.height)
        right = min(right, image.width)
        lower = min(lower, image.height)
    return image.crop((left, upper, right, lower))


def draw_nodes(
    canvas: Image.Image,
    nodes: Iterable[ImageNode],
    image_lookup: ImageLookup,
) -> Image.Image:
    """Alpha-composite ``nodes`` onto ``canvas`` in order, in place.

    Nodes partly above or left of the canvas are clipped; nodes entirely
    outside it are skipped.
    """
    for node in nodes:
        sprite = crop_sprite(image_lookup(node.url), node)
        x, y = int(node.x), int(node.y)
        src_x, src_y = max(-x, 0), max(-y, 0)
        if src_x >= sprite.width or src_y >= sprite.height:
            continue
        canvas.alpha_composite(sprite, (max(x, 0), max(y, 0)), (src_x, src_y))
    return canvas


def render_nodes(
    size: tuple[int, int],
    nodes: Iterable[ImageNode],
    image_lookup: ImageLookup,
    background: tuple[int, int, int, int] = (0, 0, 0, 0),
) -> Image.Image:
    """Draw ``nodes`` onto a fresh RGBA canvas of ``size``."""
    canvas = Image.new("RGBA", size, background)
    return draw_nodes(canvas, nodes, image_lookup)
