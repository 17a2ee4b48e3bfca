"""Sprite atlas resolution.

Turns a loaded atlas description (sprite name -> ``{url, x, y, w, h}``) into
renderable image nodes and exposes the scoped subset of the atlas for
enumeration (palettes, pickers). The package focuses on:

* Strict resolution of sprite names against an immutable atlas table.
* Two scoping strategies: one table per group, or a prefix filter over a
  single global table.
* A small node contract so any renderer can receive the materialized sprite.

See :mod:`sprite_atlas.factory` for the core factory.
"""

from sprite_atlas.config import FactoryConfig, build_factory
from sprite_atlas.entry import AtlasEntry, Rect, parse_entry
from sprite_atlas.errors import (
    AtlasError,
    ConfigurationError,
    MalformedEntryError,
    NotFoundError,
)
from sprite_atlas.factory import SpriteAtlasFactory
from sprite_atlas.node import ImageNode, Placement, RenderableSpriteNode
from sprite_atlas.table import AtlasCatalog, freeze_table
from sprite_atlas.types import ScopingMode

__all__ = [
    "AtlasCatalog",
    "AtlasEntry",
    "AtlasError",
    "ConfigurationError",
    "FactoryConfig",
    "ImageNode",
    "MalformedEntryError",
    "NotFoundError",
    "Placement",
    "Rect",
    "RenderableSpriteNode",
    "ScopingMode",
    "SpriteAtlasFactory",
    "build_factory",
    "freeze_table",
    "parse_entry",
]
