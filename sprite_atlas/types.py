"""Common type aliases and enumerations.

``ScopingMode`` selects how a factory narrows the atlas it enumerates; see
:class:`sprite_atlas.factory.SpriteAtlasFactory`.
"""

from enum import StrEnum
from typing import Any, Mapping

from pyrsistent.typing import PMap

SpriteName = str
GroupId = str
ImageUrl = str

RawEntry = Mapping[str, Any]
AtlasTable = PMap[SpriteName, RawEntry]
SpriteIndex = PMap[SpriteName, ImageUrl]


class ScopingMode(StrEnum):
    """Strategy used to decide which atlas entries a factory enumerates."""

    # One table per group, chosen by a case-insensitive group label.
    EXACT_GROUP = "exact-group"
    # One global table, filtered by the sanitized scope as a name prefix.
    PREFIX_GROUP = "prefix-group"
