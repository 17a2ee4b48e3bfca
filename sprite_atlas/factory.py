"""Sprite atlas factory: resolution, materialization and enumeration.

A factory is built once per scope and is read-only afterwards:

* **Resolution** looks a sprite name up in the factory's source table and
  parses its rectangle strictly (:func:`sprite_atlas.entry.parse_entry`).
* **Materialization** constructs a fresh node at the requested placement,
  backed by the entry's image and sliced to its rectangle.
* **Enumeration** exposes the scope-filtered ``name -> url`` index, e.g. to
  build sprite palettes.

Scope only gates enumeration. ``create`` resolves any name present in the
source table, even outside the scope: in ``prefix-group`` mode the source is
the whole global table, in ``exact-group`` mode it is the group's own table.
"""

from typing import Iterator, Mapping, Optional, Union

from pyrsistent import pmap

from sprite_atlas.entry import AtlasEntry, parse_entry
from sprite_atlas.errors import ConfigurationError, NotFoundError
from sprite_atlas.naming import in_prefix_scope
from sprite_atlas.node import (
    ImageNode,
    NodeConstructor,
    RenderableSpriteNode,
    as_placement,
)
from sprite_atlas.table import AtlasCatalog, freeze_table
from sprite_atlas.types import (
    AtlasTable,
    ImageUrl,
    RawEntry,
    ScopingMode,
    SpriteIndex,
    SpriteName,
)

AtlasSource = Union[AtlasCatalog, Mapping[SpriteName, RawEntry]]


def _url_of(raw: RawEntry) -> Optional[ImageUrl]:
    if not isinstance(raw, Mapping):
        return None
    url = raw.get("url")
    return url if isinstance(url, str) else None


def build_index(table: AtlasTable, scope: str, mode: ScopingMode) -> SpriteIndex:
    """Scope-filtered ``name -> url`` mapping over ``table``.

    In ``exact-group`` mode the table is already the group's partition, so
    every entry is in scope. Entries without a usable url are not listed.
    """
    index: dict[SpriteName, ImageUrl] = {}
    for name, raw in table.items():
        if mode is ScopingMode.PREFIX_GROUP and not in_prefix_scope(name, scope):
            continue
        url = _url_of(raw)
        if url is not None:
            index[name] = url
    return pmap(index)


class SpriteAtlasFactory:
    """Resolve sprite names into renderable nodes for one scope.

    Args:
        source: A single global table (``prefix-group`` mode) or an
            :class:`AtlasCatalog` of per-group tables (``exact-group`` mode).
            Plain mappings are snapshotted at construction.
        scope: Group id (``exact-group``) or name prefix (``prefix-group``).
            Empty means every entry.
        mode: Scoping strategy, a :class:`ScopingMode` or its string value.
        node_constructor: ``(x, y, url) -> node`` used to materialize sprites.

    Raises:
        ConfigurationError: If the mode is unknown, the source does not match
            the mode, or the group's table cannot be resolved.
    """

    def __init__(
        self,
        source: AtlasSource,
        scope: str = "",
        mode: Union[ScopingMode, str] = ScopingMode.PREFIX_GROUP,
        node_constructor: NodeConstructor = ImageNode,
    ) -> None:
        try:
            mode = ScopingMode(mode)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown scoping mode: {mode!r}") from exc

        table: AtlasTable
        if mode is ScopingMode.EXACT_GROUP:
            if not isinstance(source, AtlasCatalog):
                raise ConfigurationError(
                    "exact-group mode requires an AtlasCatalog of per-group tables"
                )
            table = source.table_for_group(scope) if scope else source.merged()
        else:
            if isinstance(source, AtlasCatalog):
                raise ConfigurationError(
                    "prefix-group mode requires a single global atlas table"
                )
            table = freeze_table(source)

        self._scope = scope
        self._mode = mode
        self._table = table
        self._node_constructor = node_constructor
        self._index = build_index(table, scope, mode)

    @property
    def scope(self) -> str:
        return self._scope

    @property
    def mode(self) -> ScopingMode:
        return self._mode

    def entry(self, name: SpriteName) -> AtlasEntry:
        """Resolve ``name`` against the source table.

        Raises:
            NotFoundError: If ``name`` is absent from the source table.
            MalformedEntryError: If the entry's fields are not valid.
        """
        if name not in self._table:
            raise NotFoundError(name)
        return parse_entry(name, self._table[name])

    def create(self, name: SpriteName, placement: object) -> RenderableSpriteNode:
        """Materialize a node for sprite ``name`` anchored at ``placement``.

        ``placement`` is anything :func:`sprite_atlas.node.as_placement`
        accepts, e.g. ``{"x": 100, "y": 200}``. The node is built fresh on
        every call and the factory keeps no reference to it.

        Raises:
            NotFoundError: If ``name`` is absent from the source table.
            MalformedEntryError: If the entry's rectangle is not valid.
            ValueError: If ``placement`` carries no ``x`` / ``y``.
        """
        entry = self.entry(name)
        position = as_placement(placement)
        node = self._node_constructor(position.x, position.y, entry.url)
        node.set_slice(entry.x, entry.y, entry.w, entry.h, True)
        node.name = name
        return node

    def get_index(self) -> SpriteIndex:
        """Return the immutable scope-filtered ``name -> url`` snapshot."""
        return self._index

    def names(self) -> tuple[SpriteName, ...]:
        """Sorted sprite names in scope, for stable palette ordering."""
        return tuple(sorted(self._index))

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[SpriteName]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(scope={self._scope!r}, mode={self._mode.value!r}, "
            f"sprites={len(self._index)})"
        )
