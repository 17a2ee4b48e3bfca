"""Immutable atlas tables and per-group catalogs.

A table is loaded once and shared read-only by every factory that uses it.
``freeze_table`` takes a snapshot into persistent maps, so later mutation of
the mapping a caller passed in never reaches a factory.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from pyrsistent import pmap
from pyrsistent.typing import PMap

from sprite_atlas.errors import ConfigurationError
from sprite_atlas.naming import table_name
from sprite_atlas.types import AtlasTable, GroupId, RawEntry, SpriteName

DEFAULT_TABLE_PREFIX = "SPRITE_"


def freeze_table(table: Mapping[SpriteName, RawEntry]) -> AtlasTable:
    """Snapshot a mapping of raw entries into a persistent ``AtlasTable``.

    Mapping values are frozen one level deep; anything else is kept as is so
    that :func:`sprite_atlas.entry.parse_entry` can report it as malformed.
    """
    frozen: dict[SpriteName, Any] = {}
    for name, raw in table.items():
        frozen[name] = pmap(raw) if isinstance(raw, Mapping) else raw
    return pmap(frozen)


def _normalized_tables(
    items: Iterable[tuple[str, str, Mapping[SpriteName, RawEntry]]],
) -> PMap[str, AtlasTable]:
    # Names must stay unique after case normalization.
    tables: dict[str, AtlasTable] = {}
    origins: dict[str, str] = {}
    for name, origin, table in items:
        if name in tables:
            raise ConfigurationError(
                f"Atlas tables {origins[name]!r} and {origin!r} both map to {name!r}"
            )
        tables[name] = freeze_table(table)
        origins[name] = origin
    return pmap(tables)


@dataclass(frozen=True)
class AtlasCatalog:
    """Named atlas tables, one per group.

    Tables are published under ``<PREFIX><GROUP>``, upper-cased as a whole.
    Build instances with :meth:`from_tables` or :meth:`from_groups` so names
    are normalized and tables frozen.

    Attributes:
        tables: Table name -> frozen atlas table.
        prefix: Prefix prepended to the group id.
    """

    tables: PMap[str, AtlasTable] = pmap()
    prefix: str = DEFAULT_TABLE_PREFIX

    @classmethod
    def from_tables(
        cls,
        tables: Mapping[str, Mapping[SpriteName, RawEntry]],
        prefix: str = DEFAULT_TABLE_PREFIX,
    ) -> "AtlasCatalog":
        """Build a catalog from tables already keyed by table name."""
        return cls(
            tables=_normalized_tables(
                (name.upper(), name, t) for name, t in tables.items()
            ),
            prefix=prefix,
        )

    @classmethod
    def from_groups(
        cls,
        groups: Mapping[GroupId, Mapping[SpriteName, RawEntry]],
        prefix: str = DEFAULT_TABLE_PREFIX,
    ) -> "AtlasCatalog":
        """Build a catalog from tables keyed by group id."""
        return cls(
            tables=_normalized_tables(
                (table_name(prefix, g), g, t) for g, t in groups.items()
            ),
            prefix=prefix,
        )

    def table_for_group(self, group_id: GroupId) -> AtlasTable:
        """Resolve the table published for ``group_id``.

        Raises:
            ConfigurationError: If no table carries the synthesized name.
        """
        name = table_name(self.prefix, group_id)
        table = self.tables.get(name)
        if table is None:
            raise ConfigurationError(
                f"No atlas table named {name!r} for group {group_id!r}"
            )
        return table

    def group_ids(self) -> Iterable[GroupId]:
        """Yield the (upper-cased) group ids of every table carrying the prefix."""
        for name in sorted(self.tables):
            if name.startswith(self.prefix.upper()):
                yield name[len(self.prefix) :]

    def merged(self) -> AtlasTable:
        """Union of every group table; on duplicate names the later group wins.

        Tables whose names lack the prefix are not group tables and are left out.
        """
        merged: AtlasTable = pmap()
        for group_id in self.group_ids():
            merged = merged.update(self.table_for_group(group_id))
        return merged
