"""Factory configuration.

The scoping strategy is chosen by configuration rather than hard-coded, so
one factory class serves both the per-group and the prefix-filtered layouts.
"""

from dataclasses import dataclass
from typing import Any, Mapping

from sprite_atlas.errors import ConfigurationError
from sprite_atlas.factory import AtlasSource, SpriteAtlasFactory
from sprite_atlas.node import ImageNode, NodeConstructor
from sprite_atlas.table import DEFAULT_TABLE_PREFIX, AtlasCatalog
from sprite_atlas.types import ScopingMode


@dataclass(frozen=True)
class FactoryConfig:
    """Settings for one :class:`SpriteAtlasFactory`.

    Attributes:
        mode: Scoping strategy.
        scope: Group id or name prefix; empty means every entry.
        table_prefix: Prefix of per-group table names in ``exact-group`` mode.
    """

    mode: ScopingMode = ScopingMode.PREFIX_GROUP
    scope: str = ""
    table_prefix: str = DEFAULT_TABLE_PREFIX

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FactoryConfig":
        unknown = set(data) - {"mode", "scope", "table_prefix"}
        if unknown:
            raise ConfigurationError(f"Unknown factory settings: {sorted(unknown)}")
        raw_mode = data.get("mode", ScopingMode.PREFIX_GROUP)
        try:
            mode = ScopingMode(raw_mode)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown scoping mode: {raw_mode!r}") from exc
        scope = data.get("scope", "")
        table_prefix = data.get("table_prefix", DEFAULT_TABLE_PREFIX)
        for key, value in (("scope", scope), ("table_prefix", table_prefix)):
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"Factory setting {key!r} must be a string, got {value!r}"
                )
        return cls(mode=mode, scope=scope, table_prefix=table_prefix)


def build_factory(
    config: FactoryConfig,
    source: AtlasSource,
    node_constructor: NodeConstructor = ImageNode,
) -> SpriteAtlasFactory:
    """Build a factory for ``config`` over ``source``.

    In ``exact-group`` mode a plain mapping is read as ``table name -> table``
    and wrapped into an :class:`AtlasCatalog` using ``config.table_prefix``.
    """
    if config.mode is ScopingMode.EXACT_GROUP and not isinstance(source, AtlasCatalog):
        source = AtlasCatalog.from_tables(source, prefix=config.table_prefix)
    return SpriteAtlasFactory(
        source,
        scope=config.scope,
        mode=config.mode,
        node_constructor=node_constructor,
    )
