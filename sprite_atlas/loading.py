"""Bootstrap helpers that bring atlas tables into memory.

The factory only consumes tables that are already resident; these helpers
read the two formats sprite build steps commonly emit:

* a JSON object of ``name -> {url, x, y, w, h}``;
* generated JavaScript declarations, one per sprite::

    SPRITE['hero_walk'] = {x : "0", y : "0", w : "32", h : "48", url : "a.png"};
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from sprite_atlas.errors import ConfigurationError
from sprite_atlas.table import DEFAULT_TABLE_PREFIX, AtlasCatalog, freeze_table
from sprite_atlas.types import AtlasTable, GroupId

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_DECLARATION_RE = re.compile(
    r"(?P<var>[A-Za-z_$][\w$]*)\[(?P<q>['\"])(?P<name>(?:\\.|(?!(?P=q)).)*)(?P=q)\]"
    r"\s*=\s*(?P<body>\{.*?\})\s*;",
    re.DOTALL,
)
_PROPERTY_RE = re.compile(
    r"(?P<key>[A-Za-z_$][\w$]*|\"[^\"]*\"|'[^']*')\s*:\s*"
    r"(?P<value>\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*'|[-+]?[\d.]+)"
)


def _read_table(data: Any, origin: str) -> AtlasTable:
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Atlas table in {origin} must be an object, got {type(data).__name__}"
        )
    table = freeze_table(data)
    logger.debug("Loaded %d atlas entries from %s", len(table), origin)
    return table


def load_table(path: PathLike) -> AtlasTable:
    """Load a JSON atlas table from ``path``.

    Raises:
        ConfigurationError: If the file is not valid JSON or not an object.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid atlas JSON in {path}: {exc}") from exc
    return _read_table(data, str(path))


def load_catalog(
    paths_by_group: Mapping[GroupId, PathLike],
    prefix: str = DEFAULT_TABLE_PREFIX,
) -> AtlasCatalog:
    """Load one JSON table per group into an :class:`AtlasCatalog`."""
    groups = {group: load_table(path) for group, path in paths_by_group.items()}
    logger.info("Loaded atlas catalog with %d group tables", len(groups))
    return AtlasCatalog.from_groups(groups, prefix=prefix)


def _unquote(token: str) -> str:
    if token[:1] in ("'", '"'):
        return re.sub(r"\\(.)", r"\1", token[1:-1])
    return token


def _parse_object(body: str, name: str) -> dict[str, Any]:
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        parsed = None
    if isinstance(parsed, dict):
        return parsed

    fields = {
        _unquote(m.group("key")): _unquote(m.group("value"))
        for m in _PROPERTY_RE.finditer(body)
    }
    if not fields:
        raise ConfigurationError(f"Cannot read sprite declaration for {name!r}: {body}")
    return fields


def parse_sprite_script(text: str, variable: Optional[str] = None) -> AtlasTable:
    """Read generated JavaScript sprite declarations into an atlas table.

    Args:
        text: Script source.
        variable: If given, only declarations assigned into this variable are
            read; otherwise every ``VAR['name'] = {...};`` statement is.

    Raises:
        ConfigurationError: If a declaration's object cannot be read.
    """
    entries: dict[str, dict[str, Any]] = {}
    for match in _DECLARATION_RE.finditer(text):
        if variable is not None and match.group("var") != variable:
            continue
        name = re.sub(r"\\(.)", r"\1", match.group("name"))
        entries[name] = _parse_object(match.group("body"), name)
    return _read_table(entries, "sprite script")


def load_sprite_script(path: PathLike, variable: Optional[str] = None) -> AtlasTable:
    """Read a generated JavaScript sprite file from ``path``."""
    text = Path(path).read_text(encoding="utf-8")
    return parse_sprite_script(text, variable=variable)
