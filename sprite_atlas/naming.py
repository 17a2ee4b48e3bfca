"""Sprite identifier conventions.

Sprite producers name regions ``<group>_<file base name>`` with every
non-letter replaced by ``_``; per-group tables are published under
``<PREFIX><GROUP>``. The helpers here reproduce those conventions so scoping
can be expressed without evaluating dynamically named globals.
"""

import re

from sprite_atlas.types import GroupId, SpriteName

PLACEHOLDER = "_"

_NON_LETTER_RE = re.compile(r"[^a-zA-Z]")


def sanitize(text: str) -> str:
    """Replace every character outside ``[A-Za-z]`` with ``_``."""
    return _NON_LETTER_RE.sub(PLACEHOLDER, text)


def allowed_name(group_id: GroupId, path: str) -> SpriteName:
    """Compute the identifier a sprite producer assigns to an image path.

    The directory and extension of ``path`` are dropped, the group id is
    joined with an underscore, and the result is sanitized::

        >>> allowed_name("hero", "img/walk-1.png")
        'hero_walk__'
    """
    start = path.rfind("/") + 1
    last = path.rfind(".")
    base = path[start : last if last > start else len(path)]
    return sanitize(f"{group_id}_{base}")


def table_name(prefix: str, group_id: GroupId) -> str:
    # Group labels are case-insensitive; table names are upper-cased.
    return f"{prefix}{group_id}".upper()


def in_prefix_scope(name: SpriteName, scope: str) -> bool:
    """Return True if ``name`` falls under ``scope`` in prefix-group mode."""
    return sanitize(name).startswith(sanitize(scope))
