"""Exceptions raised while resolving and materializing sprites."""

from typing import Optional


class AtlasError(Exception):
    """Base class for all sprite atlas failures."""


class ConfigurationError(AtlasError):
    """The atlas table a factory needs cannot be resolved."""


class NotFoundError(AtlasError, LookupError):
    """A sprite name is absent from the source table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Sprite {name!r} is not found in atlas")
        self.name = name


class MalformedEntryError(AtlasError, ValueError):
    """An atlas entry is missing a field or holds a non-integer rectangle."""

    def __init__(self, name: str, field: Optional[str], reason: str) -> None:
        where = f"{name!r}" if field is None else f"{name!r} field {field!r}"
        super().__init__(f"Malformed atlas entry {where}: {reason}")
        self.name = name
        self.field = field
