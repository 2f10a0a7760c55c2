"""Case-insensitive allow-list of attribute names per record type.

Client-supplied sort and field tokens are only ever matched against this
allow-list, never evaluated. Each type is inspected once and the result is
cached for the lifetime of the process.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from functools import lru_cache

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect as sa_inspect


@dataclass(frozen=True)
class PropertyMap:
    """Public attribute names of one record type, in declaration order."""

    names: tuple[str, ...]
    aliases: dict[str, str]
    _lookup: dict[str, str]

    def resolve(self, name: str | None) -> str | None:
        """Return the canonical attribute name for *name*, or None if unknown."""
        if not name:
            return None
        return self._lookup.get(name.strip().casefold())

    def alias(self, name: str) -> str:
        return self.aliases.get(name, name)


def _pydantic_names(record_type: type[BaseModel]) -> list[tuple[str, str]]:
    return [
        (name, field.alias or to_camel(name))
        for name, field in record_type.model_fields.items()
    ]


def _mapped_names(record_type: type) -> list[tuple[str, str]] | None:
    mapper = sa_inspect(record_type, raiseerr=False)
    if mapper is None or not hasattr(mapper, "column_attrs"):
        return None
    return [(attr.key, to_camel(attr.key)) for attr in mapper.column_attrs]


def _annotated_names(record_type: type) -> list[tuple[str, str]]:
    if dataclasses.is_dataclass(record_type):
        names = [f.name for f in dataclasses.fields(record_type)]
    else:
        names = []
        for klass in reversed(record_type.__mro__):
            for name in getattr(klass, "__annotations__", {}):
                if name not in names:
                    names.append(name)
    return [(n, to_camel(n)) for n in names if not n.startswith("_")]


@lru_cache(maxsize=None)
def property_map(record_type: type) -> PropertyMap:
    """Build (once) the allow-list for *record_type*.

    Pydantic models contribute their declared fields, SQLAlchemy mapped
    classes their column attributes, and dataclasses / annotated classes
    their public annotated attributes. Both the attribute name and its
    camelCase alias match, ignoring case.
    """
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        pairs = _pydantic_names(record_type)
    else:
        pairs = _mapped_names(record_type)
        if pairs is None:
            pairs = _annotated_names(record_type)

    lookup: dict[str, str] = {}
    for name, alias in pairs:
        lookup.setdefault(name.casefold(), name)
        lookup.setdefault(alias.casefold(), name)

    return PropertyMap(
        names=tuple(name for name, _ in pairs),
        aliases={name: alias for name, alias in pairs},
        _lookup=lookup,
    )


def resolve_property_name(record_type: type, name: str | None) -> str | None:
    """Resolve a user-supplied attribute name against *record_type*; None if unknown."""
    return property_map(record_type).resolve(name)
