"""Field projection for `?fields=name,age` on read endpoints."""

from __future__ import annotations

from collections.abc import Iterable
from operator import attrgetter
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from app.core.property_names import property_map

DtoT = TypeVar("DtoT", bound=BaseModel)

ShapedEntity = dict[str, Any]


class DataShaper(Generic[DtoT]):
    """Projects DTO instances down to a client-chosen subset of fields.

    Output keys are the DTO's serialization aliases. The identifier field is
    always emitted first, whether requested or not. Unknown field names are
    ignored.
    """

    def __init__(self, dto_type: type[DtoT], identifier: str = "id"):
        self._properties = property_map(dto_type)
        if identifier not in self._properties.names:
            raise ValueError(f"{dto_type.__name__} has no '{identifier}' field")
        self._identifier = identifier
        self._accessors = {name: attrgetter(name) for name in self._properties.names}

    def required_fields(self, fields: str | None) -> list[str]:
        if not fields or not fields.strip():
            return list(self._properties.names)

        selected = [self._identifier]
        for token in fields.split(","):
            name = self._properties.resolve(token)
            if name is not None and name not in selected:
                selected.append(name)
        return selected

    def _project(self, entity: DtoT, names: list[str]) -> ShapedEntity:
        return {
            self._properties.alias(name): self._accessors[name](entity)
            for name in names
        }

    def shape_data(self, entities: Iterable[DtoT], fields: str | None = None) -> list[ShapedEntity]:
        names = self.required_fields(fields)
        return [self._project(entity, names) for entity in entities]

    def shape_entity(self, entity: DtoT, fields: str | None = None) -> ShapedEntity:
        return self._project(entity, self.required_fields(fields))
