"""
Embedded wrappers: pair a value with the relation it is embedded under.

``EmbeddedWrappers.wrap`` is the factory the embedded builder calls once per
grouped item. Mapping rule:

- an existing ``EmbeddedWrapper`` is returned unchanged
- list / tuple / set values become an ``EmbeddedCollection``
- anything else becomes an ``EmbeddedElement``, or a one-item
  ``EmbeddedCollection`` when ``prefer_collections`` is set
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from ..errors import EmptyCollectionError
from ..logging import logger
from ..models.links import LinkRelation
from ..models.representation import EntityModel

_COLLECTION_TYPES = (list, tuple, set, frozenset)


def _target_type(value: Any) -> type:
    if isinstance(value, EntityModel):
        return type(value.content)
    return type(value)


class EmbeddedWrapper(BaseModel):
    """A value tagged with the relation it is embedded under (if any)."""

    model_config = ConfigDict(frozen=True)

    value: Any
    rel: Optional[LinkRelation] = None

    @field_validator("rel", mode="before")
    @classmethod
    def _intern_rel(cls, value):
        if isinstance(value, str):
            return LinkRelation.of(value)
        return value

    @field_serializer("rel")
    def _serialize_rel(self, rel: Optional[LinkRelation]) -> Optional[str]:
        return rel.value if rel is not None else None

    @property
    def is_collection_value(self) -> bool:
        return False

    @property
    def rel_target_type(self) -> Optional[type]:
        return _target_type(self.value)

    def has_rel(self, rel: str | LinkRelation) -> bool:
        return self.rel is not None and self.rel == LinkRelation.of(rel)


class EmbeddedElement(EmbeddedWrapper):
    """Single embedded value."""


class EmbeddedCollection(EmbeddedWrapper):
    """Embedded collection of values, optionally typed when empty."""

    value: tuple[Any, ...] = ()
    element_type: Optional[type] = None

    @field_serializer("element_type")
    def _serialize_element_type(self, element_type: Optional[type]) -> Optional[str]:
        return element_type.__name__ if element_type is not None else None

    @property
    def is_collection_value(self) -> bool:
        return True

    @property
    def rel_target_type(self) -> Optional[type]:
        if self.element_type is not None:
            return self.element_type
        if not self.value:
            return None
        return _target_type(self.value[0])


class EmbeddedWrappers:
    """
    Factory for embedded wrappers.

    Args:
        prefer_collections: wrap single values as one-item collections, so the
            consumer always sees a collection per relation.
    """

    def __init__(self, prefer_collections: bool = False):
        self.prefer_collections = prefer_collections

    def wrap(self, source: Any, rel: str | LinkRelation | None = None) -> EmbeddedWrapper:
        if isinstance(source, EmbeddedWrapper):
            return source

        relation = LinkRelation.of(rel) if rel is not None else None

        if isinstance(source, _COLLECTION_TYPES):
            items = tuple(source)
            if not items and relation is None:
                raise EmptyCollectionError(
                    "Cannot wrap an empty collection without a relation; "
                    "use empty_collection_of() or pass rel"
                )
            return EmbeddedCollection(value=items, rel=relation)

        if self.prefer_collections:
            return EmbeddedCollection(value=(source,), rel=relation)

        return EmbeddedElement(value=source, rel=relation)

    def empty_collection_of(self, element_type: type) -> EmbeddedCollection:
        """Empty collection wrapper reporting ``element_type`` as its target type."""
        logger.debug(f"EmbeddedWrappers: Empty collection of {element_type.__name__}")
        return EmbeddedCollection(value=(), element_type=element_type)
