"""
Representation models: the documents the builders assemble.

- ``RepresentationModel``: ordered links, mutable while a builder owns it.
- ``EntityModel``: a representation wrapping one domain value.
- ``CollectionModel``: ordered items plus collection-level links. Only
  produced by ``build()``, and frozen.

Serialization into a wire format (HAL or otherwise) is the caller's job;
``model_dump()`` gives a plain structure to start from.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import MissingLinkError
from .links import Link, LinkRelation


class _LinkLookup:
    """Relation-based link queries over ``self.links``."""

    def has_links(self) -> bool:
        return len(self.links) > 0

    def has_link(self, rel: str | LinkRelation) -> bool:
        return self.get_link(rel) is not None

    def get_link(self, rel: str | LinkRelation) -> Optional[Link]:
        """First link with ``rel``, in insertion order."""
        relation = LinkRelation.of(rel)
        for link in self.links:
            if link.rel == relation:
                return link
        return None

    def get_links(self, rel: str | LinkRelation | None = None) -> list[Link]:
        if rel is None:
            return list(self.links)
        relation = LinkRelation.of(rel)
        return [link for link in self.links if link.rel == relation]

    def get_required_link(self, rel: str | LinkRelation) -> Link:
        link = self.get_link(rel)
        if link is None:
            raise MissingLinkError(rel, available=[str(link.rel) for link in self.links])
        return link


class RepresentationModel(_LinkLookup, BaseModel):
    """Base representation: an ordered list of links."""

    links: list[Link] = Field(default_factory=list)

    def add(self, *links: Link) -> "RepresentationModel":
        self.links.extend(links)
        return self


class EntityModel(RepresentationModel):
    """Representation wrapping a single domain value."""

    content: Any = None


class CollectionModel(_LinkLookup, BaseModel):
    """
    Immutable collection representation.

    ``content`` holds representations or embedded wrappers in build order;
    ``links`` are collection-level links, not per-item.
    """

    model_config = ConfigDict(frozen=True)

    content: tuple[Any, ...] = ()
    links: tuple[Link, ...] = ()

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)
