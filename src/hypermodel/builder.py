"""
Fluent builders for hypermedia representations.

Entry points (``ModelBuilder`` static methods, also exported at module level):

- ``resource(value)``: wrap a domain value in an ``EntityModel``
- ``sub_resource(model)``: start from an existing representation
- ``embedded(relation, model)``: group representations by relation

State machine
-------------

    Single --add_sub_resource--> Multi
    Single | Multi --add_link--> (same)
    Single | Multi --build-->    Built

``EntityModelBuilder`` and ``SingleItemModelBuilder`` are the Single state;
``add_sub_resource`` returns a new ``MultipleItemModelBuilder`` seeded with the
current item and the added one. ``EmbeddedModelBuilder`` has one grouping
state.

Builders are single-writer accumulators. They do not validate input, copy
items, or catch anything raised by the models or wrapper factory they use.
A builder must not be reused after ``build()``; this is not checked.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, TypeVar

from .embedding.grouping import RelationGroup
from .embedding.wrappers import EmbeddedWrapper, EmbeddedWrappers
from .logging import logger
from .models.links import Link, LinkRelation
from .models.representation import CollectionModel, EntityModel, RepresentationModel

T = TypeVar("T")
M = TypeVar("M", bound=RepresentationModel)


class EntityModelBuilder(Generic[T]):
    """Build one ``EntityModel`` around a domain value."""

    def __init__(self, value: T):
        self.entity_model = EntityModel(content=value)

    def add_link(self, link: Link) -> "EntityModelBuilder[T]":
        self.entity_model.add(link)
        return self

    def add_sub_resource(self, item: RepresentationModel) -> "MultipleItemModelBuilder":
        return _promote(self.entity_model, item)

    def build(self) -> EntityModel:
        return self.entity_model


class SingleItemModelBuilder(Generic[M]):
    """Build around an existing representation; links go onto the model itself."""

    def __init__(self, model: M):
        self.single_item_model = model

    def add_link(self, link: Link) -> "SingleItemModelBuilder[M]":
        self.single_item_model.add(link)
        return self

    def add_sub_resource(self, item: M) -> "MultipleItemModelBuilder[M]":
        return _promote(self.single_item_model, item)

    def build(self) -> M:
        return self.single_item_model


class MultipleItemModelBuilder(Generic[M]):
    """Accumulate sibling representations plus collection-level links."""

    def __init__(self, models: Iterable[M], links: Iterable[Link] = ()):
        self.models: list[M] = list(models)
        self.links: list[Link] = list(links)

    def add_sub_resource(self, model: M) -> "MultipleItemModelBuilder[M]":
        self.models.append(model)
        return self

    def add_link(self, link: Link) -> "MultipleItemModelBuilder[M]":
        self.links.append(link)
        return self

    def build(self) -> CollectionModel:
        logger.debug(
            f"MultipleItemModelBuilder: Built collection with {len(self.models)} items, "
            f"{len(self.links)} links"
        )
        return CollectionModel(content=self.models, links=self.links)


class EmbeddedModelBuilder(Generic[M]):
    """
    Accumulate representations grouped by relation.

    ``build()`` flattens the group relation-major (relations in first-seen
    order, items in call order) and wraps each ``(model, relation)`` pair via
    the wrapper factory, so every added model appears exactly once.
    """

    def __init__(
        self,
        relation: str | LinkRelation,
        model: M,
        wrappers: EmbeddedWrappers | None = None,
    ):
        self.wrappers = wrappers if wrappers is not None else EmbeddedWrappers(prefer_collections=False)
        self.entity_models: RelationGroup[M] = RelationGroup()
        self.links: list[Link] = []
        self.add_sub_resource(relation, model)

    def add_sub_resource(self, relation: str | LinkRelation, model: M) -> "EmbeddedModelBuilder[M]":
        self.entity_models.add(relation, model)
        return self

    def add_link(self, link: Link) -> "EmbeddedModelBuilder[M]":
        self.links.append(link)
        return self

    def build(self) -> CollectionModel:
        embedded_wrappers: list[EmbeddedWrapper] = [
            self.wrappers.wrap(model, relation) for relation, model in self.entity_models.flatten()
        ]
        logger.debug(
            f"EmbeddedModelBuilder: Built {len(embedded_wrappers)} embedded items across "
            f"{len(self.entity_models.relations())} relations"
        )
        return CollectionModel(content=embedded_wrappers, links=self.links)


def _promote(first: Any, item: Any) -> MultipleItemModelBuilder:
    logger.debug("Promoting single-item builder to MultipleItemModelBuilder")
    return MultipleItemModelBuilder([first, item], [])


class ModelBuilder:
    """Namespace for the builder entry points."""

    @staticmethod
    def resource(value: T) -> EntityModelBuilder[T]:
        return EntityModelBuilder(value)

    @staticmethod
    def sub_resource(model: M) -> SingleItemModelBuilder[M]:
        return SingleItemModelBuilder(model)

    @staticmethod
    def embedded(
        relation: str | LinkRelation,
        model: M,
        wrappers: EmbeddedWrappers | None = None,
    ) -> EmbeddedModelBuilder[M]:
        return EmbeddedModelBuilder(relation, model, wrappers=wrappers)


resource = ModelBuilder.resource
sub_resource = ModelBuilder.sub_resource
embedded = ModelBuilder.embedded
