"""
Public API for the hypermodel package.
"""

from .builder import (
    EmbeddedModelBuilder,
    EntityModelBuilder,
    ModelBuilder,
    MultipleItemModelBuilder,
    SingleItemModelBuilder,
    embedded,
    resource,
    sub_resource,
)
from .embedding import EmbeddedWrapper, EmbeddedWrappers, RelationGroup
from .errors import EmptyCollectionError, HypermodelError, MissingLinkError
from .models import CollectionModel, EntityModel, Link, LinkRelation, RepresentationModel

__all__ = [
    "ModelBuilder",
    "resource",
    "sub_resource",
    "embedded",
    "EntityModelBuilder",
    "SingleItemModelBuilder",
    "MultipleItemModelBuilder",
    "EmbeddedModelBuilder",
    "Link",
    "LinkRelation",
    "RepresentationModel",
    "EntityModel",
    "CollectionModel",
    "EmbeddedWrapper",
    "EmbeddedWrappers",
    "RelationGroup",
    "HypermodelError",
    "MissingLinkError",
    "EmptyCollectionError",
]
