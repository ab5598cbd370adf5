from .links import Link, LinkRelation
from .representation import CollectionModel, EntityModel, RepresentationModel

__all__ = [
    "Link",
    "LinkRelation",
    "RepresentationModel",
    "EntityModel",
    "CollectionModel",
]
