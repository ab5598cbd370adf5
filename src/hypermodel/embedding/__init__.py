"""Embedding subsystem: relation grouping and embedded wrappers."""

from .grouping import RelationGroup
from .wrappers import (
    EmbeddedCollection,
    EmbeddedElement,
    EmbeddedWrapper,
    EmbeddedWrappers,
)

__all__ = [
    "EmbeddedCollection",
    "EmbeddedElement",
    "EmbeddedWrapper",
    "EmbeddedWrappers",
    "RelationGroup",
]
