"""
Relation-grouped accumulation for embedded sub-resources.

``RelationGroup`` is an ordered multimap ``relation -> [item, ...]``:

- relations iterate in the order they were first added
- items within a relation keep insertion order, even when contributions for
  one relation are interleaved with others
"""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from ..models.links import LinkRelation

T = TypeVar("T")


class RelationGroup(Generic[T]):
    """Insertion-ordered ``LinkRelation -> list`` mapping."""

    def __init__(self) -> None:
        # dict keeps first-insertion key order
        self._groups: dict[LinkRelation, list[T]] = {}

    def add(self, relation: str | LinkRelation, item: T) -> None:
        key = LinkRelation.of(relation)
        self._groups.setdefault(key, []).append(item)

    def relations(self) -> list[LinkRelation]:
        return list(self._groups)

    def items_for(self, relation: str | LinkRelation) -> list[T]:
        return list(self._groups.get(LinkRelation.of(relation), []))

    def flatten(self) -> Iterator[tuple[LinkRelation, T]]:
        """Yield ``(relation, item)`` relation-major, then in insertion order."""
        for relation, items in self._groups.items():
            for item in items:
                yield relation, item

    def __contains__(self, relation: object) -> bool:
        if not isinstance(relation, (str, LinkRelation)):
            return False
        return LinkRelation.of(relation) in self._groups

    def __len__(self) -> int:
        return sum(len(items) for items in self._groups.values())

    def __iter__(self) -> Iterator[LinkRelation]:
        return iter(self._groups)
