"""
Link and link-relation value types.

A ``LinkRelation`` is an opaque, interned relation name. It is used in two
independent roles:

- the relation of an outbound ``Link`` ("this link has relation X")
- the key an embedded sub-resource is grouped under ("embedded under X")

No relation taxonomy is enforced here: any non-blank name is accepted and
compared by value.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class LinkRelation(BaseModel):
    """
    Interned relation name.

    ``LinkRelation.of("orders") is LinkRelation.of("orders")`` holds; directly
    constructed instances are still equal and hash alike, so they work as
    grouping keys either way.
    """

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Link relation must not be blank")
        return value

    @classmethod
    def of(cls, relation: "str | LinkRelation") -> "LinkRelation":
        """Return the interned relation for ``relation``."""
        if isinstance(relation, LinkRelation):
            return relation
        interned = _INTERNED.get(relation)
        if interned is None:
            interned = cls(value=relation)
            _INTERNED[relation] = interned
        return interned

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LinkRelation({self.value!r})"


_INTERNED: dict[str, LinkRelation] = {}


class Link(BaseModel):
    """
    Navigational link: relation plus target, with optional metadata.

    Links are values. The builders only store and order them; duplicates are
    kept as given.
    """

    model_config = ConfigDict(frozen=True)

    href: str = Field(description="Link target (URI or URI template, not resolved here).")
    rel: LinkRelation = Field(description="Relation of the link to its context resource.")
    title: Optional[str] = Field(default=None, description="Human-readable label.")
    name: Optional[str] = Field(default=None, description="Secondary key among links sharing a rel.")
    type: Optional[str] = Field(default=None, description="Media type hint for the target.")
    hreflang: Optional[str] = Field(default=None, description="Language of the target.")
    deprecation: Optional[str] = Field(default=None, description="URL describing a deprecation.")
    profile: Optional[str] = Field(default=None, description="Profile URI of the target.")

    @field_validator("rel", mode="before")
    @classmethod
    def _intern_rel(cls, value):
        if isinstance(value, str):
            return LinkRelation.of(value)
        return value

    @field_serializer("rel")
    def _serialize_rel(self, rel: LinkRelation) -> str:
        return rel.value

    @classmethod
    def of(cls, href: str, rel: "str | LinkRelation") -> "Link":
        return cls(href=href, rel=LinkRelation.of(rel))

    def with_rel(self, rel: "str | LinkRelation") -> "Link":
        """Copy of this link under a different relation."""
        return self.model_copy(update={"rel": LinkRelation.of(rel)})

    def has_rel(self, rel: "str | LinkRelation") -> bool:
        return self.rel == LinkRelation.of(rel)
