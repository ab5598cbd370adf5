import pytest
from pydantic import ValidationError

from hypermodel.models import Link, LinkRelation


def test_link_relation_is_interned():
    assert LinkRelation.of("orders") is LinkRelation.of("orders")
    assert LinkRelation.of(LinkRelation.of("orders")) is LinkRelation.of("orders")


def test_link_relation_value_semantics():
    assert LinkRelation(value="orders") == LinkRelation.of("orders")
    assert hash(LinkRelation(value="orders")) == hash(LinkRelation.of("orders"))
    assert str(LinkRelation.of("orders")) == "orders"
    assert LinkRelation.of("orders") != LinkRelation.of("shipments")


def test_link_relation_rejects_blank_names():
    with pytest.raises(ValidationError):
        LinkRelation.of("  ")


def test_link_relation_accepts_any_name():
    assert str(LinkRelation.of("urn:example:custom")) == "urn:example:custom"


def test_link_of_interns_relation():
    link = Link.of("/orders/1", "self")
    assert link.href == "/orders/1"
    assert link.rel is LinkRelation.of("self")
    assert link.has_rel("self")
    assert not link.has_rel("next")


def test_link_accepts_string_rel_in_constructor():
    link = Link(href="/a", rel="related", title="A")
    assert link.rel is LinkRelation.of("related")
    assert link.title == "A"


def test_link_is_frozen():
    link = Link.of("/a", "self")
    with pytest.raises(ValidationError):
        link.href = "/b"


def test_with_rel_returns_copy():
    link = Link.of("/a", "self")
    other = link.with_rel("canonical")
    assert other.rel is LinkRelation.of("canonical")
    assert other.href == "/a"
    assert link.rel is LinkRelation.of("self")


def test_links_serialize_relation_as_string_and_round_trip():
    link = Link(href="/a", rel="self", type="application/json")
    dumped = link.model_dump(mode="json", exclude_none=True)
    assert dumped == {"href": "/a", "rel": "self", "type": "application/json"}
    assert Link.model_validate(dumped) == link


def test_duplicate_links_are_equal_values():
    assert Link.of("/a", "self") == Link.of("/a", "self")
