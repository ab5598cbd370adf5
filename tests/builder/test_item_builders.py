from hypermodel import (
    CollectionModel,
    EntityModel,
    Link,
    ModelBuilder,
    MultipleItemModelBuilder,
    SingleItemModelBuilder,
    resource,
    sub_resource,
)
from hypermodel.builder import EntityModelBuilder


def _model(value) -> EntityModel:
    return EntityModel(content=value)


def test_resource_wraps_value_with_no_links():
    entity = resource({"id": 1}).build()
    assert isinstance(entity, EntityModel)
    assert entity.content == {"id": 1}
    assert entity.links == []


def test_resource_build_is_passthrough_without_collection_wrapping():
    value = object()
    self_link = Link.of("/orders/1", "self")
    entity = resource(value).add_link(self_link).build()
    assert isinstance(entity, EntityModel)
    assert not isinstance(entity, CollectionModel)
    assert entity.content is value
    assert entity.links == [self_link]


def test_resource_links_keep_call_order_and_duplicates():
    first = Link.of("/a", "related")
    second = Link.of("/b", "related")
    builder = resource("x")
    assert builder.add_link(first) is builder
    entity = builder.add_link(second).add_link(first).build()
    assert entity.links == [first, second, first]


def test_resource_promotes_to_collection_in_fixed_order():
    builder = resource("A")
    item_b = _model("B")
    promoted = builder.add_sub_resource(item_b)
    assert isinstance(promoted, MultipleItemModelBuilder)

    collection = promoted.build()
    assert isinstance(collection, CollectionModel)
    assert [item.content for item in collection.content] == ["A", "B"]
    assert collection.content[1] is item_b


def test_promotion_keeps_prior_links_on_first_item():
    item_link = Link.of("/a", "self")
    collection = resource("A").add_link(item_link).add_sub_resource(_model("B")).build()
    assert collection.links == ()
    assert collection.content[0].links == [item_link]


def test_multi_item_scenario_items_and_links():
    a, b, c = _model("A"), _model("B"), _model("C")
    l1 = Link.of("/collection", "self")
    collection = sub_resource(a).add_sub_resource(b).add_sub_resource(c).add_link(l1).build()
    assert list(collection.content) == [a, b, c]
    assert collection.links == (l1,)


def test_multi_item_order_is_call_order():
    models = [_model(i) for i in range(10)]
    builder = sub_resource(models[0])
    for model in models[1:]:
        builder = builder.add_sub_resource(model)
    collection = builder.build()
    assert [item.content for item in collection] == list(range(10))
    assert len(collection) == 10


def test_multi_item_accepts_duplicates_and_linked_items_as_is():
    linked = _model("A").add(Link.of("/a", "self"))
    collection = sub_resource(linked).add_sub_resource(linked).build()
    assert collection.content == (linked, linked)
    assert collection.content[0].links[0].href == "/a"


def test_multi_item_links_keep_call_order():
    l1, l2, l3 = Link.of("/1", "first"), Link.of("/2", "next"), Link.of("/1", "first")
    builder = sub_resource(_model("A")).add_sub_resource(_model("B"))
    assert builder.add_link(l1) is builder
    collection = builder.add_link(l2).add_link(l3).build()
    assert collection.links == (l1, l2, l3)


def test_single_item_builder_adds_links_to_model_itself():
    model = _model("A")
    builder = ModelBuilder.sub_resource(model)
    assert isinstance(builder, SingleItemModelBuilder)
    link = Link.of("/a", "self")
    built = builder.add_link(link).build()
    assert built is model
    assert model.links == [link]


def test_multiple_item_builder_copies_seed_lists():
    seed_items = [_model("A")]
    seed_links = [Link.of("/x", "self")]
    builder = MultipleItemModelBuilder(seed_items, seed_links)
    builder.add_sub_resource(_model("B")).add_link(Link.of("/y", "next"))
    assert len(seed_items) == 1
    assert len(seed_links) == 1


def test_built_collection_is_detached_from_builder_state():
    builder = sub_resource(_model("A")).add_sub_resource(_model("B"))
    collection = builder.build()
    builder.add_sub_resource(_model("C"))
    assert len(collection) == 2


def test_entry_points_return_expected_builders():
    assert isinstance(ModelBuilder.resource(1), EntityModelBuilder)
    assert resource is ModelBuilder.resource
    assert sub_resource is ModelBuilder.sub_resource
