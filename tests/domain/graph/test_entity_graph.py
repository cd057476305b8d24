from __future__ import annotations

from seograph.domain.graph import EntityGraph
from seograph.domain.model import (
    Entity,
    Item,
    ItemType,
    Resource,
    ResourceKey,
    Site,
    ToMany,
    ToOne,
)


def _item(item_id: str, item_type_id: str | None) -> Resource:
    target = None if item_type_id is None else ResourceKey("item_type", item_type_id)
    return Resource(
        type="item",
        id=item_id,
        attributes={"title": f"Item {item_id}"},
        relationships={"itemType": ToOne(target)},
    )


def test_to_one_resolves_indexed_target() -> None:
    graph = EntityGraph.from_resources(
        [_item("1", "10"), Resource(type="item_type", id="10", attributes={"apiKey": "article"})]
    )

    item = graph.entity("item", "1")

    assert isinstance(item, Item)
    assert item.item_type == graph.entity("item_type", "10")
    assert item.item_type is not None
    assert item.item_type.api_key == "article"


def test_to_one_dangling_or_null_link_is_absent() -> None:
    graph = EntityGraph.from_resources([_item("1", "404"), _item("2", None)])

    dangling = graph.entity("item", "1")
    null_link = graph.entity("item", "2")

    assert isinstance(dangling, Item)
    assert isinstance(null_link, Item)
    assert dangling.item_type is None
    assert null_link.item_type is None
    assert graph.to_one(dangling.resource, "unknownRelationship") is None


def test_to_many_drops_missing_targets_and_keeps_order() -> None:
    site = Resource(
        type="site",
        id="1",
        relationships={
            "itemTypes": ToMany(
                (
                    ResourceKey("item_type", "b"),
                    ResourceKey("item_type", "missing"),
                    ResourceKey("item_type", "a"),
                )
            )
        },
    )
    graph = EntityGraph.from_resources(
        [site, Resource(type="item_type", id="a"), Resource(type="item_type", id="b")]
    )

    resolved = graph.to_many(site, "itemTypes")

    assert [entity.id for entity in resolved] == ["b", "a"]
    assert all(isinstance(entity, ItemType) for entity in resolved)


def test_relationships_resolve_on_access_not_at_build_time() -> None:
    graph = EntityGraph.from_resources([_item("1", "10")])
    item = graph.entity("item", "1")
    assert isinstance(item, Item)

    assert item.item_type is None
    assert item.item_type is None


def test_wrong_link_kind_degrades_to_absence() -> None:
    resource = Resource(
        type="item",
        id="1",
        relationships={"itemType": ToMany((ResourceKey("item_type", "10"),))},
    )
    graph = EntityGraph.from_resources([resource, Resource(type="item_type", id="10")])

    assert graph.to_one(resource, "itemType") is None
    assert [entity.id for entity in graph.to_many(resource, "itemType")] == ["10"]


def test_unknown_resource_types_are_wrapped_generically() -> None:
    graph = EntityGraph.from_resources([Resource(type="menu_item", id="4212")])

    entity = graph.entity("menu_item", "4212")

    assert type(entity) is Entity
    assert entity is not None
    assert entity.key == ResourceKey("menu_item", "4212")


def test_entities_of_type_are_typed() -> None:
    graph = EntityGraph.from_resources([Resource(type="site", id="1")])

    (site,) = graph.entities_of_type("site")

    assert isinstance(site, Site)
    assert graph.entities_of_type("item") == ()
