"""Builders for JSON:API documents shaped like the content API's raw payloads."""

from __future__ import annotations

from typing import Any

ITEM_ID = "24038"
SITE_ID = "681"
ITEM_TYPE_ID = "3781"
UPDATED_AT = "2016-12-07T09:14:22Z"


def image_payload(path: str) -> dict[str, Any]:
    return {"path": path, "width": 569, "height": 629, "format": "png", "size": 572451}


def _field(
    field_id: str, label: str, field_type: str, api_key: str, position: int
) -> dict[str, Any]:
    return {
        "id": field_id,
        "type": "field",
        "attributes": {
            "label": label,
            "field_type": field_type,
            "api_key": api_key,
            "hint": None,
            "localized": False,
            "validators": {"required": {}} if api_key == "title" else {},
            "position": position,
            "appeareance": {"type": "title"} if api_key == "title" else {},
        },
        "relationships": {"item_type": {"data": {"id": ITEM_TYPE_ID, "type": "item_type"}}},
    }


def make_document(
    *,
    item_title: str | None = None,
    seo: dict[str, Any] | None = None,
    item_image: dict[str, Any] | None = None,
    global_seo: dict[str, Any] | None = None,
    no_index: bool | None = None,
    locales: list[str] | None = None,
    extra: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a snake_case document with one article item, its type, four fields and a site."""

    return {
        "data": [
            {
                "id": ITEM_ID,
                "type": "item",
                "attributes": {
                    "updated_at": UPDATED_AT,
                    "is_valid": True,
                    "title": item_title,
                    "another_string": "Foo bar",
                    "seo_settings": seo,
                    "image": item_image,
                },
                "relationships": {
                    "item_type": {"data": {"id": ITEM_TYPE_ID, "type": "item_type"}},
                },
            },
            {
                "id": SITE_ID,
                "type": "site",
                "attributes": {
                    "name": "XXX",
                    "locales": locales if locales is not None else ["en"],
                    "theme_hue": 190,
                    "domain": None,
                    "internal_domain": "wispy-sun-3056.admin.datocms.com",
                    "global_seo": global_seo,
                    "favicon": None,
                    "no_index": no_index,
                    "ssg": None,
                },
                "relationships": {
                    "menu_items": {"data": [{"id": "4212", "type": "menu_item"}]},
                    "item_types": {"data": [{"id": ITEM_TYPE_ID, "type": "item_type"}]},
                },
            },
            {
                "id": ITEM_TYPE_ID,
                "type": "item_type",
                "attributes": {
                    "name": "Article",
                    "singleton": False,
                    "sortable": False,
                    "api_key": "article",
                },
                "relationships": {
                    "fields": {
                        "data": [
                            {"id": "15088", "type": "field"},
                            {"id": "15085", "type": "field"},
                            {"id": "15086", "type": "field"},
                            {"id": "15087", "type": "field"},
                        ]
                    },
                    "singleton_item": {"data": None},
                },
            },
            _field("15088", "Image", "image", "image", 1),
            _field("15085", "Title", "string", "title", 2),
            _field("15086", "Another string", "string", "another_string", 3),
            _field("15087", "SEO settings", "seo", "seo_settings", 4),
            *(extra or []),
        ]
    }
