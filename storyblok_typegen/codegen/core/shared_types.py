"""
Structural types shared by every component.

Each function takes the generated type name and returns the TypeSpec
describing how Storyblok serializes that field type.
"""

from typing import Callable, Dict

from .schema import FieldKind
from .types import (
    AnyType,
    ArrayOf,
    BOOLEAN,
    ObjectType,
    Primitive,
    Reference,
    STRING,
    TypeSpec,
    UnionOf,
)

NUMBER = Primitive(("number",))
NULLABLE_STRING = Primitive(("string", "null"))
NULLABLE_NUMBER = Primitive(("number", "null"))


def _literal(value: str) -> Primitive:
    return Primitive(("string",), (value,))


def _asset_object(title: str = None) -> ObjectType:
    return ObjectType(
        title=title,
        properties={
            "alt": NULLABLE_STRING,
            "copyright": NULLABLE_STRING,
            "fieldtype": _literal("asset"),
            "id": NUMBER,
            "filename": NULLABLE_STRING,
            "name": STRING,
            "title": NULLABLE_STRING,
            "focus": NULLABLE_STRING,
            "meta_data": ObjectType(additional_properties=True),
            "source": NULLABLE_STRING,
            "is_external_url": BOOLEAN,
            "is_private": BOOLEAN,
            "src": STRING,
            "updated_at": STRING,
            "width": NULLABLE_NUMBER,
            "height": NULLABLE_NUMBER,
            "aspect_ratio": NULLABLE_NUMBER,
            "public_id": NULLABLE_STRING,
            "content_type": STRING,
        },
        required=("id", "filename", "name"),
    )


def get_asset_schema(title: str) -> TypeSpec:
    return _asset_object(title)


def get_multiasset_schema(title: str) -> TypeSpec:
    return ArrayOf(_asset_object())


def _link(linktype: str, extra: Dict[str, TypeSpec] = None) -> ObjectType:
    properties: Dict[str, TypeSpec] = {
        "fieldtype": _literal("multilink"),
        "id": STRING,
        "url": STRING,
        "cached_url": STRING,
        "target": Primitive(("string",), ("_blank", "_self")),
        "linktype": _literal(linktype),
    }
    properties.update(extra or {})
    return ObjectType(properties=properties, required=("fieldtype", "id"))


def get_multilink_schema(title: str) -> TypeSpec:
    # The `linktype` literal discriminates the union, which lets link
    # shapes be removed with Exclude<...> per field.
    return UnionOf(
        (
            _link(
                "story",
                {
                    "story": ObjectType(
                        properties={
                            "name": STRING,
                            "created_at": STRING,
                            "published_at": STRING,
                            "id": NUMBER,
                            "uuid": STRING,
                            "content": ObjectType(additional_properties=True),
                            "slug": STRING,
                            "full_slug": STRING,
                            "sort_by_date": NULLABLE_STRING,
                            "position": NUMBER,
                            "tag_list": ArrayOf(STRING),
                            "is_startpage": BOOLEAN,
                            "parent_id": NULLABLE_NUMBER,
                            "meta_data": ObjectType(additional_properties=True),
                            "group_id": STRING,
                            "first_published_at": NULLABLE_STRING,
                            "release_id": NULLABLE_NUMBER,
                            "lang": STRING,
                            "path": NULLABLE_STRING,
                            "alternates": ArrayOf(AnyType()),
                            "default_full_slug": NULLABLE_STRING,
                            "translated_slugs": Primitive(("null",)),
                        },
                        required=("name", "id", "uuid", "slug", "full_slug"),
                        additional_properties=True,
                    ),
                    "anchor": STRING,
                },
            ),
            _link("url"),
            _link("email", {"email": STRING}),
            _link("asset"),
        )
    )


def get_richtext_schema(title: str) -> TypeSpec:
    return ObjectType(
        title=title,
        properties={
            "type": STRING,
            "content": ArrayOf(Reference(title)),
            "marks": ArrayOf(Reference(title)),
            "attrs": AnyType(),
            "text": STRING,
        },
        required=("type",),
    )


def _table_cell() -> ObjectType:
    return ObjectType(
        properties={
            "_uid": STRING,
            "value": STRING,
            "component": NUMBER,
        },
        required=("_uid", "component"),
    )


def get_table_schema(title: str) -> TypeSpec:
    return ObjectType(
        title=title,
        properties={
            "thead": ArrayOf(_table_cell()),
            "tbody": ArrayOf(
                ObjectType(
                    properties={
                        "_uid": STRING,
                        "body": ArrayOf(_table_cell()),
                        "component": NUMBER,
                    },
                    required=("_uid", "body", "component"),
                )
            ),
        },
        required=("thead", "tbody"),
    )


SHARED_TYPE_SCHEMAS: Dict[FieldKind, Callable[[str], TypeSpec]] = {
    FieldKind.ASSET: get_asset_schema,
    FieldKind.MULTIASSET: get_multiasset_schema,
    FieldKind.MULTILINK: get_multilink_schema,
    FieldKind.RICHTEXT: get_richtext_schema,
    FieldKind.TABLE: get_table_schema,
}


def get_shared_type_schema(kind: FieldKind, title: str) -> TypeSpec:
    """Return the TypeSpec for a shared kind under the given type name."""
    return SHARED_TYPE_SCHEMAS[kind](title)
