"""
Language-neutral type specifications.

The resolver produces these values; a TypeCompiler turns them into
definition text for a concrete target language.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union


PRIMITIVE_TYPES = ("string", "number", "integer", "boolean", "null")


@dataclass(frozen=True)
class Primitive:
    """A scalar type, optionally restricted to a set of literal values."""

    types: Tuple[str, ...] = ()
    enum: Optional[Tuple[Any, ...]] = None


@dataclass(frozen=True)
class ArrayOf:
    items: "TypeSpec"


@dataclass(frozen=True)
class Reference:
    """A named type generated elsewhere in the same output."""

    name: str


@dataclass(frozen=True)
class UnionOf:
    members: Tuple["TypeSpec", ...]


@dataclass(frozen=True)
class Exclude:
    """`base` narrowed by removing every shape in `excluded`."""

    base: "TypeSpec"
    excluded: Tuple["TypeSpec", ...]


@dataclass(frozen=True)
class StoryContent:
    """A story whose content is the component `type_name`."""

    type_name: str


@dataclass(frozen=True)
class Never:
    pass


@dataclass(frozen=True)
class AnyType:
    pass


@dataclass(frozen=True)
class Raw:
    """Verbatim type text supplied by a custom field-type resolver."""

    text: str


@dataclass(frozen=True)
class ObjectType:
    """
    A structured type with named properties.

    `additional_properties` of None defers to the compiler options.
    `descriptions` maps property names to doc comments.
    """

    properties: Dict[str, "TypeSpec"] = field(default_factory=dict)
    required: Tuple[str, ...] = ()
    title: Optional[str] = None
    description: Optional[str] = None
    descriptions: Dict[str, str] = field(default_factory=dict)
    additional_properties: Optional[bool] = None

    def is_required(self, key: str) -> bool:
        return key in self.required


TypeSpec = Union[
    Primitive,
    ArrayOf,
    Reference,
    UnionOf,
    Exclude,
    StoryContent,
    Never,
    AnyType,
    Raw,
    ObjectType,
]

TYPE_SPEC_CLASSES = (
    Primitive,
    ArrayOf,
    Reference,
    UnionOf,
    Exclude,
    StoryContent,
    Never,
    AnyType,
    Raw,
    ObjectType,
)

STRING = Primitive(("string",))
BOOLEAN = Primitive(("boolean",))
EMPTY_ARRAY = ArrayOf(Never())


def union_of(members) -> "TypeSpec":
    """Collapse a sequence of specs into a union (or `never` when empty)."""
    members = tuple(members)
    if not members:
        return Never()
    if len(members) == 1:
        return members[0]
    return UnionOf(members)


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def from_json_schema(fragment: Any) -> "TypeSpec":
    """
    Convert a JSON-schema-shaped fragment into a TypeSpec.

    Custom field-type resolvers may return either TypeSpec values or the
    JSON schema dialect understood by json-schema-to-typescript
    (`type`, `enum`, `items`, `properties`, `required`, `anyOf`, `tsType`).
    Unrecognized shapes become `AnyType`.
    """
    if isinstance(fragment, TYPE_SPEC_CLASSES):
        return fragment

    if not isinstance(fragment, Mapping):
        return AnyType()

    if isinstance(fragment.get("tsType"), str):
        return Raw(fragment["tsType"])

    if isinstance(fragment.get("anyOf"), list):
        return union_of(from_json_schema(item) for item in fragment["anyOf"])

    schema_type = fragment.get("type")
    enum = fragment.get("enum")

    if schema_type == "array":
        items = fragment.get("items")
        return ArrayOf(from_json_schema(items) if items is not None else AnyType())

    if schema_type == "object" or "properties" in fragment:
        properties = fragment.get("properties") or {}
        required = fragment.get("required") or []
        if not isinstance(properties, Mapping) or not _is_string_list(required):
            return AnyType()
        additional = fragment.get("additionalProperties")
        return ObjectType(
            properties={str(key): from_json_schema(value) for key, value in properties.items()},
            required=tuple(required),
            title=_optional_str(fragment.get("title")),
            description=_optional_str(fragment.get("description")),
            additional_properties=additional if isinstance(additional, bool) else None,
        )

    types = schema_type if isinstance(schema_type, list) else [schema_type] if schema_type else []
    types = tuple(t for t in types if t in PRIMITIVE_TYPES)

    if isinstance(enum, list):
        return Primitive(types, tuple(enum))
    if types:
        return Primitive(types)
    return AnyType()


def fragment_from_mapping(fragment: Mapping[str, Any]) -> Dict[str, "TypeSpec"]:
    """Convert every value of a `{property: schema}` mapping to a TypeSpec."""
    return {str(key): from_json_schema(value) for key, value in fragment.items()}
