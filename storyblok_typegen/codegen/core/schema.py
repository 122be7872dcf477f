"""
Core schema representation for code generation.

Converts Storyblok component definitions (as exported by
``storyblok pull-components``) into a normalized internal format
that the resolver can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple
from enum import Enum


class FieldKind(Enum):
    """Storyblok field types understood by the resolver."""

    TEXT = "text"
    TEXTAREA = "textarea"
    MARKDOWN = "markdown"
    NUMBER = "number"
    DATETIME = "datetime"
    IMAGE = "image"
    BOOLEAN = "boolean"
    OPTION = "option"
    OPTIONS = "options"
    ASSET = "asset"
    MULTIASSET = "multiasset"
    MULTILINK = "multilink"
    RICHTEXT = "richtext"
    TABLE = "table"
    BLOKS = "bloks"
    CUSTOM = "custom"
    UNKNOWN = "unknown"  # Anything else, resolved to `any`

    @classmethod
    def from_value(cls, value: Any) -> "FieldKind":
        """Map a raw `type` tag to a FieldKind, falling back to UNKNOWN."""
        try:
            kind = cls(value)
        except ValueError:
            return cls.UNKNOWN
        return kind

    @property
    def is_shared(self) -> bool:
        """Whether this kind is backed by a shared, generate-once type."""
        return self in SHARED_KINDS


SHARED_KINDS = (
    FieldKind.ASSET,
    FieldKind.MULTIASSET,
    FieldKind.MULTILINK,
    FieldKind.RICHTEXT,
    FieldKind.TABLE,
)

# Kinds that are serialized as plain strings by the Storyblok API
STRING_KINDS = (
    FieldKind.DATETIME,
    FieldKind.IMAGE,
    FieldKind.MARKDOWN,
    FieldKind.NUMBER,
    FieldKind.TEXT,
    FieldKind.TEXTAREA,
)


class FieldSource(Enum):
    """Data source of option/options fields."""

    NONE = "none"
    INTERNAL = "internal"
    EXTERNAL = "external"
    INTERNAL_STORIES = "internal_stories"
    INTERNAL_LANGUAGES = "internal_languages"
    OTHER = "other"  # Non-empty but unrecognized

    @classmethod
    def from_value(cls, value: Any) -> "FieldSource":
        if not value:
            return cls.NONE
        if value in ("none", "other"):
            return cls.OTHER
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class RestrictType(Enum):
    """How a bloks field restricts the components it accepts."""

    GROUPS = "groups"
    LIST = "list"

    @classmethod
    def from_value(cls, value: Any) -> "RestrictType":
        return cls.GROUPS if value == "groups" else cls.LIST


TAB_PREFIX = "tab-"


def _as_tuple(value: Any) -> Tuple[Any, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def _optional_bool(value: Any) -> Optional[bool]:
    if value is None:
        return None
    return bool(value)


@dataclass(frozen=True)
class FieldDescriptor:
    """Configuration of a single field inside a component schema."""

    kind: FieldKind
    raw_kind: Any = None
    options: Tuple[Any, ...] = ()
    exclude_empty_option: bool = False
    source: FieldSource = FieldSource.NONE
    filter_content_type: Tuple[str, ...] = ()
    restrict_components: bool = False
    restrict_type: RestrictType = RestrictType.LIST
    component_whitelist: Tuple[str, ...] = ()
    component_group_whitelist: Tuple[str, ...] = ()
    email_link_type: Optional[bool] = None
    asset_link_type: Optional[bool] = None
    required: bool = False
    description: Optional[str] = None

    # Untouched descriptor, handed to custom field-type resolvers
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "FieldDescriptor":
        """
        Build a descriptor from a Storyblok field definition.

        Never raises for a mapping: missing or malformed attributes
        fall back to their defaults.
        """
        if not isinstance(raw, Mapping):
            raw = {}

        options = tuple(
            option.get("value") if isinstance(option, Mapping) else option
            for option in _as_tuple(raw.get("options"))
        )

        description = raw.get("description")

        return cls(
            kind=FieldKind.from_value(raw.get("type")),
            raw_kind=raw.get("type"),
            options=options,
            exclude_empty_option=raw.get("exclude_empty_option") is True,
            source=FieldSource.from_value(raw.get("source")),
            filter_content_type=_as_tuple(raw.get("filter_content_type")),
            restrict_components=bool(raw.get("restrict_components")),
            restrict_type=RestrictType.from_value(raw.get("restrict_type")),
            component_whitelist=_as_tuple(raw.get("component_whitelist")),
            component_group_whitelist=_as_tuple(raw.get("component_group_whitelist")),
            email_link_type=_optional_bool(raw.get("email_link_type")),
            asset_link_type=_optional_bool(raw.get("asset_link_type")),
            required=bool(raw.get("required")),
            description=description if isinstance(description, str) and description else None,
            raw=dict(raw),
        )


@dataclass(frozen=True)
class ComponentSchema:
    """A Storyblok component: a named, ordered set of fields."""

    name: str
    fields: Dict[str, FieldDescriptor] = field(default_factory=dict)
    group_id: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ComponentSchema":
        """Build a component from one entry of Storyblok's `components` list."""
        if "name" not in raw:
            raise ValueError("Component definition has no 'name'")

        schema = raw.get("schema") or {}
        fields = {
            key: FieldDescriptor.from_dict(value)
            for key, value in schema.items()
        }

        return cls(
            name=str(raw["name"]),
            fields=fields,
            group_id=raw.get("component_group_uuid") or None,
            display_name=raw.get("display_name") or None,
        )

    def required_fields(self) -> List[str]:
        """Required property names, starting with the two system fields."""
        required = ["component", "_uid"]
        required.extend(key for key, descriptor in self.fields.items() if descriptor.required)
        return required

    def typed_fields(self) -> List[Tuple[str, FieldDescriptor]]:
        """Fields that carry type information (editor tabs are skipped)."""
        return [
            (key, descriptor)
            for key, descriptor in self.fields.items()
            if not key.startswith(TAB_PREFIX)
        ]


def convert_components(raw_components: List[Mapping[str, Any]]) -> List[ComponentSchema]:
    """
    Convert raw Storyblok component definitions to ComponentSchema objects.

    Args:
        raw_components: Component objects as found in components.json

    Returns:
        List of ComponentSchema in input order
    """
    return [ComponentSchema.from_dict(component) for component in raw_components]
