"""
Field type resolution.

Maps every Storyblok field descriptor to a TypeSpec. Shared field kinds
trigger the one-time emission of their structural type; custom fields are
delegated to the configured custom field-type resolver.
"""

from typing import Dict, List

from ...logging_config import get_logger
from .context import RunContext
from .custom import call_custom_resolver
from .schema import FieldDescriptor, FieldKind, FieldSource, RestrictType, STRING_KINDS
from .shared_types import get_shared_type_schema
from .types import (
    AnyType,
    ArrayOf,
    BOOLEAN,
    EMPTY_ARRAY,
    Exclude,
    ObjectType,
    Primitive,
    Reference,
    STRING,
    StoryContent,
    TypeSpec,
    UnionOf,
    fragment_from_mapping,
    union_of,
)

logger = get_logger(__name__)


def _link_shape(linktype: str) -> ObjectType:
    return ObjectType(
        properties={"linktype": Primitive(("string",), (linktype,))},
        additional_properties=False,
    )


EMAIL_LINK_SHAPE = _link_shape("email")
ASSET_LINK_SHAPE = _link_shape("asset")


class FieldTypeResolver:
    """Resolves field descriptors against the state of one run."""

    def __init__(self, context: RunContext):
        self.context = context

    def resolve(self, field_key: str, descriptor: FieldDescriptor) -> Dict[str, TypeSpec]:
        """
        Resolve one field.

        Args:
            field_key: Property name of the field in its component
            descriptor: Field configuration

        Returns:
            Properties to merge into the owning component; usually just
            ``{field_key: spec}``, but custom fields may contribute any
            number of properties.
        """
        if descriptor.kind == FieldKind.CUSTOM:
            fragment = call_custom_resolver(
                self.context.custom_resolver, field_key, descriptor.raw
            )
            try:
                properties = fragment_from_mapping(fragment)
            except Exception as e:
                logger.warning("Custom field '%s' returned an unusable fragment: %s", field_key, e)
                return {}
            logger.debug("Custom field '%s' contributed %d properties", field_key, len(properties))
            return properties

        return {field_key: self.resolve_type(descriptor)}

    def resolve_type(self, descriptor: FieldDescriptor) -> TypeSpec:
        """Resolve the type of a non-custom field."""
        kind = descriptor.kind

        if kind.is_shared:
            reference = self.shared_reference(kind)
            if kind == FieldKind.MULTILINK:
                return self._narrow_multilink(reference, descriptor)
            return reference

        if kind == FieldKind.BLOKS:
            return self._resolve_bloks(descriptor)

        if descriptor.source == FieldSource.INTERNAL_STORIES and descriptor.filter_content_type:
            return self._resolve_stories(descriptor)

        return self._resolve_fallback(descriptor)

    def shared_reference(self, kind: FieldKind) -> Reference:
        """Reference a shared type, emitting its definition on first use."""
        name = self.context.formatter.format(kind.value)
        registry = self.context.registry

        if not registry.has_been_emitted(kind):
            try:
                schema = get_shared_type_schema(kind, name)
                definition = self.context.compiler.compile(schema, name, self.context.options)
            except Exception as e:
                # Left unmarked, so the next field of this kind retries
                logger.error("Error generating type %s with title %s: %s", kind.value, name, e)
                self.context.report(kind.value, f"Failed to generate shared type {name}: {e}", e)
            else:
                registry.mark_emitted(kind)
                self.context.emit(definition)
                logger.debug("Generated shared type %s", name)

        return Reference(name)

    def _narrow_multilink(self, base: Reference, descriptor: FieldDescriptor) -> TypeSpec:
        excluded = []
        if descriptor.email_link_type is not True:
            excluded.append(EMAIL_LINK_SHAPE)
        if descriptor.asset_link_type is not True:
            excluded.append(ASSET_LINK_SHAPE)

        if excluded:
            return Exclude(base, tuple(excluded))
        return base

    def allowed_components(self, descriptor: FieldDescriptor) -> List[str]:
        """Names of the components a bloks field accepts, in encounter order."""
        index = self.context.group_index

        if not descriptor.restrict_components:
            return index.all_names()

        if descriptor.restrict_type == RestrictType.GROUPS:
            names: Dict[str, None] = {}
            for group_id in descriptor.component_group_whitelist:
                for name in index.members(group_id):
                    names[name] = None
            return list(names)

        return list(dict.fromkeys(descriptor.component_whitelist))

    def _resolve_bloks(self, descriptor: FieldDescriptor) -> TypeSpec:
        names = self.allowed_components(descriptor)
        if not names:
            return EMPTY_ARRAY

        formatter = self.context.formatter
        return ArrayOf(union_of(Reference(formatter.format(name)) for name in names))

    def _resolve_stories(self, descriptor: FieldDescriptor) -> TypeSpec:
        formatter = self.context.formatter
        members = [
            StoryContent(formatter.format(content_type))
            for content_type in descriptor.filter_content_type
        ]
        members.append(STRING)
        spec = UnionOf(tuple(members))

        if descriptor.kind == FieldKind.OPTIONS:
            return ArrayOf(spec)
        return spec

    def _resolve_fallback(self, descriptor: FieldDescriptor) -> TypeSpec:
        kind = descriptor.kind
        source = descriptor.source
        values = list(descriptor.options)

        if values and not descriptor.exclude_empty_option:
            values.insert(0, "")

        scalar: TypeSpec = AnyType()
        if (
            (values and source == FieldSource.NONE)
            or source == FieldSource.INTERNAL_LANGUAGES
            or source == FieldSource.EXTERNAL
        ):
            scalar = STRING
        if source == FieldSource.INTERNAL:
            scalar = Primitive(("number", "string"))

        if kind == FieldKind.OPTION:
            if values:
                types = scalar.types if isinstance(scalar, Primitive) else ()
                return Primitive(types, tuple(values))
            return scalar

        if kind == FieldKind.OPTIONS:
            if values:
                return ArrayOf(Primitive((), tuple(values)))
            return ArrayOf(scalar)

        if kind == FieldKind.BOOLEAN:
            return BOOLEAN

        if kind in STRING_KINDS:
            return STRING

        return AnyType()
