"""
Core type generation components.

Provides the schema model, the resolution engine and the base compiler
interface used by all target languages.
"""

from .schema import (
    ComponentSchema,
    FieldDescriptor,
    FieldKind,
    FieldSource,
    RestrictType,
    convert_components,
)
from .types import (
    AnyType,
    ArrayOf,
    Exclude,
    Never,
    ObjectType,
    Primitive,
    Raw,
    Reference,
    StoryContent,
    TypeSpec,
    UnionOf,
    from_json_schema,
)
from .groups import GroupIndex, build_group_index
from .naming import TypeNameFormatter, format_type_name
from .compiler import CompilationError, TypeCompiler
from .config import CompilerOptions, GeneratorConfig, ConfigManager, ConfigError, load_config
from .custom import load_custom_field_type_resolver
from .context import GenerationIssue, RunContext
from .resolver import FieldTypeResolver
from .generator import ComponentTypeAssembler, GenerationResult, generate, run
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Schema system - input data structures
    "ComponentSchema",
    "FieldDescriptor",
    "FieldKind",
    "FieldSource",
    "RestrictType",
    "convert_components",
    # Type specifications
    "AnyType",
    "ArrayOf",
    "Exclude",
    "Never",
    "ObjectType",
    "Primitive",
    "Raw",
    "Reference",
    "StoryContent",
    "TypeSpec",
    "UnionOf",
    "from_json_schema",
    # Resolution engine
    "GroupIndex",
    "build_group_index",
    "TypeNameFormatter",
    "format_type_name",
    "FieldTypeResolver",
    "ComponentTypeAssembler",
    "RunContext",
    "GenerationIssue",
    "GenerationResult",
    "generate",
    "run",
    # Compiler interface
    "CompilationError",
    "TypeCompiler",
    # Configuration system
    "CompilerOptions",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "load_custom_field_type_resolver",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
