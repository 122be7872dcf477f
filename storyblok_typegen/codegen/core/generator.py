"""
Component type assembly.

Turns every component schema into one object type specification, compiles
it, and collects the definitions (shared types included) in output order.
"""

from typing import Any, Dict, List, Optional, Sequence

from ...logging_config import get_logger
from .compiler import TypeCompiler
from .config import CompilerOptions, GeneratorConfig
from .context import GenerationIssue, RunContext
from .custom import CustomFieldTypeResolver
from .groups import build_group_index
from .naming import TypeNameFormatter
from .resolver import FieldTypeResolver
from .schema import ComponentSchema
from .types import ObjectType, Primitive, STRING, TypeSpec

logger = get_logger(__name__)


class ComponentTypeAssembler:
    """Builds and compiles the type of each component of a run."""

    def __init__(self, context: RunContext):
        self.context = context
        self.resolver = FieldTypeResolver(context)

    def build_spec(self, component: ComponentSchema) -> ObjectType:
        """Build the object type specification of one component."""
        properties: Dict[str, TypeSpec] = {}
        descriptions: Dict[str, str] = {}

        for key, descriptor in component.typed_fields():
            properties.update(self.resolver.resolve(key, descriptor))
            if descriptor.description and key in properties:
                descriptions[key] = descriptor.description

        properties["_uid"] = STRING
        properties["component"] = Primitive(("string",), (component.name,))

        return ObjectType(
            properties=properties,
            required=tuple(component.required_fields()),
            title=self.context.formatter.format(component.name),
            descriptions=descriptions if self.context.options.add_comments else {},
        )

    def assemble(self, component: ComponentSchema) -> Optional[str]:
        """
        Compile one component and append it to the output.

        Failures are reported and skip only this component.

        Returns:
            The definition text, or None on failure
        """
        title = self.context.formatter.format(component.name)

        try:
            spec = self.build_spec(component)
            definition = self.context.compiler.compile(spec, title, self.context.options)
        except Exception as e:
            logger.error("Error generating type for component %s: %s", component.name, e)
            self.context.report(component.name, f"Failed to generate type {title}: {e}", e)
            return None

        self.context.emit(definition)
        logger.debug("Generated type %s for component %s", title, component.name)
        return definition

    def assemble_all(self, components: Sequence[ComponentSchema]) -> List[str]:
        for component in components:
            self.assemble(component)
        return self.context.definitions


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        definitions: List[str],
        errors: List[GenerationIssue] = None,
        metadata: Dict[str, Any] = None,
        preamble: List[str] = None,
    ):
        """
        Initialize generation result.

        Args:
            definitions: Rendered definitions in output order
            errors: Non-fatal failures of the run
            metadata: Additional metadata about generation
            preamble: Lines to write before the definitions
        """
        self.definitions = definitions
        self.errors = errors or []
        self.metadata = metadata or {}
        self.preamble = preamble or []

    @property
    def success(self) -> bool:
        """True when every component and shared type was generated."""
        return not self.errors

    @property
    def code(self) -> str:
        """Complete output file content."""
        return "\n".join([*self.preamble, *self.definitions])


def create_run_context(
    components: Sequence[ComponentSchema],
    compiler: TypeCompiler,
    config: Optional[GeneratorConfig] = None,
    custom_resolver: Optional[CustomFieldTypeResolver] = None,
) -> RunContext:
    """Create the isolated state for one run over `components`."""
    config = config or GeneratorConfig()
    return RunContext(
        group_index=build_group_index(components),
        formatter=TypeNameFormatter(config.type_names_prefix, config.type_names_suffix),
        compiler=compiler,
        options=config.compiler or CompilerOptions(),
        custom_resolver=custom_resolver,
    )


def generate(
    components: Sequence[ComponentSchema],
    compiler: TypeCompiler,
    config: Optional[GeneratorConfig] = None,
    custom_resolver: Optional[CustomFieldTypeResolver] = None,
) -> GenerationResult:
    """
    Generate type definitions for all components.

    Args:
        components: Component schemas in output order
        compiler: Compiler rendering each type specification
        config: Naming and formatting configuration
        custom_resolver: Resolver for fields of type `custom`

    Returns:
        GenerationResult with definitions, errors and metadata
    """
    context = create_run_context(components, compiler, config, custom_resolver)
    logger.info("Generating types for %d components", len(components))

    ComponentTypeAssembler(context).assemble_all(components)

    metadata = {
        "language": compiler.language_name,
        "file_extension": compiler.file_extension,
        "component_count": len(components),
        "definition_count": len(context.definitions),
        "shared_types": [kind.value for kind in context.registry.emitted_kinds()],
        "groups": len(context.group_index.groups),
    }

    if context.errors:
        logger.warning("Generation finished with %d error(s)", len(context.errors))
    else:
        logger.info("Generated %d definitions", len(context.definitions))

    return GenerationResult(
        context.definitions,
        context.errors,
        metadata,
        preamble=compiler.preamble(context.options),
    )


def run(
    components: Sequence[ComponentSchema],
    compiler: TypeCompiler,
    config: Optional[GeneratorConfig] = None,
    custom_resolver: Optional[CustomFieldTypeResolver] = None,
) -> List[str]:
    """Generate and return only the ordered definition texts."""
    return generate(components, compiler, config, custom_resolver).definitions
