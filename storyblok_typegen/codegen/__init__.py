"""
Storyblok type generation module.

Generates static type definitions from Storyblok component schemas.
"""

from .core import (
    CompilationError,
    ComponentSchema,
    CompilerOptions,
    GenerationResult,
    GeneratorConfig,
    TypeCompiler,
    convert_components,
    generate,
    load_config,
    load_custom_field_type_resolver,
    run,
)
from .registry import RegistryError, SharedTypeRegistry
from .languages import TypeScriptCompiler, get_compiler


def generate_from_components(raw_components, language="typescript", config=None):
    """
    Generate type definitions from raw Storyblok component definitions.

    Args:
        raw_components: Component objects as found in components.json
        language: Target language name
        config: GeneratorConfig, configuration dict or path to a JSON file

    Returns:
        GenerationResult with definitions and errors
    """
    if isinstance(config, GeneratorConfig):
        final_config = config
    elif isinstance(config, dict):
        final_config = load_config(custom_config=config)
    elif config:
        final_config = load_config(config_file=config)
    else:
        final_config = load_config()

    components = convert_components(raw_components)
    custom_resolver = load_custom_field_type_resolver(
        final_config.custom_field_types_parser_path
    )

    return generate(components, get_compiler(language), final_config, custom_resolver)


__all__ = [
    "SharedTypeRegistry",
    "RegistryError",
    "CompilationError",
    "ComponentSchema",
    "CompilerOptions",
    "GenerationResult",
    "GeneratorConfig",
    "TypeCompiler",
    "TypeScriptCompiler",
    "generate",
    "generate_from_components",
    "get_compiler",
    "run",
]
