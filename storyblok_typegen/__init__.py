"""
storyblok_typegen - TypeScript type definitions for Storyblok components.
"""

from .codegen import (
    CompilationError,
    ComponentSchema,
    CompilerOptions,
    GenerationResult,
    GeneratorConfig,
    TypeScriptCompiler,
    generate,
    generate_from_components,
    run,
)

__version__ = "0.1.0"

__all__ = [
    "CompilationError",
    "ComponentSchema",
    "CompilerOptions",
    "GenerationResult",
    "GeneratorConfig",
    "TypeScriptCompiler",
    "generate",
    "generate_from_components",
    "run",
    "__version__",
]
