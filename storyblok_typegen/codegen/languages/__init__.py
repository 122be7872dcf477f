"""
Target language compilers.

Each subpackage provides a TypeCompiler implementation.
"""

from .typescript import TypeScriptCompiler

COMPILERS = {
    "typescript": TypeScriptCompiler,
    "ts": TypeScriptCompiler,
}


def get_compiler(language: str = "typescript"):
    """
    Create a compiler for a target language.

    Raises:
        ValueError: If the language is not supported
    """
    try:
        compiler_class = COMPILERS[language.lower()]
    except KeyError:
        available = ", ".join(sorted(COMPILERS))
        raise ValueError(
            f"No compiler registered for language: {language}. Available: {available}"
        ) from None
    return compiler_class()


__all__ = ["COMPILERS", "TypeScriptCompiler", "get_compiler"]
