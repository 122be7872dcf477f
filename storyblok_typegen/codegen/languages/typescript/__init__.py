"""
TypeScript declarations for Storyblok components.
"""

from .compiler import TypeScriptCompiler

__all__ = ["TypeScriptCompiler"]
