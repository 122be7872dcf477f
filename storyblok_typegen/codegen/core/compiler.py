"""
Base type compiler interface for all code generation targets.

Defines the contract that all language compilers must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .config import CompilerOptions
from .types import TypeSpec


class CompilationError(Exception):
    """Raised when a type specification cannot be rendered."""

    pass


class TypeCompiler(ABC):
    """Abstract base class for all type compilers."""

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.d.ts')."""
        pass

    @abstractmethod
    def compile(
        self, spec: TypeSpec, name: str, options: Optional[CompilerOptions] = None
    ) -> str:
        """
        Render one named type definition.

        Args:
            spec: Type specification to render
            name: Name of the generated type
            options: Formatting options

        Returns:
            Definition text

        Raises:
            CompilationError: If the specification cannot be rendered
        """
        pass

    def preamble(self, options: Optional[CompilerOptions] = None) -> List[str]:
        """
        Lines written once before all definitions (banner, imports).

        Returns:
            List of lines (can be empty)
        """
        return []

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"
