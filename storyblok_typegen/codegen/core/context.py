"""
Per-run state shared by the resolver and the assembler.

A fresh RunContext is created for every run, so concurrent or repeated
runs never share registry flags or output.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from ..registry import SharedTypeRegistry
from .compiler import TypeCompiler
from .config import CompilerOptions
from .custom import CustomFieldTypeResolver
from .groups import GroupIndex
from .naming import TypeNameFormatter


@dataclass
class GenerationIssue:
    """A non-fatal failure recorded during a run."""

    subject: str  # Component name or shared kind
    message: str
    exception: Optional[Exception] = None

    def __str__(self) -> str:
        return f"{self.subject}: {self.message}"


@dataclass
class RunContext:
    """Mutable state of one generation run."""

    group_index: GroupIndex
    formatter: TypeNameFormatter
    compiler: TypeCompiler
    options: CompilerOptions = field(default_factory=CompilerOptions)
    custom_resolver: Optional[CustomFieldTypeResolver] = None
    registry: SharedTypeRegistry = field(default_factory=SharedTypeRegistry)
    definitions: List[str] = field(default_factory=list)
    errors: List[GenerationIssue] = field(default_factory=list)

    def emit(self, definition: str) -> None:
        """Append rendered definition text to the output buffer."""
        self.definitions.append(definition)

    def report(self, subject: str, message: str, exception: Exception = None) -> None:
        self.errors.append(GenerationIssue(subject, message, exception))
