"""
Registry of shared Storyblok field types.

Asset, multiasset, multilink, richtext and table fields all reference one
structural type each. The registry tracks which of these have already been
emitted in the current run so every definition appears exactly once.
"""

from typing import Dict, List, Union

from .core.schema import FieldKind, SHARED_KINDS


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class SharedTypeRegistry:
    """Tracks which shared types have been emitted during one run."""

    def __init__(self):
        """Initialize registry with every shared kind marked as not emitted."""
        self._emitted: Dict[FieldKind, bool] = {kind: False for kind in SHARED_KINDS}

    def _key(self, kind: Union[FieldKind, str]) -> FieldKind:
        if isinstance(kind, str):
            kind = FieldKind.from_value(kind)

        if kind not in self._emitted:
            available = ", ".join(k.value for k in SHARED_KINDS)
            raise RegistryError(
                f"Not a shared field kind: {kind}. Available: {available}"
            )
        return kind

    def has_been_emitted(self, kind: Union[FieldKind, str]) -> bool:
        """Check whether the definition for `kind` has been emitted."""
        return self._emitted[self._key(kind)]

    def mark_emitted(self, kind: Union[FieldKind, str]) -> None:
        """Record that the definition for `kind` has been emitted."""
        self._emitted[self._key(kind)] = True

    def emitted_kinds(self) -> List[FieldKind]:
        """Shared kinds emitted so far, in registry order."""
        return [kind for kind, emitted in self._emitted.items() if emitted]

    def is_shared(self, kind: Union[FieldKind, str]) -> bool:
        """Check whether `kind` is one of the shared kinds."""
        if isinstance(kind, str):
            kind = FieldKind.from_value(kind)
        return kind in self._emitted
