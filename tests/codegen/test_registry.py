"""Tests for the shared-type registry."""

from __future__ import annotations

import pytest

from storyblok_typegen.codegen.core.schema import FieldKind
from storyblok_typegen.codegen.registry import RegistryError, SharedTypeRegistry


class TestSharedTypeRegistry:
    def test_nothing_emitted_initially(self) -> None:
        registry = SharedTypeRegistry()
        assert registry.emitted_kinds() == []
        assert registry.has_been_emitted(FieldKind.ASSET) is False

    def test_mark_emitted(self) -> None:
        registry = SharedTypeRegistry()
        registry.mark_emitted(FieldKind.TABLE)
        registry.mark_emitted("table")
        assert registry.has_been_emitted("table") is True
        assert registry.emitted_kinds() == [FieldKind.TABLE]

    def test_emitted_kinds_in_registry_order(self) -> None:
        registry = SharedTypeRegistry()
        registry.mark_emitted(FieldKind.TABLE)
        registry.mark_emitted(FieldKind.ASSET)
        assert registry.emitted_kinds() == [FieldKind.ASSET, FieldKind.TABLE]

    @pytest.mark.parametrize("kind", ["text", FieldKind.BLOKS, "nonsense"])
    def test_non_shared_kind_raises(self, kind) -> None:
        with pytest.raises(RegistryError):
            SharedTypeRegistry().has_been_emitted(kind)

    def test_is_shared(self) -> None:
        registry = SharedTypeRegistry()
        assert registry.is_shared("multilink")
        assert not registry.is_shared("text")

    def test_registries_are_independent(self) -> None:
        first, second = SharedTypeRegistry(), SharedTypeRegistry()
        first.mark_emitted(FieldKind.ASSET)
        assert second.has_been_emitted(FieldKind.ASSET) is False
