"""Shared fixtures: deterministic fakes for the compiler and component builders."""

from __future__ import annotations

from collections import Counter
from typing import Any

import pytest

from storyblok_typegen.codegen.core import (
    CompilationError,
    ComponentSchema,
    CompilerOptions,
    TypeCompiler,
)


class FakeCompiler(TypeCompiler):
    """Records every call and renders `type <Name>`.

    Names in *fail_names* always fail; names in *fail_once* fail on their
    first compilation only.
    """

    def __init__(self, fail_names=(), fail_once=()):
        self.fail_names = set(fail_names)
        self.fail_once = set(fail_once)
        self.calls: list[tuple[str, Any]] = []

    @property
    def language_name(self) -> str:
        return "fake"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def compile(self, spec, name, options: CompilerOptions | None = None) -> str:
        self.calls.append((name, spec))
        if name in self.fail_names:
            raise CompilationError(f"cannot compile {name}")
        if name in self.fail_once:
            self.fail_once.discard(name)
            raise CompilationError(f"transient failure for {name}")
        return f"type {name}"

    def preamble(self, options=None) -> list[str]:
        return ["// preamble"]

    def call_counts(self) -> Counter:
        return Counter(name for name, _ in self.calls)

    def spec_for(self, name: str):
        for call_name, spec in self.calls:
            if call_name == name:
                return spec
        raise KeyError(name)


@pytest.fixture
def fake_compiler() -> FakeCompiler:
    return FakeCompiler()


@pytest.fixture
def make_compiler():
    return FakeCompiler


@pytest.fixture
def component():
    """Factory building a ComponentSchema from a Storyblok-style schema dict."""

    def _component(name: str, schema: dict | None = None, group: str | None = None):
        raw: dict[str, Any] = {"name": name, "schema": schema or {}}
        if group:
            raw["component_group_uuid"] = group
        return ComponentSchema.from_dict(raw)

    return _component
