"""Tests for loading and calling custom field-type resolvers."""

from __future__ import annotations

import logging

import pytest

from storyblok_typegen.codegen.core.custom import (
    call_custom_resolver,
    load_custom_field_type_resolver,
    split_resolver_path,
)


@pytest.fixture
def parser_file(tmp_path):
    path = tmp_path / "parser.py"
    path.write_text(
        "def resolve(key, raw):\n"
        "    return {key: {'type': 'string'}}\n"
        "\n"
        "def other(key, raw):\n"
        "    return {key: {'tsType': 'Other'}}\n"
        "\n"
        "NOT_CALLABLE = 1\n",
        encoding="utf-8",
    )
    return path


class TestSplitResolverPath:
    def test_plain_path(self) -> None:
        assert split_resolver_path("parser.py") == ("parser.py", None)

    def test_with_attribute(self) -> None:
        assert split_resolver_path("parser.py:other") == ("parser.py", "other")

    def test_windows_drive_is_not_an_attribute(self) -> None:
        assert split_resolver_path("C:\\parsers\\parser.py") == ("C:\\parsers\\parser.py", None)


class TestLoadCustomFieldTypeResolver:
    def test_none(self) -> None:
        assert load_custom_field_type_resolver(None) is None
        assert load_custom_field_type_resolver("") is None

    def test_default_attribute(self, parser_file) -> None:
        resolver = load_custom_field_type_resolver(str(parser_file))
        assert resolver("mood", {}) == {"mood": {"type": "string"}}

    def test_named_attribute(self, parser_file) -> None:
        resolver = load_custom_field_type_resolver(f"{parser_file}:other")
        assert resolver("mood", {}) == {"mood": {"tsType": "Other"}}

    def test_missing_file(self, tmp_path, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="storyblok_typegen"):
            assert load_custom_field_type_resolver(str(tmp_path / "missing.py")) is None
        assert "Could not load custom field types parser" in caplog.text

    def test_missing_attribute(self, parser_file) -> None:
        assert load_custom_field_type_resolver(f"{parser_file}:absent") is None

    def test_attribute_not_callable(self, parser_file) -> None:
        assert load_custom_field_type_resolver(f"{parser_file}:NOT_CALLABLE") is None

    def test_file_raising_on_import(self, tmp_path) -> None:
        path = tmp_path / "broken.py"
        path.write_text("raise RuntimeError('broken')\n", encoding="utf-8")
        assert load_custom_field_type_resolver(str(path)) is None

    def test_importable_module(self) -> None:
        resolver = load_custom_field_type_resolver("json:dumps")
        assert resolver is not None


class TestCallCustomResolver:
    def test_no_resolver(self) -> None:
        assert call_custom_resolver(None, "mood", {}) == {}

    def test_result_is_copied(self) -> None:
        result = call_custom_resolver(lambda key, raw: {key: {"type": "number"}}, "n", {})
        assert result == {"n": {"type": "number"}}

    def test_exception_gives_empty_fragment(self) -> None:
        def failing(key, raw):
            raise ValueError("nope")

        assert call_custom_resolver(failing, "mood", {}) == {}

    @pytest.mark.parametrize("value", [None, ["not", "a", "mapping"], "text"])
    def test_non_mapping_gives_empty_fragment(self, value) -> None:
        assert call_custom_resolver(lambda key, raw: value, "mood", {}) == {}
