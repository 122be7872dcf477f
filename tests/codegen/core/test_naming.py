"""Tests for type name derivation."""

from __future__ import annotations

import pytest

from storyblok_typegen.codegen.core.naming import (
    NamingCase,
    TypeNameFormatter,
    convert_case,
    format_type_name,
    split_words,
    to_camel_case,
    to_snake_case,
)


class TestSplitWords:
    @pytest.mark.parametrize(
        "name, words",
        [
            ("teaser", ["teaser"]),
            ("my_blok", ["my", "blok"]),
            ("my-blok", ["my", "blok"]),
            ("myBlok", ["my", "Blok"]),
            ("HTMLBlock", ["HTML", "Block"]),
            ("grid2col", ["grid", "2", "col"]),
            ("  hero  section ", ["hero", "section"]),
            ("café", ["café"]),
            ("überBlock", ["über", "Block"]),
            ("ÄRZTEListe", ["ÄRZTE", "Liste"]),
            ("straße2go", ["straße", "2", "go"]),
        ],
    )
    def test_split(self, name, words) -> None:
        assert split_words(name) == words


class TestTypeNameFormatter:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("teaser", "Teaser"),
            ("my_blok", "MyBlok"),
            ("HTMLBlock", "HtmlBlock"),
            ("grid2col", "Grid2Col"),
            ("multiasset", "Multiasset"),
        ],
    )
    def test_without_affixes(self, raw, expected) -> None:
        assert TypeNameFormatter().format(raw) == expected

    def test_suffix_is_applied_before_case_conversion(self) -> None:
        formatter = TypeNameFormatter(suffix="Storyblok")
        assert formatter.format("teaser") == "TeaserStoryblok"
        assert formatter.format("my_blok") == "MyBlokStoryblok"

    def test_prefix(self) -> None:
        assert TypeNameFormatter(prefix="sb-").format("teaser") == "SbTeaser"

    def test_known_collisions(self) -> None:
        formatter = TypeNameFormatter()
        assert formatter("my_blok") == formatter("my-blok") == formatter("myBlok") == "MyBlok"

    def test_deterministic(self) -> None:
        first = TypeNameFormatter(suffix="Storyblok")
        second = TypeNameFormatter(suffix="Storyblok")
        assert first.format("hero_section") == second.format("hero_section")
        assert first.format("hero_section") == first.format("hero_section")

    def test_none_affixes_behave_like_empty(self) -> None:
        assert TypeNameFormatter(None, None).format("page") == "Page"

    def test_non_ascii_letters_are_kept(self) -> None:
        formatter = TypeNameFormatter()
        assert formatter.format("café") == "Café"
        assert formatter.format("cafè") == "Cafè"
        assert formatter.format("über") == "Über"
        assert formatter.format("café") != formatter.format("cafè")

    def test_format_type_name(self) -> None:
        assert format_type_name("x", "page", "y") == "XPageY"


class TestCaseConversion:
    def test_snake(self) -> None:
        assert to_snake_case("typeNamesPrefix") == "type_names_prefix"

    def test_camel(self) -> None:
        assert to_camel_case("type_names_prefix") == "typeNamesPrefix"

    def test_convert_case(self) -> None:
        assert convert_case("hero_section", NamingCase.PASCAL_CASE) == "HeroSection"
        assert convert_case("HeroSection", NamingCase.SNAKE_CASE) == "hero_section"
