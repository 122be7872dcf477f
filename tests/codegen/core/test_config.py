"""Tests for configuration loading."""

from __future__ import annotations

import json

import pytest

from storyblok_typegen.codegen.core.config import (
    DEFAULT_BANNER_COMMENT,
    CompilerOptions,
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


def write_json(path, data) -> str:
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


class TestConfigManager:
    def test_defaults(self) -> None:
        config = load_config()
        assert config.type_names_prefix == ""
        assert config.type_names_suffix == ""
        assert config.custom_field_types_parser_path is None
        assert config.compiler.banner_comment == DEFAULT_BANNER_COMMENT
        assert config.compiler.indent == "  "
        assert config.custom == {}

    def test_overrides_with_camel_case_keys(self) -> None:
        config = load_config({"typeNamesPrefix": "Sb", "type_names_suffix": "Block"})
        assert config.type_names_prefix == "Sb"
        assert config.type_names_suffix == "Block"

    def test_config_file_with_compiler_options(self, tmp_path) -> None:
        path = write_json(
            tmp_path / "options.json",
            {"bannerComment": "// hi", "additionalProperties": False, "indentSize": 4},
        )
        config = load_config(config_file=path)
        assert config.compiler.banner_comment == "// hi"
        assert config.compiler.additional_properties is False
        assert config.compiler.indent == "    "

    def test_nested_compiler_section(self, tmp_path) -> None:
        path = write_json(tmp_path / "config.json", {"compilerOptions": {"useTabs": True}})
        assert load_config(config_file=path).compiler.indent == "\t"

    def test_overrides_win_over_file(self, tmp_path) -> None:
        path = write_json(tmp_path / "config.json", {"typeNamesSuffix": "File"})
        config = load_config({"type_names_suffix": "Override"}, path)
        assert config.type_names_suffix == "Override"

    @pytest.mark.parametrize("banner", [False, None, ""])
    def test_disabled_banner(self, banner) -> None:
        assert load_config({"bannerComment": banner}).compiler.banner_comment == ""

    def test_aliases(self) -> None:
        config = load_config({"customFieldTypesParser": "parser.py"})
        assert config.custom_field_types_parser_path == "parser.py"

    def test_unknown_keys_are_kept(self) -> None:
        config = load_config({"strictIndexSignatures": True})
        assert config.custom == {"strict_index_signatures": True}

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_non_json_suffix(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("a: 1", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            load_config(config_file=path)

    def test_non_object(self, tmp_path) -> None:
        path = write_json(tmp_path / "config.json", [1, 2])
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(config_file=path)


class TestValidateConfig:
    def test_valid_config_has_no_warnings(self) -> None:
        assert ConfigManager().validate_config(GeneratorConfig()) == []

    def test_warnings(self, tmp_path) -> None:
        config = GeneratorConfig(
            custom_field_types_parser_path=str(tmp_path / "missing.py"),
            compiler=CompilerOptions(indent_size=-1, story_type_name="not valid"),
            custom={"unknown_option": 1},
        )
        warnings = ConfigManager().validate_config(config)
        assert len(warnings) == 4
        assert any("indent_size" in w for w in warnings)
        assert any("story_type_name" in w for w in warnings)
        assert any("unknown_option" in w for w in warnings)
        assert any("parser not found" in w for w in warnings)

    def test_parser_with_attribute(self, tmp_path) -> None:
        parser = tmp_path / "parser.py"
        parser.write_text("def resolve(key, raw):\n    return {}\n", encoding="utf-8")
        config = GeneratorConfig(custom_field_types_parser_path=f"{parser}:resolve")
        assert ConfigManager().validate_config(config) == []
