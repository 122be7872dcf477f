"""
Configuration management for type generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from .custom import split_resolver_path
from .naming import to_snake_case


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


DEFAULT_BANNER_COMMENT = (
    "/* eslint-disable */\n"
    "/**\n"
    " * This file was automatically generated by storyblok-typegen.\n"
    " * DO NOT MODIFY IT BY HAND. Instead, modify the source component schemas\n"
    " * and run storyblok-typegen to regenerate this file.\n"
    " */"
)


@dataclass
class CompilerOptions:
    """Formatting options handed to the type compiler."""

    # Written once at the top of the output file
    banner_comment: str = DEFAULT_BANNER_COMMENT

    # Code style settings
    indent_size: int = 2
    use_tabs: bool = False

    # Type handling
    export_types: bool = True
    additional_properties: bool = True

    # Doc comments from field descriptions
    add_comments: bool = True

    # Content-type references for `internal_stories` fields
    story_type_name: str = "ISbStoryData"
    story_type_import: str = "storyblok"

    @property
    def indent(self) -> str:
        return "\t" if self.use_tabs else " " * self.indent_size


@dataclass
class GeneratorConfig:
    """Configuration for a generation run."""

    # Naming settings
    type_names_prefix: str = ""
    type_names_suffix: str = ""

    # Python file exporting a custom field-type resolver
    custom_field_types_parser_path: Optional[str] = None

    compiler: CompilerOptions = field(default_factory=CompilerOptions)

    # Unrecognized settings
    custom: Dict[str, Any] = field(default_factory=dict)


_COMPILER_FIELDS = {f.name for f in fields(CompilerOptions)}
_GENERATOR_FIELDS = {f.name for f in fields(GeneratorConfig)} - {"compiler", "custom"}

# Spellings used by json-schema-to-typescript option files
_ALIASES = {
    "type_name_prefix": "type_names_prefix",
    "type_name_suffix": "type_names_suffix",
    "custom_field_types_parser": "custom_field_types_parser_path",
    "custom_type_parser": "custom_field_types_parser_path",
}


def _normalize_key(key: str) -> str:
    snake = to_snake_case(key)
    return _ALIASES.get(snake, snake)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(GeneratorConfig())

    def get_config(self, custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        # Start with defaults
        base_config = self._flatten(self._defaults)

        # Load from file if provided
        if config_file:
            base_config.update(self._flatten(self._load_config_file(config_file)))

        # Apply custom overrides
        if custom_config:
            base_config.update(self._flatten(custom_config))

        return self._dict_to_config(base_config)

    def _flatten(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize keys and hoist the nested `compiler` section."""
        flat: Dict[str, Any] = {}
        for key, value in config.items():
            if key in ("compiler", "compilerOptions") and isinstance(value, dict):
                flat.update(self._flatten(value))
            elif key == "custom" and isinstance(value, dict):
                flat.update(value)
            else:
                flat[_normalize_key(key)] = value
        return flat

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        config_args = {}
        compiler_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in _GENERATOR_FIELDS:
                config_args[key] = value
            elif key in _COMPILER_FIELDS:
                compiler_args[key] = value
            else:
                custom_args[key] = value

        # json-schema-to-typescript spells "no banner" as an empty string or false
        if compiler_args.get("banner_comment") in (None, False):
            compiler_args["banner_comment"] = ""

        return GeneratorConfig(
            compiler=CompilerOptions(**compiler_args),
            custom=custom_args,
            **config_args,
        )

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []
        compiler = config.compiler

        if not isinstance(compiler.indent_size, int) or compiler.indent_size < 0:
            warnings.append(f"Invalid indent_size: {compiler.indent_size}")

        if not compiler.story_type_name.isidentifier():
            warnings.append(f"Invalid story_type_name: {compiler.story_type_name}")

        for key in config.custom:
            warnings.append(f"Unknown configuration option: {key}")

        parser_path = config.custom_field_types_parser_path
        if parser_path:
            target, _ = split_resolver_path(parser_path)
            if target.endswith(".py") and not Path(target).exists():
                warnings.append(f"Custom field types parser not found: {parser_path}")

        return warnings


def load_config(custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return ConfigManager().get_config(custom_config, config_file)
