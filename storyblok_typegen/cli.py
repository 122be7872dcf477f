"""
Command-line interface for storyblok_typegen.

Reads Storyblok component schemas and writes TypeScript type definitions.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.table import Table
from rich import box

from . import __version__
from .codegen import GenerationResult, generate, get_compiler
from .codegen.core import ConfigError, ConfigManager, convert_components
from .codegen.core import load_custom_field_type_resolver
from .logging_config import get_logger, setup_logging
from .utils import SchemaLoaderError, load_component_schemas, write_typedefs

logger = get_logger(__name__)

DEFAULT_TARGET = "./storyblok-component-types.d.ts"
DEFAULT_TYPE_NAMES_SUFFIX = "Storyblok"

# Diagnostics go to stderr so --stdout output stays clean
console = Console(stderr=True)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="storyblok-typegen",
        description="Generate TypeScript type definitions from Storyblok component schemas.",
    )

    parser.add_argument(
        "sources",
        nargs="+",
        metavar="SOURCE",
        help="components.json files or http(s) URLs to read component schemas from",
    )

    parser.add_argument(
        "--target",
        "-t",
        metavar="FILE",
        default=DEFAULT_TARGET,
        help=f"Output file for the type definitions (default: {DEFAULT_TARGET})",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the type definitions instead of writing the target file",
    )

    naming_group = parser.add_argument_group("naming")
    naming_group.add_argument(
        "--type-names-prefix",
        metavar="PREFIX",
        default="",
        help="Prefix added to every generated type name",
    )
    naming_group.add_argument(
        "--type-names-suffix",
        metavar="SUFFIX",
        default=DEFAULT_TYPE_NAMES_SUFFIX,
        help=f"Suffix added to every generated type name (default: {DEFAULT_TYPE_NAMES_SUFFIX})",
    )

    generation_group = parser.add_argument_group("generation")
    generation_group.add_argument(
        "--custom-fields-parser",
        metavar="PATH",
        help="Python file (optionally FILE:FUNCTION) resolving fields of type 'custom'",
    )
    generation_group.add_argument(
        "--compiler-options",
        metavar="FILE",
        help="JSON file with compiler options (bannerComment, additionalProperties, ...)",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata",
    )
    output_group.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def _build_overrides(args: argparse.Namespace) -> dict:
    overrides = {
        "type_names_prefix": args.type_names_prefix,
        "type_names_suffix": args.type_names_suffix,
    }
    if args.custom_fields_parser:
        overrides["custom_field_types_parser_path"] = args.custom_fields_parser
    return overrides


def _print_errors(result: GenerationResult) -> None:
    table = Table(title="Generation errors", box=box.SIMPLE, show_lines=False)
    table.add_column("Subject", style="cyan")
    table.add_column("Error", style="red")
    for issue in result.errors:
        table.add_row(issue.subject, issue.message)
    console.print(table)


def _print_metadata(result: GenerationResult) -> None:
    table = Table(title="Generation summary", box=box.SIMPLE)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in result.metadata.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "-"
        table.add_row(key, str(value))
    console.print(table)


def run_cli(args: argparse.Namespace) -> int:
    """Run the generation described by parsed arguments."""
    if not args.stdout and Path(args.target).is_dir():
        raise CLIError(f"Target is a directory: {args.target}")

    manager = ConfigManager()
    config = manager.get_config(_build_overrides(args), args.compiler_options)

    for warning in manager.validate_config(config):
        console.print(f"[yellow]Warning:[/yellow] {warning}")
        logger.warning(warning)

    raw_components = load_component_schemas(args.sources)
    components = convert_components(raw_components)

    custom_resolver = load_custom_field_type_resolver(config.custom_field_types_parser_path)
    if config.custom_field_types_parser_path and custom_resolver is None:
        console.print(
            "[yellow]Warning:[/yellow] custom field types parser could not be loaded, "
            "custom fields will be skipped"
        )

    result = generate(components, get_compiler("typescript"), config, custom_resolver)

    if args.stdout:
        sys.stdout.write(result.code)
    else:
        path = write_typedefs(args.target, result.code)
        console.print(
            f"[green]✓[/green] Wrote {len(result.definitions)} definitions to {path}"
        )

    if result.errors:
        _print_errors(result)

    if args.verbose:
        _print_metadata(result)

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the storyblok-typegen command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        return run_cli(args)
    except (ConfigError, SchemaLoaderError, CLIError) as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.debug("Generation aborted", exc_info=True)
        return 1
    except ValueError as e:
        console.print(f"[red]Invalid component schema:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
