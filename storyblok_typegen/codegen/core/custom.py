"""
Loading of user-supplied custom field-type resolvers.

A resolver is a callable ``resolve(field_key, raw_descriptor)`` returning a
mapping of property names to type specifications (TypeSpec values or
JSON-schema-shaped dicts). It is loaded from a Python file or module:

    path/to/parser.py              -> attribute ``resolve``
    path/to/parser.py:my_resolver  -> attribute ``my_resolver``
    my_package.parsers:resolver    -> importable module attribute
"""

import importlib
import importlib.util
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ...logging_config import get_logger

logger = get_logger(__name__)

CustomFieldTypeResolver = Callable[[str, Mapping[str, Any]], Mapping[str, Any]]

DEFAULT_ATTRIBUTE = "resolve"


def split_resolver_path(spec: str) -> Tuple[str, Optional[str]]:
    """Split ``target:attribute`` into its parts (attribute may be None)."""
    target, sep, attribute = spec.rpartition(":")
    if sep and target and attribute.isidentifier():
        return target, attribute
    return spec, None


def _import_target(target: str):
    path = Path(target)
    if path.suffix == ".py" or path.exists():
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        module_spec = importlib.util.spec_from_file_location(
            f"storyblok_typegen_custom_{path.stem}", path
        )
        if module_spec is None or module_spec.loader is None:
            raise ImportError(f"Cannot import {path}")
        module = importlib.util.module_from_spec(module_spec)
        module_spec.loader.exec_module(module)
        return module
    return importlib.import_module(target)


def load_custom_field_type_resolver(
    spec: Optional[str],
) -> Optional[CustomFieldTypeResolver]:
    """
    Load a custom field-type resolver.

    Failures are never fatal: they are logged and treated as if no
    resolver had been configured.

    Args:
        spec: File path or module, optionally followed by ``:attribute``

    Returns:
        The resolver callable, or None
    """
    if not spec:
        return None

    target, attribute = split_resolver_path(spec)
    attribute = attribute or DEFAULT_ATTRIBUTE

    try:
        module = _import_target(target)
    except Exception as e:
        logger.warning("Could not load custom field types parser %s: %s", spec, e)
        return None

    resolver = getattr(module, attribute, None)
    if not callable(resolver):
        logger.warning(
            "Custom field types parser %s does not export a callable '%s'",
            spec,
            attribute,
        )
        return None

    logger.info("Loaded custom field types parser from %s", spec)
    return resolver


def call_custom_resolver(
    resolver: Optional[CustomFieldTypeResolver],
    field_key: str,
    raw_descriptor: Mapping[str, Any],
) -> Dict[str, Any]:
    """
    Invoke a resolver, degrading to an empty fragment on any failure.

    Returns:
        Mapping of property names to raw specifications
    """
    if resolver is None:
        return {}

    try:
        fragment = resolver(field_key, raw_descriptor)
    except Exception as e:
        logger.warning("Custom field types parser failed for '%s': %s", field_key, e)
        return {}

    if fragment is None:
        return {}

    if not isinstance(fragment, Mapping):
        logger.warning(
            "Custom field types parser returned %s for '%s', expected a mapping",
            type(fragment).__name__,
            field_key,
        )
        return {}

    return dict(fragment)
