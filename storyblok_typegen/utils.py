"""Utility functions for loading component schemas and writing type definitions.

This module provides functions for loading JSON from files and URLs with
proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any, Iterable
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaLoaderError(Exception):
    """Custom exception for schema loading errors."""

    pass


def is_url(source: str) -> bool:
    parsed_url = urlparse(str(source))
    return parsed_url.scheme in ("http", "https") and bool(parsed_url.netloc)


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        SchemaLoaderError: If file is missing, cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load JSON from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise SchemaLoaderError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")
        # Don't raise, just warn - might still be valid JSON

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info(f"Successfully loaded JSON from {file_path}")
        return str(file_path), data
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        SchemaLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug(f"Attempting to load JSON from URL: {url}")

    if not is_url(url):
        logger.error(f"Invalid URL format: {url}")
        raise SchemaLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
        logger.info(f"Successfully loaded JSON from {url}")
        return url, data

    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise SchemaLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Invalid JSON response from URL {url}: {e}") from e


def load_json(source: str | Path, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from either a file or an http(s) URL."""
    if isinstance(source, str) and is_url(source):
        return load_json_from_url(source, timeout)
    return load_json_from_file(source)


def extract_components(data: Any, source: str = "<data>") -> list[dict]:
    """Return the component list of a components.json document.

    Accepts either a bare list of components or an object with a
    ``components`` list (the format written by ``storyblok pull-components``).
    """
    if isinstance(data, dict) and "components" in data:
        data = data["components"]

    if not isinstance(data, list):
        raise SchemaLoaderError(f"No component list found in {source}")

    components = [item for item in data if isinstance(item, dict)]
    if len(components) != len(data):
        logger.warning(f"Ignored {len(data) - len(components)} non-object entries in {source}")
    return components


def load_component_schemas(sources: Iterable[str | Path], timeout: int = 30) -> list[dict]:
    """Load and concatenate raw component definitions from several sources.

    Args:
        sources: File paths or http(s) URLs, read in order.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Raw component definitions in source order.
    """
    components: list[dict] = []
    for source in sources:
        description, data = load_json(source, timeout)
        loaded = extract_components(data, description)
        logger.info(f"Loaded {len(loaded)} components from {description}")
        components.extend(loaded)

    if not components:
        raise SchemaLoaderError("No components found in the provided sources")

    return components


def write_typedefs(file_path: str | Path, content: str) -> Path:
    """Write generated type definitions, creating parent directories.

    Raises:
        SchemaLoaderError: If the file cannot be written.
    """
    file_path = Path(file_path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Error writing file {file_path}: {e}", exc_info=True)
        raise SchemaLoaderError(f"Error writing file {file_path}: {e}") from e

    logger.info(f"Wrote type definitions to {file_path}")
    return file_path
