"""Utility functions for loading API documents.

This module provides functions for loading OpenAPI documents (JSON or YAML)
from files and URLs with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
import yaml

from .logging_config import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class DocumentLoaderError(Exception):
    """Custom exception for document loading errors."""

    pass


def parse_document_text(text: str, yaml_format: bool = False) -> Any:
    """Parse JSON or YAML text into Python data.

    Args:
        text: Raw document content.
        yaml_format: Parse as YAML instead of JSON.

    Raises:
        DocumentLoaderError: If the text cannot be parsed.
    """
    try:
        if yaml_format:
            return yaml.safe_load(text)
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoaderError(f"Invalid JSON: {e}") from e
    except yaml.YAMLError as e:
        raise DocumentLoaderError(f"Invalid YAML: {e}") from e


def load_document_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load an API document from a local file.

    Args:
        file_path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        DocumentLoaderError: If file cannot be read or parsed.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load document from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    yaml_format = file_path.suffix.lower() in YAML_SUFFIXES
    if not yaml_format and file_path.suffix.lower() != ".json":
        logger.warning(f"Unrecognised extension, parsing as JSON: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise DocumentLoaderError(f"Error reading file {file_path}: {e}") from e

    try:
        data = parse_document_text(text, yaml_format)
    except DocumentLoaderError as e:
        logger.error(f"Failed to parse {file_path}: {e}")
        raise DocumentLoaderError(f"{file_path}: {e}") from e

    logger.info(f"Successfully loaded document from {file_path}")
    return str(file_path), data


def load_document_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load an API document from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DocumentLoaderError: If URL is invalid, request fails, or the
            response cannot be parsed.
    """
    logger.debug(f"Attempting to load document from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise DocumentLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise DocumentLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise DocumentLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise DocumentLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise DocumentLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    yaml_format = "yaml" in content_type or any(
        parsed_url.path.lower().endswith(suffix) for suffix in YAML_SUFFIXES
    )

    data = parse_document_text(response.text, yaml_format)
    logger.info(f"Successfully loaded document from {url}")
    return url, data


def load_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Load an API document from either a file or URL.

    Args:
        file_path: Path to local document (mutually exclusive with url).
        url: URL to fetch the document from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DocumentLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise DocumentLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise DocumentLoaderError("Cannot specify both file_path and url")

    if file_path:
        return load_document_from_file(file_path)
    return load_document_from_url(url, timeout)
