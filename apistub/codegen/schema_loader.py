"""Schema loading utilities for OpenAPI documents.

This module loads OpenAPI documents from URLs or local file paths, parses
JSON or YAML content and validates the result into the OpenAPI object model.
"""

import json
import logging
from pathlib import Path

import httpx
import yaml
from pydantic import ValidationError

from apistub.codegen.utils import is_url
from apistub.exceptions import SchemaLoadError, SchemaValidationError
from apistub.openapi.v3 import OpenAPI

__all__ = ['SchemaLoader', 'validate_document']

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Loads OpenAPI documents from URLs or file paths.

    Example:
        >>> loader = SchemaLoader()
        >>> document = loader.load('https://api.example.com/openapi.json')
        >>> # or
        >>> document = loader.load('/path/to/openapi.yaml')
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the schema loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, ``httpx.get`` is used.
            base_path: Base path for resolving relative file paths.
                      Defaults to the current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> OpenAPI:
        """Load and validate an OpenAPI document from a URL or file path.

        Args:
            source: URL or file path to the OpenAPI document.

        Returns:
            The validated OpenAPI document.

        Raises:
            SchemaLoadError: If the document cannot be fetched or parsed.
            SchemaValidationError: If it has no ``openapi`` version or does
                not match the OpenAPI object model.
        """
        try:
            if is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
        except SchemaLoadError:
            raise
        except Exception as e:
            raise SchemaLoadError(source, cause=e)

        return validate_document(content, source)

    def _load_from_url(self, url: str):
        """Load document content from a URL."""
        logger.debug(f'Fetching {url}')
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(content)
            return json.loads(content)

        except httpx.HTTPError as e:
            raise SchemaLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(url, cause=e)

    def _load_from_file(self, file_path: str):
        """Load document content from a file."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise SchemaLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        logger.debug(f'Reading {path}')
        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise SchemaLoadError(str(file_path), cause=e)
        except OSError as e:
            raise SchemaLoadError(str(file_path), cause=e)


def validate_document(content, source: str = '<document>') -> OpenAPI:
    """Validate parsed content into an OpenAPI document.

    Raises:
        SchemaValidationError: If the content is not a mapping, declares no
            ``openapi`` version, or does not match the object model.
    """
    if not isinstance(content, dict):
        raise SchemaValidationError(source, ['document is not a JSON object'])
    if content.get('openapi') is None:
        raise SchemaValidationError(source, ['OpenAPI version is not defined'])

    try:
        return OpenAPI.model_validate(content)
    except ValidationError as e:
        errors = [f'{".".join(map(str, err["loc"]))}: {err["msg"]}' for err in e.errors()]
        raise SchemaValidationError(source, errors)
