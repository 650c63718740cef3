"""Discovery document loading.

This module provides utilities for loading discovery documents from URLs or
local file paths, decoding JSON or YAML, and validating the result into the
immutable discovery data model.
"""

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml
from pydantic import ValidationError

from gce2retrofit.codegen.utils import is_url
from gce2retrofit.discovery import DiscoveryDocument
from gce2retrofit.exceptions import DocumentLoadError, ParseError

logger = logging.getLogger(__name__)

__all__ = ['DocumentLoader']


class DocumentLoader:
    """Loads discovery documents from URLs or file paths.

    Example:
        >>> loader = DocumentLoader()
        >>> document = loader.load('https://www.googleapis.com/discovery/v1/apis/compute/v1/rest')
        >>> # or
        >>> document = loader.load('./compute.json')
    """

    def __init__(self, http_client: httpx.Client | None = None, timeout: float = 30.0):
        """Initialize the document loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, httpx.get is used.
            timeout: Timeout in seconds for URL requests.
        """
        self._http_client = http_client
        self._timeout = timeout

    def load(self, source: str | Path) -> DiscoveryDocument:
        """Load and validate a discovery document from a URL or file path.

        Raises:
            DocumentLoadError: If the document cannot be read or fetched.
            ParseError: If the content is not valid JSON/YAML or does not
                have the shape of a discovery document.
        """
        source = str(source)
        if is_url(source):
            text, is_yaml = self._load_from_url(source)
        else:
            text, is_yaml = self._load_from_file(source)

        try:
            data = yaml.safe_load(text) if is_yaml else json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ParseError(source, errors=[str(e)]) from e

        return self.parse(data, source)

    def parse(self, data: Any, source: str = '<memory>') -> DiscoveryDocument:
        """Validate decoded content as a discovery document.

        Raises:
            ParseError: If the content does not validate.
        """
        if not isinstance(data, dict):
            raise ParseError(source, errors=['document root must be an object'])

        try:
            document = DiscoveryDocument.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                source,
                errors=[
                    f'{".".join(str(loc) for loc in error["loc"])}: {error["msg"]}'
                    for error in e.errors()
                ],
            ) from e

        logger.info(
            f'Loaded {source}: {len(document.schemas)} schemas, '
            f'{len(document.resources)} resources'
        )
        return document

    def _load_from_url(self, url: str) -> tuple[str, bool]:
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise DocumentLoadError(url, cause=e) from e

        content_type = response.headers.get('content-type', '')
        is_yaml = 'yaml' in content_type or url.endswith(('.yaml', '.yml'))
        return response.text, is_yaml

    def _load_from_file(self, file_path: str) -> tuple[str, bool]:
        path = Path(file_path)
        try:
            text = path.read_text(encoding='utf-8')
        except OSError as e:
            raise DocumentLoadError(file_path, cause=e) from e
        return text, path.suffix.lower() in ('.yaml', '.yml')
