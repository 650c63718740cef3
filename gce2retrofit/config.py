import json
import os
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gce2retrofit.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['gce2retrofit.yaml', 'gce2retrofit.yml', 'gce2retrofit.json']
ENV_PREFIX = 'GCE2RETROFIT_'


class MethodType(str, Enum):
    """Call shapes generated for each discovery method."""

    SYNC = 'sync'
    ASYNC = 'async'


ALL_METHOD_TYPES = frozenset(MethodType)

_METHOD_TOKENS = {
    'sync': {MethodType.SYNC},
    'async': {MethodType.ASYNC},
    'both': {MethodType.SYNC, MethodType.ASYNC},
}


def parse_method_types(selector: str | Iterable[str] | None) -> frozenset[MethodType]:
    """Parse a method selector such as ``'sync,async'``.

    Recognized tokens are ``sync``, ``async`` and ``both``; other tokens are
    ignored. An empty selector, or one without any recognized token, selects
    both call shapes.
    """
    if selector is None:
        return ALL_METHOD_TYPES
    tokens = selector.split(',') if isinstance(selector, str) else selector

    method_types: set[MethodType] = set()
    for token in tokens:
        if isinstance(token, MethodType):
            method_types.add(token)
        else:
            method_types.update(_METHOD_TOKENS.get(str(token).strip(), ()))
    return frozenset(method_types) or ALL_METHOD_TYPES


class DocumentConfig(BaseModel):
    """Represents a single discovery document to be processed."""

    source: str = Field(..., description='Path or URL to the discovery document.')

    output: str = Field(..., description='Output directory for the generated code.')

    class_map: str | None = Field(
        None,
        description='Optional path to a tab-separated property-name to class-name file.',
    )

    methods: frozenset[MethodType] = Field(
        ALL_METHOD_TYPES,
        description='Call shapes to generate: sync, async or both.',
    )

    @field_validator('source', 'output')
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('must not be empty')
        return value

    @field_validator('methods', mode='before')
    @classmethod
    def _parse_methods(cls, value):
        return parse_method_types(value)


class CodegenConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    documents: list[DocumentConfig] = Field(
        ..., min_length=1, description='List of discovery documents to process.'
    )


class CliSettings(BaseSettings):
    """Defaults for the ``generate`` command, read from the environment."""

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX)

    class_map: str | None = None
    methods: str | None = None


def load_yaml(path: str | Path) -> dict:
    import yaml

    return yaml.load(Path(path).read_text(), Loader=yaml.SafeLoader)


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load_file(path: str | Path) -> dict:
    if str(path).endswith('.json'):
        return load_json(path)
    return load_yaml(path)


def _validate(data: dict, config_path: str | Path) -> CodegenConfig:
    try:
        return CodegenConfig.model_validate(data)
    except ValidationError as e:
        errors = e.errors()
        field = '.'.join(str(loc) for loc in errors[0]['loc']) if errors else None
        raise ConfigurationError(
            f'Invalid configuration: {e.error_count()} validation error(s)',
            config_path=str(config_path),
            field=field,
        ) from e


def get_config(path: str | None = None) -> CodegenConfig:
    """Load configuration from a file or the project's pyproject.toml."""
    if path:
        return _validate(_load_file(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _validate(_load_file(path), path)

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        pyproject = tomllib.loads(path.read_text())
        tools = pyproject.get('tool', {})

        if 'gce2retrofit' in tools:
            return _validate(tools['gce2retrofit'], path)

    raise FileNotFoundError('config not found')
