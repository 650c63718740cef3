"""
Pydantic V2 models for Google API discovery documents.

Only the subset of the discovery format needed for Retrofit generation is
modeled: the base URL, the schemas with their property types and the
top-level resources with their methods. Unknown fields are ignored and every
model is frozen once validated.

Usage Example:
-------------

    from gce2retrofit.discovery import DiscoveryDocument
    import json

    with open('compute.json') as f:
        document = DiscoveryDocument.model_validate(json.load(f))

    for name, resource in document.resources.items():
        for method in resource.methods.values():
            print(f'{method.http_method} /{method.path}')
"""

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    model_validator,
)

__all__ = [
    'ArrayType',
    'DiscoveryDocument',
    'Method',
    'ParameterType',
    'PrimitiveType',
    'PropertyType',
    'ReferenceType',
    'RequestRef',
    'Resource',
    'ResponseRef',
    'Schema',
]


class _DiscoveryModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)


# ============================================================================
# Type descriptors
# ============================================================================


class PrimitiveType(_DiscoveryModel):
    """A scalar type such as ``string`` or ``integer``."""

    type: str
    format: str | None = None


class ArrayType(_DiscoveryModel):
    """A sequence of another type descriptor."""

    type: str = 'array'
    items: 'PropertyType'


class ReferenceType(_DiscoveryModel):
    """A reference to another schema, by schema id."""

    ref: str = Field(..., alias='$ref')


def _get_descriptor_kind(data: Any) -> str | None:
    """Discriminator function to determine the descriptor variant."""
    if isinstance(data, dict):
        if '$ref' in data or 'ref' in data:
            return 'reference'
        if data.get('type') == 'array':
            return 'array'
        return 'primitive'
    if isinstance(data, ReferenceType):
        return 'reference'
    if isinstance(data, ArrayType):
        return 'array'
    if isinstance(data, PrimitiveType):
        return 'primitive'
    return None


PropertyType = Annotated[
    Annotated[PrimitiveType, Tag('primitive')]
    | Annotated[ArrayType, Tag('array')]
    | Annotated[ReferenceType, Tag('reference')],
    Discriminator(_get_descriptor_kind),
]

ArrayType.model_rebuild()


# ============================================================================
# Schemas, methods and resources
# ============================================================================


class Schema(_DiscoveryModel):
    """A named data-model entity with typed properties."""

    id: str
    properties: dict[str, PropertyType] = Field(default_factory=dict)


class ParameterType(_DiscoveryModel):
    """A method parameter: a type descriptor plus its location and required flag.

    Discovery documents describe a parameter in a single JSON object, e.g.
    ``{"type": "string", "location": "query", "required": true}``; the
    descriptor part of that object is validated into ``descriptor``.
    """

    descriptor: PropertyType
    location: str | None = None
    required: bool = False

    @model_validator(mode='before')
    @classmethod
    def _split_descriptor(cls, data: Any) -> Any:
        if isinstance(data, dict) and 'descriptor' not in data:
            descriptor = {
                key: value
                for key, value in data.items()
                if key not in ('location', 'required')
            }
            data = {
                'descriptor': descriptor,
                'location': data.get('location'),
                'required': data.get('required', False),
            }
        return data


class RequestRef(_DiscoveryModel):
    """The request body of a method."""

    ref: str = Field(..., alias='$ref')
    parameter_name: str = Field('body', alias='parameterName')


class ResponseRef(_DiscoveryModel):
    """The response body of a method."""

    ref: str = Field(..., alias='$ref')


class Method(_DiscoveryModel):
    """One callable API operation."""

    name: str
    http_method: str = Field(..., alias='httpMethod')
    path: str
    request: RequestRef | None = None
    response: ResponseRef | None = None
    parameters: dict[str, ParameterType] = Field(default_factory=dict)
    parameter_order: list[str] | None = Field(None, alias='parameterOrder')


class Resource(_DiscoveryModel):
    """A named group of methods."""

    name: str
    methods: dict[str, Method] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def _name_methods(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get('methods'), dict):
            data = {**data, 'methods': _with_key(data['methods'], 'name')}
        return data


class DiscoveryDocument(_DiscoveryModel):
    """Root of a discovery document."""

    base_url: str = Field(..., alias='baseUrl')
    name: str | None = None
    version: str | None = None
    title: str | None = None
    schemas: dict[str, Schema] = Field(default_factory=dict)
    resources: dict[str, Resource] = Field(default_factory=dict)

    @model_validator(mode='before')
    @classmethod
    def _name_entities(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if isinstance(data.get('schemas'), dict):
            data['schemas'] = _with_key(data['schemas'], 'id', overwrite=False)
        if isinstance(data.get('resources'), dict):
            data['resources'] = _with_key(data['resources'], 'name')
        return data


def _with_key(mapping: dict, field: str, overwrite: bool = True) -> dict:
    """Copy ``mapping`` storing each entry's key under ``field`` of its value."""
    named = {}
    for key, value in mapping.items():
        if isinstance(value, dict) and (overwrite or field not in value):
            value = {**value, field: key}
        named[key] = value
    return named
