from gce2retrofit.discovery.models import (
    ArrayType,
    DiscoveryDocument,
    Method,
    ParameterType,
    PrimitiveType,
    PropertyType,
    ReferenceType,
    RequestRef,
    Resource,
    ResponseRef,
    Schema,
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
