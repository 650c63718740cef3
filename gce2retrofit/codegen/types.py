"""Type mapping from discovery type descriptors to Java type names.

This module provides the TypeMapper, which resolves the three descriptor
variants of a discovery document (primitive, array and schema reference) to
the Java type written into generated models and interfaces.
"""

from collections.abc import Mapping

from gce2retrofit.discovery import (
    ArrayType,
    ParameterType,
    PrimitiveType,
    PropertyType,
    ReferenceType,
)
from gce2retrofit.exceptions import UnsupportedTypeError

__all__ = [
    'BOXED_TYPES',
    'JAVA_PRIMITIVE_TYPES',
    'TypeMapper',
    'box',
]

JAVA_PRIMITIVE_TYPES: Mapping[str, str] = {
    'string': 'String',
    'integer': 'int',
    'number': 'double',
    'boolean': 'boolean',
}

BOXED_TYPES: Mapping[str, str] = {
    'boolean': 'Boolean',
    'byte': 'Byte',
    'char': 'Character',
    'short': 'Short',
    'int': 'Integer',
    'long': 'Long',
    'float': 'Float',
    'double': 'Double',
}


def box(java_type: str) -> str:
    """Return the object equivalent of a Java primitive type.

    Non-primitive types are returned unchanged.

    Examples:
        >>> box('int')
        'Integer'
        >>> box('String')
        'String'
    """
    return BOXED_TYPES.get(java_type, java_type)


class TypeMapper:
    """Maps discovery type descriptors to Java type names.

    A mapper is created once per generation run and passed explicitly to the
    model and interface builders.

    Example:
        >>> mapper = TypeMapper()
        >>> mapper.map(ArrayType(items=PrimitiveType(type='integer')))
        'List<Integer>'
    """

    def __init__(self, primitive_types: Mapping[str, str] | None = None):
        """Initialize the mapper.

        Args:
            primitive_types: Optional table from discovery primitive names to
                Java types. Defaults to JAVA_PRIMITIVE_TYPES.
        """
        self._primitive_types = dict(primitive_types or JAVA_PRIMITIVE_TYPES)

    def map(self, descriptor: PropertyType, context: str | None = None) -> str:
        """Map a type descriptor to a Java type name.

        Args:
            descriptor: The primitive, array or reference descriptor.
            context: Optional description of what is being mapped, used in
                error messages (e.g. ``'Instance.name'``).

        Returns:
            The Java type name. References resolve to the schema id.

        Raises:
            UnsupportedTypeError: If a primitive type name is unknown.
        """
        if isinstance(descriptor, ReferenceType):
            return descriptor.ref
        if isinstance(descriptor, ArrayType):
            # type arguments must be reference types
            return f'List<{box(self.map(descriptor.items, context))}>'
        if isinstance(descriptor, PrimitiveType):
            try:
                return self._primitive_types[descriptor.type]
            except KeyError:
                raise UnsupportedTypeError(descriptor.type, context=context) from None
        raise UnsupportedTypeError(type(descriptor).__name__, context=context)

    def map_parameter(self, parameter: ParameterType, context: str | None = None) -> str:
        """Map a method parameter to the Java type used in a call signature.

        Optional primitive parameters are boxed so that an absent value can be
        passed as ``null``. Arrays and references are left as they are.
        """
        java_type = self.map(parameter.descriptor, context)
        if not parameter.required and isinstance(parameter.descriptor, PrimitiveType):
            return box(java_type)
        return java_type
