"""Model class generation from discovery schemas."""

import logging
from collections.abc import Mapping

from gce2retrofit.codegen.java_writer import JavaWriter
from gce2retrofit.codegen.types import TypeMapper
from gce2retrofit.discovery import Schema

logger = logging.getLogger(__name__)

__all__ = ['ModelBuilder']

MODEL_IMPORTS = ('java.util.List',)


class ModelBuilder:
    """Builds one plain data class per schema.

    Every property becomes a public field named exactly like the property
    key. The field type is the class map override for that property name if
    there is one, otherwise the type mapper's result.

    Example:
        >>> builder = ModelBuilder('com.googleapis.www.model', TypeMapper())
        >>> print(builder.build(schema))
        package com.googleapis.www.model;
        <BLANKLINE>
        import java.util.List;
        <BLANKLINE>
        public class Instance {
          public String name;
        }
    """

    def __init__(
        self,
        package_name: str,
        type_mapper: TypeMapper,
        class_map: Mapping[str, str] | None = None,
    ):
        """Initialize the model builder.

        Args:
            package_name: The Java package of the generated models.
            type_mapper: Mapper for property types.
            class_map: Optional property-name to type-name overrides.
        """
        self.package_name = package_name
        self._type_mapper = type_mapper
        self._class_map = class_map

    def field_type(self, schema: Schema, name: str) -> str:
        if self._class_map is not None and name in self._class_map:
            return self._class_map[name]
        return self._type_mapper.map(
            schema.properties[name], context=f'{schema.id}.{name}'
        )

    def build(self, schema: Schema) -> str:
        """Return the Java source of the model class for ``schema``.

        Raises:
            UnsupportedTypeError: If a property type cannot be mapped.
        """
        writer = (
            JavaWriter()
            .emit_package(self.package_name)
            .emit_imports(*MODEL_IMPORTS)
            .emit_empty_line()
            .begin_type(f'{self.package_name}.{schema.id}', 'class')
        )
        for name in schema.properties:
            writer.emit_field(self.field_type(schema, name), name)
        writer.end_type()

        logger.debug(
            f'Built model {schema.id} with {len(schema.properties)} fields'
        )
        return writer.source

    def file_name(self, schema: Schema) -> str:
        return f'{schema.id}.java'
