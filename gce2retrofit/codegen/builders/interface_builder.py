"""Retrofit interface generation from discovery resources.

Each resource becomes one Java interface. Every method of the resource is
emitted once per requested call shape:

- SYNC: the member returns the response type (or ``void``).
- ASYNC: the member returns ``void`` and receives the result through a
  trailing ``Callback`` parameter.
"""

import logging
from collections.abc import Iterable

from gce2retrofit.codegen.builders.signature_builder import (
    MethodSignature,
    MethodSignatureBuilder,
)
from gce2retrofit.codegen.java_writer import JavaWriter
from gce2retrofit.codegen.processors import ParameterProcessor
from gce2retrofit.codegen.types import TypeMapper
from gce2retrofit.codegen.utils import interface_name
from gce2retrofit.config import ALL_METHOD_TYPES, MethodType
from gce2retrofit.discovery import Method, Resource

logger = logging.getLogger(__name__)

__all__ = ['InterfaceBuilder']

RETROFIT_IMPORTS = (
    'retrofit.Callback',
    'retrofit.http.Body',
    'retrofit.http.DELETE',
    'retrofit.http.GET',
    'retrofit.http.PATCH',
    'retrofit.http.POST',
    'retrofit.http.PUT',
    'retrofit.http.Path',
    'retrofit.http.Query',
)


class InterfaceBuilder:
    """Builds one Retrofit interface per resource.

    Example:
        >>> builder = InterfaceBuilder(
        ...     'com.googleapis.www', TypeMapper(), {MethodType.SYNC}
        ... )
        >>> source = builder.build(resource)
    """

    def __init__(
        self,
        package_name: str,
        type_mapper: TypeMapper,
        method_types: Iterable[MethodType] | None = None,
        parameter_processor: ParameterProcessor | None = None,
    ):
        """Initialize the interface builder.

        Args:
            package_name: The Java package of the generated interfaces.
                Models are imported from ``<package_name>.model``.
            type_mapper: Mapper for parameter types.
            method_types: Call shapes to generate. Empty or None generates
                both synchronous and asynchronous members.
            parameter_processor: Orders method parameters.
        """
        self.package_name = package_name
        self.model_package_name = f'{package_name}.model'
        self.method_types = frozenset(method_types or ()) or ALL_METHOD_TYPES
        self._type_mapper = type_mapper
        self._parameter_processor = parameter_processor or ParameterProcessor()

    def type_name(self, resource: Resource) -> str:
        return interface_name(resource.name)

    def file_name(self, resource: Resource) -> str:
        return f'{self.type_name(resource)}.java'

    def signatures(self, method: Method) -> list[MethodSignature]:
        """Return the members generated for ``method``, sync first.

        Raises:
            MissingParameterError: If parameterOrder names an unknown parameter.
            UnsupportedTypeError: If a parameter type cannot be mapped.
        """
        parameters = self._parameter_processor.order(method)
        signatures = []

        if MethodType.SYNC in self.method_types:
            signatures.append(
                MethodSignatureBuilder(method.name, self._type_mapper)
                .add_request_body(method.request)
                .add_parameters(parameters)
                .returns(method.response)
                .build()
            )

        if MethodType.ASYNC in self.method_types:
            signatures.append(
                MethodSignatureBuilder(method.name, self._type_mapper)
                .add_request_body(method.request)
                .add_parameters(parameters)
                .add_callback(method.response)
                .build()
            )

        return signatures

    def build(self, resource: Resource) -> str:
        """Return the Java source of the interface for ``resource``."""
        writer = (
            JavaWriter()
            .emit_package(self.package_name)
            .emit_imports(f'{self.model_package_name}.*')
            .emit_empty_line()
            .emit_imports('java.util.List')
            .emit_empty_line()
            .emit_imports(*RETROFIT_IMPORTS)
            .emit_empty_line()
            .begin_type(
                f'{self.package_name}.{self.type_name(resource)}', 'interface'
            )
        )

        for method in resource.methods.values():
            path = JavaWriter.string_literal('/' + method.path)
            for signature in self.signatures(method):
                writer.emit_annotation(method.http_method, path)
                writer.emit_method(
                    signature.return_type, signature.name, signature.parameters
                )

        writer.end_type()

        logger.debug(
            f'Built interface {self.type_name(resource)} '
            f'with {len(resource.methods)} methods'
        )
        return writer.source
