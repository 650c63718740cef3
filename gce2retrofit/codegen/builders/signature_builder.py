"""Method signature building for Retrofit interface members.

This module provides a builder for the Java method declarations generated
for each discovery method. It assembles the request body, the ordered
path/query parameters, the optional callback and the return type.
"""

from dataclasses import dataclass, field
from typing import Self

from gce2retrofit.codegen.types import TypeMapper
from gce2retrofit.codegen.utils import sanitize_java_identifier
from gce2retrofit.discovery import ParameterType, RequestRef, ResponseRef

__all__ = ['MethodSignature', 'MethodSignatureBuilder']

VOID = 'void'
VOID_OBJECT = 'Void'
CALLBACK_NAME = 'cb'

PARAMETER_ANNOTATIONS = {
    'path': 'Path',
    'query': 'Query',
}


@dataclass(frozen=True)
class MethodSignature:
    """A Java interface member declaration.

    Attributes:
        name: The method name.
        return_type: The declared return type.
        parameters: Formatted parameters, annotations included.
    """

    name: str
    return_type: str
    parameters: tuple[str, ...] = field(default_factory=tuple)

    def render(self) -> str:
        return f'{self.return_type} {self.name}({", ".join(self.parameters)});'


class MethodSignatureBuilder:
    """Builder for the signature of one Retrofit member.

    Example:
        >>> signature = (
        ...     MethodSignatureBuilder('list', mapper)
        ...     .add_parameters(processor.order(method))
        ...     .add_callback(method.response)
        ...     .build()
        ... )
        >>> signature.render()
        'void list(@Query("pageToken") String pageToken, Callback<Item> cb);'
    """

    def __init__(self, name: str, type_mapper: TypeMapper):
        self._name = name
        self._type_mapper = type_mapper
        self._parameters: list[str] = []
        self._return_type = VOID

    def add_request_body(self, request: RequestRef | None) -> Self:
        """Add the ``@Body`` parameter when the method takes a request."""
        if request is not None:
            variable = sanitize_java_identifier(request.parameter_name)
            self._parameters.append(f'@Body {request.ref} {variable}')
        return self

    def add_parameters(self, parameters: list[tuple[str, ParameterType]]) -> Self:
        """Add path and query parameters in the given order.

        Parameters with a known location are annotated with ``@Path`` or
        ``@Query`` carrying the original name; the Java variable name is the
        sanitized parameter name.
        """
        for name, parameter in parameters:
            java_type = self._type_mapper.map_parameter(
                parameter, context=f'{self._name}.{name}'
            )
            declaration = f'{java_type} {sanitize_java_identifier(name)}'
            annotation = PARAMETER_ANNOTATIONS.get(parameter.location)
            if annotation:
                declaration = f'@{annotation}("{name}") {declaration}'
            self._parameters.append(declaration)
        return self

    def add_callback(self, response: ResponseRef | None) -> Self:
        """Add the trailing ``Callback`` parameter of an asynchronous member."""
        result_type = response.ref if response is not None else VOID_OBJECT
        self._parameters.append(f'Callback<{result_type}> {CALLBACK_NAME}')
        return self

    def returns(self, response: ResponseRef | None) -> Self:
        """Return the response type, or ``void`` when there is none."""
        self._return_type = response.ref if response is not None else VOID
        return self

    def build(self) -> MethodSignature:
        return MethodSignature(
            name=self._name,
            return_type=self._return_type,
            parameters=tuple(self._parameters),
        )
