"""Custom exceptions for gce2retrofit.

This module defines the hierarchy of exceptions raised while loading a
discovery document and generating Retrofit sources from it. None of them is
recovered locally: the first error aborts the generation run.
"""


class Gce2RetrofitError(Exception):
    """Base exception for all gce2retrofit errors.

    Example:
        try:
            codegen.generate()
        except Gce2RetrofitError as e:
            print(f"gce2retrofit error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DocumentError(Gce2RetrofitError):
    """Base exception for discovery document errors."""

    pass


class DocumentLoadError(DocumentError):
    """Failed to read a discovery document from its source.

    Attributes:
        source: The path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load discovery document from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class ParseError(DocumentError):
    """The discovery document does not have the expected shape.

    Raised for syntactically invalid JSON/YAML as well as for documents that
    decode fine but do not validate against the discovery data model.

    Attributes:
        source: The path or URL of the malformed document.
        errors: List of error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Malformed discovery document '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class CodeGenerationError(Gce2RetrofitError):
    """Error during code generation.

    Attributes:
        context: Additional context about what was being generated.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self, message: str, context: str | None = None, cause: Exception | None = None
    ):
        self.context = context
        self.cause = cause
        full_message = message
        if context:
            full_message = f'{message} (while generating {context})'
        if cause:
            full_message += f': {cause}'
        super().__init__(full_message)


class UnsupportedTypeError(CodeGenerationError):
    """A type descriptor names a type the type mapper cannot resolve.

    Attributes:
        type_name: The unresolvable type name from the document.
    """

    def __init__(self, type_name: str, context: str | None = None):
        self.type_name = type_name
        super().__init__(f"Unsupported type '{type_name}'", context=context)


class MissingParameterError(CodeGenerationError):
    """A parameterOrder entry names a parameter the method does not declare.

    Attributes:
        parameter: The name listed in parameterOrder.
        method: The name of the method being generated.
    """

    def __init__(self, parameter: str, method: str | None = None):
        self.parameter = parameter
        self.method = method
        super().__init__(
            f"Parameter '{parameter}' is listed in parameterOrder but not declared",
            context=method,
        )


class ConfigurationError(Gce2RetrofitError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(Gce2RetrofitError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class OutputCollisionError(OutputError):
    """Two generated units resolved to the same output path in one run."""

    def __init__(self, output_path: str):
        super().__init__(
            output_path,
            cause=FileExistsError('path was already written during this run'),
        )
