"""gce2retrofit - Generate Retrofit interfaces from Google API discovery documents.

gce2retrofit reads a discovery document (the JSON description of a Google
style REST API) and generates Java sources for the Retrofit HTTP client: a
plain model class per schema and an interface per resource, with
synchronous and/or callback-based asynchronous members.

Quick Start:
    >>> from gce2retrofit import Codegen, DocumentConfig
    >>>
    >>> config = DocumentConfig(
    ...     source="https://www.googleapis.com/discovery/v1/apis/compute/v1/rest",
    ...     output="./src/main/java",
    ... )
    >>> Codegen(config).generate()

CLI Usage:
    $ gce2retrofit generate compute.json ./src/main/java
    $ gce2retrofit generate compute.json ./out --classmap classes.tsv --methods async
    $ gce2retrofit batch --config gce2retrofit.yaml
"""

from importlib.metadata import PackageNotFoundError, version

from gce2retrofit.codegen.class_map import ClassMap
from gce2retrofit.codegen.codegen import Codegen, generate
from gce2retrofit.codegen.document_loader import DocumentLoader
from gce2retrofit.codegen.types import TypeMapper
from gce2retrofit.config import (
    CodegenConfig,
    DocumentConfig,
    MethodType,
    get_config,
    parse_method_types,
)
from gce2retrofit.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    DocumentError,
    DocumentLoadError,
    Gce2RetrofitError,
    MissingParameterError,
    OutputCollisionError,
    OutputError,
    ParseError,
    UnsupportedTypeError,
)

__all__ = [
    # Main classes
    'Codegen',
    'generate',
    'ClassMap',
    'DocumentLoader',
    'TypeMapper',
    # Configuration
    'CodegenConfig',
    'DocumentConfig',
    'MethodType',
    'get_config',
    'parse_method_types',
    # Exceptions
    'Gce2RetrofitError',
    'DocumentError',
    'DocumentLoadError',
    'ParseError',
    'CodeGenerationError',
    'UnsupportedTypeError',
    'MissingParameterError',
    'ConfigurationError',
    'OutputError',
    'OutputCollisionError',
]

try:
    __version__ = version('gce2retrofit')
except PackageNotFoundError:
    __version__ = 'unknown'
