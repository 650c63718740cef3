"""Builders package for Java source generation.

This package contains the builders that turn discovery schemas and
resources into Java model classes and Retrofit interfaces.
"""

from gce2retrofit.codegen.builders.interface_builder import InterfaceBuilder
from gce2retrofit.codegen.builders.model_builder import ModelBuilder
from gce2retrofit.codegen.builders.signature_builder import (
    MethodSignature,
    MethodSignatureBuilder,
)

__all__ = [
    'InterfaceBuilder',
    'MethodSignature',
    'MethodSignatureBuilder',
    'ModelBuilder',
]
