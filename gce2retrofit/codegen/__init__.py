"""Code generation module for gce2retrofit.

This module provides the translation engine that turns a discovery document
into Java model classes and Retrofit interfaces.

Main Components:
    - Codegen: Runs generation for one configured document
    - generate: Generates every unit of an already parsed document
    - TypeMapper: Maps discovery type descriptors to Java types
    - ParameterProcessor: Orders method parameters
    - ModelBuilder / InterfaceBuilder: Build Java sources
    - ClassMap: Property-name to type-name overrides
    - DocumentLoader: Loads discovery documents from URLs or files
    - CodeEmitter: Handles output of generated units

Example:
    >>> from gce2retrofit.codegen import Codegen
    >>> from gce2retrofit.config import DocumentConfig
    >>>
    >>> config = DocumentConfig(source='./compute.json', output='./out')
    >>> Codegen(config).generate()
"""

from gce2retrofit.codegen.builders import (
    InterfaceBuilder,
    MethodSignature,
    MethodSignatureBuilder,
    ModelBuilder,
)
from gce2retrofit.codegen.class_map import ClassMap
from gce2retrofit.codegen.codegen import Codegen, generate
from gce2retrofit.codegen.document_loader import DocumentLoader
from gce2retrofit.codegen.emitter import CodeEmitter, FileEmitter, StringEmitter
from gce2retrofit.codegen.java_writer import JavaWriter
from gce2retrofit.codegen.processors import ParameterProcessor
from gce2retrofit.codegen.types import TypeMapper

__all__ = [
    # Main entry points
    'Codegen',
    'generate',
    # Type mapping
    'TypeMapper',
    'ClassMap',
    # Document handling
    'DocumentLoader',
    'ParameterProcessor',
    # Java building
    'InterfaceBuilder',
    'ModelBuilder',
    'MethodSignature',
    'MethodSignatureBuilder',
    'JavaWriter',
    # Code emission
    'CodeEmitter',
    'FileEmitter',
    'StringEmitter',
]
