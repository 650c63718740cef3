"""Processors package for discovery extraction logic.

This package contains processor classes that turn discovery document
elements into the inputs of the Java builders.
"""

from gce2retrofit.codegen.processors.parameter_processor import ParameterProcessor

__all__ = [
    'ParameterProcessor',
]
