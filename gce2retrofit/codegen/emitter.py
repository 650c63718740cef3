"""Code emitter interfaces and implementations for generated Java units.

This module provides the CodeEmitter interface and concrete implementations
for persisting generated source (files on disk, in-memory strings).
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from upath import UPath

from gce2retrofit.exceptions import OutputCollisionError, OutputError

logger = logging.getLogger(__name__)

__all__ = ['CodeEmitter', 'FileEmitter', 'StringEmitter']


class CodeEmitter(ABC):
    """Abstract base class for code emitters.

    A CodeEmitter receives one generated unit at a time, identified by a
    relative path such as ``com/googleapis/www/model/Instance.java``. Each
    path may be emitted only once per emitter.
    """

    def __init__(self):
        self._emitted: list[str] = []

    @property
    def emitted_paths(self) -> list[str]:
        """Relative paths emitted so far, in emission order."""
        return list(self._emitted)

    def emit(self, path: str, source: str) -> str:
        """Emit one generated unit.

        Args:
            path: Relative path of the unit, using ``/`` separators.
            source: The unit's source text.

        Returns:
            The location of the emitted unit.

        Raises:
            OutputCollisionError: If ``path`` was already emitted.
            OutputError: If the unit cannot be written.
        """
        if path in self._emitted:
            raise OutputCollisionError(path)
        location = self._write(path, source)
        self._emitted.append(path)
        logger.debug(f'Emitted {location}')
        return location

    @abstractmethod
    def _write(self, path: str, source: str) -> str:
        """Persist one unit and return its location."""
        pass


class FileEmitter(CodeEmitter):
    """Emits generated units to files under an output directory.

    Parent directories are created on demand. Files written before a failure
    are left in place.
    """

    def __init__(self, output_dir: str | Path | UPath):
        """Initialize the file emitter.

        Args:
            output_dir: Directory where files will be written.
        """
        super().__init__()
        self.output_dir = UPath(output_dir)

    def _write(self, path: str, source: str) -> str:
        file_path = self.output_dir.joinpath(*path.split('/'))
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(source, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(file_path), cause=e) from e
        return str(file_path)


class StringEmitter(CodeEmitter):
    """Keeps generated units in memory.

    Useful for tests and for callers that post-process the sources.
    """

    def __init__(self):
        super().__init__()
        self._units: dict[str, str] = {}

    def _write(self, path: str, source: str) -> str:
        self._units[path] = source
        return path

    def get_unit(self, path: str) -> str | None:
        """Get a previously emitted unit by path."""
        return self._units.get(path)

    def get_all_units(self) -> dict[str, str]:
        """Get all emitted units, keyed by path."""
        return self._units.copy()
