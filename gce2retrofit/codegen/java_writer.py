"""A small writer for Java source declarations.

JavaWriter builds a Java compilation unit line by line: the package clause,
imports, one top-level type and its members. It only formats declarations;
it does not check that the emitted code type-checks.
"""

from collections.abc import Iterable, Sequence
from typing import Self

__all__ = ['JavaWriter']

INDENT = '  '


class JavaWriter:
    """Fluent writer for a single Java source file.

    Example:
        >>> writer = JavaWriter()
        >>> source = (
        ...     writer.emit_package('com.example.model')
        ...     .begin_type('com.example.model.Pet', 'class')
        ...     .emit_field('String', 'name')
        ...     .end_type()
        ...     .source
        ... )
    """

    def __init__(self):
        self._lines: list[str] = []
        self._package: str | None = None
        self._types: list[str] = []

    def _emit(self, line: str = '') -> None:
        if line:
            self._lines.append(INDENT * len(self._types) + line)
        else:
            self._lines.append('')

    def compress_type(self, type_name: str) -> str:
        """Drop the current package prefix from a qualified type name."""
        if self._package and type_name.startswith(self._package + '.'):
            simple_name = type_name[len(self._package) + 1 :]
            if '.' not in simple_name:
                return simple_name
        return type_name

    def emit_package(self, package_name: str) -> Self:
        if self._lines:
            raise ValueError('The package clause must be emitted first')
        self._package = package_name
        if package_name:
            self._emit(f'package {package_name};')
            self._emit()
        return self

    def emit_imports(self, *names: str) -> Self:
        """Emit one import statement per name, in the given order."""
        for name in names:
            self._emit(f'import {name};')
        return self

    def emit_empty_line(self) -> Self:
        self._emit()
        return self

    def begin_type(
        self, type_name: str, kind: str, modifiers: Iterable[str] = ('public',)
    ) -> Self:
        """Open a class or interface body.

        Args:
            type_name: The type name, qualified or not.
            kind: ``'class'`` or ``'interface'``.
            modifiers: Modifiers written before the kind.
        """
        self._emit(' '.join([*modifiers, kind, self.compress_type(type_name)]) + ' {')
        self._types.append(type_name)
        return self

    def end_type(self) -> Self:
        if not self._types:
            raise ValueError('No type is open')
        self._types.pop()
        self._emit('}')
        return self

    def emit_field(
        self, type_name: str, name: str, modifiers: Iterable[str] = ('public',)
    ) -> Self:
        self._emit(' '.join([*modifiers, type_name, name]) + ';')
        return self

    def emit_annotation(self, name: str, value: str | None = None) -> Self:
        """Emit an annotation line, e.g. ``@GET("/items")``."""
        if value is None:
            self._emit(f'@{name}')
        else:
            self._emit(f'@{name}({value})')
        return self

    def emit_method(
        self,
        return_type: str,
        name: str,
        parameters: Sequence[str] = (),
        modifiers: Iterable[str] = (),
    ) -> Self:
        """Emit an abstract method declaration terminated by a semicolon.

        Args:
            return_type: The declared return type.
            name: The method name.
            parameters: Fully formatted parameters, annotations included.
            modifiers: Optional modifiers written before the return type.
        """
        head = ' '.join([*modifiers, return_type, name])
        self._emit(f'{head}({", ".join(parameters)});')
        return self

    @property
    def source(self) -> str:
        """The emitted source, terminated by a newline."""
        if self._types:
            raise ValueError(f'Type {self._types[-1]} is still open')
        return '\n'.join(self._lines) + '\n'

    @staticmethod
    def string_literal(value: str) -> str:
        """Quote a value as a Java string literal."""
        escaped = value.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'
