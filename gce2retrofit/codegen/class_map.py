"""Property-name to Java type overrides for generated models.

A class map file holds one override per line, two fields separated by a tab:

    id<TAB>Long
    creationTimestamp<TAB>java.util.Date

Lines that do not split into exactly two fields are skipped.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

__all__ = ['ClassMap']


class ClassMap(Mapping[str, str]):
    """Read-only mapping from property name to override type name.

    Example:
        >>> class_map = ClassMap.load(['id\\tLong', 'not an override'])
        >>> class_map['id']
        'Long'
        >>> len(class_map)
        1
    """

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries = dict(entries or {})

    @classmethod
    def load(cls, lines: Iterable[str]) -> 'ClassMap':
        """Build a class map from tab-separated lines.

        Args:
            lines: Lines of text, with or without trailing line terminators.

        Returns:
            A ClassMap with one entry per well-formed line. A later line for
            the same property replaces an earlier one.
        """
        entries = {}
        for number, line in enumerate(lines, 1):
            fields = line.rstrip('\r\n').split('\t')
            if len(fields) != 2:
                logger.debug(f'Skipping class map line {number}: {line!r}')
                continue
            entries[fields[0]] = fields[1]
        return cls(entries)

    @classmethod
    def load_file(cls, path: str | Path) -> 'ClassMap':
        """Read a class map file.

        Raises:
            OSError: If the file cannot be read.
        """
        with open(path, encoding='utf-8') as f:
            class_map = cls.load(f)
        logger.info(f'Loaded {len(class_map)} class map entries from {path}')
        return class_map

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f'ClassMap({self._entries!r})'
