"""
Document — ordered, ID-indexed container of HostsLines.

The Document is the single in-memory representation of a hosts file.
Line order is significant: a resolver honors the first line that binds a
host, and new bindings are inserted at the top so they shadow any stale
duplicates further down.

Lines are addressed by stable UUID (``line_id``) for O(1) removal; the
editor removes emptied lines by id without tracking positions.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from hostsedit.core.document_line import HostsLine

logger = logging.getLogger(__name__)


class Document:
    """
    Mutable ordered collection of :class:`HostsLine` objects.

    Internal invariant: ``_index[line.line_id] == position`` for every
    line.  The index is maintained incrementally on insert / remove.
    Changes to ``ip`` or ``hosts`` inside an existing line do *not* need
    an index update.
    """

    __slots__ = ("file_path", "_lines", "_index", "_lines_cache")

    def __init__(
        self,
        file_path: str = "",
        lines: Optional[list[HostsLine]] = None,
    ):
        self.file_path: str = file_path
        self._lines: list[HostsLine] = list(lines) if lines else []
        self._index: dict[str, int] = {}
        self._lines_cache: tuple[HostsLine, ...] | None = None
        self._rebuild_index()

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def lines(self) -> tuple[HostsLine, ...]:
        """Return a cached tuple so callers cannot break internal ordering."""
        if self._lines_cache is None:
            self._lines_cache = tuple(self._lines)
        return self._lines_cache

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, position: int) -> HostsLine:
        return self._lines[position]

    def __iter__(self) -> Iterator[HostsLine]:
        return iter(self.lines)

    def mapping_lines(self) -> Iterator[HostsLine]:
        """Yield non-comment, non-passthrough lines in document order."""
        return (line for line in self.lines if line.is_mapping)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def insert_line(self, position: int, line: HostsLine) -> None:
        """Insert *line* at *position*."""
        if line.line_id in self._index:
            raise ValueError(f"Duplicate line_id: {line.line_id}")
        self._lines.insert(position, line)
        self._lines_cache = None
        for lid, idx in self._index.items():
            if idx >= position:
                self._index[lid] = idx + 1
        self._index[line.line_id] = min(position, len(self._lines) - 1)
        logger.debug("Inserted line %s at position %d", line.line_id, position)

    def remove_line(self, line_id: str) -> HostsLine:
        """Remove and return a line by UUID.  Raises KeyError."""
        pos = self._index.pop(line_id)
        removed = self._lines.pop(pos)
        self._lines_cache = None
        for lid, idx in self._index.items():
            if idx > pos:
                self._index[lid] = idx - 1
        logger.debug("Removed line %s at position %d", line_id, pos)
        return removed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _rebuild_index(self) -> None:
        self._index = {line.line_id: i for i, line in enumerate(self._lines)}
