"""
HostsLine — one logical row of a hosts file.

Each non-blank row of the file becomes one HostsLine.  ``line_id`` is an
internal stable UUID used by the :class:`~hostsedit.core.document.Document`
index; it never reaches the file.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from hostsedit.core.line_kind import LineKind


@dataclass(slots=True)
class HostsLine:
    """
    Parsed representation of one hosts-file row.

    Attributes:
        line_id:         Internal stable UUID (Document index key).
        is_comment:      ``True`` if the row began with ``#``.  Comment rows
                         keep their parsed content but are ignored by lookups.
        raw_passthrough: Verbatim text of a row that is not an IP mapping.
                         Empty for mapping rows.
        ip:              IP literal of a mapping row, empty otherwise.
        hosts:           Hostnames of a mapping row, keyed for uniqueness.
                         Values are unused; order carries no meaning.
    """
    line_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    is_comment: bool = False
    raw_passthrough: str = ""
    ip: str = ""
    hosts: dict[str, None] = field(default_factory=dict)

    @classmethod
    def mapping(cls, ip: str, *hosts: str) -> HostsLine:
        """Build a non-comment mapping line."""
        return cls(ip=ip, hosts=dict.fromkeys(hosts))

    @property
    def kind(self) -> LineKind:
        if self.is_comment:
            return LineKind.COMMENT
        if self.raw_passthrough:
            return LineKind.PASSTHROUGH
        return LineKind.MAPPING

    @property
    def is_mapping(self) -> bool:
        """``True`` for rows that take part in host lookups."""
        return self.kind is LineKind.MAPPING

    @property
    def host_names(self) -> tuple[str, ...]:
        return tuple(self.hosts)

    def has_host(self, host: str) -> bool:
        return host in self.hosts

    def add_host(self, host: str) -> None:
        self.hosts.setdefault(host, None)

    def remove_host(self, host: str) -> bool:
        """Drop *host*; return ``True`` if it was present."""
        if host not in self.hosts:
            return False
        del self.hosts[host]
        return True
