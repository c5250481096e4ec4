"""
Serializer for hosts-file rows.

Converts HostsLine back to file text, and provides a JSON helper
(``to_json``) for the service layer.
"""
from __future__ import annotations

from hostsedit.core.document_line import HostsLine
from hostsedit.hosts.parser import COMMENT_INDICATOR


def _content(line: HostsLine) -> str:
    if line.raw_passthrough or not line.ip:
        return line.raw_passthrough
    return " ".join([line.ip, *line.hosts])


def serialize(line: HostsLine) -> str:
    """Serialize a HostsLine into a single hosts-file row (no newline)."""
    content = _content(line)
    if not line.is_comment:
        return content
    # Comments are normalized to "# <content>"; a bare marker stays bare
    return f"{COMMENT_INDICATOR} {content}" if content else COMMENT_INDICATOR


def to_json(line: HostsLine) -> dict:
    """Convert a HostsLine to a JSON-safe dict."""
    return {
        "kind": line.kind.value,
        "ip": line.ip,
        "hosts": list(line.hosts),
        "text": serialize(line),
    }
