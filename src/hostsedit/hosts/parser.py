"""
Parser for hosts-file rows.

Line format: <ip> <host> [<host> ...]   (optionally prefixed by '#')

Anything that does not match is kept verbatim as a passthrough row.
"""
from __future__ import annotations

import ipaddress
from typing import Callable

from hostsedit.core.document_line import HostsLine


COMMENT_INDICATOR = "#"

IpValidator = Callable[[str], bool]


def is_comment(text: str) -> bool:
    return text.strip().startswith(COMMENT_INDICATOR)


def is_empty(text: str) -> bool:
    return not text.strip()


def is_ip_literal(token: str) -> bool:
    """Return ``True`` if *token* is a syntactically valid IPv4/IPv6 literal."""
    try:
        ipaddress.ip_address(token)
    except ValueError:
        return False
    return True


def parse_line(text: str, is_ip: IpValidator = is_ip_literal) -> HostsLine:
    """
    Parse one non-blank hosts-file row into a HostsLine.

    Comment rows have the marker stripped and their remainder is parsed
    with the same mapping rule, so a commented-out entry keeps its ip and
    hosts.  Rows that are not a mapping keep their trimmed text as
    ``raw_passthrough``.

    Raises ValueError on blank input; the caller drops blank rows first.
    """
    content = text.strip()
    if not content:
        raise ValueError("Cannot parse a blank line")

    comment = content.startswith(COMMENT_INDICATOR)
    if comment:
        content = content[len(COMMENT_INDICATOR):].strip()

    tokens = content.split()
    if len(tokens) >= 2 and is_ip(tokens[0]):
        return HostsLine(
            is_comment=comment,
            ip=tokens[0],
            hosts=dict.fromkeys(tokens[1:]),
        )

    return HostsLine(is_comment=comment, raw_passthrough=content)
