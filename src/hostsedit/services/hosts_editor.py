"""
Hosts editor — lookup and mutation over a loaded :class:`Document`.

Every mutation that changes the Document is persisted with
:func:`~hostsedit.infrastructure.document_io.save_document` before the
call returns.  If the save fails the error propagates and the in-memory
Document stays ahead of the file; reload to resynchronize.

The Document is owned by the caller.  Nothing here is thread-safe; see
:class:`~hostsedit.services.document_service.HostsService` for a
lock-guarded owner.
"""
from __future__ import annotations

import logging
from typing import Optional

from hostsedit.core.document import Document
from hostsedit.core.document_line import HostsLine
from hostsedit.core.errors import InvalidEntryError
from hostsedit.hosts.parser import COMMENT_INDICATOR, IpValidator, is_ip_literal
from hostsedit.infrastructure.document_io import save_document

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Lookup
# ------------------------------------------------------------------

def lookup(doc: Document, host: str) -> Optional[str]:
    """Return the IP of the first line binding *host*, or ``None``."""
    for line in doc.mapping_lines():
        if line.has_host(host):
            return line.ip
    return None


def get(doc: Document, host: str) -> tuple[str, bool]:
    """Return ``(ip, found)`` for *host*; first match in document order wins."""
    ip = lookup(doc, host)
    if ip is None:
        return "", False
    return ip, True


def exists(doc: Document, host: str) -> bool:
    return lookup(doc, host) is not None


# ------------------------------------------------------------------
# Mutation
# ------------------------------------------------------------------

def _check_entry(host: str, ip: str, is_ip: IpValidator) -> None:
    tokens = host.split()
    if len(tokens) != 1 or tokens[0] != host:
        raise InvalidEntryError(f"Invalid host name: {host!r}")
    if host.startswith(COMMENT_INDICATOR):
        raise InvalidEntryError(f"Host name cannot start with '#': {host!r}")
    if not is_ip(ip):
        raise InvalidEntryError(f"Not a valid IP address: {ip!r}")


def _check_backed(doc: Document) -> None:
    if not doc.file_path:
        raise ValueError("Document has no file path to save to.")


def edit(
    doc: Document,
    host: str,
    ip: str,
    is_ip: IpValidator = is_ip_literal,
) -> bool:
    """
    Make *host* resolve to *ip* and persist the Document.

    Scans mapping lines top to bottom:

    - a line already binding *host* to *ip* ends the scan (no write if
      nothing was touched on the way)
    - *host* sharing a line with other hosts under another IP is taken
      off that line, leaving the co-resident hosts bound as before
    - *host* alone on its line has the line's IP rewritten in place

    If no line was rewritten, *host* joins the first line already using
    *ip*, or a new ``ip host`` line is inserted at the top of the file.

    Returns:
        ``True`` if the Document changed and was saved, ``False`` if
        *host* already resolved to *ip*.

    Raises:
        InvalidEntryError: *host* is not a single token or *ip* is not
            an IP literal.  Nothing is modified.
        ValueError: *doc* has no ``file_path``.  Nothing is modified.
        StorageUnavailableError: the save failed.
    """
    _check_entry(host, ip, is_ip)
    _check_backed(doc)

    detached = False
    for line in doc.mapping_lines():
        if not line.has_host(host):
            continue
        if line.ip == ip:
            if not detached:
                logger.debug("edit %s: already bound to %s", host, ip)
                return False
            break
        if len(line.hosts) > 1:
            line.remove_host(host)
            detached = True
            logger.debug("edit %s: detached from shared line %s", host, line.ip)
            continue
        logger.debug("edit %s: rebinding line %s -> %s", host, line.ip, ip)
        line.ip = ip
        break
    else:
        _attach_or_insert(doc, host, ip)

    save_document(doc)
    return True


def _attach_or_insert(doc: Document, host: str, ip: str) -> None:
    for line in doc.mapping_lines():
        if line.ip == ip:
            line.add_host(host)
            logger.debug("edit %s: attached to existing line %s", host, ip)
            return
    # Top of file, so the new binding shadows stale entries below it.
    doc.insert_line(0, HostsLine.mapping(ip, host))
    logger.debug("edit %s: inserted new line %s", host, ip)


def delete(doc: Document, host: str) -> bool:
    """
    Remove every binding of *host* and persist the Document.

    Lines left without hosts are dropped.  An absent host is not an
    error: nothing is written and ``False`` is returned.

    Raises:
        ValueError: *doc* has no ``file_path``.  Nothing is modified.
        StorageUnavailableError: the save failed.
    """
    _check_backed(doc)

    emptied: list[str] = []
    removed = 0
    for line in doc.mapping_lines():
        if line.remove_host(host):
            removed += 1
            if not line.hosts:
                emptied.append(line.line_id)

    if not removed:
        return False

    for line_id in emptied:
        doc.remove_line(line_id)
    logger.debug("delete %s: %d bindings, %d lines dropped",
                 host, removed, len(emptied))
    save_document(doc)
    return True
