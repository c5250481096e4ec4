"""
Document I/O — read a hosts file into a Document, write it back.

This is a functional module.  The editor and HostsService delegate here
for the actual file ↔ Document conversion.

Load flow:
    file → splitlines → for each line:
        is_empty?    → dropped
        parse_line   → HostsLine (comment / mapping / passthrough)
    strict?          → validate_strict → MalformedStrictDocumentError

Save flow:
    for each HostsLine → serializer.serialize(line) + "\\n"
    → overwrite the file
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from hostsedit.core.document import Document
from hostsedit.core.errors import (
    MalformedStrictDocumentError,
    StorageUnavailableError,
)
from hostsedit.hosts import parser
from hostsedit.hosts.parser import IpValidator
from hostsedit.hosts.serializer import serialize
from hostsedit.hosts.validator import validate_strict

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# File helpers
# ------------------------------------------------------------------

# Undecodable bytes (e.g. an ANSI code page comment) survive load and save
# unchanged as lone surrogates.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding=_ENCODING, errors=_ERRORS)
    except OSError as exc:
        raise StorageUnavailableError(path, exc.strerror or str(exc)) from exc


def _write_text(path: Path, content: str) -> None:
    # Plain overwrite; an interrupted write can leave a truncated file.
    try:
        path.write_text(content, encoding=_ENCODING, errors=_ERRORS)
    except OSError as exc:
        raise StorageUnavailableError(path, exc.strerror or str(exc)) from exc


# ------------------------------------------------------------------
# Parse
# ------------------------------------------------------------------

def parse_document(
    text: str,
    file_path: str = "",
    strict: bool = False,
    is_ip: Optional[IpValidator] = None,
) -> Document:
    """
    Build a Document from raw hosts-file text.

    Blank rows are dropped.  With *strict* set, duplicate host bindings
    and unparsed non-comment rows raise
    :class:`MalformedStrictDocumentError` and no Document is returned.
    """
    check_ip = is_ip or parser.is_ip_literal
    lines = [
        parser.parse_line(raw, check_ip)
        for raw in text.splitlines()
        if not parser.is_empty(raw)
    ]

    result = validate_strict(lines)
    if strict and not result:
        raise MalformedStrictDocumentError(result.errors)
    for warning in result.warnings:
        logger.debug("Tolerated: %s", warning)

    return Document(file_path=file_path, lines=lines)


# ------------------------------------------------------------------
# Load
# ------------------------------------------------------------------

def load_document(
    file_path: str | Path,
    strict: bool = False,
    is_ip: Optional[IpValidator] = None,
) -> Document:
    """
    Read a hosts file and return a populated Document.

    Raises:
        StorageUnavailableError: the file cannot be opened or read.
        MalformedStrictDocumentError: *strict* is set and the file has
            duplicate host bindings or unparsed non-comment rows.
    """
    path = Path(file_path)
    doc = parse_document(_read_text(path), str(path), strict, is_ip)
    logger.debug("Loaded %s: %d lines (strict=%s)", path, len(doc), strict)
    return doc


# ------------------------------------------------------------------
# Save
# ------------------------------------------------------------------

def render_document(document: Document) -> str:
    """Render every line of *document*, each terminated by one newline."""
    return "".join(serialize(line) + "\n" for line in document.lines)


def save_document(
    document: Document,
    file_path: str | Path | None = None,
) -> None:
    """
    Write a Document to disk, replacing the previous content entirely.

    Writes to *file_path* when given, otherwise back to the path the
    Document was loaded from.

    Raises:
        ValueError: neither *file_path* nor ``document.file_path`` is set.
        StorageUnavailableError: the file cannot be created or written.
    """
    if file_path:
        target = Path(file_path)
    elif document.file_path:
        target = Path(document.file_path)
    else:
        raise ValueError("No file path specified and document has no path.")

    _write_text(target, render_document(document))
    logger.debug("Saved %d lines to %s", len(document), target)
