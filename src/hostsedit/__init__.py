"""
hostsedit — edit an operating-system hosts file in place.

Typical use::

    from hostsedit import load_document, edit, get

    doc = load_document("/etc/hosts")
    edit(doc, "myapp.local", "127.0.0.1")   # persisted immediately
    ip, found = get(doc, "myapp.local")
"""
from hostsedit.core import (
    Document,
    HostsLine,
    LineKind,
    HostsError,
    StorageUnavailableError,
    MalformedStrictDocumentError,
    InvalidEntryError,
)
from hostsedit.infrastructure import load_document, save_document
from hostsedit.services import get, exists, lookup, edit, delete, HostsService

__version__ = "0.1.0"

__all__ = [
    "Document",
    "HostsLine",
    "LineKind",
    "HostsError",
    "StorageUnavailableError",
    "MalformedStrictDocumentError",
    "InvalidEntryError",
    "load_document",
    "save_document",
    "get",
    "exists",
    "lookup",
    "edit",
    "delete",
    "HostsService",
]
