from hostsedit.core.line_kind import LineKind
from hostsedit.core.validation_result import ValidationResult
from hostsedit.core.document_line import HostsLine
from hostsedit.core.document import Document
from hostsedit.core.errors import (
    HostsError,
    StorageUnavailableError,
    MalformedStrictDocumentError,
    InvalidEntryError,
)

__all__ = [
    "LineKind",
    "ValidationResult",
    "HostsLine",
    "Document",
    "HostsError",
    "StorageUnavailableError",
    "MalformedStrictDocumentError",
    "InvalidEntryError",
]
