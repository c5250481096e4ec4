from hostsedit.services import hosts_editor
from hostsedit.services.hosts_editor import get, exists, lookup, edit, delete
from hostsedit.services.document_service import HostsService

__all__ = [
    "hosts_editor",
    "get",
    "exists",
    "lookup",
    "edit",
    "delete",
    "HostsService",
]
