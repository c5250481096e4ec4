"""
API routes for the hosts editor.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Optional

from hostsedit.core.errors import (
    InvalidEntryError,
    MalformedStrictDocumentError,
    StorageUnavailableError,
)
from hostsedit.services.document_service import HostsService


router = APIRouter(prefix="/api")

# Singleton service — created in main.py and attached here
_service: Optional[HostsService] = None


def init_service(svc: HostsService) -> None:
    global _service
    _service = svc


def svc() -> HostsService:
    if _service is None:
        raise RuntimeError("HostsService not initialized")
    return _service


def _storage_error(exc: StorageUnavailableError) -> HTTPException:
    if exc.not_found:
        return HTTPException(404, f"File not found: {exc.path}")
    return HTTPException(500, str(exc))


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class LoadRequest(BaseModel):
    doc_id: str
    file_path: Optional[str] = None
    strict: Optional[bool] = None


class HostRequest(BaseModel):
    ip: str


# ------------------------------------------------------------------
# Documents
# ------------------------------------------------------------------

@router.post("/documents/load")
def load_document(req: LoadRequest):
    """Load a hosts file into memory."""
    try:
        return svc().load(req.doc_id, req.file_path, req.strict)
    except StorageUnavailableError as e:
        raise _storage_error(e)
    except MalformedStrictDocumentError as e:
        raise HTTPException(422, {"message": "Malformed hosts file", "errors": e.errors})


@router.get("/documents")
def list_documents():
    """List all loaded documents."""
    return svc().list_documents()


@router.get("/documents/{doc_id}/lines")
def get_lines(doc_id: str):
    """Get all lines in a document."""
    try:
        return svc().get_lines(doc_id)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")


@router.post("/documents/{doc_id}/reload")
def reload_document(doc_id: str):
    """Re-read a document from disk."""
    try:
        return svc().reload(doc_id)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")
    except StorageUnavailableError as e:
        raise _storage_error(e)
    except MalformedStrictDocumentError as e:
        raise HTTPException(422, {"message": "Malformed hosts file", "errors": e.errors})


@router.delete("/documents/{doc_id}")
def close_document(doc_id: str):
    """Drop a document from memory (the file is left untouched)."""
    try:
        svc().close_document(doc_id)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")
    return {"doc_id": doc_id, "closed": True}


# ------------------------------------------------------------------
# Hosts
# ------------------------------------------------------------------

@router.get("/documents/{doc_id}/hosts/{host}")
def get_host(doc_id: str, host: str):
    """Resolve a host the way the OS would (first match wins)."""
    try:
        ip = svc().lookup(doc_id, host)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")
    if ip is None:
        raise HTTPException(404, f"Host not found: {host}")
    return {"host": host, "ip": ip}


@router.put("/documents/{doc_id}/hosts/{host}")
def set_host(doc_id: str, host: str, req: HostRequest):
    """Add or update a host binding; the file is saved immediately."""
    try:
        return svc().set_host(doc_id, host, req.ip)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")
    except InvalidEntryError as e:
        raise HTTPException(422, str(e))
    except StorageUnavailableError as e:
        raise HTTPException(500, str(e))


@router.delete("/documents/{doc_id}/hosts/{host}")
def delete_host(doc_id: str, host: str):
    """Remove every binding of a host; absent hosts are not an error."""
    try:
        return svc().remove_host(doc_id, host)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")
    except StorageUnavailableError as e:
        raise HTTPException(500, str(e))
