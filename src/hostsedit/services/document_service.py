"""
HostsService — the bridge between the API layer and the hosts editor.

Manages:
- Loaded documents (keyed by a doc_id string)
- One lock per document, so every operation on a document runs alone
- Defaults (hosts path, strict mode) taken from :class:`Config`

The service is the exclusive owner of the Documents it loads; callers
address them by ``doc_id`` only.
"""
from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Optional

from hostsedit.config import Config
from hostsedit.core.document import Document
from hostsedit.hosts.serializer import to_json
from hostsedit.infrastructure.document_io import load_document
from hostsedit.services import hosts_editor

logger = logging.getLogger(__name__)


class HostsService:
    """
    Facade that the API layer calls. One instance per application.
    """

    def __init__(self, config: Optional[Config] = None):
        self._config: Config = config or Config()
        self._documents: dict[str, Document] = {}
        self._strict: dict[str, bool] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._registry_lock = threading.Lock()

    @property
    def config(self) -> Config:
        return self._config

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    def load(
        self,
        doc_id: str,
        file_path: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> dict:
        """Load a hosts file into memory and return a summary.

        *file_path* and *strict* fall back to the configured defaults.
        Loading an already-known ``doc_id`` replaces that document.
        """
        path = file_path or self._config.hosts_file_path
        use_strict = self._config.strict if strict is None else strict
        logger.info("Loading document %s from %s (strict=%s)", doc_id, path, use_strict)
        with self._registry_lock:
            lock = self._locks.setdefault(doc_id, threading.RLock())
        with lock:
            try:
                doc = load_document(path, strict=use_strict)
            except Exception:
                self._forget_unloaded(doc_id, lock)
                raise
            with self._registry_lock:
                self._documents[doc_id] = doc
                self._strict[doc_id] = use_strict
        logger.info("Loaded document %s: %d lines", doc_id, len(doc))
        return self._document_summary(doc_id, doc)

    def reload(self, doc_id: str) -> dict:
        """Re-read a document from its file, e.g. after a failed save."""
        with self._lock(doc_id):
            doc = self._documents[doc_id]
            return self.load(doc_id, doc.file_path, self._strict[doc_id])

    def list_documents(self) -> list[dict]:
        return [
            self._document_summary(did, doc)
            for did, doc in list(self._documents.items())
        ]

    def close_document(self, doc_id: str) -> None:
        """Remove a document from memory.  Raises KeyError if unknown.

        The lock for *doc_id* is kept so a reload racing the close still
        serializes on it.
        """
        with self._lock(doc_id), self._registry_lock:
            del self._documents[doc_id]
            self._strict.pop(doc_id, None)
        logger.info("Closed document %s", doc_id)

    # ------------------------------------------------------------------
    # Line access
    # ------------------------------------------------------------------

    def get_lines(self, doc_id: str) -> list[dict]:
        """Return all lines of a document as JSON-friendly dicts."""
        with self._lock(doc_id):
            doc = self._documents[doc_id]
            return [
                {"position": pos, **to_json(line)}
                for pos, line in enumerate(doc.lines)
            ]

    # ------------------------------------------------------------------
    # Host operations
    # ------------------------------------------------------------------

    def lookup(self, doc_id: str, host: str) -> Optional[str]:
        """Return the IP *host* resolves to, or ``None`` if unbound."""
        with self._lock(doc_id):
            return hosts_editor.lookup(self._documents[doc_id], host)

    def set_host(self, doc_id: str, host: str, ip: str) -> dict:
        """Bind *host* to *ip* and persist."""
        with self._lock(doc_id):
            changed = hosts_editor.edit(self._documents[doc_id], host, ip)
        if changed:
            logger.info("Bound %s -> %s in doc=%s", host, ip, doc_id)
        return {"host": host, "ip": ip, "changed": changed}

    def remove_host(self, doc_id: str, host: str) -> dict:
        """Remove every binding of *host* and persist."""
        with self._lock(doc_id):
            changed = hosts_editor.delete(self._documents[doc_id], host)
        if changed:
            logger.info("Removed %s from doc=%s", host, doc_id)
        return {"host": host, "changed": changed}

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lock(self, doc_id: str) -> threading.RLock:
        """Return the lock guarding *doc_id*.  Raises KeyError if unknown."""
        with self._registry_lock:
            return self._locks[doc_id]

    def _forget_unloaded(self, doc_id: str, lock: threading.RLock) -> None:
        """Drop the lock created for a first load of *doc_id* that failed."""
        with self._registry_lock:
            if doc_id not in self._documents and self._locks.get(doc_id) is lock:
                del self._locks[doc_id]

    def _document_summary(self, doc_id: str, doc: Document) -> dict:
        kinds = Counter(line.kind.value for line in doc.lines)
        return {
            "doc_id": doc_id,
            "file_path": doc.file_path,
            "strict": self._strict.get(doc_id, False),
            "total_lines": len(doc),
            "kind_counts": dict(kinds),
            "host_count": len({h for line in doc.mapping_lines() for h in line.hosts}),
        }
