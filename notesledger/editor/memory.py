"""
In-process document store.

Useful for tests and for embedding the dispatcher in a service that keeps
document bodies in memory. Thread-safe via one internal lock.
"""

import threading
from typing import Dict

from notesledger.core.exceptions import DocumentIOError
from notesledger.editor.base import DocumentEditor


class InMemoryDocumentEditor(DocumentEditor):

    def __init__(self, documents: Dict[str, str] = None) -> None:
        self._lock:      threading.Lock = threading.Lock()
        self._documents: Dict[str, str] = dict(documents or {})

    def create_document(self, document_ref: str, body: str = "") -> None:
        with self._lock:
            self._documents[document_ref] = body

    def get_body(self, document_ref: str) -> str:
        with self._lock:
            return self._read_body(document_ref)

    def _locked(self, document_ref: str):
        return self._lock

    def _read_body(self, document_ref: str) -> str:
        try:
            return self._documents[document_ref]
        except KeyError:
            raise DocumentIOError("Unknown document", {"document": document_ref}) from None

    def _write_body(self, document_ref: str, body: str) -> None:
        if document_ref not in self._documents:
            raise DocumentIOError("Unknown document", {"document": document_ref})
        self._documents[document_ref] = body
