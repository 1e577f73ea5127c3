"""
notesledger/editor/file.py

Markdown-file document store.

Document refs are file paths. Writes go to a temp file, are fsynced and
then replace the original, so a reader never sees a half-written body.
The version check and the replace happen under one lock per path. Locks
are held weakly and disappear once no write on that path is in flight.

The lock is in-process only. Two processes editing the same file can
still race between the check and the replace.
"""

import os
import threading
import weakref
from pathlib import Path

from notesledger.core.exceptions import DocumentIOError
from notesledger.editor.base import DocumentEditor


class FileDocumentEditor(DocumentEditor):

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._guard: threading.Lock              = threading.Lock()
        self._locks: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    def _locked(self, document_ref: str):
        key = str(Path(document_ref).resolve())
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
        return lock

    def _read_body(self, document_ref: str) -> str:
        path = Path(document_ref)
        try:
            # newline="" keeps CRLF bodies byte-identical outside the region
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except FileNotFoundError:
            raise DocumentIOError("Document not found", {"document": document_ref}) from None
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentIOError(f"Failed to read document: {e}", {"document": document_ref}) from e

    def _write_body(self, document_ref: str, body: str) -> None:
        path = Path(document_ref)
        temp_path = path.with_suffix(path.suffix + ".tmp")

        try:
            with open(temp_path, "w", encoding=self.encoding, newline="") as f:
                f.write(body)
                f.flush()
                os.fsync(f.fileno())
            temp_path.replace(path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise DocumentIOError(f"Failed to write document: {e}", {"document": document_ref}) from e
