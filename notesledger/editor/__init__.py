"""
notesledger Editors - Delimited region storage

Editors load and save the machine-managed region of a document together
with its embedded state, guarded by a version token.
"""

from notesledger.editor.base import DocumentEditor, Snapshot
from notesledger.editor.file import FileDocumentEditor
from notesledger.editor.memory import InMemoryDocumentEditor

__all__ = [
    "DocumentEditor",
    "Snapshot",
    "FileDocumentEditor",
    "InMemoryDocumentEditor",
]
