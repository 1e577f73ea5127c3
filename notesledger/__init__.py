"""
notesledger/__init__.py

notesledger: a machine-managed notes section inside a freely edited document

Users post short commands ("@notesbot note fix-typo"); notesledger keeps an
ordered list of notes in a marker-delimited region of the document (an
issue or pull request description, a markdown file) together with the
structured state it was rendered from. Everything outside the region is
left alone, and concurrent edits are detected by a version check.
"""

__version__ = "0.1.0"

from notesledger.core.commands import AddNote, RemoveNote, NoteCommand, parse_note_command
from notesledger.core.context import EventContext
from notesledger.core.dispatcher import CommandDispatcher, DispatchResult
from notesledger.core.exceptions import (
    NotesLedgerError,
    ValidationError,
    EntryNotFound,
    ConflictError,
    RetryExhausted,
    MissingContext,
    DocumentIOError,
    StateDecodeError,
    ConfigError,
)
from notesledger.core.models import NoteEntry, NoteLedger
from notesledger.core.render import RenderOptions, render_ledger
from notesledger.config import NotesConfig
from notesledger.editor import (
    DocumentEditor,
    Snapshot,
    FileDocumentEditor,
    InMemoryDocumentEditor,
)

__all__ = [
    # Model
    "NoteEntry",
    "NoteLedger",
    "RenderOptions",
    "render_ledger",
    # Commands
    "AddNote",
    "RemoveNote",
    "NoteCommand",
    "parse_note_command",
    # Dispatch
    "EventContext",
    "CommandDispatcher",
    "DispatchResult",
    "NotesConfig",
    # Editors
    "DocumentEditor",
    "Snapshot",
    "FileDocumentEditor",
    "InMemoryDocumentEditor",
    # Errors
    "NotesLedgerError",
    "ValidationError",
    "EntryNotFound",
    "ConflictError",
    "RetryExhausted",
    "MissingContext",
    "DocumentIOError",
    "StateDecodeError",
    "ConfigError",
]
