"""
notesledger Core - Ledger model, rendering and command dispatch.
"""

from notesledger.core.commands import AddNote, NoteCommand, RemoveNote, parse_note_command
from notesledger.core.context import EventContext
from notesledger.core.dispatcher import CommandDispatcher, DispatchResult
from notesledger.core.models import NoteEntry, NoteLedger
from notesledger.core.render import RenderOptions, render_ledger

__all__ = [
    "AddNote",
    "RemoveNote",
    "NoteCommand",
    "parse_note_command",
    "EventContext",
    "CommandDispatcher",
    "DispatchResult",
    "NoteEntry",
    "NoteLedger",
    "RenderOptions",
    "render_ledger",
]
