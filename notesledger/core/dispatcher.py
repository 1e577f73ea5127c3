"""
notesledger/core/dispatcher.py

Command Dispatcher

run() MUST, in this exact order, per attempt:
  1. Load a Snapshot (ledger or None, version) from the editor
  2. handle(): copy the ledger (or start empty), apply the command
  3. Render markdown from the new ledger
  4. apply_update() with markdown + state + the snapshot's version
  5. On ConflictError, go back to 1 against fresh state

Stale state is never re-used across attempts. Markdown and state always
travel together into one apply_update() call.
No per-request state is kept on the dispatcher.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from notesledger.core.commands import AddNote, NoteCommand, RemoveNote
from notesledger.core.context import EventContext
from notesledger.core.exceptions import ConflictError, RetryExhausted, ValidationError
from notesledger.core.models import NoteEntry, NoteLedger
from notesledger.core.render import DEFAULT_OPTIONS, RenderOptions

log = logging.getLogger(__name__)

DEFAULT_MARKER_NAME = "SUMMARY"
DEFAULT_MAX_RETRIES = 3


@dataclass
class DispatchResult:
    """New ledger and its markdown, produced together."""
    ledger:   NoteLedger
    markdown: str
    attempts: int = 1
    version:  Optional[str] = None


class CommandDispatcher:
    """
    Applies one note command to one document.

    Args:
        editor:       DocumentEditor used by run(). handle() never touches it.
        marker_name:  Region name inside the document.
        max_retries:  Extra attempts after a conflict. 0 means no retry.
        options:      Attribution line settings for rendering.
    """

    def __init__(
        self,
        editor,
        marker_name:  str = DEFAULT_MARKER_NAME,
        max_retries:  int = DEFAULT_MAX_RETRIES,
        options:      RenderOptions = DEFAULT_OPTIONS,
    ) -> None:
        if max_retries < 0:
            raise ValidationError("max_retries must be >= 0", {"max_retries": max_retries})
        self.editor      = editor
        self.marker_name = marker_name
        self.max_retries = max_retries
        self.options     = options

    # ── Pure step ─────────────────────────────────────────────

    def handle(
        self,
        current: Optional[NoteLedger],
        command: NoteCommand,
        context: EventContext,
    ) -> DispatchResult:
        """
        Apply `command` to `current` and render. No I/O.

        `current` is never mutated. None means the document has no notes yet.

        Raises:
            MissingContext  author or comment link absent
            EntryNotFound   RemoveNote for a title not in the ledger
        """
        context.require("author", "comment_url")

        ledger = current.copy() if current is not None else NoteLedger()

        if isinstance(command, AddNote):
            ledger.append(
                NoteEntry(
                    title=       command.title,
                    comment_url= context.comment_url,
                    author=      context.author,
                )
            )
        elif isinstance(command, RemoveNote):
            ledger.remove_by_title(command.title)
        else:
            raise ValidationError(
                "Unknown note command",
                {"command": type(command).__name__},
            )

        markdown = ledger.to_markdown(self.options)
        log.debug("New markdown: %r", markdown)
        return DispatchResult(ledger=ledger, markdown=markdown)

    # ── Transaction ───────────────────────────────────────────

    def run(self, command: NoteCommand, context: EventContext) -> DispatchResult:
        """
        Read-mutate-render-persist `command` against the context's document.

        Raises:
            MissingContext    document, author or comment link absent
            EntryNotFound     propagated from handle()
            RetryExhausted    every attempt hit a concurrent modification
            DocumentIOError   storage failure (never retried)
        """
        context.require("document_ref", "author", "comment_url")

        attempts = self.max_retries + 1
        for attempt in range(1, attempts + 1):
            snapshot = self.editor.load_current(context.document_ref, self.marker_name)
            result = self.handle(snapshot.ledger, command, context)
            try:
                result.version = self.editor.apply_update(
                    context.document_ref,
                    self.marker_name,
                    result.markdown,
                    result.ledger,
                    expected_version=snapshot.version,
                )
            except ConflictError as e:
                log.warning(
                    "Conflict on %s (attempt %d/%d): %s",
                    context.document_ref, attempt, attempts, e,
                )
                continue

            result.attempts = attempt
            log.info(
                "Updated %s region on %s: %d note(s), attempt %d",
                self.marker_name, context.document_ref, len(result.ledger), attempt,
            )
            return result

        raise RetryExhausted(
            "Gave up after repeated concurrent modifications",
            {"document": context.document_ref, "attempts": attempts},
        )
