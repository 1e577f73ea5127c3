"""
notesledger/cli/notes.py

notesledger add / remove / comment / show: edit the notes region of a
markdown file.

Usage:
    notesledger add ISSUE.md "fix-typo" --author alice --comment-url https://x/1
    notesledger remove ISSUE.md "fix-typo" --author alice --comment-url https://x/2
    notesledger comment ISSUE.md --body "@notesbot note fix-typo" --author alice --comment-url https://x/1
    notesledger show ISSUE.md --format json

Exit codes:
    0  Region updated (or shown)
    1  Command rejected  (no such note, conflict retries exhausted, no command in comment)
    2  Error  (missing context, unreadable document, invalid config or input)
"""

import json
import sys
from typing import Optional

import click

from notesledger.config import NotesConfig
from notesledger.core.commands import AddNote, NoteCommand, RemoveNote, parse_note_command
from notesledger.core.context import EventContext
from notesledger.core.exceptions import EntryNotFound, NotesLedgerError, RetryExhausted
from notesledger.editor.file import FileDocumentEditor

EXIT_REJECTED = 1
EXIT_ERROR    = 2


def _config(ctx: click.Context) -> NotesConfig:
    return ctx.obj["config"]


def _fail(message: str, code: int) -> None:
    click.echo(f"❌ {message}", err=True)
    sys.exit(code)


def _run(ctx: click.Context, command: NoteCommand, document: str,
         author: Optional[str], comment_url: Optional[str]) -> None:
    config = _config(ctx)
    dispatcher = config.build_dispatcher(FileDocumentEditor())
    context = EventContext(document_ref=document, author=author, comment_url=comment_url)

    try:
        result = dispatcher.run(command, context)
    except (EntryNotFound, RetryExhausted) as e:
        _fail(str(e), EXIT_REJECTED)
    except NotesLedgerError as e:
        _fail(str(e), EXIT_ERROR)

    verb = "Added" if isinstance(command, AddNote) else "Removed"
    click.echo(
        f"✅ {verb} note {command.title!r} ({len(result.ledger)} note(s) in {document})"
    )


_author_option = click.option(
    "--author", type=str, default=None, metavar="HANDLE",
    help="Handle of the commenter, rendered as @HANDLE.",
)
_comment_url_option = click.option(
    "--comment-url", type=str, default=None, metavar="URL",
    help="Permanent link to the comment that issued the command.",
)


@click.command(name="add")
@click.argument("document", type=click.Path(dir_okay=False))
@click.argument("title")
@_author_option
@_comment_url_option
@click.pass_context
def add_command(ctx, document: str, title: str, author: Optional[str], comment_url: Optional[str]) -> None:
    """Append a note titled TITLE to DOCUMENT."""
    _run(ctx, AddNote(title=title), document, author, comment_url)


@click.command(name="remove")
@click.argument("document", type=click.Path(dir_okay=False))
@click.argument("title")
@_author_option
@_comment_url_option
@click.pass_context
def remove_command(ctx, document: str, title: str, author: Optional[str], comment_url: Optional[str]) -> None:
    """Remove the first note titled TITLE from DOCUMENT."""
    _run(ctx, RemoveNote(title=title), document, author, comment_url)


@click.command(name="comment")
@click.argument("document", type=click.Path(dir_okay=False))
@click.option("--body", type=str, default=None, help="Comment text.")
@click.option(
    "--body-file", type=click.File("r", encoding="utf-8"), default=None,
    help="Read the comment text from a file ('-' for stdin).",
)
@_author_option
@_comment_url_option
@click.pass_context
def comment_command(ctx, document: str, body: Optional[str], body_file,
                    author: Optional[str], comment_url: Optional[str]) -> None:
    """Parse a raw comment for a note command and apply it to DOCUMENT."""
    if (body is None) == (body_file is None):
        _fail("Pass exactly one of --body or --body-file", EXIT_ERROR)
    text = body if body is not None else body_file.read()

    config = _config(ctx)
    try:
        command = parse_note_command(text, config.bot_name)
    except NotesLedgerError as e:
        _fail(str(e), EXIT_ERROR)
    if command is None:
        _fail(f"No @{config.bot_name} note command in comment", EXIT_REJECTED)

    _run(ctx, command, document, author, comment_url)


@click.command(name="show")
@click.argument("document", type=click.Path(dir_okay=False))
@click.option(
    "--format", "fmt",
    type=click.Choice(["markdown", "json"], case_sensitive=False),
    default="markdown",
    show_default=True,
    help="markdown: the rendered region. json: the embedded state.",
)
@click.pass_context
def show_command(ctx, document: str, fmt: str) -> None:
    """Print the notes stored in DOCUMENT."""
    config = _config(ctx)
    try:
        snapshot = FileDocumentEditor().load_current(document, config.marker_name)
    except NotesLedgerError as e:
        _fail(str(e), EXIT_ERROR)

    if fmt.lower() == "json":
        state = snapshot.ledger.to_dict() if snapshot.exists else {"entries": []}
        click.echo(json.dumps(state, indent=2, ensure_ascii=False))
        return

    if not snapshot.exists or not snapshot.ledger.entries:
        click.echo("(no notes)")
        return
    click.echo(snapshot.ledger.to_markdown(config.render_options()).lstrip("\n"))
