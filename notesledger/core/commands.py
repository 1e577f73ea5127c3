"""
notesledger/core/commands.py

Note commands and a reference comment parser.

Users post comments like:

    @notesbot note fix-typo
    @notesbot note "Decision: ship on Friday"
    @notesbot note remove fix-typo

The dispatcher only ever sees AddNote / RemoveNote.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from notesledger.core.exceptions import ValidationError


@dataclass(frozen=True)
class AddNote:
    """Append a note titled `title`."""
    title: str


@dataclass(frozen=True)
class RemoveNote:
    """Remove the first note titled `title`."""
    title: str


NoteCommand = Union[AddNote, RemoveNote]

_REMOVE_KEYWORD = "remove"


def _clean_title(raw: str) -> str:
    title = raw.strip()
    if len(title) >= 2 and title[0] == title[-1] == '"':
        title = title[1:-1].strip()
    return title


def parse_note_command(text: str, bot_name: str) -> Optional[NoteCommand]:
    """
    Find the first `@{bot_name} note ...` line in a comment.

    Returns None when the comment carries no note command.
    Raises ValidationError when the command has no title.
    """
    pattern = re.compile(
        rf"^\s*@{re.escape(bot_name)}\s+note\b(?P<rest>.*)$",
        re.IGNORECASE,
    )
    for line in text.splitlines():
        match = pattern.match(line)
        if not match:
            continue

        rest = match.group("rest").strip()
        parts = rest.split(None, 1)
        head = parts[0] if parts else ""
        tail = parts[1] if len(parts) > 1 else ""
        if head.lower() == _REMOVE_KEYWORD:
            title = _clean_title(tail)
            if not title:
                raise ValidationError("`note remove` needs a title", {"line": line.strip()})
            return RemoveNote(title=title)

        title = _clean_title(rest)
        if not title:
            raise ValidationError("`note` needs a title", {"line": line.strip()})
        return AddNote(title=title)

    return None
