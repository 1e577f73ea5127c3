"""
notesledger/core/models.py

Notes Ledger Data Model

A NoteLedger is the ordered list of notes attached to one document. It is
rebuilt from the document's embedded state for every command, mutated
once, rendered, persisted and thrown away.

CONTRACT 1: Order
    entries keep insertion order. Rendering follows it.

CONTRACT 2: Duplicates
    titles are NOT unique. append() never checks.
    remove_by_title() removes the FIRST match only.

CONTRACT 3: Missing title
    remove_by_title() raises EntryNotFound and leaves entries untouched.

CONTRACT 4: Serialized form
    {"entries": [{"title": ..., "comment_url": ..., "author": ...}, ...]}
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from notesledger.core.exceptions import EntryNotFound, StateDecodeError, ValidationError
from notesledger.core.render import DEFAULT_OPTIONS, RenderOptions, render_entry, render_ledger

log = logging.getLogger(__name__)

_ENTRY_FIELDS = ("title", "comment_url", "author")


# ─────────────────────────────────────────────────────────────
# NoteEntry
# ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class NoteEntry:
    """One note: a title, who posted it, and a link to the comment."""
    title:       str
    comment_url: str
    author:      str

    def __post_init__(self) -> None:
        for name in _ENTRY_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(
                    f"Note entry field '{name}' must be a non-empty string",
                    {"field": name, "value": repr(value)},
                )

    def to_markdown(self) -> str:
        return render_entry(self)

    def to_dict(self) -> Dict[str, str]:
        return {
            "title":       self.title,
            "comment_url": self.comment_url,
            "author":      self.author,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoteEntry":
        """
        Rebuild an entry from persisted state.

        Persisted state comes from a document anyone can edit, so shape
        problems are reported as StateDecodeError rather than ValidationError.
        """
        if not isinstance(data, dict):
            raise StateDecodeError(
                "Note entry must be an object",
                {"got": type(data).__name__},
            )
        missing = [name for name in _ENTRY_FIELDS if name not in data]
        if missing:
            raise StateDecodeError(
                "Note entry is missing fields",
                {"missing": ",".join(missing)},
            )
        try:
            return cls(
                title=       data["title"],
                comment_url= data["comment_url"],
                author=      data["author"],
            )
        except ValidationError as e:
            raise StateDecodeError(f"Invalid note entry: {e.message}", e.details) from e


# ─────────────────────────────────────────────────────────────
# NoteLedger
# ─────────────────────────────────────────────────────────────

@dataclass
class NoteLedger:
    """Ordered, duplicate-tolerant list of note entries for one document."""
    entries: List[NoteEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def append(self, entry: NoteEntry) -> None:
        """Add an entry at the end. Duplicate titles are allowed."""
        log.debug("New note entry: %r", entry)
        self.entries.append(entry)

    def index_of(self, title: str) -> Optional[int]:
        for idx, entry in enumerate(self.entries):
            if entry.title == title:
                return idx
        return None

    def find(self, title: str) -> Optional[NoteEntry]:
        idx = self.index_of(title)
        return self.entries[idx] if idx is not None else None

    def remove_by_title(self, title: str) -> NoteEntry:
        """
        Remove the first entry whose title equals `title`.

        Returns:
            The removed entry.

        Raises:
            EntryNotFound if no entry matches. The ledger is unchanged.
        """
        idx = self.index_of(title)
        if idx is None:
            raise EntryNotFound(
                f"No note titled {title!r}",
                {"title": title, "entries": len(self.entries)},
            )
        log.debug("Removing element %r from index %d", self.entries[idx], idx)
        return self.entries.pop(idx)

    def titles(self) -> List[str]:
        return [entry.title for entry in self.entries]

    def copy(self) -> "NoteLedger":
        # Entries are frozen, a shallow list copy is enough.
        return NoteLedger(entries=list(self.entries))

    def to_markdown(self, options: RenderOptions = DEFAULT_OPTIONS) -> str:
        return render_ledger(self, options)

    def to_dict(self) -> Dict[str, Any]:
        return {"entries": [entry.to_dict() for entry in self.entries]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoteLedger":
        if not isinstance(data, dict):
            raise StateDecodeError(
                "Ledger state must be an object",
                {"got": type(data).__name__},
            )
        raw_entries = data.get("entries", [])
        if not isinstance(raw_entries, list):
            raise StateDecodeError(
                "Ledger 'entries' must be a list",
                {"got": type(raw_entries).__name__},
            )
        return cls(entries=[NoteEntry.from_dict(item) for item in raw_entries])
