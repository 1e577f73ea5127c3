"""
notesledger/core/render.py

Markdown rendering for the notes region.

Layout of a non-empty ledger:

    (blank)
    ### Summary Notes
    (blank)
    - ["first-note" by @alice](https://example.com/c/1)
    - ["second-note" by @bob](https://example.com/c/2)
    (blank)
    Generated by notesledger, see [help](...) for how to add more

An empty ledger renders to "" so the region collapses between its markers.
Rendering is a pure function of the entries and the options: no counters,
no timestamps.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from notesledger.core.models import NoteEntry, NoteLedger


SUMMARY_HEADER    = "### Summary Notes"
DEFAULT_GENERATOR = "notesledger"
DEFAULT_HELP_URL  = "https://github.com/notesledger/notesledger/wiki/Note"


@dataclass(frozen=True)
class RenderOptions:
    """Attribution line settings. Part of the render input, never the state."""
    generator: str = DEFAULT_GENERATOR
    help_url:  str = DEFAULT_HELP_URL

    def footer(self) -> str:
        return (
            f"Generated by {self.generator}, "
            f"see [help]({self.help_url}) for how to add more"
        )


DEFAULT_OPTIONS = RenderOptions()


def _escape(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def render_entry(entry: "NoteEntry") -> str:
    """
    One bullet line, without the leading newline.

    Angle brackets in user-supplied fields are written as entities so a
    title can never open or close an HTML comment inside the region.
    """
    return (
        f'- ["{_escape(entry.title)}" by @{_escape(entry.author)}]'
        f'({_escape(entry.comment_url)})'
    )


def render_ledger(ledger: "NoteLedger", options: RenderOptions = DEFAULT_OPTIONS) -> str:
    if not ledger.entries:
        return ""

    text = f"\n{SUMMARY_HEADER}\n"
    for entry in ledger.entries:
        text += "\n" + render_entry(entry)
    text += "\n\n" + options.footer()
    return text
