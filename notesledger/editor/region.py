"""
notesledger/editor/region.py

Delimited region codec.

A document owns at most one region per marker name. For marker SUMMARY:

    <!-- NOTESLEDGER_SUMMARY_START -->
    {rendered markdown}
    <!-- NOTESLEDGER_SUMMARY_DATA_START$$
    {canonical JSON state}
    $$NOTESLEDGER_SUMMARY_DATA_END -->
    <!-- NOTESLEDGER_SUMMARY_END -->

The state block is an HTML comment, so it never shows in rendered
markdown. Everything outside START..END belongs to humans and is copied
through unchanged.
"""

import json
import logging
import re
from typing import Optional, Tuple

from notesledger.core.canonical import embedded_text, text_hash
from notesledger.core.exceptions import StateDecodeError, ValidationError
from notesledger.core.models import NoteLedger

log = logging.getLogger(__name__)

MARKER_PREFIX = "NOTESLEDGER"

_MARKER_NAME_RE = re.compile(r"^[A-Z][A-Z0-9_]*$")


def validate_marker_name(marker_name: str) -> str:
    if not isinstance(marker_name, str) or not _MARKER_NAME_RE.match(marker_name):
        raise ValidationError(
            "Marker name must be upper-case letters, digits and underscores",
            {"marker_name": marker_name},
        )
    return marker_name


def start_marker(marker_name: str) -> str:
    return f"<!-- {MARKER_PREFIX}_{validate_marker_name(marker_name)}_START -->"


def end_marker(marker_name: str) -> str:
    return f"<!-- {MARKER_PREFIX}_{validate_marker_name(marker_name)}_END -->"


def data_start(marker_name: str) -> str:
    return f"<!-- {MARKER_PREFIX}_{validate_marker_name(marker_name)}_DATA_START$$"


def data_end(marker_name: str) -> str:
    return f"$${MARKER_PREFIX}_{validate_marker_name(marker_name)}_DATA_END -->"


def _state_terminator(marker_name: str) -> str:
    """The state block closes on a line of its own."""
    return "\n" + data_end(marker_name)


# ─────────────────────────────────────────────────────────────
# Locate
# ─────────────────────────────────────────────────────────────

def find_region(body: str, marker_name: str) -> Optional[Tuple[int, int]]:
    """
    Return (start, end) offsets of the region including both markers,
    or None when the document has no region.

    The end marker is searched for after the embedded state block, so
    marker text appearing earlier in the rendered markdown cannot cut the
    region short. Raises StateDecodeError when the start marker has no
    matching end.
    """
    start = body.find(start_marker(marker_name))
    if start == -1:
        return None
    search_from = start
    state_start = body.find(data_start(marker_name), start)
    if state_start != -1:
        state_end = body.find(_state_terminator(marker_name), state_start)
        if state_end != -1:
            search_from = state_end
    closing = end_marker(marker_name)
    end = body.find(closing, search_from)
    if end == -1:
        raise StateDecodeError(
            "Region start marker has no end marker",
            {"marker_name": marker_name, "offset": start},
        )
    return start, end + len(closing)


def extract_region(body: str, marker_name: str) -> Optional[str]:
    span = find_region(body, marker_name)
    if span is None:
        return None
    return body[span[0]:span[1]]


def region_version(region: Optional[str]) -> str:
    """Version token of a region as read. An absent region hashes as ""."""
    return text_hash(region or "")


# ─────────────────────────────────────────────────────────────
# State
# ─────────────────────────────────────────────────────────────

def decode_state(region: Optional[str], marker_name: str) -> Optional[NoteLedger]:
    """
    Recover the ledger embedded in a region.

    Returns None when there is no region, or when the region carries no
    state block (e.g. it was pasted by hand). Raises StateDecodeError on
    malformed state.
    """
    if region is None:
        return None

    opening = data_start(marker_name)
    closing = _state_terminator(marker_name)
    start = region.find(opening)
    if start == -1:
        log.warning("Region %s has no embedded state, treating as empty", marker_name)
        return None
    end = region.find(closing, start)
    if end == -1:
        raise StateDecodeError(
            "Embedded state block is not terminated",
            {"marker_name": marker_name},
        )

    raw = region[start + len(opening):end].strip()
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StateDecodeError(
            f"Embedded state is not valid JSON: {e}",
            {"marker_name": marker_name},
        ) from e
    return NoteLedger.from_dict(data)


def build_region(marker_name: str, markdown: str, ledger: NoteLedger) -> str:
    """Full region text, markers included, for a rendered ledger and its state."""
    state = embedded_text(ledger.to_dict())
    return (
        f"{start_marker(marker_name)}\n"
        f"{markdown}\n"
        f"{data_start(marker_name)}\n"
        f"{state}\n"
        f"{data_end(marker_name)}\n"
        f"{end_marker(marker_name)}"
    )


# ─────────────────────────────────────────────────────────────
# Splice
# ─────────────────────────────────────────────────────────────

def splice_region(body: str, marker_name: str, region: str) -> str:
    """
    Put `region` into `body`.

    An existing region is replaced in place. Otherwise the region is
    appended after a blank line, keeping the original body as an exact
    prefix.
    """
    span = find_region(body, marker_name)
    if span is not None:
        return body[:span[0]] + region + body[span[1]:]

    if not body:
        separator = ""
    elif body.endswith("\n\n"):
        separator = ""
    elif body.endswith("\n"):
        separator = "\n"
    else:
        separator = "\n\n"
    return f"{body}{separator}{region}\n"
