"""
notesledger/editor/base.py

DocumentEditor contract.

Editors own a document store and give the dispatcher exactly two calls:

    load_current(document_ref, marker_name)  → Snapshot(ledger, version)
    apply_update(document_ref, marker_name,
                 new_markdown, new_state,
                 expected_version)             → new version

apply_update MUST compare `expected_version` with the region's current
version and write, as one step under the editor's lock. A mismatch raises
ConflictError and writes nothing. Markdown and state are always written
together in the same region.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from notesledger.core.exceptions import ConflictError
from notesledger.core.models import NoteLedger
from notesledger.editor.region import (
    build_region,
    decode_state,
    extract_region,
    region_version,
    splice_region,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Region state as observed by load_current()."""
    ledger:  Optional[NoteLedger]
    version: str

    @property
    def exists(self) -> bool:
        return self.ledger is not None


class DocumentEditor:
    """
    Base editor. Subclasses provide raw body access; the region logic and
    the version check live here.

    Subclasses implement:
        _read_body(document_ref)          → str
        _write_body(document_ref, body)   → None
        _locked(document_ref)             → context manager
    """

    def load_current(self, document_ref: str, marker_name: str) -> Snapshot:
        with self._locked(document_ref):
            body = self._read_body(document_ref)
        region = extract_region(body, marker_name)
        return Snapshot(
            ledger=  decode_state(region, marker_name),
            version= region_version(region),
        )

    def apply_update(
        self,
        document_ref:     str,
        marker_name:      str,
        new_markdown:     str,
        new_state:        NoteLedger,
        expected_version: str,
    ) -> str:
        new_region = build_region(marker_name, new_markdown, new_state)

        with self._locked(document_ref):
            body = self._read_body(document_ref)
            current_version = region_version(extract_region(body, marker_name))
            if current_version != expected_version:
                raise ConflictError(
                    "Document region changed since it was loaded",
                    {
                        "document": document_ref,
                        "expected": expected_version[:12],
                        "actual":   current_version[:12],
                    },
                )
            self._write_body(document_ref, splice_region(body, marker_name, new_region))

        log.debug("Wrote region %s to %s", marker_name, document_ref)
        return region_version(new_region)

    # ── Storage hooks ─────────────────────────────────────────

    def _locked(self, document_ref: str):
        raise NotImplementedError

    def _read_body(self, document_ref: str) -> str:
        raise NotImplementedError

    def _write_body(self, document_ref: str, body: str) -> None:
        raise NotImplementedError
