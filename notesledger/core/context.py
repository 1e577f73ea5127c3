"""
Event context for one note command.
"""

from dataclasses import dataclass
from typing import Optional

from notesledger.core.exceptions import MissingContext


@dataclass(frozen=True)
class EventContext:
    """Who posted the command, where, and on which document."""

    document_ref: Optional[str] = None
    author:       Optional[str] = None
    comment_url:  Optional[str] = None

    def require(self, *fields: str) -> None:
        """Raise MissingContext unless every named field is a non-empty string."""
        missing = [
            name for name in fields
            if not isinstance(getattr(self, name), str) or not getattr(self, name).strip()
        ]
        if missing:
            raise MissingContext(
                "Event context is incomplete",
                {"missing": missing},
            )

    def __repr__(self) -> str:
        return (
            f"EventContext("
            f"document_ref={self.document_ref!r}, "
            f"author={self.author!r}, "
            f"comment_url={self.comment_url!r})"
        )
