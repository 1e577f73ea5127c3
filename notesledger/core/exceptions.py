"""
notesledger Exception Hierarchy

All exceptions inherit from NotesLedgerError for easy catching.
Every kind is recoverable: the dispatcher raises, the caller decides
how to report it.
"""


class NotesLedgerError(Exception):
    """Base exception for all notesledger errors"""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class ValidationError(NotesLedgerError):
    """Raised when an entry, command or marker name is malformed"""
    pass


class EntryNotFound(NotesLedgerError):
    """Raised when a remove targets a title that is not in the ledger"""
    pass


class ConflictError(NotesLedgerError):
    """Raised when the document region changed since it was loaded"""
    pass


class RetryExhausted(ConflictError):
    """Raised when every retry of the update cycle hit a conflict"""
    pass


class MissingContext(NotesLedgerError):
    """Raised when the event has no document, author or comment link"""
    pass


class DocumentIOError(NotesLedgerError):
    """Raised when the document store cannot be read or written"""
    pass


class StateDecodeError(DocumentIOError):
    """Raised when the delimited region or its embedded state is damaged"""
    pass


class ConfigError(NotesLedgerError):
    """Raised when configuration is missing or invalid"""
    pass
