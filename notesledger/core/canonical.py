"""
notesledger: Canonical JSON Encoding, RFC 8785 (JCS)

The embedded ledger state is always written in canonical form, so the
same ledger produces the same document bytes on every write.

RFC 8785: https://www.rfc-editor.org/rfc/rfc8785
"""

import hashlib

try:
    import jcs as _jcs
except ImportError as exc:
    raise ImportError(
        "notesledger requires the 'jcs' package for RFC 8785 compliance.\n"
        "Install with: pip install jcs\n"
        f"Original error: {exc}"
    ) from exc


def canonicalize(obj: dict) -> bytes:
    """
    Encode a dict to RFC 8785 canonical JSON bytes.

    Output is deterministic regardless of key insertion order.
    All values must be JSON-primitive (str, int, float, bool, None, list, dict).

    Returns:
        UTF-8 encoded canonical JSON bytes.
    """
    return _jcs.canonicalize(obj)


def canonical_text(obj: dict) -> str:
    """Canonical JSON as a str, for embedding in a document body."""
    return canonicalize(obj).decode("utf-8")


def text_hash(text: str) -> str:
    """
    SHA-256 of a text block, used as the optimistic-concurrency version token.

    Returns:
        Lowercase hex-encoded SHA-256 digest (64 characters).
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


_EMBED_ESCAPES = (("<", "\\u003c"), (">", "\\u003e"), ("$", "\\u0024"))


def embedded_text(obj: dict) -> str:
    """
    Canonical JSON with '<', '>' and '$' written as \\u escapes.

    These characters only occur inside JSON strings, so the result is
    still valid JSON that decodes to the same object. It can be placed
    inside an HTML comment without any value closing the comment or
    forming a region marker.
    """
    text = canonical_text(obj)
    for char, escape in _EMBED_ESCAPES:
        text = text.replace(char, escape)
    return text
