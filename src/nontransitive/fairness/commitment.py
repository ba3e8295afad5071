"""HMAC commitments binding a move to a secret key."""

from __future__ import annotations

import hashlib
import hmac


def commit(move: str, key: str) -> str:
    """Commit to a move.

    Args:
        move: Move name (the HMAC message, UTF-8 encoded)
        key: Hex-encoded secret key (decoded to raw bytes for the MAC key)

    Returns:
        Lowercase hex HMAC-SHA256 digest

    Raises:
        ValueError: If key is not valid hex
    """
    return hmac.new(
        bytes.fromhex(key),
        move.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verify(commitment: str, move: str, key: str) -> bool:
    """Check that a revealed (move, key) pair reproduces a commitment."""
    expected = commit(move, key)
    return hmac.compare_digest(commitment.lower().encode("utf-8"), expected.encode("utf-8"))
