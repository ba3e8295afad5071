"""Secret key and computer move generation from the OS CSPRNG."""

from __future__ import annotations

import secrets

KEY_BYTES = 32


def generate_secret_key() -> str:
    """Return a fresh 256-bit key as 64 lowercase hex characters."""
    return secrets.token_bytes(KEY_BYTES).hex()


def random_move_index(n: int) -> int:
    """Pick a move index uniformly from 1..n.

    Uses ``secrets`` so the human cannot predict the computer's choice.
    """
    if n < 1:
        raise ValueError(f"Cannot pick a move from {n} moves")
    return secrets.randbelow(n) + 1
