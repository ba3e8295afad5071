"""Commit-reveal primitives: secret keys and HMAC commitments."""

from nontransitive.fairness.keys import generate_secret_key, random_move_index
from nontransitive.fairness.commitment import commit, verify

__all__ = [
    "generate_secret_key",
    "random_move_index",
    "commit",
    "verify",
]
