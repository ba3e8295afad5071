"""Provably-fair non-transitive rock-paper-scissors."""

__version__ = "0.1.0"
