# errors.py
# Exceptions raised by the trie engine.

from __future__ import annotations


class TrieError(Exception):
    """Base class for runetrie errors."""


class EntryConflictError(TrieError):
    """
    Raised when an insertion would store a second, different string on a node
    that already ends a stored string. Only reachable through case aliasing,
    e.g. inserting "aA" and then "aa" into a case-insensitive trie.
    """

    def __init__(self, existing: str, incoming: str) -> None:
        super().__init__(f"conflict entry: {incoming!r} collides with {existing!r}")
        self.existing = existing
        self.incoming = incoming
