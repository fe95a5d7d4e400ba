"""
runetrie.core

The trie engine and its tooling.
Contains:
 - Trie / TrieNode with case-insensitive edge aliasing
 - constructors (new_trie, new_case_insensitive_trie, must)
 - EntryConflictError, the only error the engine raises
"""

from .errors import EntryConflictError, TrieError
from .trie import Bounds, Trie, TrieNode, must, new_case_insensitive_trie, new_trie

__all__ = [
    "Bounds",
    "EntryConflictError",
    "Trie",
    "TrieError",
    "TrieNode",
    "must",
    "new_case_insensitive_trie",
    "new_trie",
]
