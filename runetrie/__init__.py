"""
runetrie - prefix tree over Unicode code points.

    >>> from runetrie import must, new_case_insensitive_trie
    >>> trie = must(new_case_insensitive_trie, "FoO", "bAr", "buz")
    >>> trie.longest_match_prefix_of("fOoo")
    ('FoO', True)
"""

from runetrie.core import (
    Bounds,
    EntryConflictError,
    Trie,
    TrieError,
    TrieNode,
    must,
    new_case_insensitive_trie,
    new_trie,
)

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

__version__ = "0.1.0"
