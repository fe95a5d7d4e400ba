# trie.py
# Prefix tree over Unicode code points for exact and prefix matching
# against a fixed set of strings (MIME types, header values, etc).
# Nodes keep min/max remaining-length bounds so lookups can bail out early.

from __future__ import annotations

import logging
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

from runetrie.core.errors import EntryConflictError

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=str)
Match = Tuple[Optional[S], bool]


class Bounds:
    """Min/max length window. Starts empty and only ever widens."""

    __slots__ = ("min", "max")

    def __init__(self) -> None:
        self.min: Optional[int] = None
        self.max: Optional[int] = None

    def widen(self, n: int) -> None:
        if self.min is None or n < self.min:
            self.min = n
        if self.max is None or n > self.max:
            self.max = n

    def covers(self, n: int) -> bool:
        return self.min is not None and self.min <= n <= self.max

    def __repr__(self) -> str:
        return f"Bounds(min={self.min}, max={self.max})"


class TrieNode:
    """
    A single node in the Trie.
    children: code point -> TrieNode (two keys may share one node when case-insensitive)
    terminal: the stored string ending here, as inserted, or None
    bounds: remaining suffix lengths of every pattern routed through this node
    """

    __slots__ = ("children", "terminal", "bounds")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.terminal: Optional[str] = None
        self.bounds = Bounds()


def _case_counterpart(c: str) -> Optional[str]:
    """Other-case form of a code point, or None if it has no single-code-point one."""
    if c.islower():
        alt = c.upper()
    elif c.isupper():
        alt = c.lower()
    else:
        return None
    if len(alt) != 1 or alt == c:
        return None
    return alt


class Trie(Generic[S]):
    """
    Trie used to classify inputs against a set of stored strings:
     - exact membership (match_any)
     - is any stored string a prefix of the input (match_any_prefix_of)
     - shortest / longest stored prefix of the input

    Case-insensitive tries register every letter edge under both of its case
    forms pointing at one shared node, so lookups stay plain code point
    comparisons. Queries never mutate, mutation is not thread-safe.
    """

    def __init__(self, case_insensitive: bool = False) -> None:
        self._root = TrieNode()
        self._case_insensitive = case_insensitive

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    @property
    def bounds(self) -> Tuple[Optional[int], Optional[int]]:
        """(min, max) length over every string inserted so far."""
        return self._root.bounds.min, self._root.bounds.max

    # insertion -----------------------------------------------------
    def add(self, *ss: S) -> None:
        """
        Insert strings one at a time, in order.
        Re-inserting a stored string is a no-op.
        Raises EntryConflictError when two different strings land on the
        same node (case-insensitive mode only). Strings inserted before the
        conflicting one in the same call stay in the trie.
        """
        for s in ss:
            self._add_one(s)

    def _add_one(self, s: S) -> None:
        n = len(s)
        self._root.bounds.widen(n)

        node = self._root
        for i, c in enumerate(s):
            node = self._child_for_insert(node, c)
            node.bounds.widen(n - i - 1)

        if node.terminal is not None and node.terminal != s:
            logger.debug("conflict entry: %r collides with stored %r", s, node.terminal)
            raise EntryConflictError(node.terminal, s)
        node.terminal = s

    def _child_for_insert(self, node: TrieNode, c: str) -> TrieNode:
        child = node.children.get(c)
        if not self._case_insensitive:
            if child is None:
                child = node.children[c] = TrieNode()
            return child

        alt = _case_counterpart(c)
        if child is None and alt is not None:
            child = node.children.get(alt)
        if child is None:
            child = TrieNode()
        node.children[c] = child
        if alt is not None and alt not in node.children:
            logger.debug("aliasing edge %r as %r", c, alt)
            node.children[alt] = child
        return child

    # search/traversal ---------------------------------------------------------
    def _clip(self, s: S) -> Optional[S]:
        """
        Root guard shared by the prefix queries.
        None when s is shorter than every stored string, otherwise the
        part of s a match could possibly consume.
        """
        lo, hi = self.bounds
        if lo is None or len(s) < lo:
            return None
        if len(s) > hi:
            return s[:hi]
        return s

    def match_any(self, s: S) -> bool:
        """True iff s is exactly one of the stored strings."""
        node = self._root
        if not node.bounds.covers(len(s)):
            return False

        remaining = len(s)
        for c in s:
            node = node.children.get(c)
            remaining -= 1
            if node is None or not node.bounds.covers(remaining):
                return False
        return node.terminal is not None

    def match_any_prefix_of(self, s: S) -> bool:
        """True if some stored string is a prefix of s (s itself included)."""
        _, matched = self.match_prefix_of(s)
        return matched

    def match_prefix_of(self, s: S) -> Match:
        """
        Return (shortest stored prefix of s, True), or (None, False).
        The walk stops at the first terminal it meets.
        """
        clipped = self._clip(s)
        if clipped is None:
            return None, False

        node = self._root
        if node.terminal is not None:
            return node.terminal, True
        for c in clipped:
            node = node.children.get(c)
            if node is None:
                break
            if node.terminal is not None:
                return node.terminal, True
        return None, False

    def longest_match_prefix_of(self, s: S) -> Match:
        """
        Return (longest stored prefix of s, True), or (None, False).
        Walks as far as the input and the edges allow, keeping the last terminal seen.
        """
        clipped = self._clip(s)
        if clipped is None:
            return None, False

        node = self._root
        result = node.terminal
        for c in clipped:
            node = node.children.get(c)
            if node is None:
                break
            if node.terminal is not None:
                result = node.terminal
            if not node.children:
                break
        return result, result is not None

    # convenience -----------------------------------------------------
    def __contains__(self, s: object) -> bool:
        return isinstance(s, str) and self.match_any(s)

    def __repr__(self) -> str:
        lo, hi = self.bounds
        return f"Trie(case_insensitive={self._case_insensitive}, min={lo}, max={hi})"


# constructors ---------------------------------------------------------
def new_trie(*ss: S) -> Trie[S]:
    """Case-sensitive trie holding ss. Cannot fail: conflicts need case aliasing."""
    trie: Trie[S] = Trie()
    trie.add(*ss)
    return trie


def new_case_insensitive_trie(*ss: S) -> Trie[S]:
    """
    Case-insensitive trie holding ss.
    Raises EntryConflictError if two of ss are equal under case folding
    but spelled differently, e.g. "aA" and "aa".
    """
    trie: Trie[S] = Trie(case_insensitive=True)
    trie.add(*ss)
    return trie


def must(factory: Callable[..., Trie[S]], *ss: S) -> Trie[S]:
    """
    Build a trie with factory(*ss) and treat a conflict as a programming error.
    Only for call sites whose input set is known to be conflict-free,
    e.g. module-level constants.
    """
    try:
        return factory(*ss)
    except EntryConflictError as exc:
        logger.critical("trie construction failed: %s", exc)
        raise RuntimeError(f"trie construction failed: {exc}") from exc
