"""Prefix trie with a reserved terminator character.

A word is stored by walking one node per character and then placing the
terminator as a key in the last node's children, mapped to ``None``.  The
terminator is therefore never a node itself and may not appear inside a word.

Insertion is atomic: nodes created while walking a word start out unclean and
are only marked clean once the whole word has been recorded.  If the walk
hits the terminator, the first unclean node on the path is cut from its
parent, which drops every node the failed call created.

Trie instances are not thread-safe.  Callers sharing one across threads must
hold an exclusive lock around every call.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Iterable

from wordtrie.constants import DEFAULT_TERMINATOR, LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


class InvalidTerminatorError(ValueError):
    """Raised when a trie is built with something other than one character."""


class AddResult(Enum):
    """Outcome of :meth:`Trie.insert`."""

    ADDED = "added"
    EMPTY = "empty"
    EXISTS = "exists"
    INVALID = "invalid"

    @property
    def ok(self) -> bool:
        """The boolean reported by :meth:`Trie.add` for this outcome."""
        return self in (AddResult.ADDED, AddResult.EMPTY)


class TrieNode:
    """Single node in the trie.

    ``children`` maps a character to the next node, or the terminator to
    ``None`` when a word ends here.
    """

    __slots__ = ("value", "clean", "children")

    def __init__(self, value: str, clean: bool = False):
        self.value = value
        self.clean = clean
        self.children: dict[str, TrieNode | None] = {}

    def __repr__(self) -> str:
        flag = "" if self.clean else " dirty"
        return f"<TrieNode {self.value!r}{flag} children={len(self.children)}>"


class Trie:
    """Set of words stored as a prefix tree."""

    def __init__(self, terminator: str = DEFAULT_TERMINATOR):
        if not isinstance(terminator, str) or len(terminator) != 1:
            raise InvalidTerminatorError(
                f"terminator must be a single character, got {terminator!r}"
            )
        self._terminator = terminator
        self.root = TrieNode(terminator, clean=True)
        self._len = 0

    @property
    def terminator(self) -> str:
        return self._terminator

    def add(self, word: str) -> bool:
        """Add ``word``; return False if it was already present or invalid.

        The empty word is trivially present and reports True.
        """
        return self.insert(word).ok

    def insert(self, word: str) -> AddResult:
        """Add ``word`` and report exactly what happened."""
        if not word:
            return AddResult.EMPTY

        node = self.root
        for ch in word:
            if ch == self._terminator:
                self._rollback(word)
                return AddResult.INVALID
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child

        if self._terminator in node.children:
            return AddResult.EXISTS

        node.children[self._terminator] = None

        node = self.root
        for ch in word:
            node = node.children[ch]
            node.clean = True

        self._len += 1
        return AddResult.ADDED

    def update(self, words: Iterable[str]) -> int:
        """Add every word in ``words``; return how many were new."""
        return sum(1 for word in words if self.insert(word) is AddResult.ADDED)

    def contains(self, word: str) -> bool:
        """True if ``word`` was added and not deleted since.

        The empty word is always contained.  A word holding the terminator
        can never have been added, so it is never contained.
        """
        if not word:
            return True
        if self._terminator in word:
            return False
        node = self._walk(word)
        return node is not None and self._terminator in node.children

    def delete(self, word: str) -> None:
        """Remove ``word`` if present.

        Nodes along the path are left in place, so the tree never shrinks.
        """
        if not word or self._terminator in word:
            return
        node = self._walk(word)
        if node is None:
            return
        if self._terminator in node.children:
            del node.children[self._terminator]
            self._len -= 1

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _rollback(self, word: str) -> None:
        # Re-walk the prefix before the terminator and cut the first unclean
        # node; everything below it was created by the aborted call.
        node = self.root
        for depth, ch in enumerate(word):
            if ch == self._terminator:
                if node.children.get(ch) is not None:
                    node.children[ch] = None
                return
            child = node.children[ch]
            if not child.clean:
                del node.children[ch]
                log.debug("Rolled back %r at depth %d", word[:depth + 1], depth)
                return
            node = child

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._len

    def __repr__(self) -> str:
        return f"Trie(terminator={self._terminator!r}, words={self._len})"
