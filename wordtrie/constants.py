"""Shared constants for the word trie."""

from __future__ import annotations

# Reserved end-of-word character used when none is given.
DEFAULT_TERMINATOR = "*"

LOGGER_NAME = "wordtrie"
