"""Word trie -- prefix tree with a reserved terminator character."""

from wordtrie.constants import DEFAULT_TERMINATOR
from wordtrie.trie import AddResult, InvalidTerminatorError, Trie, TrieNode
from wordtrie.wordlist import load_trie, read_words

__all__ = [
    "DEFAULT_TERMINATOR",
    "AddResult",
    "InvalidTerminatorError",
    "Trie",
    "TrieNode",
    "load_trie",
    "read_words",
]
