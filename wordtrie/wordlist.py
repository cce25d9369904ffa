"""Word list files loaded into a trie."""

from __future__ import annotations

import logging

from wordtrie.constants import DEFAULT_TERMINATOR, LOGGER_NAME
from wordtrie.trie import AddResult, Trie

log = logging.getLogger(LOGGER_NAME)


def read_words(path: str) -> list[str]:
    """Return the non-blank lines of ``path``, stripped, in file order."""
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    return words


def load_trie(path: str, terminator: str = DEFAULT_TERMINATOR) -> Trie:
    """Build a trie holding every valid word listed in ``path``.

    Words containing ``terminator`` cannot be stored and are skipped.
    """
    trie = Trie(terminator)
    rejected = 0
    duplicates = 0
    for word in read_words(path):
        result = trie.insert(word)
        if result is AddResult.INVALID:
            rejected += 1
        elif result is AddResult.EXISTS:
            duplicates += 1

    if duplicates:
        log.debug("Skipped %d duplicate words in %s", duplicates, path)
    if rejected:
        log.warning(
            "Rejected %d words containing the terminator %r in %s",
            rejected, terminator, path,
        )
    log.info("Loaded %s words from %s", f"{len(trie):,}", path)
    return trie
