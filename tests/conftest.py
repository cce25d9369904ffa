import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from wordtrie import Trie

TESTDATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), "testdata")


@pytest.fixture
def trie():
    return Trie("*")


@pytest.fixture
def words_path():
    return os.path.join(TESTDATA, "words.txt")
