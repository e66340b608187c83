"""Trie module: nodes, the trie itself and its errors."""

from .exceptions import WordNotFoundError
from .tree import Trie, TrieNode

__all__ = ["Trie", "TrieNode", "WordNotFoundError"]
