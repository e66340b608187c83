"""Utility functions for word simulation and trie verification.

This module provides support for:
- Simulating word workloads (uniform or Zipf-weighted symbols).
- Loading word lists from text files.
- Checking the count and pruning invariants of a trie.
"""

from .utils import (
    count_end_nodes,
    find_dead_leaves,
    generate_simulated_words,
    load_words,
)

__all__ = [
    "count_end_nodes",
    "find_dead_leaves",
    "generate_simulated_words",
    "load_words",
]
