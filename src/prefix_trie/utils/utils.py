"""Utility functions for word simulation, word-list loading, and trie verification."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from numpy.random import default_rng

# Only import heavy types for type checking
if TYPE_CHECKING:
    from numpy.random import Generator
    from numpy.typing import NDArray

    from prefix_trie.trie import Trie, TrieNode

# Initialize a single random number generator for simulations
_rng = default_rng()


def _symbol_weights(alphabet_size: int, distribution: str) -> NDArray[np.float64]:
    """Probability of drawing each alphabet symbol.

    Args
    -----
        alphabet_size (int): Number of symbols.
        distribution (str): 'uniform' for equal weights, 'zipf' for weights
            proportional to 1/rank.

    Returns
    -------
        NDArray[np.float64]: Weights summing to 1.
    """
    if distribution == "uniform":
        return np.full(alphabet_size, 1.0 / alphabet_size)
    ranks = np.arange(1, alphabet_size + 1, dtype=float)
    weights = 1.0 / ranks
    return weights / weights.sum()


def generate_simulated_words(
    num_words: int,
    alphabet: str,
    min_length: int,
    max_length: int,
    distribution: str = "uniform",
    rng: Generator | None = None,
) -> list[str]:
    """
    Generate random words.

    Args
    -----
        num_words (int): Number of words to generate.
        alphabet (str): Symbols to draw from.
        min_length, max_length (int, int): Inclusive word length range.
        distribution (str): One of 'uniform', 'zipf'. Zipf-weighted symbols
            make words share long prefixes.
        rng (Generator, optional): Random generator, the module one by default.

    Returns
    -------
        List of words, possibly with repeats.
    """
    if distribution not in ("uniform", "zipf"):
        msg = f"Unknown distribution: {distribution!r}"
        raise ValueError(msg)
    if not alphabet:
        msg = "alphabet must not be empty"
        raise ValueError(msg)
    if not (0 <= min_length <= max_length):
        msg = f"Invalid length range [{min_length}, {max_length}]"
        raise ValueError(msg)

    rng = rng or _rng
    symbols = np.array(list(alphabet))
    weights = _symbol_weights(len(symbols), distribution)
    lengths = rng.integers(min_length, max_length + 1, size=num_words)
    return [
        "".join(rng.choice(symbols, size=int(n), p=weights))
        for n in lengths
    ]


def load_words(path: str | Path) -> list[str]:
    """Read one word per line, skipping blank lines.

    Only the line terminator is stripped; other whitespace is part of the word.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip("\r\n")]


def count_end_nodes(trie: Trie) -> int:
    """Count nodes reachable from the root that mark the end of a word."""
    total = 0
    stack = [trie.root]
    while stack:
        node = stack.pop()
        total += node.is_end
        stack.extend(node.children.values())
    return total


def find_dead_leaves(trie: Trie) -> list[str]:
    """
    Find non-root nodes that are childless and not the end of any word.

    A correctly pruned trie has none.

    Returns
    -------
        list[str]: Paths spelling each dead leaf.
    """
    dead: list[str] = []
    stack: list[tuple[TrieNode, str]] = [(trie.root, "")]
    while stack:
        node, path = stack.pop()
        if node is not trie.root and not node.children and not node.is_end:
            dead.append(path)
        for ch, child in node.children.items():
            stack.append((child, path + ch))
    return dead
