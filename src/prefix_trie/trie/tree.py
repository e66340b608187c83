"""Character-keyed prefix tree (trie) with insertion, lookup and pruning deletion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prefix_trie.config import Config
from prefix_trie.trie.exceptions import WordNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


def _check_word(word: str) -> None:
    if not isinstance(word, str):
        msg = f"word must be a str, got {type(word).__name__}"
        raise TypeError(msg)


class TrieNode:
    """Node in a trie; the path from the root to it spells a (possibly stored) word."""
    __slots__ = ("children", "is_end")

    def __init__(self) -> None:
        # Maps a single character to the child it leads to
        self.children: dict[str, TrieNode] = {}
        self.is_end = False

    def __repr__(self):
        return f"TrieNode(is_end={self.is_end}, children={len(self.children)})"


class Trie:
    """Prefix tree of strings with a running count of stored words."""

    def __init__(self, config: Config | None = None, words: Iterable[str] | None = None) -> None:
        """
        Initialize an empty trie, optionally filled with ``words``.

        Args
        -----
        config (Config, optional): Counting and verbosity settings. Defaults to Config().
        words (Iterable[str], optional): Words to add right away.
        """
        self.config = config or Config()
        # Root stands for the empty string and is never removed
        self.root = TrieNode()
        self._count = 0
        for word in words or ():
            self.add(word)

    def __repr__(self):
        return f"Trie(count={self._count})"

    def count(self) -> int:
        """Number of words currently stored."""
        return self._count

    def __len__(self) -> int:
        return self._count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __iter__(self) -> Iterator[str]:
        """Yield every distinct stored word."""
        yield from self._walk(self.root, "")

    def add(self, word: str) -> None:
        """Add ``word``, creating any missing nodes along its path.

        With ``count_duplicates`` enabled (the default) the count grows on every
        call, also when ``word`` is already stored.

        Args
        -----
            word (str): Word to add, may be empty.
        """
        _check_word(word)
        current = self.root
        for ch in word:
            child = current.children.get(ch)
            if child is None:
                child = current.children[ch] = TrieNode()
            current = child
        if self.config.trie.count_duplicates or not current.is_end:
            self._count += 1
        current.is_end = True
        if self.config.verbose:
            print(f"Added {word!r}: count={self._count}")

    def search(self, word: str) -> bool:
        """Return True only if ``word`` itself is stored, not merely a prefix of a stored word."""
        _check_word(word)
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Return True if some stored word begins with ``prefix``."""
        _check_word(prefix)
        node = self._find(prefix)
        if node is None:
            return False
        # Non-root leaves are always end nodes after pruning
        return node.is_end or bool(node.children)

    def words_with_prefix(self, prefix: str) -> list[str]:
        """
        Collect every distinct stored word that begins with ``prefix``.

        Args
        -----
            prefix (str): The prefix to match.

        Returns
        -------
            list[str]: Matching words, in no particular order.
        """
        _check_word(prefix)
        node = self._find(prefix)
        if node is None:
            return []
        return list(self._walk(node, prefix))

    def delete(self, word: str) -> None:
        """Remove one occurrence of ``word`` and prune branches that no longer lead to a word.

        Nodes are only removed once they are childless and not the end of
        another word. A failed deletion leaves the trie untouched.

        Args
        -----
            word (str): Word to remove.

        Raises
        ------
            WordNotFoundError: If ``word`` is not stored as a complete entry.
        """
        _check_word(word)
        if not self._delete(word):
            if self.config.verbose:
                print(f"Delete failed, {word!r} not stored")
            raise WordNotFoundError(word)
        self._count -= 1
        if self.config.verbose:
            print(f"Deleted {word!r}: count={self._count}")

    def discard(self, word: str) -> bool:
        """Delete ``word`` if stored; return whether anything was removed."""
        try:
            self.delete(word)
        except WordNotFoundError:
            return False
        return True

    def node_count(self) -> int:
        """Number of nodes in the tree, root included."""
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children.values())
        return total

    def _find(self, word: str) -> TrieNode | None:
        current = self.root
        for ch in word:
            current = current.children.get(ch)
            if current is None:
                return None
        return current

    def _delete(self, word: str) -> bool:
        """Post-order removal of ``word`` over an explicit stack of ``(parent, ch)`` frames.

        The descent only reads. Once the end node is unmarked, the frames are
        unwound and each child is dropped while it is childless and not the
        end of another word.

        Returns
        -------
            bool: Whether ``word`` was stored. Nothing is mutated otherwise.
        """
        frames: list[tuple[TrieNode, str]] = []
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            frames.append((node, ch))
            node = child
        if not node.is_end:
            return False

        node.is_end = False
        prune = not node.children
        for depth in range(len(frames) - 1, -1, -1):
            if not prune:
                break
            parent, ch = frames[depth]
            del parent.children[ch]
            if self.config.verbose:
                print(f"Pruned {word[:depth + 1]!r}")
            prune = not parent.children and not parent.is_end
        return True

    def _walk(self, node: TrieNode, prefix: str) -> Iterator[str]:
        path = list(prefix)
        # (node, path length before its symbol, its symbol)
        stack: list[tuple[TrieNode, int, str]] = [(node, len(path), "")]
        while stack:
            current, keep, ch = stack.pop()
            del path[keep:]
            if ch:
                path.append(ch)
            if current.is_end:
                yield "".join(path)
            length = len(path)
            for next_ch, child in current.children.items():
                stack.append((child, length, next_ch))
