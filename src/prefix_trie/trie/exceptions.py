"""Errors raised by trie operations."""


class WordNotFoundError(LookupError):
    """Raised by ``Trie.delete`` when the word is not stored as a complete entry."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"Word {word!r} not found in trie")
