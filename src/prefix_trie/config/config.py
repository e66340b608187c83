"""Configuration module for the prefix trie."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, ClassVar

import yaml

DEFAULT_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True)
class TrieConfig:
    """Counting behaviour of the trie.

    Attributes
    ----------
        count_duplicates: bool
            When True every ``add`` increments the word count, even if the word
            is already stored. When False the count only grows when a word
            becomes newly present.
    """

    count_duplicates: bool = True


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters for the random word workload.

    Attributes
    ----------
        num_words: int
            Number of words to generate and add.
        alphabet: str
            Symbols words are drawn from.
        min_length: int
            Shortest word length (0 allows the empty word).
        max_length: int
            Longest word length.
        distribution: str
            Symbol distribution, one of 'uniform' or 'zipf'.
        delete_fraction: float
            Share of the added words deleted afterwards.

    Raises
    ------
        ValueError: If any value is out of range.
    """

    num_words: int = 1000
    alphabet: str = DEFAULT_ALPHABET
    min_length: int = 1
    max_length: int = 8
    distribution: str = "uniform"
    delete_fraction: float = 0.5

    DISTRIBUTIONS: ClassVar[tuple[str, ...]] = ("uniform", "zipf")

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.num_words <= 0:
            msg = f"num_words must be > 0, got {self.num_words}"
            raise ValueError(msg)
        if not self.alphabet:
            msg = "alphabet must not be empty"
            raise ValueError(msg)
        if len(set(self.alphabet)) != len(self.alphabet):
            msg = f"alphabet symbols must be unique, got {self.alphabet!r}"
            raise ValueError(msg)
        if self.max_length < 1:
            msg = f"max_length must be >= 1, got {self.max_length}"
            raise ValueError(msg)
        if not (0 <= self.min_length <= self.max_length):
            msg = f"min_length must be in [0, {self.max_length}], got {self.min_length}"
            raise ValueError(msg)
        if self.distribution not in self.DISTRIBUTIONS:
            msg = f"distribution must be one of {self.DISTRIBUTIONS}, got {self.distribution!r}"
            raise ValueError(msg)
        if not (0.0 <= self.delete_fraction <= 1.0):
            msg = f"delete_fraction must be in [0,1], got {self.delete_fraction}"
            raise ValueError(msg)


@dataclass(frozen=True)
class Config:
    """
    Top-level configuration.

    Groups
    ----------
        trie: TrieConfig
            Counting behaviour of the trie.
        simulation: SimulationConfig
            Parameters for the simulation script.
        verbose: bool
            Flag to enable verbose output.

    Raises
    ------
        ValueError: If any of the sub-configs contain invalid values.
    """

    trie: TrieConfig = field(default_factory=TrieConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    verbose: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Recursively convert to plain dict (for logging, serialization)."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Dump entire config as a YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build Config by unpacking each sub-dict into its sub-config."""
        return cls(
            trie=TrieConfig(**data.get("trie", {})),
            simulation=SimulationConfig(**data.get("simulation", {})),
            verbose=data.get("verbose", False),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a YAML file and return a Config."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})
