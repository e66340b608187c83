from .config import (
    DEFAULT_ALPHABET,
    Config,
    SimulationConfig,
    TrieConfig,
)

__all__ = [
    "DEFAULT_ALPHABET",
    "Config",
    "SimulationConfig",
    "TrieConfig",
]
