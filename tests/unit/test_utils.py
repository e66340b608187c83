"""Unit tests for simulation and verification utilities."""

import numpy as np
from click.testing import CliRunner
import pytest

from prefix_trie.config import Config, TrieConfig
from prefix_trie.main import main, run_simulation
from prefix_trie.trie import Trie
from prefix_trie.utils import (
    count_end_nodes,
    find_dead_leaves,
    generate_simulated_words,
    load_words,
)


@pytest.fixture
def rng() -> np.random.Generator:
    """Provides a seeded generator for reproducible workloads."""
    return np.random.default_rng(1234)


@pytest.mark.parametrize("distribution", ["uniform", "zipf"])
def test_generate_simulated_words_shape(rng, distribution: str) -> None:
    """Generated words respect the alphabet and the length range."""
    words = generate_simulated_words(200, "abc", 2, 5, distribution, rng=rng)
    assert len(words) == 200
    assert all(isinstance(w, str) for w in words)
    assert all(2 <= len(w) <= 5 for w in words)
    assert set("".join(words)) <= set("abc")


def test_generate_simulated_words_empty_allowed(rng) -> None:
    """A zero minimum length can produce the empty word."""
    words = generate_simulated_words(100, "ab", 0, 0, rng=rng)
    assert words == [""] * 100


def test_generate_simulated_words_zipf_skew(rng) -> None:
    """Zipf weighting favours the first symbols of the alphabet."""
    words = generate_simulated_words(2000, "abcdefghij", 1, 1, "zipf", rng=rng)
    assert words.count("a") > words.count("j")


@pytest.mark.parametrize("args", [
    ("ab", 1, 3, "gaussian"),   # unknown distribution
    ("", 1, 3, "uniform"),      # empty alphabet
    ("ab", 4, 2, "uniform"),    # inverted range
])
def test_generate_simulated_words_invalid(args) -> None:
    """Invalid parameters raise ValueError."""
    with pytest.raises(ValueError):
        generate_simulated_words(10, *args)


def test_load_words(tmp_path) -> None:
    """Blank lines are skipped and only line endings stripped."""
    path = tmp_path / "words.txt"
    path.write_text("hello\n\nhey there\r\nhi\n", encoding="utf-8")
    assert load_words(path) == ["hello", "hey there", "hi"]


def test_count_end_nodes_and_dead_leaves() -> None:
    """Verification helpers report stored words and unpruned leaves."""
    t = Trie(words=["to", "tea", "ten"])
    assert count_end_nodes(t) == 3
    assert find_dead_leaves(t) == []
    # Simulate a broken prune by unmarking a leaf directly
    t.root.children["t"].children["o"].is_end = False
    assert find_dead_leaves(t) == ["to"]


@pytest.mark.parametrize("count_duplicates", [True, False])
def test_random_workload_keeps_invariants(rng, count_duplicates: bool) -> None:
    """Random adds and deletes never leave dead leaves and keep counts consistent."""
    t = Trie(Config(trie=TrieConfig(count_duplicates=count_duplicates)))
    words = generate_simulated_words(500, "abcd", 0, 6, "zipf", rng=rng)
    for word in words:
        t.add(word)
    added = len(words) if count_duplicates else len(set(words))

    deleted = 0
    for i in rng.permutation(len(words))[:300]:
        deleted += t.discard(words[i])
        assert find_dead_leaves(t) == []

    assert t.count() == added - deleted
    assert set(t) == {w for w in words if t.search(w)}
    if not count_duplicates:
        assert t.count() == count_end_nodes(t)


@pytest.mark.parametrize("count_duplicates", [True, False])
def test_run_simulation(count_duplicates: bool) -> None:
    """The simulation reports no failed checks."""
    config = Config.from_dict({
        "trie": {"count_duplicates": count_duplicates},
        "simulation": {"num_words": 300, "alphabet": "abc", "max_length": 4},
    })
    summary = run_simulation(config, seed=7)
    assert summary["failures"] == 0
    assert summary["dead_leaves"] == 0
    assert summary["added"] == 300
    assert summary["delete_attempts"] == 150


def test_run_simulation_with_given_words() -> None:
    """A supplied word list replaces the simulated workload."""
    words = ["hello", "hey", "hi", "hello", ""]
    summary = run_simulation(Config(), seed=3, words=words)
    assert summary["added"] == 5
    assert summary["distinct"] == 4
    assert summary["failures"] == 0


def test_run_simulation_seed_is_reproducible() -> None:
    """The same seed yields the same summary."""
    config = Config.from_dict({"simulation": {"num_words": 200, "alphabet": "ab"}})
    assert run_simulation(config, seed=11) == run_simulation(config, seed=11)


def test_main_with_config_file(tmp_path) -> None:
    """main loads the given config and exits cleanly."""
    path = tmp_path / "config.yaml"
    path.write_text("simulation:\n  num_words: 50\n  alphabet: xyz\n")
    result = CliRunner().invoke(main, [str(path), "--seed", "5"])
    assert result.exit_code == 0
    assert "All invariant checks passed." in result.output
    assert "added: 50" in result.output


def test_main_without_config_file(tmp_path) -> None:
    """main falls back to defaults when the config file is missing."""
    result = CliRunner().invoke(main, [str(tmp_path / "missing.yaml")])
    assert result.exit_code == 0
    assert "using defaults" in result.output


def test_main_help_does_not_run() -> None:
    """--help prints usage instead of running the simulation."""
    result = CliRunner().invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "--seed" in result.output
    assert "--words" in result.output
    assert "Running trie simulation" not in result.output


def test_main_with_word_list(tmp_path) -> None:
    """--words runs the workload from a word list file."""
    words = tmp_path / "words.txt"
    words.write_text("car\ncart\ncat\n\ndog\n", encoding="utf-8")
    result = CliRunner().invoke(main, [str(tmp_path / "missing.yaml"), "--words", str(words)])
    assert result.exit_code == 0
    assert "added: 4" in result.output
    assert "All invariant checks passed." in result.output


def test_main_rejects_bad_seed() -> None:
    """A non-integer seed is a usage error."""
    result = CliRunner().invoke(main, ["--seed", "abc"])
    assert result.exit_code == 2
