"""Prefix Trie Simulation and Verification
This script adds a word workload (simulated, or read from a word list) to a
trie, deletes a fraction of it again, and checks the count and pruning
invariants.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from numpy.random import default_rng

from prefix_trie.config import Config
from prefix_trie.trie import Trie
from prefix_trie.utils import count_end_nodes, find_dead_leaves, generate_simulated_words, load_words


def run_simulation(config: Config, seed: int | None = None, words: list[str] | None = None) -> dict[str, int]:
    """
    Add and delete a workload, returning summary figures.

    Args
    -----
        config (Config): Trie and simulation settings.
        seed (int, optional): Seed for reproducible workloads.
        words (list[str], optional): Words to use instead of simulated ones.

    Returns
    -------
        dict[str, int]: Counts describing the final trie and how many checks failed.
    """
    sim = config.simulation
    rng = default_rng(seed)
    if words is None:
        words = generate_simulated_words(
            sim.num_words, sim.alphabet, sim.min_length, sim.max_length, sim.distribution, rng=rng
        )

    trie = Trie(config)
    for word in words:
        trie.add(word)

    num_to_delete = int(len(words) * sim.delete_fraction)
    to_delete = [words[i] for i in rng.permutation(len(words))[:num_to_delete]]
    deleted = 0
    for word in to_delete:
        if trie.discard(word):
            deleted += 1

    added = len(words) if config.trie.count_duplicates else len(set(words))
    failures = 0
    if trie.count() != added - deleted:
        failures += 1
    if not config.trie.count_duplicates and trie.count() != count_end_nodes(trie):
        failures += 1
    dead = find_dead_leaves(trie)
    if dead:
        failures += 1
    if any(trie.search(w) for w in set(to_delete)):
        failures += 1

    return {
        "added": len(words),
        "distinct": len(set(words)),
        "delete_attempts": len(to_delete),
        "deleted": deleted,
        "count": trie.count(),
        "stored_words": count_end_nodes(trie),
        "nodes": trie.node_count(),
        "dead_leaves": len(dead),
        "failures": failures,
    }


@click.command()
@click.argument("config_path", default="config.yaml", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--seed", type=click.INT, help="Seed for a reproducible workload")
@click.option(
    "--words",
    "words_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Word list (one word per line) to use instead of simulated words",
)
def main(config_path, seed, words_path):
    """Run the trie simulation described by CONFIG_PATH (default: config.yaml)."""
    if config_path.exists():
        sim_config = Config.from_yaml(config_path)
    else:
        click.echo(f"No config at {config_path}, using defaults.")
        sim_config = Config()

    words = load_words(words_path) if words_path else None

    click.echo("Running trie simulation...")
    summary = run_simulation(sim_config, seed=seed, words=words)

    click.echo("\n--- Results ---")
    for key, value in summary.items():
        click.echo(f"{key}: {value}")

    if summary["failures"]:
        click.echo(f"{summary['failures']} invariant check(s) failed.")
        sys.exit(1)
    click.echo("All invariant checks passed.")


# --- Main Simulation Example ---
if __name__ == "__main__":
    main()
