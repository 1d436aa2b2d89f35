#!/usr/bin/env python3
"""Score mutated copies of a genome with gep-core.

This example demonstrates the full workflow:
  1. Parse a two-gene genome from Karva text
  2. Breed mutated duplicates of it
  3. Score the batch on worker threads against a target function
  4. Inspect the best genome and its symbol usage

Run:
    python examples/score_genomes.py
"""

from __future__ import annotations

import logging

import numpy as np

from gep.core import (
    PERFECT_SCORE,
    GeneConfig,
    Genome,
    ParallelScorer,
    best,
    deserialize_genome,
)

# ---------------------------------------------------------------------------
# 1. Target and scoring function
# ---------------------------------------------------------------------------

SAMPLES = [(float(x), float(y)) for x in range(-3, 4) for y in range(-3, 4)]


def target(x: float, y: float) -> float:
    """The function the genomes try to reproduce: ``x*x - y``."""
    return x * x - y


def score(genome: Genome) -> float:
    """``PERFECT_SCORE`` for an exact match, falling with mean absolute error."""
    errors = [abs(genome.eval_math([x, y]) - target(x, y)) for x, y in SAMPLES]
    mae = float(np.mean(errors))
    if not np.isfinite(mae):
        return 0.0
    return PERFECT_SCORE / (1.0 + mae)


# ---------------------------------------------------------------------------
# 2. Breed and score
# ---------------------------------------------------------------------------


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = GeneConfig(head_size=3, num_terminals=2, functions=("+", "-", "*"))
    parent = deserialize_genome("+.d0.d0.d1.d0.d1.d1|-|d1.d0.d1.d0.d1.d0.d1", config)

    rng = np.random.default_rng(42)
    children = [parent.dup() for _ in range(32)]
    for child in children:
        child.mutate(2, rng)

    scorer = ParallelScorer(backend="threads", max_workers=4)
    scored = scorer.score_batch([parent, *children], score)

    winner = best(scored)
    print(f"best genome : {winner}")
    print(f"score       : {winner.score:.2f}")
    print(f"uses '*'    : {winner.symbol_count('*')} time(s)")


if __name__ == "__main__":
    main()
