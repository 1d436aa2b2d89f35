"""Adapters for scoring genomes in batches."""

from gep.core.adapters.parallel_eval import ParallelScorer, best  # noqa: F401
