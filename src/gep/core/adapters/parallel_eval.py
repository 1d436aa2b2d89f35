"""Batch scoring helpers.

Each genome is scored by :meth:`Genome.evaluate`, which hands the scored
genome to a shared sink.  The scorer drains the sink and returns genomes in
arrival order; with the thread backend that order is not the submission
order.
"""

from __future__ import annotations

import logging
import queue
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from gep.core.config import ParallelConfig
from gep.core.errors import AdapterError, ParallelExecutionError
from gep.core.program.genome import Genome
from gep.core.protocols import ScoringFunc

logger = logging.getLogger(__name__)


@dataclass
class ParallelScorer:
    """Score batches of genomes with a caller-supplied scoring function.

    Parameters
    ----------
    backend:
        ``"sequential"`` (default) or ``"threads"``.
    max_workers:
        Maximum number of worker threads for the thread backend.
    """

    backend: str = "sequential"
    max_workers: int = 1

    def __post_init__(self) -> None:
        if self.backend not in {"sequential", "threads"}:
            raise AdapterError("backend must be 'sequential' or 'threads'")
        if self.max_workers < 1:
            raise AdapterError("max_workers must be >= 1")

    @classmethod
    def from_config(cls, config: ParallelConfig) -> ParallelScorer:
        return cls(backend=config.backend, max_workers=config.max_workers)

    def score_batch(
        self,
        genomes: Sequence[Genome],
        scoring_func: ScoringFunc | None,
    ) -> list[Genome]:
        """Score every genome and collect them from the sink.

        Args:
            genomes: Genomes to score; each is scored in place.
            scoring_func: Fitness function applied to each genome.

        Returns:
            The scored genomes in the order they reached the sink.

        Raises:
            AdapterError: If no scoring function is given.
            ParallelExecutionError: If the scoring function raises.
        """
        if scoring_func is None:
            raise AdapterError("ParallelScorer requires a scoring function")
        if not genomes:
            return []

        sink: queue.Queue[Genome] = queue.Queue()
        try:
            if self.backend == "threads":
                self._score_threaded(genomes, scoring_func, sink)
            else:
                for genome in genomes:
                    genome.evaluate(scoring_func, sink)
        except AdapterError:
            raise
        except Exception as exc:
            raise ParallelExecutionError(f"Batch scoring failed: {exc}") from exc

        scored = [sink.get_nowait() for _ in range(sink.qsize())]
        logger.debug("Scored %d genomes with backend %s", len(scored), self.backend)
        return scored

    def _score_threaded(
        self,
        genomes: Sequence[Genome],
        scoring_func: ScoringFunc,
        sink: queue.Queue[Genome],
    ) -> None:
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [
                pool.submit(genome.evaluate, scoring_func, sink) for genome in genomes
            ]
        for future in futures:
            future.result()


def best(genomes: Sequence[Genome]) -> Genome:
    """Highest-scoring genome; ties keep the earliest.

    Raises:
        AdapterError: If ``genomes`` is empty.
    """
    if not genomes:
        raise AdapterError("best() requires at least one genome")
    return max(genomes, key=lambda genome: genome.score)
