"""Genome: an ordered set of genes folded together by one link function."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

import numpy as np

from gep.core.errors import ConfigurationError, LinkFunctionNotFoundError
from gep.core.functions.math_nodes import MATH
from gep.core.functions.registry import Function
from gep.core.protocols import GeneLike, ResultSink, ScoringFunc

logger = logging.getLogger(__name__)

PERFECT_SCORE = 1000.0
LINK_SEPARATOR = "|"


@dataclass(eq=False)
class Genome:
    """The genes of one individual plus the function linking them.

    Attributes:
        genes: Genes in fold order.  Never empty.
        link_func: Symbol of the linking function.  Resolved at evaluation
            time, not here.
        score: Fitness written by :meth:`evaluate`; ``0.0`` until scored.
        symbol_map: Do not use directly, use :meth:`symbol_count`.
    """

    genes: list[GeneLike]
    link_func: str
    score: float = 0.0
    symbol_map: dict[str, int] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.genes:
            raise ConfigurationError("genome requires at least one gene")
        self.genes = list(self.genes)

    def symbol_count(self, sym: str) -> int:
        """Number of times ``sym`` is actually used when evaluating the genome.

        This usually differs from the number of times the symbol appears in
        the Karva text, which makes it a handy auxiliary fitness metric.  The
        link function fires once per gene boundary.

        The counts are computed on the first call and then reused for the
        lifetime of the genome, even if its genes are mutated afterwards.
        Only numeric expressions are supported.
        """
        if self.symbol_map is None:
            counts = {self.link_func: len(self.genes) - 1}
            for gene in self.genes:
                gene.symbol_count(sym)  # force the gene's own accounting
                for symbol, n in (gene.symbol_map or {}).items():
                    counts[symbol] = counts.get(symbol, 0) + n
            self.symbol_map = counts
        return self.symbol_map.get(sym, 0)

    def link_function(self, func_map: Mapping[str, Function]) -> Function:
        """Resolve the link function in ``func_map``.

        Raises:
            LinkFunctionNotFoundError: If ``link_func`` is not registered.
        """
        function = func_map.get(self.link_func)
        if function is None:
            raise LinkFunctionNotFoundError(self.link_func)
        return function

    def eval_bool(
        self,
        inputs: Sequence[bool],
        func_map: Mapping[str, Function],
    ) -> bool:
        """Evaluate the genome as a boolean expression.

        Args:
            inputs: Boolean inputs available to the genes.
            func_map: Boolean functions available to the genes and the link.

        Returns:
            The folded result, or ``False`` when the link function cannot be
            found (a warning is logged).
        """
        try:
            link = self.link_function(func_map).bool_function
            if link is None:
                raise LinkFunctionNotFoundError(self.link_func)
        except LinkFunctionNotFoundError as exc:
            logger.warning("%s", exc)
            return False

        result = self.genes[0].eval_bool(inputs, func_map)
        for gene in self.genes[1:]:
            result = link(result, gene.eval_bool(inputs, func_map), False, False)
        return result

    def eval_math(
        self,
        inputs: Sequence[float],
        func_map: Mapping[str, Function] | None = None,
    ) -> float:
        """Evaluate the genome as a floating-point expression.

        Args:
            inputs: Numeric inputs available to the genes.
            func_map: Numeric functions; defaults to the built-in registry.

        Returns:
            The folded result, or ``0.0`` when the link function cannot be
            found (a warning is logged).
        """
        func_map = MATH if func_map is None else func_map
        try:
            link = self.link_function(func_map).float64_function
            if link is None:
                raise LinkFunctionNotFoundError(self.link_func)
        except LinkFunctionNotFoundError as exc:
            logger.warning("%s", exc)
            return 0.0

        result = self.genes[0].eval_math(inputs, func_map)
        for gene in self.genes[1:]:
            result = link(result, gene.eval_math(inputs, func_map), 0.0, 0.0)
        return result

    def mutate(self, num_mutations: int, rng: np.random.Generator | None = None) -> None:
        """Perform ``num_mutations`` random symbol exchanges.

        Each round picks a gene uniformly at random, with replacement, and
        lets it mutate itself.  Zero or negative counts do nothing.
        """
        rng = rng if rng is not None else np.random.default_rng()
        for _ in range(num_mutations):
            n = int(rng.integers(len(self.genes)))
            logger.debug("Mutating gene #%d: %s", n, self.genes[n])
            self.genes[n].mutate(rng)

    def dup(self) -> Genome:
        """Deep copy with the same link function and score.

        Every gene is duplicated; the symbol cache starts empty.
        """
        return Genome(
            genes=[gene.dup() for gene in self.genes],
            link_func=self.link_func,
            score=self.score,
        )

    def evaluate(self, scoring_func: ScoringFunc | None, sink: ResultSink) -> None:
        """Score the genome and hand it to ``sink``.

        The score is computed synchronously; the only blocking point is
        ``sink.put``, which waits for room on a bounded sink.

        A missing ``scoring_func`` is a programming error: it is logged at
        CRITICAL and the process exits with status 1 from whichever thread
        made the call.  Nothing is sent.
        """
        if scoring_func is None:
            logger.critical("genome.evaluate: scoring function must not be None")
            os._exit(1)
        self.score = float(scoring_func(self))
        sink.put(self)

    def __str__(self) -> str:
        """Karva representation: genes joined by ``|link|``."""
        separator = f"{LINK_SEPARATOR}{self.link_func}{LINK_SEPARATOR}"
        return separator.join(str(gene) for gene in self.genes)


def dup(genome: Genome | None) -> Genome | None:
    """Duplicate ``genome``; an absent genome logs an error and yields ``None``."""
    if genome is None:
        logger.error("genome.dup error: source genome must not be None")
        return None
    return genome.dup()
