"""Karva-encoded gene: one expression tree of a genome.

A gene is a flat list of symbols read breadth-first: symbol 0 is the root and
every function consumes the next ``arity`` unread symbols as its operands.
Symbols past the end of the expression (the unused part of the tail) are
carried along and only matter once a mutation brings them into play.

Terminals are written ``d0``, ``d1``, ... and read the matching input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

import numpy as np

from gep.core.config import GeneConfig
from gep.core.errors import ConfigurationError, EvaluationError, SerializationError
from gep.core.functions.bool_nodes import BOOL
from gep.core.functions.math_nodes import MATH
from gep.core.functions.registry import MAX_ARITY, Function

logger = logging.getLogger(__name__)

KARVA_SEPARATOR = "."

_TERMINAL_RE = re.compile(r"^d(\d+)$")

T = TypeVar("T", bool, float)


def terminal_index(symbol: str) -> int | None:
    """Input index of a terminal symbol, or ``None`` for non-terminals."""
    match = _TERMINAL_RE.match(symbol)
    return int(match.group(1)) if match else None


def config_max_arity(config: GeneConfig) -> int:
    """Largest arity among the configured functions.

    Symbols are looked up in the numeric registry first, then the boolean one.

    Raises:
        ConfigurationError: If a configured function is in neither registry.
    """
    arities = []
    for symbol in config.functions:
        function = MATH.get(symbol) or BOOL.get(symbol)
        if function is None:
            raise ConfigurationError(f"unknown function in gene config: {symbol}")
        arities.append(function.arity)
    return max(arities)


@dataclass
class Gene:
    """A single Karva expression tree.

    Attributes:
        symbols: Karva symbols, root first.
        config: Head size and alphabet used by :meth:`mutate`.  When set, the
            gene must hold exactly ``config.gene_length`` symbols.  Genes
            parsed from text have none until one is supplied.
        symbol_map: Memoized per-symbol usage counts; ``None`` until
            :meth:`symbol_count` runs.
    """

    symbols: list[str]
    config: GeneConfig | None = None
    symbol_map: dict[str, int] | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.symbols:
            raise SerializationError("gene must contain at least one symbol")
        if self.config is not None:
            expected = self.config.gene_length(config_max_arity(self.config))
            if len(self.symbols) != expected:
                raise ConfigurationError(
                    f"gene {self} has {len(self.symbols)} symbols, "
                    f"config requires {expected}"
                )

    @classmethod
    def from_karva(cls, text: str, config: GeneConfig | None = None) -> Gene:
        """Parse ``"+.d0.d1"`` style text into a gene.

        Raises:
            SerializationError: If the text is empty or holds an empty symbol.
            ConfigurationError: If ``config`` is given and the symbol count
                differs from its gene length.
        """
        text = text.strip()
        if not text:
            raise SerializationError("empty Karva expression")
        symbols = text.split(KARVA_SEPARATOR)
        if any(not symbol for symbol in symbols):
            raise SerializationError(f"empty symbol in Karva expression: {text!r}")
        return cls(symbols=symbols, config=config)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def _arities(self, func_map: Mapping[str, Function]) -> list[int]:
        """Arity of each symbol in the expression, in Karva order.

        Only the symbols that take part in the expression are returned.
        Unknown non-terminal symbols count as leaves.
        """
        arities: list[int] = []
        needed = 1
        while len(arities) < needed:
            position = len(arities)
            if position >= len(self.symbols):
                raise EvaluationError(
                    f"truncated Karva expression {self}: needs {needed} symbols, "
                    f"has {len(self.symbols)}"
                )
            symbol = self.symbols[position]
            function = None if terminal_index(symbol) is not None else func_map.get(symbol)
            arity = function.arity if function is not None else 0
            arities.append(arity)
            needed += arity
        return arities

    @staticmethod
    def _child_offsets(arities: list[int]) -> list[int]:
        """Position of the first operand of each node."""
        offsets = []
        next_free = 1
        for arity in arities:
            offsets.append(next_free)
            next_free += arity
        return offsets

    def _evaluate(
        self,
        inputs: Sequence[T],
        func_map: Mapping[str, Function],
        *,
        default: T,
        pick: str,
    ) -> T:
        arities = self._arities(func_map)
        offsets = self._child_offsets(arities)
        cast = type(default)

        def node(position: int) -> T:
            symbol = self.symbols[position]
            index = terminal_index(symbol)
            if index is not None:
                if index >= len(inputs):
                    logger.warning(
                        "Terminal %s out of range for %d inputs", symbol, len(inputs)
                    )
                    return default
                return cast(inputs[index])

            function = func_map.get(symbol)
            impl = getattr(function, pick, None) if function is not None else None
            if impl is None:
                logger.warning("Unable to find function: %s", symbol)
                return default

            start = offsets[position]
            args = [node(start + i) for i in range(arities[position])]
            args.extend([default] * (MAX_ARITY - len(args)))
            return impl(*args)

        return node(0)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def eval_bool(
        self,
        inputs: Sequence[bool],
        func_map: Mapping[str, Function],
    ) -> bool:
        """Evaluate the gene as a boolean expression."""
        return self._evaluate(inputs, func_map, default=False, pick="bool_function")

    def eval_math(
        self,
        inputs: Sequence[float],
        func_map: Mapping[str, Function] | None = None,
    ) -> float:
        """Evaluate the gene as a numeric expression.

        ``func_map`` defaults to the built-in numeric registry.
        """
        func_map = MATH if func_map is None else func_map
        return self._evaluate(inputs, func_map, default=0.0, pick="float64_function")

    # ------------------------------------------------------------------
    # Symbol accounting
    # ------------------------------------------------------------------

    def symbol_count(self, sym: str) -> int:
        """Number of times ``sym`` is used when the gene is evaluated.

        Symbols in the unused part of the tail are not counted.  Arities are
        taken from the numeric registry, so the count is only meaningful for
        numeric expressions.  The map is computed once and reused until the
        gene is mutated.
        """
        if self.symbol_map is None:
            counts: dict[str, int] = {}
            for symbol in self.symbols[: len(self._arities(MATH))]:
                counts[symbol] = counts.get(symbol, 0) + 1
            self.symbol_map = counts
        return self.symbol_map.get(sym, 0)

    # ------------------------------------------------------------------
    # Variation
    # ------------------------------------------------------------------

    def mutate(self, rng: np.random.Generator | None = None) -> None:
        """Replace one randomly chosen symbol in place.

        A head position may become any configured function or terminal; a
        tail position only a terminal, which keeps the expression complete.

        Raises:
            ConfigurationError: If the gene has no :class:`GeneConfig`.
        """
        if self.config is None:
            raise ConfigurationError(f"gene {self} has no mutation config")
        rng = rng if rng is not None else np.random.default_rng()

        position = int(rng.integers(len(self.symbols)))
        terminals = self.config.terminals
        if position < self.config.head_size:
            choices = self.config.functions + terminals
        else:
            choices = terminals
        self.symbols[position] = choices[int(rng.integers(len(choices)))]
        self.symbol_map = None

    def dup(self) -> Gene:
        """Deep copy sharing no mutable state with this gene."""
        return Gene(
            symbols=list(self.symbols),
            config=self.config,
            symbol_map=dict(self.symbol_map) if self.symbol_map is not None else None,
        )

    def __str__(self) -> str:
        return KARVA_SEPARATOR.join(self.symbols)
