"""Configuration models for gep-core (Pydantic v2).

Provides frozen Pydantic models that validate all parameters at construction
time (fail-fast).  Invalid values raise
:class:`~gep.core.errors.ConfigurationError`.
"""

from __future__ import annotations

from typing import Literal, Self

from pydantic import BaseModel, model_validator

from gep.core.errors import ConfigurationError


class GeneConfig(BaseModel, frozen=True):
    """Shape and alphabet of a Karva gene, used by point mutation.

    Attributes:
        head_size: Number of head positions; the head may hold functions
            or terminals.
        num_terminals: Number of input terminals (``d0`` .. ``d{n-1}``).
        functions: Function symbols a head position may mutate into.
    """

    head_size: int = 7
    num_terminals: int = 2
    functions: tuple[str, ...] = ("+", "-", "*", "/")

    @model_validator(mode="after")
    def _validate_gene_config(self) -> Self:
        if self.head_size < 1:
            raise ConfigurationError("head_size must be >= 1")
        if self.num_terminals < 1:
            raise ConfigurationError("num_terminals must be >= 1")
        if not self.functions:
            raise ConfigurationError("functions must not be empty")
        if any(not symbol for symbol in self.functions):
            raise ConfigurationError("function symbols must be non-empty")
        return self

    @property
    def terminals(self) -> tuple[str, ...]:
        """Terminal symbols available to this gene."""
        return tuple(f"d{i}" for i in range(self.num_terminals))

    def tail_size(self, max_arity: int) -> int:
        """Tail length guaranteeing a complete tree: ``h * (n - 1) + 1``."""
        if max_arity < 1:
            raise ConfigurationError("max_arity must be >= 1")
        return self.head_size * (max_arity - 1) + 1

    def gene_length(self, max_arity: int) -> int:
        """Total number of Karva symbols in a gene."""
        return self.head_size + self.tail_size(max_arity)


class ParallelConfig(BaseModel, frozen=True):
    """Configuration for batch scoring.

    Attributes:
        backend: ``"sequential"`` scores in the calling thread, ``"threads"``
            runs one scoring call per genome on a thread pool.
        max_workers: Maximum number of worker threads.
    """

    backend: Literal["sequential", "threads"] = "sequential"
    max_workers: int = 1

    @model_validator(mode="after")
    def _validate_parallel(self) -> Self:
        if self.max_workers < 1:
            raise ConfigurationError("max_workers must be >= 1")
        return self
