"""Protocols (extension points) for gep-core.

Protocols define structural interfaces that collaborators implement.
They use ``typing.Protocol`` (not ABCs) so callers never need to
inherit from gep-core classes.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np

    from gep.core.functions.registry import Function
    from gep.core.program.genome import Genome

ScoringFunc = Callable[["Genome"], float]
"""Maps a genome to its fitness.

By convention ``0`` means nowhere near a solution and ``1000`` (or more)
means a perfect solution; the scale is up to the caller.
"""


@runtime_checkable
class GeneLike(Protocol):
    """Capability set a genome needs from each of its genes.

    Example::

        class MyGene:
            symbol_map = None

            def eval_bool(self, inputs, func_map):
                return inputs[0]

            def eval_math(self, inputs, func_map=None):
                return inputs[0]

            def symbol_count(self, sym):
                return 0

            def mutate(self, rng=None):
                pass

            def dup(self):
                return MyGene()
    """

    symbol_map: dict[str, int] | None

    def eval_bool(
        self,
        inputs: Sequence[bool],
        func_map: Mapping[str, Function],
    ) -> bool: ...

    def eval_math(
        self,
        inputs: Sequence[float],
        func_map: Mapping[str, Function] | None = None,
    ) -> float: ...

    def symbol_count(self, sym: str) -> int: ...

    def mutate(self, rng: np.random.Generator | None = None) -> None: ...

    def dup(self) -> GeneLike: ...


@runtime_checkable
class ResultSink(Protocol):
    """Single-writer conduit receiving scored genomes.

    ``queue.Queue`` satisfies this protocol; a bounded queue makes the
    producer block until a reader makes room.
    """

    def put(self, item: Any) -> None: ...
