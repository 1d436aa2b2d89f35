"""Tests for protocol contracts (runtime_checkable)."""

from __future__ import annotations

import queue
from typing import Any

from gep.core.program.gene import Gene
from gep.core.protocols import GeneLike, ResultSink


class TestGeneLikeProtocol:
    """Verify GeneLike is runtime-checkable."""

    def test_builtin_gene_accepted(self) -> None:
        assert isinstance(Gene.from_karva("+.d0.d1"), GeneLike)

    def test_conforming_class_accepted(self) -> None:
        class MyGene:
            symbol_map = None

            def eval_bool(self, inputs: Any, func_map: Any) -> bool:
                return True

            def eval_math(self, inputs: Any, func_map: Any = None) -> float:
                return 1.0

            def symbol_count(self, sym: str) -> int:
                return 0

            def mutate(self, rng: Any = None) -> None:
                pass

            def dup(self) -> MyGene:
                return MyGene()

        assert isinstance(MyGene(), GeneLike)

    def test_non_conforming_rejected(self) -> None:
        class NotAGene:
            def eval_bool(self, inputs: Any, func_map: Any) -> bool:
                return True

        assert not isinstance(NotAGene(), GeneLike)


class TestResultSinkProtocol:
    def test_queue_accepted(self) -> None:
        assert isinstance(queue.Queue(), ResultSink)

    def test_list_rejected(self) -> None:
        assert not isinstance([], ResultSink)
