"""Tests for package imports and public API surface."""

from __future__ import annotations

import pytest


class TestSubpackageImports:
    """Verify all subpackages are importable."""

    def test_root_package(self) -> None:
        import gep.core

        assert hasattr(gep.core, "__version__")

    def test_config_module(self) -> None:
        from gep.core import config

        assert hasattr(config, "GeneConfig")
        assert hasattr(config, "ParallelConfig")

    def test_errors_module(self) -> None:
        from gep.core import errors

        assert hasattr(errors, "GepError")

    def test_protocols_module(self) -> None:
        from gep.core import protocols

        assert hasattr(protocols, "GeneLike")
        assert hasattr(protocols, "ResultSink")
        assert hasattr(protocols, "ScoringFunc")

    def test_functions_package(self) -> None:
        from gep.core.functions import BOOL, MATH

        assert "And" in BOOL
        assert "+" in MATH

    def test_program_package(self) -> None:
        from gep.core.program import Gene, Genome

        assert callable(Gene.from_karva)
        assert callable(Genome)


class TestPublicAPI:
    @pytest.mark.parametrize(
        "name",
        [
            "Genome",
            "Gene",
            "GeneConfig",
            "ParallelConfig",
            "ParallelScorer",
            "FunctionRegistry",
            "BOOL",
            "MATH",
            "dup",
            "serialize_genome",
            "deserialize_genome",
            "GepError",
            "PERFECT_SCORE",
        ],
    )
    def test_exported(self, name: str) -> None:
        import gep.core

        assert name in gep.core.__all__
        assert hasattr(gep.core, name)
