"""Shared test fixtures for gep-core."""

from __future__ import annotations

import numpy as np
import pytest

from gep.core.config import GeneConfig
from gep.core.program.gene import Gene
from gep.core.program.genome import Genome


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic generator for mutation tests."""
    return np.random.default_rng(42)


@pytest.fixture
def gene_config() -> GeneConfig:
    """Head of 3 over the arithmetic operators and two inputs."""
    return GeneConfig(head_size=3, num_terminals=2, functions=("+", "-", "*", "/"))


@pytest.fixture
def math_genome(gene_config: GeneConfig) -> Genome:
    """``(d0 + d1) * (d0 - d1)`` with unused tail symbols in both genes."""
    genes = [
        Gene.from_karva("+.d0.d1.d1.d0.d0.d1", gene_config),
        Gene.from_karva("-.d0.d1.d0.d0.d1.d1", gene_config),
    ]
    return Genome(genes=genes, link_func="*")
