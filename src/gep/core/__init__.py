"""
gep-core: the genome layer of a Gene Expression Programming system.

A genome is an ordered set of Karva-encoded genes folded together by a single
link function into one boolean or numeric program.  This package evaluates,
mutates, duplicates and scores genomes; population management and the search
loop belong to the caller.
"""

from gep.core.adapters.parallel_eval import ParallelScorer, best
from gep.core.config import GeneConfig, ParallelConfig
from gep.core.errors import (
    AdapterError,
    ConfigurationError,
    EvaluationError,
    GepError,
    LinkFunctionNotFoundError,
    ParallelExecutionError,
    RegistryError,
    SerializationError,
)
from gep.core.functions import (
    BOOL,
    MATH,
    Function,
    FunctionRegistry,
    build_bool_registry,
    build_math_registry,
)
from gep.core.program import (
    PERFECT_SCORE,
    Gene,
    Genome,
    deserialize_genome,
    dup,
    serialize_genome,
)
from gep.core.protocols import GeneLike, ResultSink, ScoringFunc

__all__ = [
    # Configuration
    "GeneConfig",
    "ParallelConfig",
    # Protocols
    "GeneLike",
    "ResultSink",
    "ScoringFunc",
    # Functions
    "BOOL",
    "MATH",
    "Function",
    "FunctionRegistry",
    "build_bool_registry",
    "build_math_registry",
    # Program
    "PERFECT_SCORE",
    "Gene",
    "Genome",
    "dup",
    "serialize_genome",
    "deserialize_genome",
    # Scoring
    "ParallelScorer",
    "best",
    # Errors
    "GepError",
    "EvaluationError",
    "LinkFunctionNotFoundError",
    "SerializationError",
    "ConfigurationError",
    "RegistryError",
    "AdapterError",
    "ParallelExecutionError",
]

__version__ = "0.1.0"
