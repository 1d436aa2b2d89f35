"""Gene and genome representations for gep-core."""

from gep.core.program.gene import Gene
from gep.core.program.genome import PERFECT_SCORE, Genome, dup
from gep.core.program.karva import deserialize_genome, serialize_genome

__all__ = [
    "PERFECT_SCORE",
    "Gene",
    "Genome",
    "deserialize_genome",
    "dup",
    "serialize_genome",
]
