"""Genome serialization to and from Karva text.

A genome renders as its genes joined by ``|<link>|``, for example
``"+.d0.d1|*|-.d1.d0"``.  Every separator in one string names the same
link function.
"""

from __future__ import annotations

from gep.core.config import GeneConfig
from gep.core.errors import SerializationError
from gep.core.program.gene import Gene
from gep.core.program.genome import LINK_SEPARATOR, Genome


def serialize_genome(genome: Genome) -> str:
    """Serialize a Genome to Karva text."""
    return str(genome)


def deserialize_genome(
    text: str,
    config: GeneConfig | None = None,
    *,
    default_link: str = "",
) -> Genome:
    """Deserialize a Genome from Karva text.

    A single gene carries no separator, so its link function comes from
    ``default_link``.  The link is still resolved at evaluation time, even
    though it never fires.

    Args:
        text: Karva text such as ``"+.d0.d1|*|d1"``.
        config: Mutation config attached to every parsed gene.
        default_link: Link function for single-gene text.

    Raises:
        SerializationError: On empty text, dangling separators, empty genes
            or disagreeing link functions.
    """
    tokens = text.strip().split(LINK_SEPARATOR)
    if len(tokens) % 2 == 0:
        raise SerializationError(f"dangling link separator in {text!r}")

    gene_tokens = tokens[0::2]
    link_tokens = set(tokens[1::2])
    if len(link_tokens) > 1:
        raise SerializationError(
            f"genome has more than one link function: {sorted(link_tokens)}"
        )
    link_func = link_tokens.pop() if link_tokens else default_link
    if len(gene_tokens) > 1 and not link_func:
        raise SerializationError(f"empty link function in {text!r}")

    genes = [Gene.from_karva(token, config) for token in gene_tokens]
    return Genome(genes=genes, link_func=link_func)
