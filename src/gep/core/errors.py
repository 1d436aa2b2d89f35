"""Exception hierarchy for gep-core.

All exceptions inherit from :class:`GepError`.  Consumers can catch
``GepError`` for a blanket handler or individual subclasses for
fine-grained control.

The one unrecoverable failure, scoring a genome without a scoring function,
is deliberately *not* part of this hierarchy: it terminates the process
with exit status 1 (see :meth:`gep.core.program.genome.Genome.evaluate`).
"""

from __future__ import annotations


class GepError(Exception):
    """Base exception for all gep-core errors.

    All gep-core exceptions subclass this, so ``except GepError``
        acts as a catch-all for library errors.
    """


class EvaluationError(GepError):
    """Raised when a gene or genome cannot be evaluated.

    Trigger conditions:

    - A Karva expression is truncated (a function is missing operands).
    - The link function of a genome cannot be resolved (see
      :class:`LinkFunctionNotFoundError`).
    """


class LinkFunctionNotFoundError(EvaluationError):
    """Raised when a genome's link function is absent from a registry.

    The public evaluation entry points never let this escape; they collapse
    it into a degraded default (``False`` / ``0.0``) plus a log record.
    """

    def __init__(self, link_func: str = "") -> None:
        super().__init__(f"Unable to find linking function: {link_func}")
        self.link_func = link_func


class SerializationError(GepError):
    """Raised when Karva text cannot be parsed into genes or genomes.

    Trigger conditions:

    - Empty text, or an empty gene between separators.
    - A genome string whose link-function tokens disagree.
    - A genome string with a dangling separator.
    """


class ConfigurationError(GepError):
    """Raised when gep-core configuration is invalid.

    Trigger conditions:

    - ``head_size < 1``, ``num_terminals < 1`` or an empty function set
    - ``max_workers < 1``
    - A genome constructed without genes
    - Mutating a gene that carries no :class:`~gep.core.config.GeneConfig`
    - A gene whose length differs from its config, or a config naming an
      unknown function

    Raised at construction time (fail-fast) where possible.
    """


class RegistryError(GepError):
    """Raised when function registration or lookup fails.

    Trigger conditions:

    - Registering a symbol twice in the same registry.
    - A function with an arity outside ``1..4``.
    - A function that provides neither a boolean nor a numeric callable.
    """


class AdapterError(GepError):
    """Raised on batch scoring adapter misuse.

    Trigger conditions:

    - Unknown backend name or ``max_workers < 1``.
    - Scoring a batch without a scoring function.
    """


class ParallelExecutionError(AdapterError):
    """Raised when a scoring function fails inside a batch."""
