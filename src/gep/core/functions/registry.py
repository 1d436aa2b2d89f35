"""Function records and the read-only symbol registry.

Every function shares one 4-ary calling convention, ``f(a, b, c, d)``.  A
function of arity ``n`` reads only its first ``n`` arguments; callers pad the
rest with ``False`` / ``0.0``.  Gene-internal nodes and genome-level linking
go through the same convention, so any registered symbol can serve as a
genome's link function.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass

from gep.core.errors import RegistryError

BoolFunction = Callable[[bool, bool, bool, bool], bool]
Float64Function = Callable[[float, float, float, float], float]

MAX_ARITY = 4


@dataclass(frozen=True)
class Function:
    """A named GEP function.

    Attributes:
        symbol: Karva symbol, e.g. ``"+"`` or ``"And"``.
        arity: Number of operands the function consumes (1-4).
        bool_function: Boolean implementation, if any.
        float64_function: Numeric implementation, if any.
    """

    symbol: str
    arity: int
    bool_function: BoolFunction | None = None
    float64_function: Float64Function | None = None

    def __post_init__(self) -> None:
        if not self.symbol:
            raise RegistryError("function symbol must be non-empty")
        if not 1 <= self.arity <= MAX_ARITY:
            raise RegistryError(
                f"{self.symbol!r}: arity must be in [1, {MAX_ARITY}], got {self.arity}"
            )
        if self.bool_function is None and self.float64_function is None:
            raise RegistryError(f"{self.symbol!r}: no implementation provided")


class FunctionRegistry(Mapping[str, Function]):
    """Symbol to :class:`Function` lookup table.

    Registries are populated once and then only read, so a single instance
    can be shared by any number of concurrent evaluations without locking.
    """

    def __init__(self, functions: list[Function] | None = None) -> None:
        self._functions: dict[str, Function] = {}
        for function in functions or []:
            self.register(function)

    def register(self, function: Function) -> None:
        """Add ``function`` under its symbol.

        Raises:
            RegistryError: If the symbol is already registered.
        """
        if function.symbol in self._functions:
            raise RegistryError(f"Symbol already registered: {function.symbol!r}")
        self._functions[function.symbol] = function

    def list_functions(self, arity: int | None = None) -> list[Function]:
        """Registered functions, optionally filtered by arity."""
        return [f for f in self._functions.values() if arity is None or f.arity == arity]

    @property
    def max_arity(self) -> int:
        """Largest arity among registered functions (0 when empty)."""
        return max((f.arity for f in self._functions.values()), default=0)

    def __getitem__(self, symbol: str) -> Function:
        return self._functions[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"FunctionRegistry({sorted(self._functions)!r})"
