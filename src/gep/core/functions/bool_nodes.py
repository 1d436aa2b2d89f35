"""Boolean function set (Not, And, Or, Xor, multiplexer, majority, ...)."""

from __future__ import annotations

from gep.core.functions.registry import Function, FunctionRegistry


def bool_not(a: bool, b: bool, c: bool, d: bool) -> bool:
    """Logical NOT of ``a``."""
    return not a


def bool_and(a: bool, b: bool, c: bool, d: bool) -> bool:
    """Logical AND of ``a`` and ``b``."""
    return a and b


def bool_or(a: bool, b: bool, c: bool, d: bool) -> bool:
    """Logical OR of ``a`` and ``b``."""
    return a or b


def bool_xor(a: bool, b: bool, c: bool, d: bool) -> bool:
    """Exclusive OR of ``a`` and ``b``."""
    return a != b


def bool_nand(a: bool, b: bool, c: bool, d: bool) -> bool:
    """NOT (``a`` AND ``b``)."""
    return not (a and b)


def bool_nor(a: bool, b: bool, c: bool, d: bool) -> bool:
    """NOT (``a`` OR ``b``)."""
    return not (a or b)


def bool_xnor(a: bool, b: bool, c: bool, d: bool) -> bool:
    """Equivalence of ``a`` and ``b``."""
    return a == b


def bool_if(a: bool, b: bool, c: bool, d: bool) -> bool:
    """Multiplexer: ``b`` when ``a`` else ``c``."""
    return b if a else c


def bool_maj3(a: bool, b: bool, c: bool, d: bool) -> bool:
    """True when at least two of ``a``, ``b``, ``c`` are true."""
    return (a and b) or (a and c) or (b and c)


def bool_and3(a: bool, b: bool, c: bool, d: bool) -> bool:
    return a and b and c


def bool_or3(a: bool, b: bool, c: bool, d: bool) -> bool:
    return a or b or c


def bool_and4(a: bool, b: bool, c: bool, d: bool) -> bool:
    return a and b and c and d


def bool_or4(a: bool, b: bool, c: bool, d: bool) -> bool:
    return a or b or c or d


def register_bool_nodes(registry: FunctionRegistry) -> None:
    """Register the boolean function set into the registry.

    Args:
        registry: The function registry to populate.
    """
    registry.register(Function("Not", 1, bool_function=bool_not))
    registry.register(Function("And", 2, bool_function=bool_and))
    registry.register(Function("Or", 2, bool_function=bool_or))
    registry.register(Function("Xor", 2, bool_function=bool_xor))
    registry.register(Function("Nand", 2, bool_function=bool_nand))
    registry.register(Function("Nor", 2, bool_function=bool_nor))
    registry.register(Function("Xnor", 2, bool_function=bool_xnor))
    registry.register(Function("If", 3, bool_function=bool_if))
    registry.register(Function("Maj3", 3, bool_function=bool_maj3))
    registry.register(Function("And3", 3, bool_function=bool_and3))
    registry.register(Function("Or3", 3, bool_function=bool_or3))
    registry.register(Function("And4", 4, bool_function=bool_and4))
    registry.register(Function("Or4", 4, bool_function=bool_or4))


def build_bool_registry() -> FunctionRegistry:
    """Build a fresh registry holding the boolean function set."""
    registry = FunctionRegistry()
    register_bool_nodes(registry)
    return registry


BOOL = build_bool_registry()
