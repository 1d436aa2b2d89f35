"""Boolean and numeric function registries for genes and genome linking."""

from gep.core.functions.bool_nodes import BOOL, build_bool_registry
from gep.core.functions.math_nodes import MATH, build_math_registry
from gep.core.functions.registry import (
    BoolFunction,
    Float64Function,
    Function,
    FunctionRegistry,
)

__all__ = [
    "BOOL",
    "MATH",
    "BoolFunction",
    "Float64Function",
    "Function",
    "FunctionRegistry",
    "build_bool_registry",
    "build_math_registry",
]
