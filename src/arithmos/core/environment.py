"""
Predefined evaluation environment: named constants and math functions.

Three disjoint, read-only maps:
- variables: name -> float
- unary functions: name -> f(x)
- binary functions: name -> f(x, y)

Functions are numpy ufuncs (or thin wrappers over them) so that domain
errors, overflow and division by zero yield IEEE-754 inf/NaN instead of
raising. Callers evaluate inside ``numpy.errstate(all="ignore")``.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

import numpy as np

UnaryFunction = Callable[[float], float]
BinaryFunction = Callable[[float, float], float]

PHI = 1.618033988749895


class BindingKind(StrEnum):
    """What a name in the environment resolves to."""

    CONSTANT = "constant"
    UNARY = "unary function"
    BINARY = "binary function"


def signum(x: float) -> float:
    """1.0 or -1.0 by the sign bit of ``x``; NaN stays NaN."""
    if math.isnan(x):
        return math.nan
    return math.copysign(1.0, x)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    truncated = np.trunc(x)
    if abs(x - truncated) >= 0.5:
        truncated += math.copysign(1.0, x)
    return truncated


def rem_euclid(x: float, y: float) -> float:
    """Euclidean remainder: always in [0, |y|) for finite non-zero ``y``."""
    r = np.fmod(x, y)
    if r < 0.0:
        return r + abs(y)
    return r


CONSTANTS: dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "phi": PHI,
}

UNARY_FUNCTIONS: dict[str, UnaryFunction] = {
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "asinh": np.arcsinh,
    "acosh": np.arccosh,
    "atanh": np.arctanh,
    "sqrt": np.sqrt,
    "cbrt": np.cbrt,
    "exp": np.exp,
    "exp2": np.exp2,
    "ln": np.log,
    "log2": np.log2,
    "log10": np.log10,
    "abs": np.fabs,
    "signum": signum,
    "floor": np.floor,
    "ceil": np.ceil,
    "round": round_half_away,
    "trunc": np.trunc,
}

BINARY_FUNCTIONS: dict[str, BinaryFunction] = {
    "pow": np.power,
    "atan2": np.arctan2,
    "hypot": np.hypot,
    # fmax/fmin return the other operand when one is NaN
    "max": np.fmax,
    "min": np.fmin,
    "remainder": rem_euclid,
    "fmod": rem_euclid,
}


@dataclass(frozen=True)
class Environment:
    """
    Read-only name bindings for one evaluator.

    Attributes:
        variables: Named constants
        unary_functions: One-argument functions
        binary_functions: Two-argument functions
    """

    variables: Mapping[str, float] = field(default_factory=lambda: dict(CONSTANTS))
    unary_functions: Mapping[str, UnaryFunction] = field(
        default_factory=lambda: dict(UNARY_FUNCTIONS)
    )
    binary_functions: Mapping[str, BinaryFunction] = field(
        default_factory=lambda: dict(BINARY_FUNCTIONS)
    )

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for mapping in (self.variables, self.unary_functions, self.binary_functions):
            clash = seen & mapping.keys()
            if clash:
                raise ValueError(f"Names bound more than once: {', '.join(sorted(clash))}")
            seen |= mapping.keys()

        # Snapshot the maps so later changes to the caller's dicts are not seen
        object.__setattr__(self, "variables", MappingProxyType(dict(self.variables)))
        object.__setattr__(self, "unary_functions", MappingProxyType(dict(self.unary_functions)))
        object.__setattr__(
            self, "binary_functions", MappingProxyType(dict(self.binary_functions))
        )

    def kind_of(self, name: str) -> BindingKind | None:
        """Return what ``name`` is bound to, or None if unbound."""
        if name in self.variables:
            return BindingKind.CONSTANT
        if name in self.unary_functions:
            return BindingKind.UNARY
        if name in self.binary_functions:
            return BindingKind.BINARY
        return None

    def bindings(self) -> Iterator[tuple[str, BindingKind]]:
        """Yield every bound name with its kind, constants first."""
        for name in self.variables:
            yield name, BindingKind.CONSTANT
        for name in self.unary_functions:
            yield name, BindingKind.UNARY
        for name in self.binary_functions:
            yield name, BindingKind.BINARY
