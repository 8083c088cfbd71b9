"""
ARITHMOS - interactive arithmetic expression evaluator.

Parses one arithmetic expression per line and evaluates it against a
fixed environment of mathematical constants and functions.
"""

from __future__ import annotations

from ._version import __version__

# Re-export commonly used types for convenience
from .core import ir
from .core.calculator import Calculator, calculate, calculate_with_debug
from .core.errors import ArithmosError, CalculatorError, ConfigError

__all__ = [
    "__version__",
    "ir",
    "Calculator",
    "calculate",
    "calculate_with_debug",
    "ArithmosError",
    "CalculatorError",
    "ConfigError",
]
