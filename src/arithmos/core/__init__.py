"""Core ARITHMOS functionality: IR, tokenizer, parser, evaluator, environment, settings."""

from . import ir
from .calculator import Calculator, calculate, calculate_with_debug
from .config import CalculatorSettings, load_settings
from .environment import Environment
from .errors import (
    AdditionalCodeAfterEnd,
    ArithmosError,
    CalculatorError,
    CalculatorSyntaxError,
    ConfigError,
    ErrorKind,
    ExpectedExpression,
    FunctionArityMismatch,
    TooManyArguments,
    UndefinedVariableOrFunction,
)

__all__ = [
    "ir",
    "Calculator",
    "calculate",
    "calculate_with_debug",
    "CalculatorSettings",
    "load_settings",
    "Environment",
    "ArithmosError",
    "ConfigError",
    "CalculatorError",
    "ErrorKind",
    "CalculatorSyntaxError",
    "AdditionalCodeAfterEnd",
    "TooManyArguments",
    "ExpectedExpression",
    "FunctionArityMismatch",
    "UndefinedVariableOrFunction",
]
