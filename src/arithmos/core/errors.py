"""
Error types for ARITHMOS parsing, evaluation, and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from arithmos.core.ir.tokens import Token


class ArithmosError(Exception):
    """Base exception for all ARITHMOS errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigError(ArithmosError):
    """
    Raised when calculator settings cannot be loaded.

    Examples:
    - Malformed TOML
    - Unknown or mistyped settings keys
    - Missing explicit config file
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of a configuration problem.

    Attributes:
        file: Path to the config file
        key: Optional dotted settings key
    """

    file: Path
    key: str | None = None

    def format(self) -> str:
        if self.key:
            return f"{self.file} [{self.key}]"
        return str(self.file)


# ---------------------------------------------------------------------------
# Calculator diagnostics
# ---------------------------------------------------------------------------


class ErrorKind(StrEnum):
    """Closed set of diagnostics the expression pipeline can produce."""

    SYNTAX_ERROR = "SyntaxError"
    ADDITIONAL_CODE_AFTER_END = "AdditionalCodeAfterEnd"
    TOO_MANY_ARGUMENTS = "TooManyArguments"
    EXPECTED_EXPRESSION = "ExpectedExpression"
    FUNCTION_ARITY_MISMATCH = "FunctionArityMismatch"
    UNDEFINED_VARIABLE_OR_FUNCTION = "UndefinedVariableOrFunction"


class CalculatorError(ArithmosError):
    """
    Raised when an expression cannot be parsed or evaluated.

    Carries the error kind and, when known, the token at which the
    problem was detected. ``str(error)`` renders as::

        (At '<lexeme>' in line <n>) <kind>
    """

    kind: ErrorKind

    def __init__(self, token: Token | None = None) -> None:
        self.token = token
        super().__init__(self.describe())

    @property
    def args_repr(self) -> tuple[object, ...]:
        """Payload shown after the kind name; empty for unit kinds."""
        return ()

    def describe(self) -> str:
        """Kind plus payload, e.g. ``FunctionArityMismatch("sqrt", 2, 1)``."""
        payload = self.args_repr
        if not payload:
            return str(self.kind)
        parts = ", ".join(_debug(p) for p in payload)
        return f"{self.kind}({parts})"

    def _format_message(self) -> str:
        if self.token is not None:
            return f"(At '{self.token.lexeme}' in line {self.token.line}) {self.message}"
        return self.message


class CalculatorSyntaxError(CalculatorError):
    """A required token was missing; ``detail`` names the expectation."""

    kind = ErrorKind.SYNTAX_ERROR

    def __init__(self, detail: str, token: Token | None = None) -> None:
        self.detail = detail
        super().__init__(token)

    @property
    def args_repr(self) -> tuple[object, ...]:
        return (self.detail,)


class AdditionalCodeAfterEnd(CalculatorError):
    """The expression parsed but tokens remain before EOF."""

    kind = ErrorKind.ADDITIONAL_CODE_AFTER_END


class TooManyArguments(CalculatorError):
    """A call's argument list reached the 255 argument limit."""

    kind = ErrorKind.TOO_MANY_ARGUMENTS


class ExpectedExpression(CalculatorError):
    """No primary expression starts at the current token."""

    kind = ErrorKind.EXPECTED_EXPRESSION


class FunctionArityMismatch(CalculatorError):
    kind = ErrorKind.FUNCTION_ARITY_MISMATCH

    def __init__(self, name: str, provided: int, expected: int, token: Token | None = None) -> None:
        self.name = name
        self.provided = provided
        self.expected = expected
        super().__init__(token)

    @property
    def args_repr(self) -> tuple[object, ...]:
        return (self.name, self.provided, self.expected)


class UndefinedVariableOrFunction(CalculatorError):
    kind = ErrorKind.UNDEFINED_VARIABLE_OR_FUNCTION

    def __init__(self, name: str, token: Token | None = None) -> None:
        self.name = name
        super().__init__(token)

    @property
    def args_repr(self) -> tuple[object, ...]:
        return (self.name,)


def _debug(value: object) -> str:
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return str(value)


def make_config_error(message: str, file: Path, key: str | None = None) -> ConfigError:
    """
    Helper to create a ConfigError with context.

    Args:
        message: Error description
        file: Config file path
        key: Optional offending settings key

    Returns:
        ConfigError with context attached
    """
    return ConfigError(message, ErrorContext(file=file, key=key))
