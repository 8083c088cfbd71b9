"""
Expression evaluator for ARITHMOS.

Walks an expression AST and produces a float, resolving identifiers
against a fixed ``Environment``. Arithmetic follows IEEE-754: division
by zero, overflow and domain errors give inf or NaN, never an exception.
The only failures are unknown names and call arity mismatches.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from arithmos.core.environment import Environment
from arithmos.core.errors import FunctionArityMismatch, UndefinedVariableOrFunction
from arithmos.core.ir.expressions import (
    Binary,
    Call,
    Expr,
    Grouping,
    Literal,
    Unary,
    Variable,
)
from arithmos.core.ir.tokens import TokenKind

logger = logging.getLogger(__name__)

_BINARY_OPERATORS: dict[TokenKind, Callable[[float, float], float]] = {
    TokenKind.PLUS: np.add,
    TokenKind.MINUS: np.subtract,
    TokenKind.STAR: np.multiply,
    TokenKind.SLASH: np.divide,
    TokenKind.CARET: np.power,
}


class Evaluator:
    """
    Tree-walking interpreter over the expression AST.

    Builds its environment once; a single instance can evaluate any
    number of expressions.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        self.environment = environment if environment is not None else Environment()

    def evaluate(self, expr: Expr) -> float:
        """Evaluate ``expr`` and return its value.

        Raises:
            UndefinedVariableOrFunction: If a name is not in the environment.
            FunctionArityMismatch: If a call has the wrong number of arguments.
        """
        with np.errstate(all="ignore"):
            result = float(expr.accept(self))
        logger.debug("Evaluated expression to %r", result)
        return result

    def visit_literal_expr(self, expr: Literal) -> float:
        literal = expr.value.literal
        return literal if literal is not None else 0.0

    def visit_grouping_expr(self, expr: Grouping) -> float:
        return expr.expression.accept(self)

    def visit_unary_expr(self, expr: Unary) -> float:
        right = expr.right.accept(self)
        if expr.operator.kind == TokenKind.MINUS:
            return np.negative(right)
        if expr.operator.kind == TokenKind.PLUS:
            return right
        raise ValueError(f"Unknown unary operator: {expr.operator.lexeme!r}")

    def visit_binary_expr(self, expr: Binary) -> float:
        left = expr.left.accept(self)
        right = expr.right.accept(self)
        operation = _BINARY_OPERATORS.get(expr.operator.kind)
        if operation is None:
            raise ValueError(f"Unknown binary operator: {expr.operator.lexeme!r}")
        return operation(left, right)

    def visit_variable_expr(self, expr: Variable) -> float:
        name = expr.name.lexeme
        value = self.environment.variables.get(name)
        if value is None:
            raise UndefinedVariableOrFunction(name)
        return value

    def visit_call_expr(self, expr: Call) -> float:
        arguments = [argument.accept(self) for argument in expr.arguments]
        name = expr.callee.lexeme

        unary = self.environment.unary_functions.get(name)
        if unary is not None:
            if len(arguments) != 1:
                raise FunctionArityMismatch(name, len(arguments), 1)
            return unary(arguments[0])

        binary = self.environment.binary_functions.get(name)
        if binary is not None:
            if len(arguments) != 2:
                raise FunctionArityMismatch(name, len(arguments), 2)
            return binary(arguments[0], arguments[1])

        raise UndefinedVariableOrFunction(name)


def evaluate(expr: Expr, environment: Environment | None = None) -> float:
    """Evaluate an expression with a fresh evaluator.

    Args:
        expr: Parsed expression AST.
        environment: Bindings to resolve names against; the standard
            constants and functions when omitted.

    Returns:
        The computed value.
    """
    return Evaluator(environment).evaluate(expr)
