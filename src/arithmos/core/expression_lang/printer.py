"""
Debug rendering of tokens and expression trees.

Trees print in a prefix, Lisp-like form:
    1 + 2 * x   →  (+ 1 (* 2 "x"))
    max(1, 2)   →  (max [1, 2])
"""

from __future__ import annotations

from arithmos.core.ir.expressions import (
    Binary,
    Call,
    Expr,
    Grouping,
    Literal,
    Unary,
    Variable,
)
from arithmos.core.ir.tokens import Token


class AstPrinter:
    """Renders an expression tree for debug output."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return f"({expr.operator.lexeme} {expr.left.accept(self)} {expr.right.accept(self)})"

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return f"({expr.expression.accept(self)})"

    def visit_literal_expr(self, expr: Literal) -> str:
        return expr.value.lexeme

    def visit_unary_expr(self, expr: Unary) -> str:
        return f"({expr.operator.lexeme} {expr.right.accept(self)})"

    def visit_call_expr(self, expr: Call) -> str:
        args = ", ".join(argument.accept(self) for argument in expr.arguments)
        return f"({expr.callee.lexeme} [{args}])"

    def visit_variable_expr(self, expr: Variable) -> str:
        return f'"{expr.name.lexeme}"'


def format_tokens(tokens: list[Token]) -> str:
    """Render a token list, one ``Token(...)`` repr per element."""
    return "[" + ", ".join(repr(token) for token in tokens) + "]"


def format_ast(expr: Expr) -> str:
    return AstPrinter().print(expr)
