"""
Expression AST for ARITHMOS.

A closed set of six immutable node kinds:
- Binary: left op right, op in + - * / ^
- Unary: prefix sign, op in + -
- Grouping: explicit parentheses, kept for debug display
- Literal: numeric literal token
- Variable: identifier not followed by "("
- Call: identifier followed by an argument list

Traversal goes through ``node.accept(visitor)``, which dispatches to the
matching ``visit_*_expr`` method of an ``ExprVisitor``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from arithmos.core.ir.tokens import Token

R = TypeVar("R", covariant=True)

# Arguments accepted by a single call; the parser rejects the next one.
MAX_CALL_ARGUMENTS = 255


class ExprVisitor(Protocol[R]):
    """Operations over the closed set of expression nodes."""

    def visit_binary_expr(self, expr: Binary) -> R: ...

    def visit_grouping_expr(self, expr: Grouping) -> R: ...

    def visit_literal_expr(self, expr: Literal) -> R: ...

    def visit_unary_expr(self, expr: Unary) -> R: ...

    def visit_call_expr(self, expr: Call) -> R: ...

    def visit_variable_expr(self, expr: Variable) -> R: ...


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Binary(BaseModel):
    """Binary operation: left op right."""

    left: Expr
    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


class Grouping(BaseModel):
    """Parenthesized expression."""

    expression: Expr

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


class Literal(BaseModel):
    """A numeric literal; ``value`` is the NUMBER token."""

    value: Token

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


class Unary(BaseModel):
    """Prefix sign applied to ``right``."""

    operator: Token
    right: Expr

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)


class Call(BaseModel):
    """
    Function call: callee(arg1, arg2, ...).

    ``paren`` is the closing parenthesis token.
    """

    callee: Token
    paren: Token
    arguments: list[Expr] = Field(default_factory=list, max_length=MAX_CALL_ARGUMENTS)

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_call_expr(self)


class Variable(BaseModel):
    """Reference to a named constant."""

    name: Token

    model_config = ConfigDict(frozen=True)

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_variable_expr(self)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Binary | Grouping | Literal | Unary | Call | Variable

# Rebuild models for recursive forward references
Binary.model_rebuild()
Grouping.model_rebuild()
Unary.model_rebuild()
Call.model_rebuild()
