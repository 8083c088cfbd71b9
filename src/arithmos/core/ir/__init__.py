"""
ARITHMOS Intermediate Representation (IR) types.

Tokens and expression AST nodes shared by the tokenizer, parser,
evaluator, and printer. All types are re-exported from this package.
"""

# Expressions
from .expressions import (
    MAX_CALL_ARGUMENTS,
    Binary,
    Call,
    Expr,
    ExprVisitor,
    Grouping,
    Literal,
    Unary,
    Variable,
)

# Tokens
from .tokens import Token, TokenKind

__all__ = [
    # Tokens
    "Token",
    "TokenKind",
    # Expressions
    "MAX_CALL_ARGUMENTS",
    "Binary",
    "Call",
    "Expr",
    "ExprVisitor",
    "Grouping",
    "Literal",
    "Unary",
    "Variable",
]
