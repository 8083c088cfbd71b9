"""
Recursive descent parser for ARITHMOS expressions.

Grammar (precedence low to high):
    expression     → addition
    addition       → multiplication (("+" | "-") multiplication)*
    multiplication → power (("*" | "/") power)*
    power          → unary ("^" unary)*
    unary          → ("+" | "-") expression | primary
    primary        → NUMBER | "(" expression ")" | IDENT | IDENT "(" arguments? ")"
    arguments      → expression ("," expression)*

Every binary level folds to the left, including "^" (2^3^2 == 64).
A sign consumes a whole expression, so -2^2 parses as -(2^2).
"""

from __future__ import annotations

import logging

from arithmos.core.errors import (
    AdditionalCodeAfterEnd,
    CalculatorError,
    CalculatorSyntaxError,
    ExpectedExpression,
    TooManyArguments,
)
from arithmos.core.expression_lang.tokenizer import tokenize
from arithmos.core.ir.expressions import (
    MAX_CALL_ARGUMENTS,
    Binary,
    Call,
    Expr,
    Grouping,
    Literal,
    Unary,
    Variable,
)
from arithmos.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class _Parser:
    """Recursive descent parser over a token list ending in EOF."""

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens = tokens
        self.current = 0

    def parse(self) -> Expr:
        expr = self.expression()
        if not self.is_at_end():
            raise AdditionalCodeAfterEnd(self.peek())
        return expr

    # -- Grammar rules --

    def expression(self) -> Expr:
        return self.addition()

    def addition(self) -> Expr:
        """multiplication (('+' | '-') multiplication)*"""
        expr = self.multiplication()
        while self.match_token(TokenKind.PLUS, TokenKind.MINUS):
            operator = self.previous()
            right = self.multiplication()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def multiplication(self) -> Expr:
        """power (('*' | '/') power)*"""
        expr = self.power()
        while self.match_token(TokenKind.STAR, TokenKind.SLASH):
            operator = self.previous()
            right = self.power()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def power(self) -> Expr:
        """unary ('^' unary)*"""
        expr = self.unary()
        while self.match_token(TokenKind.CARET):
            operator = self.previous()
            right = self.unary()
            expr = Binary(left=expr, operator=operator, right=right)
        return expr

    def unary(self) -> Expr:
        """('+' | '-') expression | primary"""
        if self.match_token(TokenKind.MINUS, TokenKind.PLUS):
            operator = self.previous()
            right = self.expression()
            return Unary(operator=operator, right=right)
        return self.primary()

    def primary(self) -> Expr:
        """NUMBER | '(' expression ')' | IDENT | IDENT '(' arguments? ')'"""
        if self.match_token(TokenKind.NUMBER):
            return Literal(value=self.previous())

        if self.match_token(TokenKind.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenKind.RIGHT_PAREN, "Expected ')' after expression.")
            return Grouping(expression=expr)

        if self.match_token(TokenKind.IDENTIFIER):
            name = self.previous()
            if not self.match_token(TokenKind.LEFT_PAREN):
                return Variable(name=name)
            return self._finish_call(name)

        raise self.error(ExpectedExpression)

    def _finish_call(self, callee: Token) -> Call:
        """Parse the argument list after IDENT '('."""
        arguments: list[Expr] = []
        if not self.match_token(TokenKind.RIGHT_PAREN):
            while True:
                if len(arguments) >= MAX_CALL_ARGUMENTS:
                    raise self.error(TooManyArguments)
                arguments.append(self.expression())
                if not self.match_token(TokenKind.COMMA):
                    break
            self.consume(TokenKind.RIGHT_PAREN, "Expected ')' after arguments.")
        return Call(callee=callee, paren=self.previous(), arguments=arguments)

    # -- Token helpers --

    def error(self, error_type: type[CalculatorError]) -> CalculatorError:
        """Build an error anchored at the current token."""
        return error_type(self.peek())

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise CalculatorSyntaxError(message, self.peek())

    def match_token(self, *kinds: TokenKind) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def check(self, kind: TokenKind) -> bool:
        if self.is_at_end():
            return False
        return self.peek().kind == kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().kind == TokenKind.EOF


def parse(tokens: list[Token]) -> Expr:
    """Parse a token list (as produced by ``tokenize``) into an AST.

    Raises:
        CalculatorError: If the tokens do not form exactly one expression.
    """
    expr = _Parser(tokens).parse()
    logger.debug("Parsed %d tokens", len(tokens))
    return expr


def parse_expr(source: str) -> Expr:
    """Tokenize and parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "sqrt(2) * 3")

    Returns:
        Parsed expression AST.

    Raises:
        CalculatorError: If the expression is invalid.
    """
    return parse(tokenize(source))
