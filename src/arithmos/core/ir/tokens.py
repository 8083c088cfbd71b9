"""
Lexical tokens shared by the tokenizer, parser, and AST.
"""

from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field


class TokenKind(StrEnum):
    """Token types for the arithmetic language."""

    # Single-character tokens
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    MODULO = auto()
    CARET = auto()

    # Punctuation
    COMMA = auto()
    DOT = auto()

    IDENTIFIER = auto()
    NUMBER = auto()

    # End of input
    EOF = auto()


class Token(BaseModel):
    """A single token from the tokenizer."""

    kind: TokenKind
    lexeme: str = Field(description="Exact source text of the token")
    literal: float | None = Field(default=None, description="Parsed value, NUMBER only")
    line: int = Field(default=1, ge=1, description="1-based source line")

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.kind}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
        return f"Token({self.kind}, {self.lexeme!r}, line={self.line})"

    def __str__(self) -> str:
        return self.lexeme
