"""
Tokenizer for ARITHMOS expressions.

Converts an expression string into a sequence of typed tokens. The
tokenizer never fails: characters that start no token are dropped.
"""

from __future__ import annotations

import logging
import re

from arithmos.core.ir.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Integer part, then a fraction only when a digit follows the dot
_NUMBER_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?")

_SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.MODULO,
    "^": TokenKind.CARET,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
}

_WHITESPACE = " \r\t"


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens ending in EOF."""
    tokens: list[Token] = []
    line = 1
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        kind = _SINGLE_CHAR_TOKENS.get(c)
        if kind is not None:
            tokens.append(Token(kind=kind, lexeme=c, line=line))
            i += 1
            continue

        # Numbers: ASCII digits only, no sign, no exponent
        if "0" <= c <= "9":
            m = _NUMBER_RE.match(source, i)
            assert m is not None
            lexeme = m.group(0)
            tokens.append(
                Token(kind=TokenKind.NUMBER, lexeme=lexeme, literal=float(lexeme), line=line)
            )
            i = m.end()
            continue

        # Identifiers: alphabetic start, alphanumeric tail. Letters are the
        # Unicode L* categories, so combining marks end an identifier.
        if c.isalpha():
            start = i
            i += 1
            while i < n and source[i].isalnum():
                i += 1
            tokens.append(Token(kind=TokenKind.IDENTIFIER, lexeme=source[start:i], line=line))
            continue

        logger.debug("Dropping unexpected character %r at offset %d", c, i)
        i += 1

    tokens.append(Token(kind=TokenKind.EOF, lexeme="", line=line))
    logger.debug("Tokenized %d characters into %d tokens", n, len(tokens))
    return tokens
