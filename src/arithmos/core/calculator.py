"""
Entry points that run the full tokenize → parse → evaluate pipeline.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from arithmos.core.environment import Environment
from arithmos.core.expression_lang.evaluator import Evaluator
from arithmos.core.expression_lang.parser import parse
from arithmos.core.expression_lang.printer import format_ast, format_tokens
from arithmos.core.expression_lang.tokenizer import tokenize

logger = logging.getLogger(__name__)

# Parser and evaluator recurse once per nesting level (several frames per
# level in the parser), so several thousand operators need far more than
# the interpreter default of 1000.
RECURSION_LIMIT = 100_000


@contextmanager
def recursion_headroom(limit: int = RECURSION_LIMIT) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least ``limit`` for the block."""
    previous = sys.getrecursionlimit()
    if previous < limit:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class Calculator:
    """Evaluates source lines against one reusable evaluator."""

    def __init__(self, environment: Environment | None = None) -> None:
        self.evaluator = Evaluator(environment)

    def calculate(self, source: str) -> float:
        """Evaluate ``source`` and return the result.

        Raises:
            CalculatorError: If the source cannot be parsed or evaluated.
        """
        logger.debug("Calculating %r", source)
        with recursion_headroom():
            expr = parse(tokenize(source))
            return self.evaluator.evaluate(expr)

    def calculate_with_debug(self, source: str, out: TextIO | None = None) -> float:
        """Like ``calculate``, but first prints the tokens and the parsed tree.

        The ``Tokens:`` line is written even when parsing then fails.
        """
        stream = out if out is not None else sys.stdout
        tokens = tokenize(source)
        print(f"Tokens: {format_tokens(tokens)}", file=stream)
        with recursion_headroom():
            expr = parse(tokens)
            print(f"AST: {format_ast(expr)}", file=stream)
            return self.evaluator.evaluate(expr)


_default_calculator = Calculator()


def calculate(source: str) -> float:
    """Evaluate one expression with the standard environment."""
    return _default_calculator.calculate(source)


def calculate_with_debug(source: str) -> float:
    """Evaluate one expression, printing tokens and AST to stdout first."""
    return _default_calculator.calculate_with_debug(source)
