"""
ARITHMOS expression language.

Tokenizer, parser, evaluator, and debug printer for single-line
arithmetic expressions.

Usage:
    from arithmos.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("hypot(3, 4) * 2")
    result = evaluate(expr)
    # result == 10.0
"""

from arithmos.core.expression_lang.evaluator import Evaluator, evaluate
from arithmos.core.expression_lang.parser import parse, parse_expr
from arithmos.core.expression_lang.printer import AstPrinter, format_ast, format_tokens
from arithmos.core.expression_lang.tokenizer import tokenize

__all__ = [
    "AstPrinter",
    "Evaluator",
    "evaluate",
    "format_ast",
    "format_tokens",
    "parse",
    "parse_expr",
    "tokenize",
]
