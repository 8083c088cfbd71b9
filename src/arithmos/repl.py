"""
Read-eval-print loop around the calculator core.

One expression per line. The exit command (``exit`` by default) or end
of input stops the loop. Every line produces exactly one of::

    Result: <float>
    Error: <diagnostic>
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from arithmos.core.calculator import Calculator
from arithmos.core.config import CalculatorSettings
from arithmos.core.errors import CalculatorError

logger = logging.getLogger(__name__)

NESTED_TOO_DEEPLY = "expression is nested too deeply"


def format_result(value: float) -> str:
    return f"Result: {value}"


def format_error(error: CalculatorError | str) -> str:
    return f"Error: {error}"


def evaluate_source(
    calculator: Calculator, source: str, debug: bool = False, out: TextIO | None = None
) -> tuple[bool, str]:
    """Evaluate one expression for a driver.

    Returns ``(ok, line)`` where ``line`` is the ``Result:`` or ``Error:``
    output line. Debug dumps go to ``out`` (stdout when omitted).
    """
    try:
        if debug:
            value = calculator.calculate_with_debug(source, out=out)
        else:
            value = calculator.calculate(source)
    except CalculatorError as e:
        logger.debug("Evaluation failed: %s", e.describe())
        return False, format_error(e)
    except RecursionError:
        logger.warning("Expression nested too deeply: %d characters", len(source))
        return False, format_error(NESTED_TOO_DEEPLY)
    return True, format_result(value)


class Repl:
    """Line-oriented driver; streams default to stdin/stdout."""

    def __init__(
        self,
        settings: CalculatorSettings | None = None,
        calculator: Calculator | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.settings = settings if settings is not None else CalculatorSettings()
        self.calculator = calculator if calculator is not None else Calculator()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str, end: str = "\n") -> None:
        self.stdout.write(text + end)
        self.stdout.flush()

    def print_banner(self) -> None:
        mode = " (debug mode)" if self.settings.debug else ""
        self._write(f"Welcome to the calculator!{mode}")
        self._write(f"Enter an expression to evaluate it, or '{self.settings.exit_command}' to quit.")

    def evaluate_line(self, line: str) -> str:
        """Evaluate one input line and return the output line."""
        _, output = evaluate_source(self.calculator, line, self.settings.debug, self.stdout)
        return output

    def run(self) -> int:
        """Run until the exit command or end of input; return lines evaluated."""
        if self.settings.banner:
            self.print_banner()

        count = 0
        while True:
            self._write(self.settings.prompt, end="")
            raw = self.stdin.readline()
            if not raw:
                self._write("")
                break
            line = raw.strip()
            if line == self.settings.exit_command:
                break
            self._write(self.evaluate_line(line))
            count += 1

        logger.info("REPL finished after %d lines", count)
        return count
