"""Tests for the read-eval-print loop."""

from __future__ import annotations

import io

from arithmos.core.calculator import Calculator
from arithmos.core.config import CalculatorSettings
from arithmos.repl import Repl


def _run(text: str, **settings: object) -> tuple[int, list[str]]:
    stdin = io.StringIO(text)
    stdout = io.StringIO()
    repl = Repl(CalculatorSettings(**settings), stdin=stdin, stdout=stdout)
    count = repl.run()
    return count, stdout.getvalue().splitlines()


class TestRepl:
    def test_banner_and_result(self) -> None:
        count, lines = _run("1+2*3\nexit\n")
        assert count == 1
        assert lines[0] == "Welcome to the calculator!"
        assert lines[1] == "Enter an expression to evaluate it, or 'exit' to quit."
        assert lines[2] == "> Result: 7.0"
        assert lines[3] == "> "

    def test_debug_banner(self) -> None:
        _, lines = _run("exit\n", debug=True)
        assert lines[0] == "Welcome to the calculator! (debug mode)"

    def test_no_banner(self) -> None:
        _, lines = _run("pi\nexit\n", banner=False)
        assert lines[0] == "> Result: 3.141592653589793"

    def test_error_line(self) -> None:
        _, lines = _run("sqrt(2, 3)\nexit\n", banner=False)
        assert lines[0] == '> Error: FunctionArityMismatch("sqrt", 2, 1)'

    def test_input_is_stripped(self) -> None:
        _, lines = _run("   2^3^2   \n  exit  \n", banner=False)
        assert lines[0] == "> Result: 64.0"
        assert len(lines) == 2

    def test_end_of_input_stops(self) -> None:
        count, lines = _run("1\n2", banner=False)
        assert count == 2
        assert lines[:2] == ["> Result: 1.0", "> Result: 2.0"]

    def test_errors_do_not_stop_loop(self) -> None:
        count, lines = _run("foo\n(1\n1+1\nexit\n", banner=False)
        assert count == 3
        assert lines[0].startswith("> Error: ")
        assert lines[1].startswith("> Error: ")
        assert lines[2] == "> Result: 2.0"

    def test_custom_prompt_and_exit(self) -> None:
        _, lines = _run("1\nquit\n", banner=False, prompt="calc> ", exit_command="quit")
        assert lines[0] == "calc> Result: 1.0"

    def test_debug_output(self) -> None:
        _, lines = _run("1+2\nexit\n", banner=False, debug=True)
        assert lines[0].startswith("> Tokens: [")
        assert lines[1] == "AST: (+ 1 2)"
        assert lines[2] == "Result: 3.0"

    def test_non_finite_results(self) -> None:
        _, lines = _run("1/0\n0/0\nexit\n", banner=False)
        assert lines[0] == "> Result: inf"
        assert lines[1] == "> Result: nan"

    def test_long_chain_evaluates(self) -> None:
        _, lines = _run("+".join(["1"] * 3000) + "\nexit\n", banner=False)
        assert lines[0] == "> Result: 3000.0"

    def test_deep_unary_nesting_evaluates(self) -> None:
        _, lines = _run("-" * 3001 + "1\nexit\n", banner=False)
        assert lines[0] == "> Result: -1.0"

    def test_recursion_error_keeps_loop_running(self) -> None:
        class Overflowing(Calculator):
            def calculate(self, source: str) -> float:
                if source == "deep":
                    raise RecursionError("maximum recursion depth exceeded")
                return super().calculate(source)

        stdout = io.StringIO()
        repl = Repl(
            CalculatorSettings(banner=False),
            calculator=Overflowing(),
            stdin=io.StringIO("deep\n1+1\nexit\n"),
            stdout=stdout,
        )
        assert repl.run() == 2
        lines = stdout.getvalue().splitlines()
        assert lines[0] == "> Error: expression is nested too deeply"
        assert lines[1] == "> Result: 2.0"


class TestEvaluateLine:
    def test_returns_output_line(self) -> None:
        repl = Repl(stdin=io.StringIO(), stdout=io.StringIO())
        assert repl.evaluate_line("hypot(3, 4)") == "Result: 5.0"
        assert repl.evaluate_line("") == "Error: (At '' in line 1) ExpectedExpression"
