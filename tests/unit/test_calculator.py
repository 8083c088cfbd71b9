"""End-to-end tests for the calculate entry points."""

from __future__ import annotations

import io
import math
import sys

import pytest

from arithmos.core.calculator import (
    Calculator,
    calculate,
    calculate_with_debug,
    recursion_headroom,
)
from arithmos.core.errors import (
    AdditionalCodeAfterEnd,
    CalculatorError,
    CalculatorSyntaxError,
    ExpectedExpression,
    FunctionArityMismatch,
    TooManyArguments,
    UndefinedVariableOrFunction,
)


class TestScenarios:
    """Reference inputs and their results."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("1+2*3", 7.0),
            ("(1+2)*3", 9.0),
            ("2^3^2", 64.0),
            ("-2^2", -4.0),
            ("sin(0) + cos(0)", 1.0),
            ("hypot(3,4)", 5.0),
            ("pi", 3.141592653589793),
        ],
    )
    def test_results(self, source: str, expected: float) -> None:
        assert calculate(source) == expected

    def test_log_is_undefined(self) -> None:
        with pytest.raises(UndefinedVariableOrFunction) as exc_info:
            calculate("log(2)")
        assert exc_info.value.name == "log"

    def test_sqrt_arity(self) -> None:
        with pytest.raises(FunctionArityMismatch) as exc_info:
            calculate("sqrt(2, 3)")
        assert str(exc_info.value) == 'FunctionArityMismatch("sqrt", 2, 1)'

    def test_dangling_plus(self) -> None:
        with pytest.raises(ExpectedExpression) as exc_info:
            calculate("3 + ")
        assert str(exc_info.value) == "(At '' in line 1) ExpectedExpression"


class TestBoundaries:
    """Boundary inputs from the error table."""

    def test_empty_input(self) -> None:
        with pytest.raises(ExpectedExpression):
            calculate("")

    def test_trailing_dot(self) -> None:
        with pytest.raises(AdditionalCodeAfterEnd) as exc_info:
            calculate("1.")
        assert str(exc_info.value) == "(At '.' in line 1) AdditionalCodeAfterEnd"

    def test_unclosed_paren(self) -> None:
        with pytest.raises(CalculatorSyntaxError) as exc_info:
            calculate("(1+2")
        assert str(exc_info.value) == (
            "(At '' in line 1) SyntaxError(\"Expected ')' after expression.\")"
        )

    def test_undefined_name(self) -> None:
        with pytest.raises(UndefinedVariableOrFunction) as exc_info:
            calculate("foo")
        assert exc_info.value.describe() == 'UndefinedVariableOrFunction("foo")'

    def test_too_many_arguments(self) -> None:
        with pytest.raises(TooManyArguments):
            calculate("max(" + ",".join(["1"] * 256) + ")")

    def test_all_errors_share_base(self) -> None:
        for source in ["", "1.", "(1", "foo", "sqrt()"]:
            with pytest.raises(CalculatorError):
                calculate(source)


class TestNumericEdgeCases:
    """IEEE-754 sentinels are results, not errors."""

    def test_sqrt_negative(self) -> None:
        assert math.isnan(calculate("sqrt(-1)"))

    def test_ln_zero(self) -> None:
        assert calculate("ln(0)") == -math.inf

    def test_exp_overflow(self) -> None:
        assert calculate("exp(1000)") == math.inf

    def test_acos_out_of_domain(self) -> None:
        assert math.isnan(calculate("acos(2)"))

    def test_zero_to_negative_power(self) -> None:
        assert calculate("0^(0-1)") == math.inf


class TestCalculator:
    """Calculator instances and debug output."""

    def test_instance_is_reusable(self) -> None:
        calc = Calculator()
        assert [calc.calculate(s) for s in ["1", "1+1", "max(2, 3)"]] == [1.0, 2.0, 3.0]

    def test_error_does_not_poison_instance(self) -> None:
        calc = Calculator()
        with pytest.raises(CalculatorError):
            calc.calculate("nope")
        assert calc.calculate("2*2") == 4.0

    def test_debug_writes_tokens_then_ast(self) -> None:
        out = io.StringIO()
        result = Calculator().calculate_with_debug("1+2", out=out)
        assert result == 3.0
        lines = out.getvalue().splitlines()
        assert len(lines) == 2
        assert lines[0].startswith("Tokens: [Token(number, '1'")
        assert lines[1] == "AST: (+ 1 2)"

    def test_debug_tokens_printed_before_parse_error(self) -> None:
        out = io.StringIO()
        with pytest.raises(ExpectedExpression):
            Calculator().calculate_with_debug("1 +", out=out)
        lines = out.getvalue().splitlines()
        assert len(lines) == 1
        assert lines[0].startswith("Tokens: ")

    def test_module_level_debug_uses_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert calculate_with_debug("max(pi, 2)") == math.pi
        captured = capsys.readouterr()
        assert 'AST: (max ["pi", 2])' in captured.out


class TestDeepInputs:
    """Long operator chains and deep nesting stay within reach."""

    def test_long_addition_chain(self) -> None:
        assert calculate("+".join(["1"] * 3000)) == 3000.0

    def test_long_power_chain(self) -> None:
        assert calculate("^".join(["1"] * 3000)) == 1.0

    def test_deeply_nested_parens(self) -> None:
        assert calculate("(" * 3000 + "1+1" + ")" * 3000) == 2.0

    def test_deeply_nested_unary_minus(self) -> None:
        assert calculate("-" * 4000 + "5") == 5.0

    def test_nested_calls(self) -> None:
        assert calculate("abs(" * 2000 + "0-7" + ")" * 2000) == 7.0

    def test_debug_output_for_long_chain(self) -> None:
        out = io.StringIO()
        assert Calculator().calculate_with_debug("*".join(["2"] * 1000), out=out) == 2.0**1000
        assert out.getvalue().splitlines()[1].startswith("AST: (* (* (* ")

    def test_recursion_limit_restored(self) -> None:
        before = sys.getrecursionlimit()
        calculate("+".join(["1"] * 3000))
        assert sys.getrecursionlimit() == before

    def test_headroom_never_lowers_limit(self) -> None:
        before = sys.getrecursionlimit()
        with recursion_headroom(10):
            assert sys.getrecursionlimit() == before
        assert sys.getrecursionlimit() == before
