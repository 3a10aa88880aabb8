"""Tests for the calculator pipeline: parsing, validation, arithmetic, output."""

import io

import pytest

from quizcalc.calculator import (
    compute_result,
    format_result,
    read_number,
    read_operator,
    run_calculator,
)
from quizcalc.errors import (
    CalculatorError,
    DivisionByZeroError,
    InputReadError,
    InvalidNumberError,
    InvalidOperatorError,
)
from quizcalc.models import Operator


# --- Arithmetic ---

@pytest.mark.parametrize(
    "a, b, op, expected",
    [
        (2.0, 3.0, Operator.ADD, 5.0),
        (10.0, 4.0, Operator.SUBTRACT, 6.0),
        (3.0, 7.0, Operator.MULTIPLY, 21.0),
        (15.0, 4.0, Operator.DIVIDE, 3.75),
        (-1.5, 0.5, Operator.ADD, -1.0),
        (0.0, 9.0, Operator.DIVIDE, 0.0),
    ],
)
def test_compute_result(a, b, op, expected):
    assert compute_result(a, b, op) == pytest.approx(expected)


def test_compute_result_accepts_symbol():
    assert compute_result(6.0, 2.0, "/") == pytest.approx(3.0)


@pytest.mark.parametrize("a", [0.0, 1.0, -7.25, 1e300])
def test_division_by_zero(a):
    with pytest.raises(DivisionByZeroError, match="Division by zero is not allowed."):
        compute_result(a, 0.0, Operator.DIVIDE)


def test_zero_divisor_allowed_for_other_operators():
    assert compute_result(5.0, 0.0, Operator.MULTIPLY) == 0.0
    assert compute_result(5.0, 0.0, Operator.SUBTRACT) == 5.0


# --- Input parsing ---

def test_read_number_trims_whitespace(console):
    assert read_number("n: ", console, io.StringIO("  3.5  \n")) == pytest.approx(3.5)


def test_read_number_negative_and_exponent(console):
    assert read_number("n: ", console, io.StringIO("-2e3\n")) == pytest.approx(-2000.0)


@pytest.mark.parametrize("text", ["abc", "", "1,5", "3 4"])
def test_read_number_rejects_non_numeric(console, text):
    with pytest.raises(InvalidNumberError, match="Invalid number"):
        read_number("n: ", console, io.StringIO(text + "\n"))


@pytest.mark.parametrize("symbol", ["+", "-", "*", "/"])
def test_read_operator_accepts_all_four(console, symbol):
    assert read_operator("op: ", console, io.StringIO(f" {symbol} \n")) is Operator(symbol)


@pytest.mark.parametrize("text", ["x", "++", "", "%", "plus"])
def test_read_operator_rejects(console, text):
    with pytest.raises(InvalidOperatorError, match="Invalid operator"):
        read_operator("op: ", console, io.StringIO(text + "\n"))


def test_end_of_input_is_read_error(console):
    with pytest.raises(InputReadError, match="failed to read input"):
        read_number("n: ", console, io.StringIO(""))


def test_prompt_is_printed_without_newline(console, output):
    read_number("Enter the first number: ", console, io.StringIO("1\n"))
    assert output() == "Enter the first number: "


# --- Full run ---

def test_format_result():
    assert format_result(1.0, Operator.DIVIDE, 3.0, 1 / 3) == "Result: 1.00 / 3.00 = 0.33"


def test_run_calculator_prompts_in_order(console, output):
    result = run_calculator(console, io.StringIO("3\n*\n4\n"))
    assert result == pytest.approx(12.0)
    text = output()
    assert text.startswith("--- Simple Command-Line Calculator ---\n")
    first = text.index("Enter the first number: ")
    op = text.index("Enter the operator (+, -, *, /): ")
    second = text.index("Enter the second number: ")
    assert first < op < second
    assert "Result: 3.00 * 4.00 = 12.00" in text


def test_run_calculator_stops_at_first_error(console, output):
    with pytest.raises(InvalidOperatorError):
        run_calculator(console, io.StringIO("3\nx\n4\n"))
    assert "Enter the second number" not in output()


def test_errors_share_calculator_base():
    for exc in (InputReadError, InvalidNumberError, InvalidOperatorError, DivisionByZeroError):
        assert issubclass(exc, CalculatorError)
