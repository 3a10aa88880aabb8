"""Four-operator calculator: prompt, parse, validate, compute, print.

Every step raises a CalculatorError subclass on bad input; nothing retries.
The CLI turns the first error into `Error: <message>` and exit code 1.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from rich.console import Console

from quizcalc.errors import (
    DivisionByZeroError,
    InputReadError,
    InvalidNumberError,
    InvalidOperatorError,
)
from quizcalc.models import Operator

logger = logging.getLogger(__name__)

BANNER = "--- Simple Command-Line Calculator ---"
FIRST_NUMBER_PROMPT = "Enter the first number: "
OPERATOR_PROMPT = "Enter the operator (+, -, *, /): "
SECOND_NUMBER_PROMPT = "Enter the second number: "


def read_input(prompt: str, console: Console, stream: Optional[TextIO] = None) -> str:
    """Print `prompt`, read one line from `stream` (stdin by default), trim it."""
    if stream is None:
        stream = sys.stdin
    console.print(prompt, end="", markup=False)
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise InputReadError(f"failed to read input: {e}") from e
    if not line:
        raise InputReadError("failed to read input: unexpected end of input")
    return line.strip()


def parse_number(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise InvalidNumberError("Invalid number. Please enter a numeric value.") from None


def parse_operator(text: str) -> Operator:
    try:
        return Operator(text.strip())
    except ValueError:
        raise InvalidOperatorError("Invalid operator. Please use +, -, *, or /.") from None


def read_number(prompt: str, console: Console, stream: Optional[TextIO] = None) -> float:
    """Prompt for and parse one decimal operand."""
    return parse_number(read_input(prompt, console, stream))


def read_operator(prompt: str, console: Console, stream: Optional[TextIO] = None) -> Operator:
    """Prompt for one operator and validate it against + - * /."""
    return parse_operator(read_input(prompt, console, stream))


def compute_result(a: float, b: float, op: Operator | str) -> float:
    """Apply `op` to the operands.

    Division by zero is the only failure; the other operators are total.
    """
    op = parse_operator(op) if not isinstance(op, Operator) else op
    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b
    if b == 0:
        raise DivisionByZeroError("Division by zero is not allowed.")
    return a / b


def format_result(a: float, op: Operator, b: float, result: float) -> str:
    return f"Result: {a:.2f} {op.value} {b:.2f} = {result:.2f}"


def run_calculator(console: Console, stream: Optional[TextIO] = None) -> float:
    """Run one full prompt/compute/print cycle and return the result.

    Prompts in fixed order: first operand, operator, second operand.
    """
    console.print(BANNER, markup=False)

    a = read_number(FIRST_NUMBER_PROMPT, console, stream)
    op = read_operator(OPERATOR_PROMPT, console, stream)
    b = read_number(SECOND_NUMBER_PROMPT, console, stream)
    logger.debug("Computing %r %s %r", a, op.value, b)

    result = compute_result(a, b, op)
    console.print(format_result(a, op, b, result), markup=False)
    return result
