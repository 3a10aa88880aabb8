"""Exception hierarchy for quizcalc.

Library code raises these; only the CLI layer catches them and turns them
into an `Error: ...` line and a non-zero exit.
"""


class QuizCalcError(Exception):
    """Base exception for quizcalc."""


class FileOpenError(QuizCalcError):
    """The quiz CSV file could not be opened."""


class ParseError(QuizCalcError):
    """The quiz CSV file is not structurally valid CSV."""


class CalculatorError(QuizCalcError):
    """Base for calculator input and computation failures."""


class InputReadError(CalculatorError):
    """Reading a line from the input stream failed (usually end of input)."""


class InvalidNumberError(CalculatorError):
    """An operand is not a decimal number."""


class InvalidOperatorError(CalculatorError):
    """The operator is not one of + - * /."""


class DivisionByZeroError(CalculatorError):
    """Division with a zero divisor."""
