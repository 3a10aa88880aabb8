"""CLI for quizcalc.

Usage:
    python -m quizcalc quiz                               # quiz.csv, 10 seconds
    python -m quizcalc quiz -csv problems.csv -limit 30   # Custom file and limit
    python -m quizcalc quiz -shuffle --seed 42 --review   # Fixed order + review table
    python -m quizcalc calc                               # Calculator
"""

from __future__ import annotations

import logging
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from quizcalc.calculator import run_calculator
from quizcalc.config import QuizSettings
from quizcalc.errors import QuizCalcError
from quizcalc.logging_config import setup_logging
from quizcalc.quiz import load_records, make_rng, render_review, run_quiz, shuffle_records

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="quizcalc",
    help="Timed CSV quiz runner and four-operator calculator",
    no_args_is_help=True,
)
console = Console(highlight=False)
err_console = Console(stderr=True)


def _fail(error: QuizCalcError) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    raise typer.Exit(1)


@app.command("quiz")
def cmd_quiz(
    csv_path: Optional[str] = typer.Option(None, "-csv", "--csv", help="CSV file in 'question,answer' format (default: quiz.csv)"),
    limit: Optional[int] = typer.Option(None, "-limit", "--limit", min=0, help="Time limit for the quiz in seconds (default: 10)"),
    shuffle: bool = typer.Option(False, "-shuffle", "--shuffle", help="Shuffle the quiz questions"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for -shuffle (time-based when omitted)"),
    review: bool = typer.Option(False, "--review", help="Show a table of your answers after the score"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run a timed quiz from a CSV file."""
    setup_logging(verbose)
    settings = QuizSettings.from_env().override(csv_path=csv_path, limit_s=limit, shuffle=shuffle or None)
    logger.debug("Quiz settings: %s", settings)

    try:
        records = load_records(settings.csv_path)
    except QuizCalcError as e:
        _fail(e)

    if settings.shuffle:
        records = shuffle_records(records, make_rng(seed))

    session = run_quiz(records, settings.limit_s, console)

    if review:
        render_review(session, console)


@app.command("calc")
def cmd_calc(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Prompt for two numbers and an operator, print the result."""
    setup_logging(verbose)
    try:
        run_calculator(console)
    except QuizCalcError as e:
        _fail(e)


def quiz_main() -> None:
    """Entry point for the standalone quizcalc-quiz script."""
    typer.run(cmd_quiz)


def calc_main() -> None:
    """Entry point for the standalone quizcalc-calc script."""
    typer.run(cmd_calc)


if __name__ == "__main__":
    app()
