"""Timed quiz runner — load → (shuffle) → wait for Enter → race each answer.

Data flow per run:
1. Parse the CSV into QuizRecords, skipping rows without exactly two fields
2. Optionally shuffle with an explicitly passed random.Random
3. Wait for Enter, then fix the single overall Deadline
4. For each record: print the question, race one line of input against the
   deadline, score the answer if it arrived first
5. Print `You scored X out of Y.` where Y counts every loaded record
"""

from __future__ import annotations

import csv
import logging
import random
import sys
import time
from pathlib import Path
from typing import Optional, TextIO, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quizcalc.deadline import Deadline, read_line_before
from quizcalc.errors import FileOpenError, ParseError
from quizcalc.models import QuizRecord, QuizSession

logger = logging.getLogger(__name__)


def parse_records(lines: TextIO, source: str = "<stream>") -> list[QuizRecord]:
    """Parse question,answer CSV rows from an open text stream.

    The first row is a question like any other. Rows with other than two
    fields (blank lines included) are skipped.
    """
    records: list[QuizRecord] = []
    reader = csv.reader(lines, strict=True)
    try:
        for row in reader:
            if len(row) != 2:
                logger.debug("%s:%d: skipping row with %d field(s)", source, reader.line_num, len(row))
                continue
            question, answer = row
            records.append(QuizRecord(question=question.strip(), answer=answer.strip()))
    except csv.Error as e:
        raise ParseError(f"Failed to read the CSV file: {source}, line {reader.line_num}: {e}") from e
    except UnicodeDecodeError as e:
        raise ParseError(f"Failed to read the CSV file: {source} is not valid UTF-8") from e
    return records


def load_records(path: Union[str, Path]) -> list[QuizRecord]:
    """Read the whole quiz file into an ordered list of records."""
    p = Path(path)
    try:
        f = p.open(encoding="utf-8", newline="")
    except OSError as e:
        raise FileOpenError(f"Failed to open the CSV file: {e}") from e
    with f:
        records = parse_records(f, source=str(p))
    logger.debug("Loaded %d record(s) from %s", len(records), p)
    return records


def shuffle_records(records: list[QuizRecord], rng: random.Random) -> list[QuizRecord]:
    """Return a uniformly random permutation of `records`; the input is untouched."""
    shuffled = list(records)
    rng.shuffle(shuffled)
    return shuffled


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Random source for shuffling: fixed when `seed` is given, time-seeded otherwise."""
    if seed is None:
        seed = time.time_ns()
    logger.debug("Shuffle seed: %d", seed)
    return random.Random(seed)


def run_quiz(
    records: list[QuizRecord],
    limit_s: float,
    console: Console,
    stream: Optional[TextIO] = None,
) -> QuizSession:
    """Run the interactive quiz and return the finished session.

    The deadline starts once, when the user presses Enter, and is shared by
    every question. When it fires, the remaining questions are skipped.
    """
    if stream is None:
        stream = sys.stdin
    session = QuizSession(records=records)

    limit_label = f"{limit_s:g}"
    console.print(f"Press Enter to start the quiz (you have {limit_label} seconds)...", end="", markup=False)
    stream.readline()

    session.deadline = Deadline.start(limit_s)
    logger.debug("Deadline set %.3fs from now", limit_s)

    for number, record in enumerate(records, start=1):
        console.print(f"Question {number}: {record.question}", markup=False)
        line = read_line_before(session.deadline, stream)
        if line is None:
            console.print()
            console.print("Time's up!")
            session.timed_out = True
            break
        outcome = session.record_answer(number, record, line)
        logger.debug("Question %d answered %r (%s)", number, outcome.given,
                     "correct" if outcome.correct else "wrong")

    console.print()
    console.print(session.score_line(), markup=False)
    return session


def render_review(session: QuizSession, console: Console) -> None:
    """Render a Rich table of the questions that were answered in time."""
    if not session.outcomes:
        console.print("[yellow]No questions were answered.[/yellow]")
        return

    table = Table(
        title=f"Review: {session.correct}/{session.total}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Question", min_width=20)
    table.add_column("Your answer")
    table.add_column("Expected")
    table.add_column("Result", justify="center")

    for outcome in session.outcomes:
        verdict = "[green]correct[/green]" if outcome.correct else "[red]wrong[/red]"
        table.add_row(
            str(outcome.number),
            escape(outcome.record.question),
            escape(outcome.given) or "[dim]--[/dim]",
            escape(outcome.record.answer),
            verdict,
        )

    skipped = session.total - session.asked
    console.print()
    console.print(table)
    if skipped:
        console.print(f"[dim]{skipped} question(s) not reached before the deadline.[/dim]")
    console.print()
