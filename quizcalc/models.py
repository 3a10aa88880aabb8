"""Data models for quizcalc.

Operator enum, QuizRecord, QuestionOutcome, QuizSession — the typed
structures that flow through loader → quiz loop → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from quizcalc.deadline import Deadline


class Operator(str, Enum):
    """Calculator operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True)
class QuizRecord:
    """One question/answer pair loaded from the quiz CSV."""

    question: str
    answer: str

    def matches(self, given: str) -> bool:
        """Case-insensitive, whitespace-trimmed comparison with the answer."""
        return given.strip().lower() == self.answer.strip().lower()


@dataclass
class QuestionOutcome:
    """A question that was actually presented and answered before the deadline."""

    number: int
    record: QuizRecord
    given: str
    correct: bool


@dataclass
class QuizSession:
    """State of one quiz run.

    `total` is the number of loaded records, not the number asked: questions
    skipped because the deadline fired still count in the denominator.
    """

    records: list[QuizRecord]
    deadline: Optional[Deadline] = None
    correct: int = 0
    outcomes: list[QuestionOutcome] = field(default_factory=list)
    timed_out: bool = False

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def asked(self) -> int:
        return len(self.outcomes)

    def record_answer(self, number: int, record: QuizRecord, given: str) -> QuestionOutcome:
        """Score one answer and append its outcome."""
        outcome = QuestionOutcome(
            number=number,
            record=record,
            given=given.strip(),
            correct=record.matches(given),
        )
        if outcome.correct:
            self.correct += 1
        self.outcomes.append(outcome)
        return outcome

    def score_line(self) -> str:
        return f"You scored {self.correct} out of {self.total}."
