"""Progress through the quiz: current question, navigation and score."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .questions import QUESTIONS, Question

__all__ = [
    "CORRECT_MESSAGE",
    "WRONG_MESSAGE",
    "Feedback",
    "QuizSession",
]

CORRECT_MESSAGE = "That was the correct answer!! You get a point!"
WRONG_MESSAGE = "Oops! That was the wrong answer. The correct one was: "
FINAL_MESSAGE = "Congrats! You finished! You scored {score} out of {total} points."


@dataclass(frozen=True)
class Feedback:
    """What the player is told after submitting an answer."""

    correct: bool
    message: str
    context: str


class QuizSession:
    """A run through a sequence of questions, one at a time.

    Answering moves forward; going back lets a question be answered again,
    and every correct submission earns a point. The final score is capped
    at the number of questions.
    """

    def __init__(self, questions: Sequence[Question] | None = None) -> None:
        self.questions: tuple[Question, ...] = tuple(
            QUESTIONS if questions is None else questions
        )
        if not self.questions:
            raise ValueError("a quiz needs at least one question")
        self.number = 1
        self.score = 0
        self._finished = False

    @property
    def total(self) -> int:
        """How many questions the quiz has."""
        return len(self.questions)

    @property
    def final_score(self) -> int:
        """The score as reported at the end, never above the total."""
        return min(self.score, self.total)

    def current(self) -> Question:
        """The question being asked now."""
        return self.questions[self.number - 1]

    def can_go_back(self) -> bool:
        """Whether there is an earlier question to return to."""
        return not self._finished and self.number > 1

    def back(self) -> bool:
        """Step back one question; return whether the position changed."""
        self._ensure_running()
        if self.number > 1:
            self.number -= 1
            return True
        return False

    def submit(self, choice: str | int | None) -> Feedback:
        """Answer the current question and move on.

        Raises ValueError for a choice that names no option and
        RuntimeError once the quiz is over.
        """
        self._ensure_running()
        question = self.current()
        correct = question.is_correct(choice)
        if correct:
            self.score += 1
            message = CORRECT_MESSAGE
        else:
            message = WRONG_MESSAGE + question.answer_text()
        if self.number < self.total:
            self.number += 1
        else:
            self._finished = True
        return Feedback(correct=correct, message=message, context=question.context)

    def finished(self) -> bool:
        """Whether the last question has been answered."""
        return self._finished

    def final_message(self) -> str:
        """The closing line with the final score."""
        return FINAL_MESSAGE.format(score=self.final_score, total=self.total)

    def _ensure_running(self) -> None:
        if self._finished:
            raise RuntimeError("the quiz is already finished")