"""Terminal front end for the quiz."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from .session import QuizSession

__all__ = ["run", "main"]

TITLE = "Pride and Prejudice Quiz"
INTRO = (
    "Pride, Prejudice, and Propriety: A Jane Austen Quiz\n\n"
    "Think you know the Bennets? Are you a true Janeite? "
    "Test your knowledge of Jane Austen's most beloved novel!"
)
CONTEXT_HEADING = "Regency Context:\n\n"
NO_PREVIOUS = "There is no previous question."
INVALID_CHOICE = "Please answer with one of the letters shown, or type 'back' or 'quit'."
BACK_COMMAND = "back"
QUIT_COMMAND = "quit"


def _prompt(session: QuizSession) -> str:
    letters = session.current().letters
    options = f"{letters[0]}-{letters[-1]}"
    if session.can_go_back():
        options += ", back"
    return f"Answer ({options}): "


def _show_question(session: QuizSession, write: Callable[[str], object]) -> None:
    question = session.current()
    write("")
    write(question.prompt.rstrip())
    for choice in question.choices:
        write(f"  {choice}")


def run(
    session: QuizSession,
    read: Callable[[str], str],
    write: Callable[[str], object],
) -> int | None:
    """Play ``session`` with ``read`` for input and ``write`` for output.

    Returns the final score, or None if the player quit or input ran out.
    """
    shown: int | None = None
    while not session.finished():
        if session.number != shown:
            if session.number == 1:
                write(INTRO)
            _show_question(session, write)
            shown = session.number
        try:
            reply = read(_prompt(session)).strip().lower()
        except EOFError:
            return None
        if reply == QUIT_COMMAND:
            return None
        if reply == BACK_COMMAND:
            if not session.back():
                write(NO_PREVIOUS)
            continue
        try:
            feedback = session.submit(reply or None)
        except ValueError:
            write(INVALID_CHOICE)
            continue
        write(feedback.message)
        write(CONTEXT_HEADING + feedback.context)
    write(session.final_message())
    return session.final_score


def main(argv: Sequence[str] | None = None) -> int:
    """Run the quiz in the terminal."""
    parser = argparse.ArgumentParser(prog="janeitequiz", description=TITLE)
    parser.parse_args(argv)
    print(TITLE)
    try:
        run(QuizSession(), input, print)
    except KeyboardInterrupt:
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())