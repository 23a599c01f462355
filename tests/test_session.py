import pytest

from janeitequiz.questions import QUESTIONS, Question
from janeitequiz.session import CORRECT_MESSAGE, WRONG_MESSAGE, QuizSession


def right(question):
    return question.letters[question.correct]


def wrong(question):
    return next(letter for letter in question.letters if letter != right(question))


def answer_all_correctly(session):
    while not session.finished():
        session.submit(right(session.current()))


def test_starts_at_first_question():
    session = QuizSession()
    assert session.number == 1
    assert session.current() is QUESTIONS[0]
    assert session.score == 0
    assert not session.finished()
    assert not session.can_go_back()


def test_correct_answer_earns_point_and_advances():
    session = QuizSession()
    feedback = session.submit("d")
    assert feedback.correct is True
    assert feedback.message == CORRECT_MESSAGE
    assert feedback.context == QUESTIONS[0].context
    assert session.score == 1
    assert session.number == 2
    assert session.can_go_back()


def test_wrong_answer_reveals_correct_one():
    session = QuizSession()
    feedback = session.submit("a")
    assert feedback.correct is False
    assert feedback.message == WRONG_MESSAGE + QUESTIONS[0].answer_text()
    assert session.score == 0
    assert session.number == 2


def test_no_selection_counts_as_wrong():
    session = QuizSession()
    feedback = session.submit(None)
    assert feedback.correct is False
    assert session.number == 2


def test_invalid_choice_leaves_state_unchanged():
    session = QuizSession()
    with pytest.raises(ValueError):
        session.submit("z")
    assert session.number == 1
    assert session.score == 0


def test_back_moves_to_previous_question():
    session = QuizSession()
    session.submit("d")
    assert session.back() is True
    assert session.number == 1
    assert session.back() is False
    assert session.number == 1


def test_perfect_run():
    session = QuizSession()
    answer_all_correctly(session)
    assert session.finished()
    assert session.score == len(QUESTIONS)
    assert session.final_message() == "Congrats! You finished! You scored 10 out of 10 points."


def test_all_wrong_run():
    session = QuizSession()
    while not session.finished():
        session.submit(wrong(session.current()))
    assert session.score == 0
    assert session.final_score == 0


def test_reanswering_can_exceed_total_but_report_is_capped():
    session = QuizSession()
    session.submit(right(session.current()))
    session.back()
    answer_all_correctly(session)
    assert session.score == len(QUESTIONS) + 1
    assert session.final_score == len(QUESTIONS)
    assert f"scored {len(QUESTIONS)} out of {len(QUESTIONS)}" in session.final_message()


def test_finished_session_refuses_more_input():
    session = QuizSession()
    answer_all_correctly(session)
    assert not session.can_go_back()
    with pytest.raises(RuntimeError):
        session.submit("a")
    with pytest.raises(RuntimeError):
        session.back()


def test_last_question_stays_current_after_finishing():
    session = QuizSession()
    answer_all_correctly(session)
    assert session.current() is QUESTIONS[-1]


def test_custom_question_list():
    question = Question(number=1, prompt="1. Q?", choices=("a. yes", "b. no"), correct=1, context="ctx")
    session = QuizSession([question])
    feedback = session.submit("b")
    assert feedback.context == "ctx"
    assert session.finished()
    assert session.total == 1
    assert session.final_score == 1


def test_empty_question_list_rejected():
    with pytest.raises(ValueError):
        QuizSession([])