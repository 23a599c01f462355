# janeitequiz

*Pride, Prejudice, and Propriety: A Jane Austen Quiz.*

Think you know the Bennets? This is a ten-question multiple-choice quiz on
*Pride and Prejudice* that runs in your terminal. After each answer it tells
you whether you were right and, if not, what the correct answer was. It then
shows a short "Regency Context" note on the customs behind the question: how
freely women could travel, marriage and inheritance, coverture, and reputation.

## Installing

```
pip install .
```

## Playing

```
janeitequiz
```

Each question has four choices, `a` to `d`. Type a letter to answer; an empty
answer counts as wrong. Other commands at the prompt:

- `back` returns to the previous question (from the second question on), which
  can then be answered again;
- `quit` leaves the quiz without a score. End of input (Ctrl-D) does the same.

Every correct submission earns one point. After question 10 the quiz prints
your score out of 10; since going back lets a question be answered more than
once, the reported score is capped at the number of questions.

## Using it from Python

```python
from janeitequiz.questions import QUESTIONS, get_question
from janeitequiz.session import QuizSession

question = get_question(1)          # numbered from 1; ValueError outside 1-10
print(question.answer_text())       # the correct choice without its "d." label
print(question.is_correct("d"))     # True; also takes an index (3) or None

session = QuizSession()             # all ten questions; or pass your own sequence
feedback = session.submit("d")      # Feedback(correct, message, context)
print(feedback.correct, feedback.message)
print(session.current().number)     # 2
print(session.can_go_back())        # True
session.back()
```

`QuizSession.submit` raises `ValueError` for a letter or index that names no
choice and `RuntimeError` once the quiz is finished. `finished()` tells whether
the last question has been answered, `final_score` gives the capped score and
`final_message()` the closing line.

`janeitequiz.cli.run(session, read, write)` drives a session through any pair
of input and output callables (for example `input` and `print`) and returns the
final score, or `None` if the player quit or input ran out.

## What it does not do

The quiz is text only: there is no graphical window and no pictures, and scores
are not saved between runs.

## Development

```
pip install -e .[test]
pytest
```