"""The ten questions of the Pride and Prejudice quiz."""

from __future__ import annotations

import string
from dataclasses import dataclass

__all__ = ["Question", "QUESTIONS", "get_question"]


@dataclass(frozen=True)
class Question:
    """One multiple-choice question with its historical context."""

    number: int
    prompt: str
    choices: tuple[str, ...]
    correct: int
    context: str

    def __post_init__(self) -> None:
        if not self.choices:
            raise ValueError("a question needs at least one choice")
        if not 0 <= self.correct < len(self.choices):
            raise ValueError(f"correct choice {self.correct} is out of range")

    @property
    def letters(self) -> str:
        """The letters that select each choice, in order."""
        return string.ascii_lowercase[: len(self.choices)]

    def answer_text(self) -> str:
        """The correct choice without its leading letter label."""
        return " ".join(self.choices[self.correct].split(" ")[1:])

    def is_correct(self, choice: str | int | None) -> bool:
        """Whether ``choice`` (a letter, an index or None) is the right answer.

        ``None`` means nothing was selected, which counts as wrong.
        Raises ValueError for a letter or index that names no choice.
        """
        index = self._resolve(choice)
        return index is not None and index == self.correct

    def _resolve(self, choice: str | int | None) -> int | None:
        if choice is None:
            return None
        if isinstance(choice, bool):
            raise ValueError(f"not a choice: {choice!r}")
        if isinstance(choice, int):
            if 0 <= choice < len(self.choices):
                return choice
            raise ValueError(f"no choice with index {choice}")
        if isinstance(choice, str):
            letter = choice.strip().lower()
            if len(letter) == 1 and letter in self.letters:
                return self.letters.index(letter)
            raise ValueError(f"no choice labelled {choice!r}")
        raise ValueError(f"not a choice: {choice!r}")


QUESTIONS: tuple[Question, ...] = (
    Question(
        number=1,
        prompt="1. What did Mr. Bennet do when Lydia ran away?",
        choices=(
            "a. He didn't do anything, he didn't care",
            "b. He sent the servants to look for her",
            "c. He sent Elizabeth to London to look for her",
            "d. He went to London alone to look for her",
        ),
        correct=3,
        context=(
            "In the Regency, when it came to physical mobility—particularly the freedom "
            "associated with it—there were clear differences based on gender."
            " Men like Mr. Bennet were able to travel to places like London by themselves, "
            "for example, without consequence. This independence was a privilege belonging "
            "to men only."
        ),
    ),
    Question(
        number=2,
        prompt="2. Elizabeth's quest to see her sister, who was sick at Netherfield, was seen as: ",
        choices=(
            "a. Abnormal",
            "b. Selfless",
            "c. Selfish",
            "d. Normal",
        ),
        correct=0,
        context=(
            "Today, a woman walking alone may be considered normal, yet in the novel, "
            "Elizabeth's solo excursion was considered abnormal."
            " Why? Women were expected to be accompanied by a chaperone when walking. "
            "Walking alone was seen as unfeminine or could be thought to suggest sexual "
            "intentions."
        ),
    ),
    Question(
        number=3,
        prompt="3. What did Mr. Bingley do when he believed Jane had no feelings for him?",
        choices=(
            "a. He didn't care",
            "b. He set her up with someone else",
            "c. He proposed to Elizabeth instead",
            "d. He left Netherfield",
        ),
        correct=3,
        context=(
            "Mr. Bingley exercised his freedom to relocate when he left Netherfield because "
            "it no longer served him."
            " In this period, men could decide for themselves where they wanted to live, "
            "whereas the only time in a woman's life when she could willingly move was when "
            "she married."
        ),
    ),
    Question(
        number=4,
        prompt="4. What was Mrs. Bennet's main concern?",
        choices=(
            "a. Planning parties",
            "b. Writing letters to her sister",
            "c. Ensuring that her daughters were married",
            "d. Thoroughly educating her daughters",
        ),
        correct=2,
        context=(
            "While Mrs. Bennet may seem obsessive about marriage, this intense focus on it "
            "was logical at the time."
            " It was virtually the only way in which women could have financial security in "
            "economic and social systems that favored men."
        ),
    ),
    Question(
        number=5,
        prompt="5. Why was Elizabeth frustrated with her friend Charlotte?",
        choices=(
            "a. She married Mr. Collins",
            "b. She married Mr. Darcy",
            "c. She eloped with Mr. Wickham",
            "d. No legitimate reason",
        ),
        correct=0,
        context=(
            "Men inherited livings and they had access to a sufficient amount of job "
            "opportunities, allowing them to be self-sufficient."
            " Women, however, were largely dependent on marriage, as they were less equipped "
            "to financially support themselves."
        ),
    ),
    Question(
        number=6,
        prompt="6. How did Mrs. Bennet react when Elizabeth declined Mr. Collins' proposal?",
        choices=(
            "a. She understood",
            "b. She was happy about it",
            "c. She didn't care",
            "d. She was mad at her",
        ),
        correct=3,
        context=(
            "Women had limited job opportunities and could inherit a one-time sum of money, "
            "making them unable to support themselves as well as men could."
            " Thus, marrying a man was essential to be able to be financially secure as a "
            "woman."
            " Mrs. Bennet was mad, then, because marrying Mr. Collins would have guaranteed "
            "security for the Bennet women, as they would be able to continue residing at "
            "the Longbourn estate, which he was to inherit."
        ),
    ),
    Question(
        number=7,
        prompt="7. Why was Mr. Wickham interested in marrying Georgiana?",
        choices=(
            "a. He always loved her",
            "b. He wanted her inheritence",
            "c. He was going to marry her as a favor to Mr. Darcy",
            "d. Lady Catherine De Bourgh told him to marry her",
        ),
        correct=1,
        context=(
            "Marriage presented many restrictions on the rights of women, treating them "
            "virtually as the property of their husbands."
            " Upon marriage, all legal and financial possessions became their husbands', "
            "under coverture. Consequently, a marriage to Georgiana would ensure that "
            "Mr. Wickham would possess her inheritance."
        ),
    ),
    Question(
        number=8,
        prompt="8. What did Elizabeth think of Lydia's trip to Brighton?",
        choices=(
            "a. She thought she shouldn't go because she would get herself into trouble",
            "b. She thought it would be good for her to be independent",
            "c. She believed it would teach Lydia how to be a lady",
            "d. She was jealous of her",
        ),
        correct=0,
        context=(
            "As we've seen in the novel, Lydia was quite obsessive when it came to marriage "
            "and finding a man,"
            " essentially throwing herself at the militia regiment. Elizabeth was wary of "
            "Lydia's trip because women in the Regency era had to appear chaste,"
            " as they were heavily judged on the way they looked and carried themselves."
            " Chastity was said to aid them in having other moral qualities and increase "
            "their appeal to potential suitors."
        ),
    ),
    Question(
        number=9,
        prompt="9. Why was Lydia's elopement taken so seriously? ",
        choices=(
            "a. Mrs. Bennet wanted to be there when she got married",
            "b. It was not in Lydia's character",
            "c. Eloping would damage her reputation",
            "d. Mr. Wickham was a complete stranger to the Bennets",
        ),
        correct=2,
        context=(
            "Lydia's elopement would have resulted in damage to her reputation. A woman's "
            "reputation was extremely delicate and easily ruined in Regency England."
            " For example, if a woman ever appeared unchaste, it would damage her "
            "reputation. It was believed to be a serious offense, as it could have, "
            "allegedly, affected the morality of England."
        ),
    ),
    Question(
        number=10,
        prompt="10. What was Mr. Collins' reaction to Lydia's elopment?",
        choices=(
            "a. He believed it would damage the family's reputation as a whole",
            "b. He was happy for them and wished them well",
            "c. He was jealous of Mr. Wickham",
            "d. He didn't believe Mr. Wickham was good enough for Lydia",
        ),
        correct=0,
        context=(
            "Mr. Collins explained how the family name would be damaged as a result of the "
            "elopment...but how? A woman's ruined reputation not only affected her, but her "
            "family as well."
            " A woman in this predicament would often be shunned by her family, friends, and "
            "society in order to keep the family's reputation intact,"
            " as well as to protect society and England since her unchaste tendencies would "
            "damage the morality of both."
        ),
    ),
)


def get_question(number: int) -> Question:
    """Return question ``number``, counted from 1.

    Raises ValueError when there is no such question.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"question number must be an integer, not {number!r}")
    if not 1 <= number <= len(QUESTIONS):
        raise ValueError(f"there is no question {number}")
    return QUESTIONS[number - 1]