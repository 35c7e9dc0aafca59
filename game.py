import logging
import random
from dataclasses import dataclass, field

from data import COUNTRIES

logger = logging.getLogger(__name__)

CHOICES = 3


class QuizError(Exception):
    pass


class InvalidFlagError(QuizError):
    pass


class StaleQuestionError(QuizError):
    pass


class AlreadyAnsweredError(QuizError):
    pass


@dataclass
class TapResult:
    correct: bool
    title: str
    subtitle: str
    score: int
    target: str
    tapped: str


@dataclass
class FlagQuiz:
    """Session state of one player: shuffled pool, current target and score.

    Only the first ``CHOICES`` countries of the pool are shown, and
    ``correct_answer`` always points into that slice.
    """

    countries: list[str] = field(default_factory=lambda: list(COUNTRIES))
    correct_answer: int = 0
    score: int = 0
    round_number: int = 0
    answered: bool = False
    correct: int = 0
    wrong: int = 0

    def __post_init__(self):
        if len(self.countries) < CHOICES:
            raise ValueError(f"Need at least {CHOICES} countries, got {len(self.countries)}")

    @classmethod
    def new(cls, pool=None, rng: random.Random | None = None) -> "FlagQuiz":
        quiz = cls(countries=list(pool if pool is not None else COUNTRIES))
        quiz.ask_question(rng)
        return quiz

    @property
    def choices(self) -> list[str]:
        return self.countries[:CHOICES]

    @property
    def target(self) -> str:
        return self.countries[self.correct_answer]

    @property
    def accuracy(self) -> float:
        taps = self.correct + self.wrong
        return self.correct / taps * 100 if taps else 0.0

    def ask_question(self, rng: random.Random | None = None) -> None:
        rng = rng or random
        rng.shuffle(self.countries)
        self.correct_answer = rng.randint(0, CHOICES - 1)
        self.round_number += 1
        self.answered = False

    def flag_tapped(self, number: int, round_number: int | None = None) -> TapResult:
        if not 0 <= number < CHOICES:
            raise InvalidFlagError(f"Flag {number} is not on screen")
        if round_number is not None and round_number != self.round_number:
            raise StaleQuestionError(f"Tap for round {round_number}, current round is {self.round_number}")
        if self.answered:
            raise AlreadyAnsweredError(f"Round {self.round_number} is already answered")

        self.answered = True
        subtitle = f"That’s the flag of {self.target}"
        is_correct = number == self.correct_answer
        if is_correct:
            self.score += 1
            self.correct += 1
            title = "Correct"
        else:
            self.score -= 1
            self.wrong += 1
            title = "Wrong"

        logger.info("Round %s: tapped %s, target %s, score %s", self.round_number, number, self.correct_answer, self.score)
        return TapResult(
            correct=is_correct,
            title=title,
            subtitle=subtitle,
            score=self.score,
            target=self.target,
            tapped=self.countries[number],
        )

    def reset(self, rng: random.Random | None = None) -> None:
        self.score = 0
        self.correct = 0
        self.wrong = 0
        self.ask_question(rng)

    def to_dict(self) -> dict:
        return {
            'countries': list(self.countries),
            'correct_answer': self.correct_answer,
            'score': self.score,
            'round_number': self.round_number,
            'answered': self.answered,
            'correct': self.correct,
            'wrong': self.wrong,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FlagQuiz":
        quiz = cls(
            countries=list(data['countries']),
            correct_answer=data['correct_answer'],
            score=data.get('score', 0),
            round_number=data.get('round_number', 0),
            answered=data.get('answered', False),
            correct=data.get('correct', 0),
            wrong=data.get('wrong', 0),
        )
        if not 0 <= quiz.correct_answer < CHOICES:
            raise ValueError(f"Stored answer {quiz.correct_answer} is out of range")
        return quiz
