"""Quiz submission: answer checking, scoring and persistence."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sqlmodel import Session

from ..core.database import SQL_INTEGER_MAX
from ..core.errors import InvalidInput
from . import scoring
from .questions import questions_by_id
from .scores import normalize_category, record_score
from .users import normalize_user_name, resolve_user

logger = logging.getLogger(__name__)


@dataclass
class Evaluation:
    """Per-question outcomes for one submitted quiz."""

    outcomes: Dict[int, bool] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def correct(self) -> int:
        return sum(1 for outcome in self.outcomes.values() if outcome)

    @property
    def score(self) -> int:
        return scoring.score(self.outcomes.values())


def _first_present(item: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in item:
            return item[key]
    return None


def parse_answers(raw: Any) -> Dict[int, Optional[str]]:
    """Validate the ``answers`` payload into ``{question_id: selected_answer}``.

    Accepts camelCase and snake_case keys. The first answer given for a
    question wins. Ids outside the storable integer range are rejected
    rather than looked up.
    """

    if not isinstance(raw, list):
        raise InvalidInput("Missing required data in request body")
    if not raw:
        raise InvalidInput("At least one answer is required")

    answers: Dict[int, Optional[str]] = {}
    for item in raw:
        if not isinstance(item, dict):
            raise InvalidInput("Each answer must be an object")
        question_id = _first_present(item, "questionId", "question_id")
        if isinstance(question_id, bool) or not isinstance(question_id, int):
            raise InvalidInput("Each answer needs an integer questionId")
        if not 1 <= question_id <= SQL_INTEGER_MAX:
            raise InvalidInput(f"Unknown questionId {question_id}")
        selected = _first_present(item, "selectedAnswer", "selected_answer")
        answers.setdefault(question_id, selected)
    return answers


def evaluate(
    session: Session, category: str, answers: Dict[int, Optional[str]]
) -> Evaluation:
    """Check each answered question of ``category`` against its canonical answer.

    Only listed questions are scored: a question the client leaves out of
    ``answers`` does not count, while one listed with no ``selectedAnswer``
    counts as wrong. Answers to unknown questions or to questions from
    another category are ignored. An empty evaluation means nothing could be
    scored.
    """

    questions = questions_by_id(session, category, list(answers))
    evaluation = Evaluation()
    for question in questions:
        submitted = answers.get(question.id)
        is_correct = scoring.matches(question.correct_answer, submitted)
        if not is_correct:
            logger.debug(
                "Mismatch for question %s: submitted=%r expected=%r",
                question.id,
                submitted,
                question.correct_answer,
            )
        evaluation.outcomes[question.id] = is_correct

    ignored = set(answers) - set(evaluation.outcomes)
    if ignored:
        logger.warning(
            "Ignoring answers for questions outside %r: %s", category, sorted(ignored)
        )
    return evaluation


def submit_quiz(
    session: Session, name: Any, category: Any, raw_answers: Any
) -> Optional[Dict[str, Any]]:
    """Score a quiz server-side and persist the result.

    The percentage covers exactly the questions listed in ``raw_answers``;
    clients must list every question they served, unanswered ones included.
    Returns ``None`` when none of the answers refer to a question of the
    category.
    """

    name = normalize_user_name(name)
    category = normalize_category(category)
    answers = parse_answers(raw_answers)

    evaluation = evaluate(session, category, answers)
    if not evaluation.total:
        return None

    percentage = evaluation.score
    user_id = resolve_user(session, name)
    record_score(session, user_id, category, percentage)

    logger.info(
        "Score submitted: %s - %s/%s (%s%%) in %s",
        name,
        evaluation.correct,
        evaluation.total,
        percentage,
        category,
    )
    return {
        "message": "Score stored successfully.",
        "score": percentage,
        "correct": evaluation.correct,
        "total": evaluation.total,
    }


__all__ = ["Evaluation", "evaluate", "parse_answers", "submit_quiz"]
