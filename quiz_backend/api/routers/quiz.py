"""Quiz play endpoints: categories, questions and submissions."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path
from sqlmodel import Session

from ...core import (
    QUESTIONS_PER_QUIZ,
    SQL_INTEGER_MAX,
    InvalidInput,
    NoData,
    get_session,
)
from ...services.questions import (
    get_question,
    list_categories,
    question_to_dict,
    questions_for_category,
)
from ...services.scores import normalize_category
from ...services.submissions import evaluate, parse_answers, submit_quiz

router = APIRouter(prefix="/api/quiz", tags=["quiz"])


@router.get("")
def quiz_index() -> Dict[str, str]:
    return {"message": "Quiz API is working"}


@router.get("/categories")
def get_categories(session: Session = Depends(get_session)) -> List[str]:
    """List quiz categories."""

    categories = list_categories(session)
    if not categories:
        raise NoData("No categories found")
    return categories


@router.get("/questions")
def get_questions(
    category: Optional[str] = None, session: Session = Depends(get_session)
):
    """Random questions for a category with shuffled options."""

    if not category or not category.strip():
        raise InvalidInput("Missing category parameter.")

    questions = questions_for_category(session, category.strip(), QUESTIONS_PER_QUIZ)
    if not questions:
        raise NoData("No questions found for this category.")
    return questions


@router.get("/questions/{question_id}")
def get_question_by_id(
    question_id: int = Path(..., ge=1, le=SQL_INTEGER_MAX),
    session: Session = Depends(get_session),
):
    """Get a single question with options in stored order."""

    question = get_question(session, question_id)
    if not question:
        raise NoData("Question not found")
    return question_to_dict(question)


@router.post("/submit")
def submit(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Score submitted answers and store the result."""

    result = submit_quiz(
        session, body.get("name"), body.get("category"), body.get("answers")
    )
    if result is None:
        raise NoData("No questions found for this category.")
    return result


@router.post("/preview")
def preview(body: Dict[str, Any], session: Session = Depends(get_session)):
    """Score answers exactly like ``/submit`` without storing anything."""

    category = normalize_category(body.get("category"))
    answers = parse_answers(body.get("answers"))

    evaluation = evaluate(session, category, answers)
    if not evaluation.total:
        raise NoData("No questions found for this category.")

    return {
        "score": evaluation.score,
        "correct": evaluation.correct,
        "total": evaluation.total,
        "results": [
            {"questionId": question_id, "correct": outcome}
            for question_id, outcome in evaluation.outcomes.items()
        ],
    }


__all__ = ["router"]
