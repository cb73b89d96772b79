"""Database model for multiple-choice questions."""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import Field as ORMField, SQLModel


class Question(SQLModel, table=True):
    """A question with its canonical answer and four options."""

    id: Optional[int] = ORMField(default=None, primary_key=True)
    question_text: str
    category: str = ORMField(index=True)
    difficulty_level: Optional[str] = None
    correct_answer: str
    option_1: str
    option_2: str
    option_3: str
    option_4: str

    @property
    def options(self) -> List[str]:
        return [self.option_1, self.option_2, self.option_3, self.option_4]


__all__ = ["Question"]
