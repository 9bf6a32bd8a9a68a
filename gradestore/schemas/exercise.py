from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class QuestionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    desc: str | None = None
    points: int = 0


class QuestionRead(QuestionCreate):
    question_id: int

    class Config:
        from_attributes = True


class ExerciseCreate(BaseModel):
    id: int
    name: str = Field(min_length=1, max_length=255)
    due_date: Optional[datetime] = None
    questions: list[QuestionCreate] = []


class ExerciseRead(BaseModel):
    id: int
    name: str
    due_date: Optional[datetime] = None
    questions: list[QuestionRead] = []
