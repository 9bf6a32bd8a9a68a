from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from gradestore.schemas.exercise import ExerciseRead
from gradestore.schemas.user import UserBase


class SubmissionCreate(BaseModel):
    # store-assigned when None
    id: Optional[int] = None
    username: str
    exercise_id: int
    submission_time: datetime
    grades: list[float]


class SubmissionRead(BaseModel):
    id: int
    user: UserBase
    exercise: ExerciseRead
    submission_time: datetime
    # indexed by question position, grades[0] is question 1
    grades: list[float]
