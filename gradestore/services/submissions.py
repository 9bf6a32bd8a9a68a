import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gradestore.core.errors import ExerciseNotFound, StorageUnavailable, UserNotFound
from gradestore.core.timestamps import to_epoch_millis
from gradestore.models.exercise import Exercise, Question
from gradestore.models.submission import QuestionGrade, Submission
from gradestore.models.user import User
from gradestore.schemas.submission import SubmissionCreate

logger = logging.getLogger(__name__)


def store_submission(db: Session, payload: SubmissionCreate) -> int:
    """
    Persist a submission and one grade row per question in a single commit.

    ``payload.grades[i]`` is the grade for question i + 1. Returns the
    submission id (``payload.id`` when given, store-assigned otherwise).
    """
    try:
        user = db.query(User).filter(User.username == payload.username).first()
        if not user:
            raise UserNotFound(payload.username)

        if db.get(Exercise, payload.exercise_id) is None:
            raise ExerciseNotFound(payload.exercise_id)

        question_count = (
            db.query(func.count(Question.question_id))
            .filter(Question.exercise_id == payload.exercise_id)
            .scalar()
        )
        if len(payload.grades) != question_count:
            raise ValueError(
                f"exercise {payload.exercise_id} has {question_count} question(s), got {len(payload.grades)} grade(s)"
            )

        s = Submission(
            id=payload.id,
            user_id=user.id,
            exercise_id=payload.exercise_id,
            submission_time=to_epoch_millis(payload.submission_time),
        )
        s.grades = [
            QuestionGrade(question_id=position, grade=grade)
            for position, grade in enumerate(payload.grades, start=1)
        ]
        db.add(s)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageUnavailable(str(exc)) from exc

    db.refresh(s)
    logger.info(
        "stored submission %s for %s on exercise %s", s.id, payload.username, payload.exercise_id
    )
    return s.id
