import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from gradestore.core.errors import ExerciseAlreadyExists, StorageUnavailable
from gradestore.core.timestamps import from_epoch_millis, to_epoch_millis
from gradestore.models.exercise import Exercise, Question
from gradestore.schemas.exercise import ExerciseCreate, ExerciseRead, QuestionRead

logger = logging.getLogger(__name__)


def add_exercise(db: Session, payload: ExerciseCreate) -> int:
    """
    Insert an exercise and its questions.

    Question ids are the 1-based positions in ``payload.questions``.
    Raises ExerciseAlreadyExists if the id is taken.
    """
    try:
        if db.get(Exercise, payload.id) is not None:
            raise ExerciseAlreadyExists(payload.id)

        exercise = Exercise(
            id=payload.id,
            name=payload.name.strip(),
            due_date=to_epoch_millis(payload.due_date) if payload.due_date else None,
        )
        exercise.questions = [
            Question(
                question_id=position,
                name=q.name.strip(),
                desc=q.desc.strip() if q.desc is not None else None,
                points=q.points,
            )
            for position, q in enumerate(payload.questions, start=1)
        ]
        db.add(exercise)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageUnavailable(str(exc)) from exc

    logger.info("exercise %s added with %d question(s)", payload.id, len(payload.questions))
    return payload.id


def _to_read(exercise: Exercise) -> ExerciseRead:
    return ExerciseRead(
        id=exercise.id,
        name=exercise.name,
        due_date=from_epoch_millis(exercise.due_date) if exercise.due_date is not None else None,
        questions=[QuestionRead.model_validate(q) for q in exercise.questions],
    )


def load_exercises(db: Session) -> list[ExerciseRead]:
    """All exercises ordered by id, questions ordered by question id."""
    try:
        exercises = (
            db.query(Exercise)
            .options(selectinload(Exercise.questions))
            .order_by(Exercise.id.asc())
            .all()
        )
    except SQLAlchemyError as exc:
        raise StorageUnavailable(str(exc)) from exc

    return [_to_read(e) for e in exercises]
