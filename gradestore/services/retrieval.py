import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gradestore.core.errors import StorageUnavailable
from gradestore.core.timestamps import from_epoch_millis
from gradestore.schemas.exercise import ExerciseRead
from gradestore.schemas.submission import SubmissionRead
from gradestore.schemas.user import UserBase
from gradestore.services.grade_queries import (
    GradeRowsQuery,
    best_submission_grades,
    latest_submission_grades,
)
from gradestore.services.grade_vector import assemble_grade_vector

logger = logging.getLogger(__name__)


class SubmissionRetriever:
    """Read-only access to a user's last or best submission for an exercise."""

    def __init__(self, db: Session):
        self.db = db

    def get_last_submission(self, user: UserBase, exercise: ExerciseRead) -> SubmissionRead | None:
        return self.get_submission(user, exercise, latest_submission_grades)

    def get_best_submission(self, user: UserBase, exercise: ExerciseRead) -> SubmissionRead | None:
        return self.get_submission(user, exercise, best_submission_grades)

    def get_submission(
        self,
        user: UserBase,
        exercise: ExerciseRead,
        policy: GradeRowsQuery,
    ) -> SubmissionRead | None:
        """
        Run ``policy`` for (user, exercise) and materialize the chosen submission.

        Returns None if the user has no submission for the exercise (or is
        unknown). Raises InconsistentSubmission for a submission missing
        grades and StorageUnavailable if the query fails. Raises ValueError
        for an exercise without questions, since no submission can cover it.
        """
        question_count = len(exercise.questions)
        if question_count == 0:
            raise ValueError(f"exercise {exercise.id} has no questions")

        query = policy(self.db, user.username, exercise.id, question_count)

        try:
            # fetch everything so the cursor is closed before assembling
            rows = query.all()
        except SQLAlchemyError as exc:
            logger.error("%s failed for %s/%s: %s", policy.__name__, user.username, exercise.id, exc)
            raise StorageUnavailable(str(exc)) from exc

        logger.debug("%s returned %d row(s) for %s/%s", policy.__name__, len(rows), user.username, exercise.id)

        vector = assemble_grade_vector(rows, question_count)
        if vector is None:
            return None

        return SubmissionRead(
            id=vector.submission_id,
            user=user,
            exercise=exercise,
            submission_time=from_epoch_millis(vector.submission_time),
            grades=vector.grades,
        )
