"""
Selection policies over a user's submission history for one exercise.

Every policy has the same signature, ``policy(db, username, exercise_id, limit)``,
and returns a query whose rows are ``(submission_id, question_id, grade,
submission_time)`` for exactly one submission, ordered by question id and
capped at ``limit`` rows. No submissions means no rows; a chosen submission
with no grades gives a single row whose question_id and grade are None.
"""

from typing import Callable

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, aliased

from gradestore.models.submission import QuestionGrade, Submission
from gradestore.models.user import User

GradeRowsQuery = Callable[[Session, str, int, int], Query]


def _grade_rows(db: Session, chosen_submission_id, limit: int) -> Query:
    return (
        db.query(
            Submission.id.label("submission_id"),
            QuestionGrade.question_id.label("question_id"),
            QuestionGrade.grade.label("grade"),
            Submission.submission_time.label("submission_time"),
        )
        # outer join: a chosen submission without grades still yields one row
        # (question_id and grade NULL) so it is not mistaken for no submission
        .outerjoin(QuestionGrade, QuestionGrade.submission_id == Submission.id)
        .filter(Submission.id == chosen_submission_id)
        .order_by(QuestionGrade.question_id.asc())
        .limit(limit)
    )


def latest_submission_grades(db: Session, username: str, exercise_id: int, limit: int) -> Query:
    """
    Grades of the most recent submission.

    Ordering: submission_time desc, then submission id desc (ids grow with
    insertion order, so equal timestamps resolve to the later insert).
    """
    # aliased so the inner select never correlates with the outer Submission
    candidate = aliased(Submission)

    chosen = (
        db.query(candidate.id)
        .join(User, User.id == candidate.user_id)
        .filter(User.username == username, candidate.exercise_id == exercise_id)
        .order_by(candidate.submission_time.desc(), candidate.id.desc())
        .limit(1)
        .scalar_subquery()
    )
    return _grade_rows(db, chosen, limit)


def best_submission_grades(db: Session, username: str, exercise_id: int, limit: int) -> Query:
    """
    Grades of the submission with the highest total score.

    Two stages in one statement:
    - per-submission SUM(grade) for this (user, exercise)
    - arg-max over the totals, ties going to the later submission_time and
      then the higher submission id, same as latest_submission_grades
    """
    candidate = aliased(Submission)
    candidate_grade = aliased(QuestionGrade)

    totals = (
        db.query(
            candidate.id.label("submission_id"),
            candidate.submission_time.label("submission_time"),
            func.sum(candidate_grade.grade).label("total"),
        )
        .join(User, User.id == candidate.user_id)
        .join(candidate_grade, candidate_grade.submission_id == candidate.id)
        .filter(User.username == username, candidate.exercise_id == exercise_id)
        .group_by(candidate.id, candidate.submission_time)
        .subquery()
    )

    chosen = (
        db.query(totals.c.submission_id)
        .order_by(
            totals.c.total.desc(),
            totals.c.submission_time.desc(),
            totals.c.submission_id.desc(),
        )
        .limit(1)
        .scalar_subquery()
    )
    return _grade_rows(db, chosen, limit)
