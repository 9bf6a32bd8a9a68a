import pytest

from gradestore.core.errors import ExerciseNotFound, UserNotFound
from gradestore.models.submission import QuestionGrade, Submission
from gradestore.schemas.submission import SubmissionCreate
from gradestore.services.submissions import store_submission
from tests.conftest import at


def test_store_submission_writes_one_grade_per_question(db, alice, three_question_exercise, submit):
    submission_id = submit(alice, three_question_exercise, [1.0, 2.0, 3.5], 100)

    stored = db.get(Submission, submission_id)
    assert stored.user_id == alice.id
    assert stored.exercise_id == three_question_exercise.id
    assert stored.submission_time == 100_000
    assert [(g.question_id, g.grade) for g in stored.grades] == [(1, 1.0), (2, 2.0), (3, 3.5)]


def test_explicit_submission_id_is_kept(db, alice, two_question_exercise, submit):
    assert submit(alice, two_question_exercise, [1.0, 1.0], 100, submission_id=42) == 42


def test_ids_are_assigned_in_insert_order(db, alice, two_question_exercise, submit):
    first = submit(alice, two_question_exercise, [1.0, 1.0], 100)
    second = submit(alice, two_question_exercise, [1.0, 1.0], 100)

    assert second > first


def test_unknown_user_is_rejected(db, two_question_exercise):
    with pytest.raises(UserNotFound):
        store_submission(
            db,
            SubmissionCreate(username="ghost", exercise_id=two_question_exercise.id, submission_time=at(1), grades=[1, 1]),
        )
    assert db.query(Submission).count() == 0


def test_unknown_exercise_is_rejected(db, alice):
    with pytest.raises(ExerciseNotFound):
        store_submission(
            db,
            SubmissionCreate(username="alice", exercise_id=999, submission_time=at(1), grades=[1.0]),
        )


def test_grade_count_must_match_questions(db, alice, three_question_exercise):
    with pytest.raises(ValueError):
        store_submission(
            db,
            SubmissionCreate(
                username="alice", exercise_id=three_question_exercise.id, submission_time=at(1), grades=[1.0, 2.0]
            ),
        )
    assert db.query(QuestionGrade).count() == 0
