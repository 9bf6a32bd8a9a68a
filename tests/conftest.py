from datetime import datetime, timezone

import pytest
from sqlalchemy.pool import StaticPool

from gradestore.db.init_db import init_db
from gradestore.db.session import create_db_engine, get_db, make_session_factory
from gradestore.schemas.exercise import ExerciseCreate, QuestionCreate
from gradestore.schemas.submission import SubmissionCreate
from gradestore.schemas.user import UserBase, UserRead
from gradestore.services.exercises import add_exercise, load_exercises
from gradestore.services.submissions import store_submission
from gradestore.services.users import add_or_update_user

TEST_DB_URL = "sqlite://"


def at(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


@pytest.fixture()
def engine():
    """Fresh in-memory database per test."""
    engine = create_db_engine(TEST_DB_URL, poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    with get_db(make_session_factory(engine)) as session:
        yield session


@pytest.fixture()
def alice(db):
    user_id = add_or_update_user(
        db, UserBase(username="alice", firstname="Alice", lastname="Liddell"), "password123"
    )
    return UserRead(id=user_id, username="alice", firstname="Alice", lastname="Liddell")


@pytest.fixture()
def bob(db):
    user_id = add_or_update_user(
        db, UserBase(username="bob", firstname="Bob", lastname="Builder"), "password123"
    )
    return UserRead(id=user_id, username="bob", firstname="Bob", lastname="Builder")


def _exercise(db, exercise_id: int, question_count: int):
    add_exercise(
        db,
        ExerciseCreate(
            id=exercise_id,
            name=f"HW{exercise_id}",
            due_date=at(1_000_000),
            questions=[
                QuestionCreate(name=f"Q{i}", desc=f"question {i}", points=10)
                for i in range(1, question_count + 1)
            ],
        ),
    )
    return next(e for e in load_exercises(db) if e.id == exercise_id)


@pytest.fixture()
def two_question_exercise(db):
    return _exercise(db, 1, 2)


@pytest.fixture()
def three_question_exercise(db):
    return _exercise(db, 2, 3)


@pytest.fixture()
def submit(db):
    """submit(user, exercise, grades, seconds, id=None) -> submission id"""

    def _submit(user, exercise, grades, seconds, submission_id=None):
        return store_submission(
            db,
            SubmissionCreate(
                id=submission_id,
                username=user.username,
                exercise_id=exercise.id,
                submission_time=at(seconds),
                grades=grades,
            ),
        )

    return _submit
