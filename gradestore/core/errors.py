class GradeStoreError(Exception):
    """Base class for every error raised by gradestore."""


class StorageUnavailable(GradeStoreError):
    """The database failed to execute a statement."""


class InconsistentSubmission(GradeStoreError):
    """A submission exists but its grade rows do not cover the exercise."""

    def __init__(self, submission_id: int, expected: int, found: int):
        self.submission_id = submission_id
        self.expected = expected
        self.found = found
        super().__init__(
            f"submission {submission_id} has {found} grade(s), exercise declares {expected} question(s)"
        )


class UserNotFound(GradeStoreError):
    def __init__(self, username: str):
        self.username = username
        super().__init__(f"user {username!r} not found")


class ExerciseNotFound(GradeStoreError):
    def __init__(self, exercise_id: int):
        self.exercise_id = exercise_id
        super().__init__(f"exercise {exercise_id} not found")


class ExerciseAlreadyExists(GradeStoreError):
    def __init__(self, exercise_id: int):
        self.exercise_id = exercise_id
        super().__init__(f"exercise {exercise_id} already exists")
