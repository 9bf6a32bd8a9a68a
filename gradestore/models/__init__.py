from gradestore.models.exercise import Exercise, Question  # noqa: F401
from gradestore.models.submission import QuestionGrade, Submission  # noqa: F401
from gradestore.models.user import User  # noqa: F401
