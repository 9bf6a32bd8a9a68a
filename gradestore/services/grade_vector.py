import logging
from typing import Iterable, NamedTuple

from gradestore.core.errors import InconsistentSubmission

logger = logging.getLogger(__name__)


class GradeVector(NamedTuple):
    submission_id: int
    submission_time: int  # epoch milliseconds, as stored
    grades: list[float]


def assemble_grade_vector(rows: Iterable, question_count: int) -> GradeVector | None:
    """
    Build the dense grade list for one submission.

    ``rows`` must already be ordered by question id and belong to a single
    submission; row i lands in position i. A row with a None question_id
    marks a submission without grades. Returns None when there are no
    rows. Raises InconsistentSubmission when the grade count does not match
    ``question_count`` instead of padding with zeros.
    """
    submission_id = None
    submission_time = None
    grades: list[float] = []

    for row in rows:
        if submission_id is None:
            submission_id = row.submission_id
            submission_time = row.submission_time
        if row.question_id is not None:
            grades.append(float(row.grade))

    if submission_id is None:
        return None

    if len(grades) != question_count:
        logger.warning(
            "submission %s is incomplete: %d grade(s) for %d question(s)",
            submission_id,
            len(grades),
            question_count,
        )
        raise InconsistentSubmission(submission_id, expected=question_count, found=len(grades))

    return GradeVector(submission_id, submission_time, grades)
