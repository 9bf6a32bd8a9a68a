import logging

from sqlalchemy.engine import Engine

from gradestore.db.base import Base

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """Create the User, Exercise, Question, Submission and QuestionGrade tables if missing."""
    Base.metadata.create_all(bind=engine)
    logger.info("schema ready on %s", engine.url.render_as_string(hide_password=True))
