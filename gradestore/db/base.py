from gradestore.db.base_class import Base

# import models so SQLAlchemy registers them on Base.metadata
from gradestore.models import exercise, submission, user  # noqa: F401
