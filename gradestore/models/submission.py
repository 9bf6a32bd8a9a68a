from sqlalchemy import BigInteger, Column, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship

from gradestore.db.base_class import Base


class Submission(Base):
    __tablename__ = "Submission"

    id = Column("SubmissionId", Integer, primary_key=True)

    user_id = Column("UserId", Integer, ForeignKey("User.UserId", ondelete="CASCADE"), nullable=False, index=True)
    exercise_id = Column("ExerciseId", Integer, ForeignKey("Exercise.ExerciseId"), nullable=False, index=True)

    # epoch milliseconds
    submission_time = Column("SubmissionTime", BigInteger, nullable=False)

    user = relationship("User", back_populates="submissions")
    exercise = relationship("Exercise", back_populates="submissions")

    grades = relationship(
        "QuestionGrade",
        back_populates="submission",
        cascade="all, delete-orphan",
        order_by="QuestionGrade.question_id",
    )


class QuestionGrade(Base):
    __tablename__ = "QuestionGrade"

    submission_id = Column(
        "SubmissionId", Integer, ForeignKey("Submission.SubmissionId", ondelete="CASCADE"), primary_key=True
    )
    question_id = Column("QuestionId", Integer, primary_key=True, autoincrement=False)
    grade = Column("Grade", Float, nullable=False)

    submission = relationship("Submission", back_populates="grades")
