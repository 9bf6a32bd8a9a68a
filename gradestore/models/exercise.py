from sqlalchemy import BigInteger, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gradestore.db.base_class import Base


class Exercise(Base):
    __tablename__ = "Exercise"

    # caller-supplied, never autoincremented
    id: Mapped[int] = mapped_column("ExerciseId", Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
    # epoch milliseconds
    due_date: Mapped[int | None] = mapped_column("DueDate", BigInteger)

    questions = relationship(
        "Question",
        back_populates="exercise",
        cascade="all, delete-orphan",
        order_by="Question.question_id",
    )

    submissions = relationship("Submission", back_populates="exercise")


class Question(Base):
    __tablename__ = "Question"

    exercise_id: Mapped[int] = mapped_column(
        "ExerciseId", ForeignKey("Exercise.ExerciseId", ondelete="CASCADE"), primary_key=True
    )
    # 1-based position within the exercise
    question_id: Mapped[int] = mapped_column("QuestionId", Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column("Name", String(255), nullable=False)
    desc: Mapped[str | None] = mapped_column("Desc", Text)
    points: Mapped[int] = mapped_column("Points", Integer, nullable=False, default=0)

    exercise = relationship("Exercise", back_populates="questions")
