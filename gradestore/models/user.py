from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gradestore.db.base_class import Base


class User(Base):
    __tablename__ = "User"

    id: Mapped[int] = mapped_column("UserId", primary_key=True)
    username: Mapped[str] = mapped_column(
        "Username", String(255), unique=True, index=True, nullable=False
    )
    firstname: Mapped[str | None] = mapped_column("Firstname", String(255))
    lastname: Mapped[str | None] = mapped_column("Lastname", String(255))
    # passlib hash, never the plaintext
    password: Mapped[str | None] = mapped_column("Password", String(255))

    submissions = relationship(
        "Submission", back_populates="user", cascade="all, delete-orphan"
    )
