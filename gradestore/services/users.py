import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gradestore.core.errors import StorageUnavailable
from gradestore.core.security import hash_password, verify_password
from gradestore.models.user import User
from gradestore.schemas.user import UserBase

logger = logging.getLogger(__name__)


def _strip(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def add_or_update_user(db: Session, payload: UserBase, password: str) -> int:
    """Insert the user, or update names and password if the username exists. Returns the user id."""
    username = payload.username.strip()

    try:
        user = db.query(User).filter(User.username == username).first()
        if user:
            user.firstname = _strip(payload.firstname)
            user.lastname = _strip(payload.lastname)
            user.password = hash_password(password.strip())
            action = "updated"
        else:
            user = User(
                username=username,
                firstname=_strip(payload.firstname),
                lastname=_strip(payload.lastname),
                password=hash_password(password.strip()),
            )
            db.add(user)
            action = "created"

        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StorageUnavailable(str(exc)) from exc

    db.refresh(user)
    logger.info("user %s %s (id=%s)", username, action, user.id)
    return user.id


def verify_login(db: Session, username: str, password: str) -> bool:
    try:
        user = db.query(User).filter(User.username == username.strip()).first()
    except SQLAlchemyError as exc:
        raise StorageUnavailable(str(exc)) from exc

    if not user:
        return False
    return verify_password(password.strip(), user.password)
