from passlib.context import CryptContext

from gradestore.core.config import PASSWORD_SCHEMES

pwd_context = CryptContext(schemes=PASSWORD_SCHEMES, deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)
