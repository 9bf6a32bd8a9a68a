import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# DEV default: a SQLite file next to the project. Override with GRADESTORE_DATABASE_URL.
DATABASE_URL = os.getenv("GRADESTORE_DATABASE_URL", f"sqlite:///{BASE_DIR}/gradestore.db")

# passlib schemes, first one is used for new hashes
PASSWORD_SCHEMES = ["pbkdf2_sha256"]
