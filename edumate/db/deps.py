# edumate/db/deps.py
from typing import Generator

from edumate.db.session import SessionLocal


def get_db() -> Generator:
    db = SessionLocal()  # one session per request
    try:
        yield db
    finally:
        db.close()
