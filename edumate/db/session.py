# edumate/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from edumate.core.config import settings

# SQLite needs this to be shared across the threadpool FastAPI runs sync routes in
engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
