# Package marker
from edumate.db.session import engine
from edumate.db.base import Base

def init_db():
    from edumate import models  # noqa: registers the tables on Base.metadata

    Base.metadata.create_all(bind=engine)
