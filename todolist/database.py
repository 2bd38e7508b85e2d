from contextlib import contextmanager

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


class Database:
    """Engine plus session factory for one database URL.

    Built once by the application factory and kept on ``app.state.database``.
    """

    def __init__(self, url: str):
        # Only apply sqlite-specific connect_args when using sqlite
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}

        # pool_pre_ping avoids handing out stale connections after a DB restart
        self.engine = create_engine(
            url,
            connect_args=connect_args,
            pool_pre_ping=True,
        )
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self):
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()

    @contextmanager
    def session(self):
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


def get_db(request: Request):
    with request.app.state.database.session() as db:
        yield db
