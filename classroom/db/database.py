# /classroom/db/database.py

from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .base import Base


class Database:
    """
    Owns the SQLAlchemy engine and session factory for one process.

    Built once by `create_app` and stored on `app.state`; request handlers get
    sessions from it through the `get_db` dependency.
    """

    def __init__(self, database_url: str):
        self.url = database_url
        self.engine = self._build_engine(database_url)
        # Create a SessionLocal class. Each instance of this class will be a database session.
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _build_engine(database_url: str) -> Engine:
        if not database_url.startswith("sqlite"):
            return create_engine(database_url)

        # The 'check_same_thread' argument is only needed for SQLite.
        engine_args = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # An in-memory database lives inside a single connection.
            engine_args["poolclass"] = StaticPool
        engine = create_engine(database_url, **engine_args)

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    def create_all(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


# Dependency to get a DB session. This will be used in our API routers.
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
