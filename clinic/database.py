import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from .config import settings

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves foreign key enforcement off for every new connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


class Database:
    """Owns the engine for one clinic database.

    Opened once at startup and closed at shutdown. Each ``session()`` is a
    single unit of work.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None):
        self.url = url or settings.DATABASE_URL
        self.echo = settings.SQL_ECHO if echo is None else echo
        self._engine: Optional[Engine] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("Database is not open")
        return self._engine

    def open(self) -> "Database":
        if self._engine is not None:
            return self
        engine_kwargs = {}
        if self.is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs.update({"pool_pre_ping": True, "pool_recycle": 300})

        engine = create_engine(self.url, echo=self.echo, **engine_kwargs)
        if self.is_sqlite:
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)

        # Register table metadata before create_all
        from . import db  # noqa: F401

        SQLModel.metadata.create_all(engine)
        self._engine = engine
        logger.info(f"Database opened: {engine.url.render_as_string(hide_password=True)}")
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("Database closed")

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
