# db/database.py
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from team_roster.config import Settings
from team_roster.db.models._base import Base
# Imported so that Base.metadata knows every table.
from team_roster.db.models.person import Person  # noqa: F401
from team_roster.db.models.team import Team  # noqa: F401
from team_roster.db.models.team_person import TeamPerson  # noqa: F401

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DataBase:
    """
    SQLAlchemy engine plus session factory.
    Usage:
        db = DataBase("sqlite:///teams.db")
        with db.session() as s:
            ...

    One ``session()`` block is one transaction. Stores receive the yielded
    session explicitly, so everything done inside the block commits or rolls
    back together.
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None) -> None:
        settings = Settings()
        url = url or settings.database_url
        echo = settings.db_echo if echo is None else echo

        self._engine: Engine = create_engine(url, echo=echo, pool_pre_ping=settings.db_pool_pre_ping)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)

        self._sessionmaker: sessionmaker[Session] = sessionmaker(
            bind=self._engine,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.debug("Engine created for %s", self._engine.url.render_as_string(hide_password=True))

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Provides a Session with safe commit/rollback semantics.

        Commits when the block exits normally. Any exception rolls the whole
        transaction back and is re-raised unchanged. The session is always closed.
        """
        session: Session = self._sessionmaker()
        try:
            yield session
            session.commit()
        except Exception as exc:
            logger.warning("Transaction rolled back after %s: %s", type(exc).__name__, exc)
            session.rollback()
            raise
        finally:
            session.close()

    # --- schema management helpers (optional) ---

    def create_all(self) -> None:
        """
        Create tables based on Base metadata. Use only in dev/tests.
        """
        Base.metadata.create_all(self._engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(self._engine)

    def dispose(self) -> None:
        self._engine.dispose()
