# performance_api/database.py
import logging
from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from performance_api.core.config import get_settings
from performance_api.core.errors import InternalError

settings = get_settings()
logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# SQLite connection
#
# - check_same_thread=False : FastAPI runs sync endpoints in a threadpool,
#                             so a connection may cross threads.
# - StaticPool (test only)  : keep ONE in-memory connection alive, otherwise
#                             every new connection gets an empty database.
# ---------------------------------------------------------

db_url = settings.database_url

engine_kwargs: dict = {"echo": False}
if db_url.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool

engine = create_engine(db_url, **engine_kwargs)


if db_url.startswith("sqlite"):

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
        # SQLite ignores FOREIGN KEY / ON DELETE clauses unless asked per connection.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_db_and_tables() -> None:
    """
    Create all tables defined in SQLModel metadata if they do not exist.

    This is called once on application startup.
    """
    SQLModel.metadata.create_all(engine)


def drop_db_and_tables() -> None:
    """Drop every table. Used by the seed script and the test suite."""
    SQLModel.metadata.drop_all(engine)


def get_session():
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session


@contextmanager
def storage_errors(session: Session, action: str):
    """
    Wrap storage calls so any engine fault surfaces as InternalError.

    The transaction is rolled back, the full traceback is logged, and the
    client gets `{"error": "Failed to <action>", "message": ...}` where
    message is the driver detail only in development.

        with storage_errors(session, "fetch players"):
            return self.repo.list(session)
    """
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Storage failure while trying to %s", action)
        raise InternalError(
            f"Failed to {action}",
            message=str(exc) if settings.is_development else "Something went wrong",
        ) from exc
