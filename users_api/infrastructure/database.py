"""SQLAlchemy engine, table mapping and per-invocation session scope."""

import logging
from contextlib import contextmanager
from typing import Iterator, Union

from sqlalchemy import Column, DateTime, String, create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


class UserRecord(Base):
    """Row of the ``users`` table."""

    __tablename__ = "users"

    username = Column(String(128), primary_key=True)
    bio = Column(String(1024), nullable=False, default="")
    profile_picture = Column(String(512), nullable=False, default="")
    created_at = Column(DateTime, nullable=True)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True, index=True)


def create_db_engine(database_url: Union[str, URL], echo: bool = False) -> Engine:
    """Create the engine shared by all invocations of a warm container.

    The engine only holds the connection pool; connections are checked out
    per session.
    """
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        pool_recycle=1800,
    )


def init_schema(engine: Engine) -> None:
    """Create the ``users`` table if it does not exist."""
    Base.metadata.create_all(engine)


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """Yield a session for one invocation, always closing it on the way out."""
    session = sessionmaker(bind=engine, expire_on_commit=False)()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
        logger.debug("Database session closed")
