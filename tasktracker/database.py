import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from tasktracker.config import DATABASE_URL

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(url: str = None):
    url = url or DATABASE_URL
    # Only apply sqlite-specific connect_args when using sqlite
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    # pool_pre_ping drops stale pooled connections before handing them out
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine) -> bool:
    """Create the tasks table if it is missing.

    Safe to call on every startup. A failure is logged and reported through
    the return value instead of being raised, so the server still comes up
    and individual requests fail against the missing table.
    """
    # registers the Task table on Base.metadata
    from tasktracker.models import task  # noqa: F401

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception("Failed to initialize the database")
        return False
    logger.info("Database initialized")
    return True


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
