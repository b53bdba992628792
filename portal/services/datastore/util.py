"""Helpers and Flask application integration."""

import logging
from contextlib import contextmanager
from typing import Generator, Optional

from flask import Flask
from sqlalchemy import text
from sqlalchemy.orm.session import Session

from .models import db

logger = logging.getLogger(__name__)


@contextmanager
def transaction(session: Optional[Session] = None) \
        -> Generator[Session, None, None]:
    """Context manager for database transaction."""
    if session is None:
        session = db.session
    try:
        yield session
        # The caller may have committed already; only commit what remains.
        if session.new or session.dirty or session.deleted:
            session.commit()
    except Exception as e:
        logger.warning('Commit failed, rolling back: %s', str(e))
        session.rollback()
        raise


def init_app(app: Flask) -> None:
    """Attach the database session to the application."""
    db.init_app(app)


def current_session() -> Session:
    """Get/create database session for this context."""
    return db.session


def create_all() -> None:
    """Create all tables in the database."""
    db.create_all()


def drop_all() -> None:
    """Drop all tables in the database."""
    db.drop_all()


def is_available() -> bool:
    """Check our connection to the database."""
    try:
        db.session.execute(text('SELECT 1'))
    except Exception as e:
        logger.error('Encountered an error talking to database: %s', e)
        return False
    return True
