"""Database utilities for dependency injection."""

from collections.abc import Generator

from sqlalchemy.orm import Session

from dwell.config.public import settings

SessionLocal = settings.get_session_maker()


def get_db() -> Generator[Session, None, None]:
    """Get database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
