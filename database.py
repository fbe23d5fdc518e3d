"""Database configuration and session management for the Apêgo backend."""
import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from config import settings
from errors import StorageFailure

logger = logging.getLogger(__name__)


def build_engine(url: str):
    """Create an engine; SQLite needs cross-thread access for the test client."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for providing a database session to routes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session):
    """Run a block as one transaction: commit on success, roll back on any error.

    Database errors are re-raised as StorageFailure once the rollback is done;
    domain errors raised inside the block propagate unchanged.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Transaction rolled back: %s", exc)
        raise StorageFailure("Database error") from exc
    except Exception:
        db.rollback()
        raise
