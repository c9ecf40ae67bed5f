"""
Database session management for the application.

This module sets up the SQLAlchemy engine and session management. It provides a
dependency (`get_db`) for FastAPI to inject a database session into path
operation functions.
"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.DATABASE_URL
"""
The full database connection string, read from application settings.
"""

# SQLite only allows the creating thread to use a connection by default, while
# FastAPI runs sync dependencies and handlers in a threadpool.
connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
"""
The core SQLAlchemy engine for database communication.
"""

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
"""
A factory for creating new database session objects.
"""

Base = declarative_base()
"""
A base class for all ORM models. All model classes should inherit from this class.
"""


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy database session.

    A new `SessionLocal` instance is created for each request, yielded to the
    path operation function, and closed once the response has been produced,
    even if an error occurred during processing.

    Yields:
        Generator[Session, None, None]: A SQLAlchemy Session object.
    """
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
