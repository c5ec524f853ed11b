"""Database session management"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finboard.config import settings


def _engine_options(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    # Connection pool: max 20 connections, recycle after 1 hour to avoid stale connections
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 10,
        "pool_recycle": 3600,
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency injection for database sessions"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
