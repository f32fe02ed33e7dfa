"""Database engine and per-request sessions for score history"""

from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from rentledger.config import settings


def engine_options(database_url: str) -> Dict[str, Any]:
    """SQLite (local runs, tests) gets no pool tuning; server databases get a recycled pool"""
    if database_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 5,
        "pool_recycle": 1800,
    }


engine = create_engine(settings.database_url, **engine_options(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Yield a session for one request and always close it"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
