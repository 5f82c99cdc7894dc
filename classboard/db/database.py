# /classboard/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..core.config import DATABASE_URL

# The 'check_same_thread' argument is only needed for SQLite. The fetch
# orchestrator opens sessions from worker threads, so it must be disabled there.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

# Each instance of this class is one database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_session_factory() -> sessionmaker:
    """
    Dependency that provides the session factory used by the fetch orchestrator.
    Parallel reads each open their own session from it, since a Session must not
    be shared between threads.
    """
    return SessionLocal
