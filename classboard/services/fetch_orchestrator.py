# /classboard/services/fetch_orchestrator.py

"""
The Fetch Orchestrator: the only concurrent part of the reporting flow.

For one report it first confirms that the caller owns the class, and only then
fans out the report's filtered reads in parallel and waits for all of them
(fan-out / fan-in). Nothing is read when the ownership check fails, and the
reporting engine is only handed rows once every read has completed.

Each read runs in a worker thread with its own session, because a SQLAlchemy
Session must never be shared between threads. The ownership check and the
fan-out are each bounded by the configured read timeout.
"""

import asyncio
import logging
from typing import Any, Callable, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..core.config import REPORT_READ_TIMEOUT_SECONDS
from ..core.errors import ClassAccessDeniedError, StoreAccessError
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

Read = Callable[[DatabaseService], Any]


def _run_in_session(session_factory: sessionmaker, read: Read) -> Any:
    """Runs one read against a fresh session and always closes it."""
    session = session_factory()
    try:
        return read(DatabaseService(db_session=session))
    finally:
        session.close()


async def _bounded(awaitable, timeout: float, what: str):
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        logger.error("%s timed out after %s seconds", what, timeout)
        raise StoreAccessError(f"{what} timed out after {timeout} seconds")
    except SQLAlchemyError as e:
        logger.error("%s failed: %s", what, e)
        raise StoreAccessError(f"{what} failed: {e}")


async def fetch_class_rows(
    session_factory: sessionmaker,
    class_id: str,
    user_id: str,
    reads: Dict[str, Read],
    timeout: float = REPORT_READ_TIMEOUT_SECONDS,
) -> Dict[str, Any]:
    """
    Authorizes the caller for `class_id`, then runs every read concurrently.

    Args:
        session_factory: Factory that opens a new Session per call.
        class_id: The class the report is for.
        user_id: The authenticated caller.
        reads: Named read functions, each taking a DatabaseService.
        timeout: Seconds allowed for the ownership check and, separately, for the fan-out.

    Returns:
        {name: rows} for every read in `reads`.

    Raises:
        ClassAccessDeniedError: The caller does not teach the class. No reads were issued.
        StoreAccessError: The store failed or did not answer in time.
    """
    # 1. Authorization strictly precedes any data read.
    owns_class = await _bounded(
        asyncio.to_thread(
            _run_in_session, session_factory,
            lambda db: db.user_owns_class(class_id=class_id, user_id=user_id)
        ),
        timeout, "Class ownership check"
    )
    if not owns_class:
        logger.warning("User %s denied access to class %s.", user_id, class_id)
        raise ClassAccessDeniedError("Class not found or forbidden")

    # 2. Fan out: independent reads, no ordering between them.
    names = list(reads)
    results = await _bounded(
        asyncio.gather(*(asyncio.to_thread(_run_in_session, session_factory, reads[name]) for name in names)),
        timeout, f"Reading {', '.join(names) or 'nothing'} for class {class_id}"
    )

    # 3. Fan in.
    rows = dict(zip(names, results))
    logger.info(
        "Fetched rows for class %s: %s",
        class_id, ", ".join(f"{name}={len(value)}" for name, value in rows.items())
    )
    return rows
