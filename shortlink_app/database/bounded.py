"""
Time-bounded database calls.

Sessions are synchronous, so each call runs on the default thread pool and
the request task awaits it. When the time budget runs out the awaiting task
gets OperationTimeout right away, but the worker thread is not interrupted:
the query keeps running to completion on its own session, which is then
closed. Nothing else ever sees that session.
"""

import asyncio
import logging
from typing import Callable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from shortlink_app.exceptions import DatastoreError, LinkServiceError, OperationTimeout

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def run_bounded(
    session_factory: sessionmaker,
    operation: Callable[[Session], T],
    timeout: Optional[float] = None,
) -> T:
    """
    Run `operation` with a fresh session on a worker thread.

    Args:
        session_factory: Session factory bound to the shared engine
        operation: Callable receiving the session; it commits its own writes
        timeout: Seconds to wait, or None to wait indefinitely

    Raises:
        OperationTimeout: The call did not finish within `timeout`
        DatastoreError: The database layer raised
    """
    def call() -> T:
        with session_factory() as session:
            return operation(session)

    try:
        if timeout is None:
            return await asyncio.to_thread(call)
        return await asyncio.wait_for(asyncio.to_thread(call), timeout)
    except asyncio.TimeoutError:
        raise OperationTimeout() from None
    except SQLAlchemyError as e:
        raise DatastoreError.from_exception(e)


async def record_best_effort(
    session_factory: sessionmaker,
    operation: Callable[[Session], object],
    timeout: Optional[float],
    description: str,
) -> bool:
    """
    Run a bounded write whose failure must not reach the caller.

    Timeouts, database errors and any other failure are logged and
    swallowed.

    Returns:
        True if the write completed, False otherwise
    """
    try:
        await run_bounded(session_factory, operation, timeout)
    except OperationTimeout as e:
        logger.error("%s resulted in a timeout: %s", description, e)
        return False
    except LinkServiceError as e:
        logger.error("%s failed with the following error: %s", description, e)
        return False
    except Exception:
        logger.exception("%s failed unexpectedly", description)
        return False
    return True
