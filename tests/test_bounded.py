"""
Tests for time-bounded database calls.
"""
import asyncio
import logging
import time

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from shortlink_app.database.bounded import record_best_effort, run_bounded
from shortlink_app.exceptions import DatastoreError, OperationTimeout


def slow_operation(session):
    time.sleep(0.3)
    return "done"


def broken_operation(session):
    session.execute(text("SELECT * FROM no_such_table"))


class TestRunBounded:
    """Test run_bounded"""

    def test_returns_operation_result(self, db_session_factory):
        result = asyncio.run(
            run_bounded(db_session_factory, lambda session: session.execute(text("SELECT 1")).scalar(), 1.0)
        )
        assert result == 1

    def test_no_timeout_waits(self, db_session_factory):
        assert asyncio.run(run_bounded(db_session_factory, slow_operation)) == "done"

    def test_timeout_raises(self, db_session_factory):
        with pytest.raises(OperationTimeout) as exc_info:
            asyncio.run(run_bounded(db_session_factory, slow_operation, 0.05))

        assert str(exc_info.value) == "deadline has elapsed"
        assert exc_info.value.status_code == 500

    def test_timeout_returns_before_operation_finishes(self, db_session_factory):
        """Test the caller gives up without waiting for the worker thread"""
        async def elapsed_until_timeout():
            started = time.monotonic()
            with pytest.raises(OperationTimeout):
                await run_bounded(db_session_factory, slow_operation, 0.05)
            return time.monotonic() - started

        assert asyncio.run(elapsed_until_timeout()) < 0.25

    def test_database_error_is_wrapped(self, db_session_factory):
        with pytest.raises(DatastoreError) as exc_info:
            asyncio.run(run_bounded(db_session_factory, broken_operation, 1.0))

        assert "no_such_table" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OperationalError)

    def test_other_errors_propagate(self, db_session_factory):
        def failing(session):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            asyncio.run(run_bounded(db_session_factory, failing, 1.0))


class TestRecordBestEffort:
    """Test record_best_effort"""

    def test_success(self, db_session_factory):
        recorded = asyncio.run(
            record_best_effort(db_session_factory, lambda session: None, 1.0, "Saving")
        )
        assert recorded is True

    def test_timeout_is_logged_and_swallowed(self, db_session_factory, caplog):
        with caplog.at_level(logging.ERROR):
            recorded = asyncio.run(
                record_best_effort(db_session_factory, slow_operation, 0.05, "Saving new link click")
            )

        assert recorded is False
        assert "Saving new link click resulted in a timeout" in caplog.text

    def test_database_error_is_logged_and_swallowed(self, db_session_factory, caplog):
        with caplog.at_level(logging.ERROR):
            recorded = asyncio.run(
                record_best_effort(db_session_factory, broken_operation, 1.0, "Saving new link click")
            )

        assert recorded is False
        assert "Saving new link click failed with the following error" in caplog.text

    def test_unexpected_error_is_logged_and_swallowed(self, db_session_factory, caplog):
        """Test errors from outside the database layer never reach the caller"""
        def failing(session):
            raise RuntimeError("cannot schedule new futures after shutdown")

        with caplog.at_level(logging.ERROR):
            recorded = asyncio.run(
                record_best_effort(db_session_factory, failing, 1.0, "Saving new link click")
            )

        assert recorded is False
        assert "Saving new link click failed unexpectedly" in caplog.text
        assert "cannot schedule new futures" in caplog.text
