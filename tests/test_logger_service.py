"""
LoggerService Tests
===================

The in-process write path: commits its writes and notifies the
collection uri so cursors read through the provider hear about it.
"""

from unittest.mock import patch

import pytest

from logs_provider.db.services.logger_service import LoggerService
from logs_provider.exceptions import StoreWriteError

from tests.conftest import LOGS_URI


@pytest.fixture
def logger_service(log_service, notifier):
    return LoggerService(log_service, notifier, LOGS_URI)


class TestLoggerService:

    def test_add_log_stamps_time_and_commits(self, logger_service, log_service, ctx):
        with patch("logs_provider.db.services.logger_service.now_millis", return_value=1234):
            row = logger_service.add_log("Interaction with 'Button 1'")
        assert row["msg"] == "Interaction with 'Button 1'"
        assert row["timestamp"] == 1234
        # visible from a brand new session, so it was committed
        other = ctx.create_new_session()
        try:
            assert log_service.get_log_by_id(row["id"], session=other).msg == row["msg"]
        finally:
            other.close()

    def test_get_all_logs_newest_first(self, logger_service):
        for msg in ("one", "two", "three"):
            logger_service.add_log(msg)
        assert [row["msg"] for row in logger_service.get_all_logs()] == ["three", "two", "one"]

    def test_remove_logs(self, logger_service):
        logger_service.add_log("one")
        logger_service.add_log("two")
        assert logger_service.remove_logs() == 2
        assert logger_service.get_all_logs() == []

    def test_writes_notify_provider_cursors(self, logger_service, provider):
        received = []
        collection = provider.query(LOGS_URI)
        collection.register_observer(received.append)
        item = provider.query(f"{LOGS_URI}/1")
        item.register_observer(received.append)

        logger_service.add_log("first")
        assert received == [LOGS_URI, LOGS_URI]

        received.clear()
        logger_service.remove_logs()
        assert received == [LOGS_URI, LOGS_URI]

        collection.close()
        item.close()
        received.clear()
        logger_service.add_log("after close")
        assert received == []

    def test_failed_write_does_not_notify(self, logger_service, notifier):
        received = []
        notifier.register_observer(LOGS_URI, received.append)
        with pytest.raises(StoreWriteError):
            logger_service.add_log(None)
        assert received == []
