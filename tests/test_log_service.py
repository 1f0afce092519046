"""
LogService Tests
================

Data access contract of the logs table:
1. listing is newest first
2. single lookups return a log or None, never raise
3. inserts are all-or-nothing and surface StoreWriteError
4. delete removes every row
5. the table and its session are set up as expected
"""

import logging

import pytest

from logs_provider.db.models import Log
from logs_provider.exceptions import StoreWriteError

from tests.conftest import BASE_TS


class TestReads:

    def test_empty_table(self, log_service, session):
        assert log_service.get_all_logs(session) == []
        assert log_service.count_logs(session) == 0

    def test_list_is_ordered_by_id_descending(self, log_service, session):
        log_service.insert_logs(
            Log("first", BASE_TS, id=1),
            Log("second", BASE_TS + 1, id=2),
            Log("third", BASE_TS + 2, id=3),
            session=session,
        )
        assert [log.id for log in log_service.get_all_logs(session)] == [3, 2, 1]

    def test_order_follows_id_not_timestamp(self, log_service, session):
        log_service.insert_logs(Log("old id, new ts", BASE_TS + 100, id=1), session=session)
        log_service.insert_logs(Log("new id, old ts", BASE_TS, id=2), session=session)
        assert [log.msg for log in log_service.get_all_logs(session)] == ["new id, old ts", "old id, new ts"]

    def test_iter_all_logs_streams_in_the_same_order(self, log_service, session):
        log_service.insert_logs(*[Log(f"m{i}", BASE_TS + i) for i in range(7)], session=session)
        expected = [log.id for log in log_service.get_all_logs(session)]
        assert [log.id for log in log_service.iter_all_logs(session, batch_size=2)] == expected

    def test_iter_all_logs_is_restartable(self, log_service, session):
        log_service.insert_logs(Log("a", BASE_TS), session=session)
        first = [log.id for log in log_service.iter_all_logs(session)]
        log_service.insert_logs(Log("b", BASE_TS + 1), session=session)
        second = [log.id for log in log_service.iter_all_logs(session)]
        assert len(second) == len(first) + 1
        assert second[1:] == first

    def test_get_log_by_id(self, log_service, session, seed_logs):
        ids = seed_logs("hello", "world")
        log = log_service.get_log_by_id(ids[1], session=session)
        assert log.msg == "world"
        assert log.timestamp == BASE_TS + 1

    @pytest.mark.parametrize("missing_id", [999, 0, -5, 2 ** 70])
    def test_missing_id_is_none(self, log_service, session, seed_logs, missing_id):
        seed_logs("only")
        assert log_service.get_log_by_id(missing_id, session=session) is None

    def test_repeated_lookup_is_stable(self, log_service, session, seed_logs):
        (log_id,) = seed_logs("same")
        first = log_service.get_log_by_id(log_id, session=session).to_dict()
        second = log_service.get_log_by_id(log_id, session=session).to_dict()
        assert first == second

    def test_default_session_comes_from_context(self, log_service, seed_logs):
        seed_logs("a", "b")
        assert len(log_service.get_all_logs()) == 2


class TestWrites:

    def test_insert_assigns_fresh_ids(self, log_service, session):
        logs = log_service.insert_logs(Log("a", BASE_TS), Log("b", BASE_TS + 1), session=session)
        assert all(log.id is not None for log in logs)
        assert len({log.id for log in logs}) == 2

    def test_insert_needs_at_least_one_log(self, log_service, session):
        with pytest.raises(ValueError):
            log_service.insert_logs(session=session)

    def test_duplicate_id_raises_store_write_error(self, log_service, session, seed_logs):
        (log_id,) = seed_logs("original")
        with pytest.raises(StoreWriteError) as exc_info:
            log_service.insert_logs(Log("clash", BASE_TS, id=log_id), session=session)
        assert exc_info.value.__cause__ is not None
        assert log_service.count_logs(session) == 1
        assert log_service.get_log_by_id(log_id, session=session).msg == "original"

    def test_failed_insert_keeps_nothing_from_the_call(self, log_service, session):
        with pytest.raises(StoreWriteError):
            log_service.insert_logs(Log("fine", BASE_TS), Log(None, BASE_TS + 1), session=session)
        assert log_service.count_logs(session) == 0

    def test_delete_logs_then_list_is_empty(self, log_service, session, seed_logs):
        seed_logs("a", "b", "c")
        assert log_service.delete_logs(session) == 3
        assert log_service.get_all_logs(session) == []

    def test_delete_on_empty_table(self, log_service, session):
        assert log_service.delete_logs(session) == 0

    def test_insert_after_delete(self, log_service, session):
        log_service.insert_logs(Log("a", BASE_TS, id=10), session=session)
        log_service.delete_logs(session)
        log_service.insert_logs(Log("b", BASE_TS, id=11), Log("c", BASE_TS, id=12), session=session)
        assert [log.id for log in log_service.get_all_logs(session)] == [12, 11]


class TestSchema:

    def test_id_is_a_plain_primary_key(self):
        id_column = Log.__table__.c.id
        assert id_column.primary_key
        assert not id_column.index
        assert not id_column.unique
        assert [index.name for index in Log.__table__.indexes] == ["ix_logs_timestamp"]

    def test_init_session_logs_the_database(self, ctx, caplog):
        url = ctx.engine.url.render_as_string(hide_password=False)
        with caplog.at_level(logging.DEBUG, logger="logs_provider"):
            ctx.init_session(url)
        assert f"database session initialised for {url}" in caplog.messages
