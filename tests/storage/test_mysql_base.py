from __future__ import annotations

from datetime import datetime, time, timedelta, timezone

import mysql.connector
import pytest

from src.qr_attendance.qr_attendance.core.exceptions import StorageError
from src.qr_attendance.qr_attendance.database.bootstrap import _strip_create_db_and_use, iter_sql_statements
from src.qr_attendance.qr_attendance.database.mysql_base import (
    db_cursor,
    from_db_datetime,
    normalize_mysql_time,
    to_db_datetime,
)


class FakeCursor:
    def __init__(self, fail: bool):
        self._fail = fail
        self.closed = False

    def execute(self, sql, params=None):
        if self._fail:
            raise mysql.connector.Error("Duplicate entry")

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, fail: bool = False):
        self.cur = FakeCursor(fail)
        self.committed = self.rolled_back = self.closed = False

    def cursor(self, dictionary=True):
        return self.cur

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, refuse: bool = False):
        self.conn = conn
        self.refuse = refuse

    def connect(self):
        if self.refuse:
            raise mysql.connector.Error("Can't connect")
        return self.conn


def test_db_cursor_commits_and_closes():
    conn = FakeConn()
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and conn.closed and conn.cur.closed


def test_db_cursor_translates_driver_errors():
    conn = FakeConn(fail=True)
    with pytest.raises(StorageError):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert conn.rolled_back and conn.closed and not conn.committed


def test_db_cursor_connection_refused():
    with pytest.raises(StorageError):
        with db_cursor(FakeFactory(refuse=True)):
            pass


@pytest.mark.parametrize(
    "value, expected",
    [
        (time(8, 30), time(8, 30)),
        (timedelta(hours=13, minutes=5, seconds=9), time(13, 5, 9)),
        ("07:45:00", time(7, 45)),
        (None, None),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


def test_datetimes_are_stored_as_naive_utc():
    lima = timezone(timedelta(hours=-5))
    aware = datetime(2026, 1, 5, 22, 0, tzinfo=lima)

    stored = to_db_datetime(aware)

    assert stored == datetime(2026, 1, 6, 3, 0)
    assert from_db_datetime(stored) == aware


def test_schema_statements_are_split_outside_quotes():
    sql = _strip_create_db_and_use(
        "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE a (v VARCHAR(3) DEFAULT ';');\nCREATE TABLE b (id INT)"
    )

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (v VARCHAR(3) DEFAULT ';')",
        "CREATE TABLE b (id INT)",
    ]
