from unittest.mock import MagicMock

import psycopg2
import pytest

from db import connection as db_connection
from db import init_db


@pytest.fixture()
def no_pool(monkeypatch):
    monkeypatch.setattr(db_connection, "_pool", None)


def test_get_connection_requires_pool(no_pool):
    with pytest.raises(RuntimeError):
        db_connection.get_connection()


def test_release_without_pool_is_noop(no_pool):
    db_connection.release_connection(object())


def test_init_pool_and_close(no_pool, monkeypatch):
    created = MagicMock()
    factory = MagicMock(return_value=created)
    monkeypatch.setattr(db_connection.pool, "SimpleConnectionPool", factory)

    db_connection.init_pool(1, 3, dsn="postgresql://u:p@h:5432/d")
    db_connection.init_pool()

    factory.assert_called_once_with(1, 3, "postgresql://u:p@h:5432/d")
    conn = db_connection.get_connection()
    assert conn is created.getconn.return_value
    db_connection.release_connection(conn)
    created.putconn.assert_called_once_with(conn)

    db_connection.close_pool()
    created.closeall.assert_called_once()
    assert db_connection._pool is None


def test_init_pool_reraises_operational_error(no_pool, monkeypatch):
    factory = MagicMock(side_effect=psycopg2.OperationalError("unreachable"))
    monkeypatch.setattr(db_connection.pool, "SimpleConnectionPool", factory)

    with pytest.raises(psycopg2.OperationalError):
        db_connection.init_pool()
    assert db_connection._pool is None


def _patch_connection(monkeypatch, conn):
    released = []
    monkeypatch.setattr(init_db, "get_connection", lambda: conn)
    monkeypatch.setattr(init_db, "release_connection", released.append)
    return released


def test_create_tables_executes_schema(monkeypatch):
    conn = MagicMock()
    released = _patch_connection(monkeypatch, conn)

    init_db.create_tables()

    cur = conn.cursor.return_value.__enter__.return_value
    cur.execute.assert_called_once_with(init_db.SCHEMA_SQL)
    conn.commit.assert_called_once()
    assert released == [conn]


def test_create_tables_rolls_back_on_error(monkeypatch):
    conn = MagicMock()
    cur = conn.cursor.return_value.__enter__.return_value
    cur.execute.side_effect = psycopg2.ProgrammingError("bad sql")
    released = _patch_connection(monkeypatch, conn)

    with pytest.raises(psycopg2.ProgrammingError):
        init_db.create_tables()

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    assert released == [conn]


def test_schema_defines_catalog_tables():
    for table in ("author", "genre", "book", "book_author"):
        assert f"CREATE TABLE IF NOT EXISTS {table} (" in init_db.SCHEMA_SQL
