"""
Shared fixtures: an in-memory SQLite catalog exposed through a
psycopg2-shaped connection installed as the module-level pool.
"""
from __future__ import annotations

import sqlite3

import pytest

from db import connection as db_connection

SQLITE_SCHEMA = """
CREATE TABLE author (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name TEXT NOT NULL,
    family_name TEXT NOT NULL
);
CREATE TABLE genre (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    code TEXT NOT NULL
);
CREATE TABLE book (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    genre_id INTEGER NOT NULL REFERENCES genre(id),
    title TEXT NOT NULL,
    isbn TEXT,
    publication_year INTEGER,
    number_of_pages INTEGER,
    publisher TEXT
);
CREATE TABLE book_author (
    book_id INTEGER NOT NULL REFERENCES book(id),
    author_id INTEGER NOT NULL REFERENCES author(id),
    PRIMARY KEY (book_id, author_id)
);
"""


class SQLiteCursor:
    """Cursor adapter accepting psycopg2-style `%s` placeholders."""

    def __init__(self, cursor: sqlite3.Cursor):
        self._cursor = cursor

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self._cursor.close()
        return False

    def execute(self, sql, params=()):
        self._cursor.execute(sql.replace("%s", "?"), tuple(params))

    def fetchone(self):
        return self._cursor.fetchone()

    def fetchall(self):
        return self._cursor.fetchall()


class SQLiteConnection:
    def __init__(self, conn: sqlite3.Connection):
        self.raw = conn
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        return SQLiteCursor(self.raw.cursor())

    def commit(self):
        self.commits += 1
        self.raw.commit()

    def rollback(self):
        self.rollbacks += 1
        self.raw.rollback()


class SingleConnectionPool:
    """Stands in for SimpleConnectionPool, handing out one shared connection."""

    def __init__(self, conn: SQLiteConnection):
        self.conn = conn
        self.checked_out = 0

    def getconn(self):
        self.checked_out += 1
        return self.conn

    def putconn(self, conn):
        assert conn is self.conn
        self.checked_out -= 1

    def closeall(self):
        self.conn.raw.close()


@pytest.fixture()
def catalog_db(monkeypatch):
    raw = sqlite3.connect(":memory:")
    raw.executescript(SQLITE_SCHEMA)
    pool = SingleConnectionPool(SQLiteConnection(raw))
    monkeypatch.setattr(db_connection, "_pool", pool)

    yield pool

    # every borrowed connection must have been released
    assert pool.checked_out == 0
    raw.close()


def table_count(pool: SingleConnectionPool, table: str) -> int:
    return pool.conn.raw.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
