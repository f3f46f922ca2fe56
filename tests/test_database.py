import io
import sqlite3

import pytest

from worldreports import ConnectionProvider, DatabaseSettings, run_connectivity_check
from worldreports.exceptions import ResourceAcquisitionError


def test_acquire_opens_read_only_rows(world_db):
    provider = ConnectionProvider(DatabaseSettings(path=world_db))
    connection = provider.acquire()
    try:
        row = connection.execute("SELECT Name FROM country WHERE Code = 'FRA'").fetchone()
        assert row["Name"] == "France"
        with pytest.raises(sqlite3.OperationalError):
            connection.execute("DELETE FROM country")
    finally:
        provider.release(connection)
    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute("SELECT 1")


def test_missing_database_cannot_be_acquired(tmp_path):
    provider = ConnectionProvider(DatabaseSettings(path=tmp_path / "missing.db"))
    with pytest.raises(ResourceAcquisitionError, match="not found"):
        provider.acquire()
    assert not (tmp_path / "missing.db").exists()


def test_connection_context_releases(world_db):
    provider = ConnectionProvider(DatabaseSettings(path=world_db))
    with provider.connection() as connection:
        assert connection.execute("SELECT COUNT(*) FROM city").fetchone()[0] == 11
    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute("SELECT 1")


def test_connectivity_check_reports_tables(world_db):
    out = io.StringIO()
    assert run_connectivity_check(ConnectionProvider(DatabaseSettings(path=world_db)), out)
    text = out.getvalue()
    assert "Tables found: 3" in text
    assert "city (11 rows)" in text
    assert "China (Asia) - 1,277,558,000 people" in text


def test_connectivity_check_fails_without_tables(tmp_path):
    empty = tmp_path / "empty.db"
    empty.write_bytes(b"")
    out = io.StringIO()
    assert not run_connectivity_check(ConnectionProvider(DatabaseSettings(path=empty)), out)
    assert "holds no tables" in out.getvalue()


def test_connectivity_check_fails_without_database(tmp_path):
    out = io.StringIO()
    assert not run_connectivity_check(
        ConnectionProvider(DatabaseSettings(path=tmp_path / "nope.db")), out
    )
    assert "Database connection failed" in out.getvalue()


def test_sample_query_failure_is_not_fatal(tmp_path):
    path = tmp_path / "other.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE notes (body TEXT)")
    conn.commit()
    conn.close()
    out = io.StringIO()
    assert run_connectivity_check(ConnectionProvider(DatabaseSettings(path=path)), out)
    assert "Sample query skipped" in out.getvalue()
