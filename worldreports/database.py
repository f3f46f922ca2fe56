"""Database access: the connection provider and the connectivity check."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from .config import DatabaseSettings
from .exceptions import ResourceAcquisitionError

logger = logging.getLogger(__name__)

SAMPLE_QUERY = "SELECT Name, Population, Continent FROM country ORDER BY Population DESC LIMIT 5"


class ConnectionProvider:
    """Opens read-only SQLite connections to the world database."""

    def __init__(self, settings: DatabaseSettings) -> None:
        self.settings = settings

    @property
    def uri(self) -> str:
        return f"{self.settings.path.resolve().as_uri()}?mode=ro"

    def acquire(self) -> sqlite3.Connection:
        path = self.settings.path
        if not path.is_file():
            raise ResourceAcquisitionError(f"Database file not found: {path}")
        try:
            connection = sqlite3.connect(self.uri, uri=True, timeout=self.settings.timeout)
        except sqlite3.Error as exc:
            raise ResourceAcquisitionError(f"Could not open {path}: {exc}") from exc
        connection.row_factory = sqlite3.Row
        logger.debug("Opened %s", self.uri)
        return connection

    def release(self, connection: sqlite3.Connection) -> None:
        connection.close()
        logger.debug("Closed connection to %s", self.settings.path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        connection = self.acquire()
        try:
            yield connection
        finally:
            self.release(connection)


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def run_connectivity_check(provider: ConnectionProvider, out: TextIO) -> bool:
    """Print engine details, table sizes and a sample query.

    Returns ``False`` when the database cannot be opened or holds no tables.
    """
    try:
        with provider.connection() as connection:
            out.write("Database connection established.\n")
            return _ping(connection, out)
    except ResourceAcquisitionError as exc:
        out.write(f"Database connection failed: {exc}\n")
        return False
    except sqlite3.Error as exc:
        out.write(f"Database ping test failed: {exc}\n")
        return False


def _ping(connection: sqlite3.Connection, out: TextIO) -> bool:
    out.write("\nDatabase information:\n")
    out.write(f"  Engine: SQLite {sqlite3.sqlite_version}\n")
    out.write(f"  Location: {connection.execute('PRAGMA database_list').fetchone()['file']}\n")

    tables = [
        row["name"]
        for row in connection.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' "
            "AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
    ]
    out.write(f"Tables found: {len(tables)}\n")
    if not tables:
        out.write("Warning: the database holds no tables.\n")
        return False
    for table in tables:
        (count,) = connection.execute(f"SELECT COUNT(*) FROM {_quote(table)}").fetchone()
        out.write(f"  - {table} ({count:,} rows)\n")

    try:
        rows = connection.execute(SAMPLE_QUERY).fetchall()
    except sqlite3.Error as exc:
        out.write(f"Sample query skipped: {exc}\n")
    else:
        out.write("\nTop 5 countries by population:\n")
        for row in rows:
            out.write(f"  {row['Name']} ({row['Continent']}) - {row['Population']:,} people\n")
    out.write("Database ping test completed successfully.\n")
    return True


__all__ = ["ConnectionProvider", "run_connectivity_check"]
