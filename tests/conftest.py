import sqlite3
from pathlib import Path

import pytest

from worldreports.console.common import Command
from worldreports.exceptions import ReportsError

SCHEMA = """
CREATE TABLE country (
    Code TEXT PRIMARY KEY,
    Name TEXT NOT NULL,
    Continent TEXT NOT NULL,
    Region TEXT NOT NULL,
    Population INTEGER NOT NULL DEFAULT 0,
    Capital INTEGER
);
CREATE TABLE city (
    ID INTEGER PRIMARY KEY,
    Name TEXT NOT NULL,
    CountryCode TEXT NOT NULL REFERENCES country (Code),
    District TEXT NOT NULL,
    Population INTEGER NOT NULL DEFAULT 0
);
CREATE TABLE countrylanguage (
    CountryCode TEXT NOT NULL REFERENCES country (Code),
    Language TEXT NOT NULL,
    IsOfficial TEXT NOT NULL DEFAULT 'F',
    Percentage REAL NOT NULL DEFAULT 0,
    PRIMARY KEY (CountryCode, Language)
);
"""

COUNTRIES = [
    ("CHN", "China", "Asia", "Eastern Asia", 1277558000, 1891),
    ("IND", "India", "Asia", "Southern and Central Asia", 1013662000, 1109),
    ("USA", "United States", "North America", "North America", 278357000, 3813),
    ("GBR", "United Kingdom", "Europe", "British Islands", 59623400, 456),
    ("FRA", "France", "Europe", "Western Europe", 59225700, 2974),
    ("DEU", "Germany", "Europe", "Western Europe", 82164700, 3068),
    ("ATA", "Antarctica", "Antarctica", "Antarctica", 0, None),
]

CITIES = [
    (1890, "Shanghai", "CHN", "Shanghai", 9696300),
    (1891, "Peking", "CHN", "Peking", 7472000),
    (1024, "Mumbai (Bombay)", "IND", "Maharashtra", 10500000),
    (1109, "New Delhi", "IND", "Delhi", 301297),
    (3793, "New York", "USA", "New York", 8008278),
    (3813, "Washington", "USA", "District of Columbia", 572059),
    (456, "London", "GBR", "England", 7285000),
    (459, "Birmingham", "GBR", "England", 1013000),
    (2974, "Paris", "FRA", "Ile-de-France", 2125246),
    (3068, "Berlin", "DEU", "Berliini", 3386667),
    (3069, "Hamburg", "DEU", "Hamburg", 1704735),
]

LANGUAGES = [
    ("CHN", "Chinese", "T", 92.0),
    ("IND", "Hindi", "T", 39.9),
    ("USA", "English", "T", 86.2),
    ("USA", "Spanish", "F", 7.5),
    ("GBR", "English", "T", 97.3),
    ("FRA", "French", "T", 93.6),
    ("DEU", "German", "T", 91.3),
]


def build_world_db(path: Path) -> Path:
    connection = sqlite3.connect(path)
    try:
        connection.executescript(SCHEMA)
        connection.executemany("INSERT INTO country VALUES (?, ?, ?, ?, ?, ?)", COUNTRIES)
        connection.executemany("INSERT INTO city VALUES (?, ?, ?, ?, ?)", CITIES)
        connection.executemany("INSERT INTO countrylanguage VALUES (?, ?, ?, ?)", LANGUAGES)
        connection.commit()
    finally:
        connection.close()
    return path


@pytest.fixture
def world_db(tmp_path: Path) -> Path:
    return build_world_db(tmp_path / "world.db")


@pytest.fixture
def connection(world_db: Path):
    conn = sqlite3.connect(world_db)
    conn.row_factory = sqlite3.Row
    yield conn
    conn.close()


class StubCommand(Command):
    """Command whose name, description and behaviour are chosen per instance."""

    def __init__(self, name: str, description: str = "stub", action=None) -> None:
        self.name = name
        self.description = description
        self.action = action
        self.calls: list[list[str]] = []
        super().__init__()

    def execute(self, connection, args):
        self.calls.append(list(args))
        if self.action is not None:
            return self.action(args)
        return f"{self.name} ran"


@pytest.fixture
def make_command():
    return StubCommand


@pytest.fixture
def failing_action():
    def fail(args):
        raise RuntimeError("boom")

    return fail


@pytest.fixture
def reports_error_action():
    def fail(args):
        raise ReportsError("Database query failed: no such table: city")

    return fail
