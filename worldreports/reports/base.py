"""Building blocks for SQL-backed reports."""

from __future__ import annotations

import sqlite3
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from ..console.common import Command
from ..exceptions import QueryError, UsageError
from ..layout import dashed_separator, header_line, row_lines, separator

Row = sqlite3.Row


@dataclass(frozen=True, slots=True)
class Query:
    sql: str
    params: tuple[object, ...] = ()
    title: str = ""
    scope: str = ""


class ReportCommand(Command):
    """Runs one parameterised statement and renders the rows."""

    usage: str = ""

    @abstractmethod
    def build_query(self, args: list[str]) -> Query: ...

    @abstractmethod
    def render(self, rows: list[Row], query: Query) -> str: ...

    def execute(self, connection: sqlite3.Connection, args: list[str]) -> str:
        query = self.build_query(args)
        try:
            rows = connection.execute(query.sql, query.params).fetchall()
        except sqlite3.Error as exc:
            raise QueryError(f"Database query failed: {exc}") from exc
        return self.render(rows, query)

    # ------------------------------------------------------------------
    # Argument helpers
    # ------------------------------------------------------------------
    def usage_error(self, message: str) -> UsageError:
        usage = self.usage or self.name
        return UsageError(f"{message} Usage: {usage}")

    def positive_int(self, token: str) -> int:
        try:
            value = int(token)
        except ValueError:
            raise self.usage_error(f"N must be a whole number, got {token!r}.") from None
        if value <= 0:
            raise self.usage_error("N must be a positive number.")
        return value

    def place(self, args: list[str], label: str) -> str:
        """Join every argument after the command name into one place name."""
        name = " ".join(args[1:]).strip()
        if not name:
            raise self.usage_error(f"Please provide a {label}.")
        return name

    def place_and_count(self, args: list[str], label: str) -> tuple[str, int]:
        """Split ``<place words...> <N>`` into the place name and N."""
        if len(args) < 3:
            raise self.usage_error(f"Please provide a {label} and N.")
        return self.place(args[:-1], label), self.positive_int(args[-1])

    def optional_count(self, args: list[str], default: int) -> int:
        if len(args) < 2:
            return default
        if len(args) > 2:
            raise self.usage_error("Too many arguments.")
        return self.positive_int(args[1])


class ScopedReport(ReportCommand):
    """A report filtered on one place column.

    Concrete reports set ``column`` (the SQL column compared with the user's
    input) and ``label`` (how the place is named in messages).
    """

    @property
    @abstractmethod
    def column(self) -> str: ...

    @property
    @abstractmethod
    def label(self) -> str: ...


def render_table(
    title: str,
    column_format: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[object]],
    *,
    empty: str,
) -> str:
    lines = ["", title, separator(column_format), header_line(column_format, headers)]
    lines.append(dashed_separator(column_format))
    lines.extend(row_lines(column_format, rows) or [f"  {empty}"])
    lines.append(separator(column_format))
    return "\n".join(lines)


def render_summary(title: str, items: Sequence[tuple[str, str]]) -> str:
    """Label/value block framed like a table; values arrive pre-formatted."""
    width = max(len(label) for label, _ in items)
    column_format = f"{{:<{width + 1}}} {{:>20}}"
    lines = ["", title, separator(column_format)]
    lines.extend(column_format.format(f"{label}:", value) for label, value in items)
    lines.append(separator(column_format))
    return "\n".join(lines)


def share(part: int | None, whole: int | None) -> float:
    if not whole:
        return 0.0
    return (part or 0) / whole


__all__ = [
    "Query",
    "ReportCommand",
    "ScopedReport",
    "render_summary",
    "render_table",
    "share",
]
