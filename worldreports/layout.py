"""Column measurement for fixed-width text tables.

A column format is an ordinary :meth:`str.format` template such as
``"{:<35} {:<30} {:>15,}"``. Every replacement field must declare a width;
fields are joined by a single space when rendered, so the separator width
of an ``N`` column format is the sum of the widths plus ``N - 1``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from string import Formatter

from .exceptions import LayoutError

_FORMAT_SPEC = re.compile(
    r"""
    ^(?:(?P<fill>.)?(?P<align>[<>=^]))?
    (?P<sign>[-+ ])?
    z?
    \#?
    0?
    (?P<width>\d+)?
    (?P<grouping>[,_])?
    (?:\.(?P<precision>\d+))?
    (?P<type>[bcdeEfFgGnosxX%])?$
    """,
    re.VERBOSE,
)


@dataclass(frozen=True, slots=True)
class Column:
    width: int
    align: str = "<"
    grouping: str | None = None

    @property
    def title_spec(self) -> str:
        # "=" only applies to numbers; titles fall back to right alignment.
        align = ">" if self.align == "=" else self.align
        return f"{align}{self.width}"


def parse_columns(column_format: str) -> list[Column]:
    """Return the declared columns of ``column_format`` in order."""
    columns: list[Column] = []
    try:
        fields = list(Formatter().parse(column_format))
    except ValueError as exc:
        raise LayoutError(f"Malformed column format {column_format!r}: {exc}") from exc
    for _, field_name, spec, _ in fields:
        if field_name is None:
            continue
        match = _FORMAT_SPEC.match(spec or "")
        if match is None:
            raise LayoutError(f"Unsupported format spec {spec!r} in {column_format!r}")
        if match["width"] is None:
            raise LayoutError(
                f"Column {len(columns) + 1} of {column_format!r} declares no width"
            )
        default_align = "<" if match["type"] in (None, "s", "c") else ">"
        columns.append(
            Column(
                width=int(match["width"]),
                align=match["align"] or default_align,
                grouping=match["grouping"],
            )
        )
    return columns


def separator_width(column_format: str) -> int:
    columns = parse_columns(column_format)
    total = sum(column.width for column in columns)
    if len(columns) > 1:
        total += len(columns) - 1
    return total


def repeated_line(width: int, char: str = "=") -> str:
    return char * max(width, 0)


def separator(column_format: str, char: str = "=") -> str:
    """Rule that spans exactly the rendered width of ``column_format``."""
    return repeated_line(separator_width(column_format), char)


def dashed_separator(column_format: str) -> str:
    return separator(column_format, "-")


def header_line(column_format: str, titles: Sequence[str]) -> str:
    columns = parse_columns(column_format)
    if len(titles) != len(columns):
        raise LayoutError(
            f"Expected {len(columns)} titles for {column_format!r}, got {len(titles)}"
        )
    return " ".join(
        format(str(title), column.title_spec) for title, column in zip(titles, columns)
    )


def row_lines(column_format: str, rows: Iterable[Sequence[object]]) -> list[str]:
    return [column_format.format(*row) for row in rows]


__all__ = [
    "Column",
    "parse_columns",
    "separator_width",
    "repeated_line",
    "separator",
    "dashed_separator",
    "header_line",
    "row_lines",
]
