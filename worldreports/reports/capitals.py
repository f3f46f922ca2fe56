"""Capital city listings ordered by population."""

from __future__ import annotations

from .base import Query, ReportCommand, Row, ScopedReport, render_table

COLUMNS = "{:<35} {:<45} {:>15,}"
HEADERS = ("Capital City", "Country", "Population")

SELECT = (
    "SELECT ci.Name AS Capital, co.Name AS Country, ci.Population "
    "FROM country co JOIN city ci ON co.Capital = ci.ID"
)
ORDER = "ORDER BY ci.Population DESC, ci.Name"


def capital_query(title: str, *, column: str | None = None, value: str = "", limit: int | None = None) -> Query:
    sql = SELECT
    params: list[object] = []
    if column is not None:
        sql += f" WHERE {column} = ? COLLATE NOCASE"
        params.append(value)
    sql += f" {ORDER}"
    if limit is not None:
        sql += " LIMIT ?"
        params.append(limit)
    return Query(sql, tuple(params), title=title, scope=value)


class CapitalListing(ReportCommand):
    def render(self, rows: list[Row], query: Query) -> str:
        empty = f"No capital cities found for {query.scope}." if query.scope else "No capital cities found."
        return render_table(
            query.title,
            COLUMNS,
            HEADERS,
            [(r["Capital"], r["Country"], r["Population"]) for r in rows],
            empty=empty,
        )


class ScopedCapitalListing(ScopedReport, CapitalListing):
    def build_query(self, args: list[str]) -> Query:
        value = self.place(args, self.label)
        return capital_query(
            f"All Capital Cities in {value} (Sorted by Population)",
            column=self.column,
            value=value,
        )


class TopScopedCapitalListing(ScopedReport, CapitalListing):
    def build_query(self, args: list[str]) -> Query:
        value, count = self.place_and_count(args, self.label)
        return capital_query(
            f"Top {count} Capital Cities in {value} (Sorted by Population)",
            column=self.column,
            value=value,
            limit=count,
        )


class AllCapitals(CapitalListing):
    name = "all-capitals"
    description = "Display all capital cities in the world sorted by population (usage: all-capitals)"

    def build_query(self, args: list[str]) -> Query:
        return capital_query("All Capital Cities in the World (Sorted by Population)")


class TopCapitals(CapitalListing):
    name = "topcapitals"
    description = "Display the top N populated capital cities in the world (usage: topcapitals <N>)"
    usage = "topcapitals <N>"

    def build_query(self, args: list[str]) -> Query:
        if len(args) != 2:
            raise self.usage_error("Please provide N.")
        count = self.positive_int(args[1])
        return capital_query(f"Top {count} Capital Cities in the World", limit=count)


class CapitalsByContinent(ScopedCapitalListing):
    name = "capital-cities-continent"
    description = "Display all capital cities in a continent sorted by population (usage: capital-cities-continent <continent>)"
    usage = "capital-cities-continent <continent>"
    column = "co.Continent"
    label = "continent"


class CapitalsByRegion(ScopedCapitalListing):
    name = "capital-cities-region"
    description = "Display all capital cities in a region sorted by population (usage: capital-cities-region <region>)"
    usage = "capital-cities-region <region>"
    column = "co.Region"
    label = "region"


class TopCapitalsByContinent(TopScopedCapitalListing):
    name = "top-capital-cities-continent"
    description = "Display top N capital cities in a continent by population (usage: top-capital-cities-continent <continent> <N>)"
    usage = "top-capital-cities-continent <continent> <N>"
    column = "co.Continent"
    label = "continent"


class TopCapitalsByRegion(TopScopedCapitalListing):
    name = "top-capital-cities-region"
    description = "Display top N capital cities in a region by population (usage: top-capital-cities-region <region> <N>)"
    usage = "top-capital-cities-region <region> <N>"
    column = "co.Region"
    label = "region"


__all__ = [
    "capital_query",
    "CapitalListing",
    "ScopedCapitalListing",
    "TopScopedCapitalListing",
    "AllCapitals",
    "TopCapitals",
    "CapitalsByContinent",
    "CapitalsByRegion",
    "TopCapitalsByContinent",
    "TopCapitalsByRegion",
]
