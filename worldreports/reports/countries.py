"""Country listings ordered by population."""

from __future__ import annotations

from .base import Query, ReportCommand, Row, render_table

COLUMNS = "{:<5} {:<45} {:<20} {:<30} {:>15,}"
HEADERS = ("Code", "Country", "Continent", "Region", "Population")

SELECT = "SELECT Code, Name, Continent, Region, Population FROM country"
ORDER = "ORDER BY Population DESC, Name"


def country_query(title: str, *, column: str | None = None, value: str = "", limit: int | None = None) -> Query:
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


class CountryListing(ReportCommand):
    def render(self, rows: list[Row], query: Query) -> str:
        empty = f"No countries found for {query.scope}." if query.scope else "No countries found."
        return render_table(
            query.title,
            COLUMNS,
            HEADERS,
            [(r["Code"], r["Name"], r["Continent"], r["Region"], r["Population"]) for r in rows],
            empty=empty,
        )


class AllCountries(CountryListing):
    name = "all-countries"
    description = "Display all countries in the world sorted by population (usage: all-countries)"

    def build_query(self, args: list[str]) -> Query:
        return country_query("All Countries in the World (Sorted by Population)")


class AllCountriesByContinent(CountryListing):
    name = "all-countries-continent"
    description = "Display all countries in a continent sorted by population (usage: all-countries-continent <continent>)"
    usage = "all-countries-continent <continent>"

    def build_query(self, args: list[str]) -> Query:
        continent = self.place(args, "continent")
        return country_query(
            f"All Countries in {continent} (Sorted by Population)",
            column="Continent",
            value=continent,
        )


class AllCountriesByRegion(CountryListing):
    name = "all-countries-region"
    description = "Display all countries in a region sorted by population (usage: all-countries-region <region>)"
    usage = "all-countries-region <region>"

    def build_query(self, args: list[str]) -> Query:
        region = self.place(args, "region")
        return country_query(
            f"All Countries in {region} (Sorted by Population)", column="Region", value=region
        )


class TopCountries(CountryListing):
    name = "top-countries"
    description = "Display top N countries by population, 5 by default (usage: top-countries [N])"
    usage = "top-countries [N]"

    def build_query(self, args: list[str]) -> Query:
        count = self.optional_count(args, default=5)
        return country_query(f"Top {count} Countries by Population", limit=count)


class TopCountriesByContinent(CountryListing):
    name = "top-countries-continent"
    description = "Display top N countries in a continent by population (usage: top-countries-continent <continent> <N>)"
    usage = "top-countries-continent <continent> <N>"

    def build_query(self, args: list[str]) -> Query:
        continent, count = self.place_and_count(args, "continent")
        return country_query(
            f"Top {count} Countries in {continent} (Sorted by Population)",
            column="Continent",
            value=continent,
            limit=count,
        )


class TopCountriesByRegion(CountryListing):
    name = "top-countries-region"
    description = "Display top N countries in a region by population (usage: top-countries-region <region> <N>)"
    usage = "top-countries-region <region> <N>"

    def build_query(self, args: list[str]) -> Query:
        region, count = self.place_and_count(args, "region")
        return country_query(
            f"Top {count} Countries in {region} (Sorted by Population)",
            column="Region",
            value=region,
            limit=count,
        )


__all__ = [
    "country_query",
    "CountryListing",
    "AllCountries",
    "AllCountriesByContinent",
    "AllCountriesByRegion",
    "TopCountries",
    "TopCountriesByContinent",
    "TopCountriesByRegion",
]
