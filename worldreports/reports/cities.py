"""City listings ordered by population."""

from __future__ import annotations

from .base import Query, ReportCommand, Row, ScopedReport, render_table

COLUMNS = "{:<35} {:<45} {:<25} {:>15,}"
HEADERS = ("City", "Country", "District", "Population")

SELECT = (
    "SELECT ci.Name AS City, co.Name AS Country, ci.District, ci.Population "
    "FROM city ci JOIN country co ON ci.CountryCode = co.Code"
)
ORDER = "ORDER BY ci.Population DESC, ci.Name"


def city_query(title: str, *, column: str | None = None, value: str = "", limit: int | None = None) -> Query:
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


class CityListing(ReportCommand):
    def render(self, rows: list[Row], query: Query) -> str:
        empty = f"No cities found for {query.scope}." if query.scope else "No cities found."
        return render_table(
            query.title,
            COLUMNS,
            HEADERS,
            [(r["City"], r["Country"], r["District"], r["Population"]) for r in rows],
            empty=empty,
        )


class ScopedCityListing(ScopedReport, CityListing):
    """All cities in one continent, region, country or district."""

    def build_query(self, args: list[str]) -> Query:
        value = self.place(args, self.label)
        return city_query(
            f"All Cities in {value} (Sorted by Population)", column=self.column, value=value
        )


class TopScopedCityListing(ScopedReport, CityListing):
    """Top N cities in one continent, region, country or district."""

    def build_query(self, args: list[str]) -> Query:
        value, count = self.place_and_count(args, self.label)
        return city_query(
            f"Top {count} Cities in {value} (Sorted by Population)",
            column=self.column,
            value=value,
            limit=count,
        )


class AllCities(CityListing):
    name = "all-cities"
    description = "Display all cities in the world sorted by population (usage: all-cities)"

    def build_query(self, args: list[str]) -> Query:
        return city_query("All Cities in the World (Sorted by Population)")


class TopCities(CityListing):
    name = "topcities"
    description = "Display top N cities by population (usage: topcities <N>)"
    usage = "topcities <N>"

    def build_query(self, args: list[str]) -> Query:
        if len(args) != 2:
            raise self.usage_error("Please provide N.")
        count = self.positive_int(args[1])
        return city_query(f"Top {count} Cities in the World (Sorted by Population)", limit=count)


class AllCitiesByContinent(ScopedCityListing):
    name = "all-cities-continent"
    description = "Display all cities in a continent sorted by population (usage: all-cities-continent <continent>)"
    usage = "all-cities-continent <continent>"
    column = "co.Continent"
    label = "continent"


class AllCitiesByRegion(ScopedCityListing):
    name = "all-cities-region"
    description = "Display all cities in a region sorted by population (usage: all-cities-region <region>)"
    usage = "all-cities-region <region>"
    column = "co.Region"
    label = "region"


class AllCitiesByCountry(ScopedCityListing):
    name = "cities-country"
    description = "Display all cities in a country ordered by population (usage: cities-country <country>)"
    usage = "cities-country <country>"
    column = "co.Name"
    label = "country"


class AllCitiesByDistrict(ScopedCityListing):
    name = "all-cities-district"
    description = "Display all cities in a district sorted by population (usage: all-cities-district <district>)"
    usage = "all-cities-district <district>"
    column = "ci.District"
    label = "district"


class TopCitiesByContinent(TopScopedCityListing):
    name = "top-cities-continent"
    description = "Display top N cities in a continent by population (usage: top-cities-continent <continent> <N>)"
    usage = "top-cities-continent <continent> <N>"
    column = "co.Continent"
    label = "continent"


class TopCitiesByRegion(TopScopedCityListing):
    name = "top-cities-region"
    description = "Display top N cities in a region by population (usage: top-cities-region <region> <N>)"
    usage = "top-cities-region <region> <N>"
    column = "co.Region"
    label = "region"


class TopCitiesByCountry(TopScopedCityListing):
    name = "top-cities-country"
    description = "Display the top N cities in a country by population (usage: top-cities-country <country> <N>)"
    usage = "top-cities-country <country> <N>"
    column = "co.Name"
    label = "country"


class TopCitiesByDistrict(TopScopedCityListing):
    name = "topcities-district"
    description = "Display top N cities by population in a district (usage: topcities-district <district> <N>)"
    usage = "topcities-district <district> <N>"
    column = "ci.District"
    label = "district"


__all__ = [
    "city_query",
    "CityListing",
    "ScopedCityListing",
    "TopScopedCityListing",
    "AllCities",
    "TopCities",
    "AllCitiesByContinent",
    "AllCitiesByRegion",
    "AllCitiesByCountry",
    "AllCitiesByDistrict",
    "TopCitiesByContinent",
    "TopCitiesByRegion",
    "TopCitiesByCountry",
    "TopCitiesByDistrict",
]
