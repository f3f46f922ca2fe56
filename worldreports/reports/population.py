"""Population totals and urban/rural breakdowns."""

from __future__ import annotations

from abc import abstractmethod

from .base import Query, ReportCommand, Row, ScopedReport, render_summary, render_table, share

# Per-country city population, so country totals are never multiplied by the join.
URBAN = "(SELECT CountryCode, SUM(Population) AS Population FROM city GROUP BY CountryCode)"

BREAKDOWN_COLUMNS = "{:<35} {:>15,} {:>15,} {:>15,} {:>12.2%} {:>12.2%}"


def _breakdown_items(total: int, urban: int) -> list[tuple[str, str]]:
    rural = total - urban
    return [
        ("Total population", f"{total:,}"),
        ("Living in cities", f"{urban:,} ({share(urban, total):.2%})"),
        ("Not living in cities", f"{rural:,} ({share(rural, total):.2%})"),
    ]


class GroupedPopulation(ReportCommand):
    """Total, urban and rural population for every group of countries."""

    @property
    @abstractmethod
    def column(self) -> str: ...

    @property
    @abstractmethod
    def heading(self) -> str: ...

    def build_query(self, args: list[str]) -> Query:
        if len(args) > 1:
            raise self.usage_error("This report takes no arguments.")
        sql = (
            f"SELECT co.{self.column} AS Name, SUM(co.Population) AS Total, "
            "SUM(COALESCE(urban.Population, 0)) AS Urban "
            f"FROM country co LEFT JOIN {URBAN} urban ON urban.CountryCode = co.Code "
            f"GROUP BY co.{self.column} ORDER BY Total DESC, Name"
        )
        return Query(sql, title=f"Population Details by {self.heading}")

    def render(self, rows: list[Row], query: Query) -> str:
        table = []
        for row in rows:
            total, urban = row["Total"] or 0, row["Urban"] or 0
            rural = total - urban
            table.append((row["Name"], total, urban, rural, share(urban, total), share(rural, total)))
        return render_table(
            query.title,
            BREAKDOWN_COLUMNS,
            (self.heading, "Total Pop.", "Urban Pop.", "Rural Pop.", "Urban %", "Rural %"),
            table,
            empty="No population data found.",
        )


class PopulationByContinent(GroupedPopulation):
    name = "population-continent"
    description = "Display population details for each continent (usage: population-continent)"
    column = "Continent"
    heading = "Continent"


class PopulationByRegion(GroupedPopulation):
    name = "population-region"
    description = "Display population details for each region (usage: population-region)"
    column = "Region"
    heading = "Region"


class PopulationByCountry(GroupedPopulation):
    name = "population-country"
    description = "Display population details for each country (usage: population-country)"
    column = "Name"
    heading = "Country"


class ScopePopulation(ScopedReport):
    """Total, urban and rural population of one place."""

    def build_query(self, args: list[str]) -> Query:
        value = self.place(args, self.label)
        sql = (
            f"SELECT COUNT(*) AS Countries, MAX(co.{self.column}) AS Name, "
            "SUM(co.Population) AS Total, SUM(COALESCE(urban.Population, 0)) AS Urban "
            f"FROM country co LEFT JOIN {URBAN} urban ON urban.CountryCode = co.Code "
            f"WHERE co.{self.column} = ? COLLATE NOCASE"
        )
        return Query(sql, (value,), scope=value)

    def render(self, rows: list[Row], query: Query) -> str:
        row = rows[0] if rows else None
        if row is None or not row["Countries"]:
            return f"  No {self.label} found with the name: {query.scope}"
        title = f"Population Details for {self.label.title()}: {row['Name']}"
        return render_summary(title, _breakdown_items(row["Total"] or 0, row["Urban"] or 0))


class ContinentPopulation(ScopePopulation):
    name = "continent-pop"
    description = "Display total, urban, and rural population of a continent (usage: continent-pop <continent>)"
    usage = "continent-pop <continent>"
    column = "Continent"
    label = "continent"


class RegionPopulation(ScopePopulation):
    name = "region-pop"
    description = "View population details for a region (usage: region-pop <region>)"
    usage = "region-pop <region>"
    column = "Region"
    label = "region"


class CountryPopulationDetails(ScopePopulation):
    name = "populationdetailscountry"
    description = "Display population details for a specific country (usage: populationdetailscountry <country>)"
    usage = "populationdetailscountry <country>"
    column = "Name"
    label = "country"


class WorldPopulation(ReportCommand):
    name = "population-world"
    description = "Display the total population of the world (usage: population-world)"

    def build_query(self, args: list[str]) -> Query:
        return Query("SELECT COALESCE(SUM(Population), 0) AS Population FROM country")

    def render(self, rows: list[Row], query: Query) -> str:
        return render_summary("Total World Population", [("Population", f"{rows[0]['Population']:,}")])


class CountryPopulation(ReportCommand):
    name = "countrypop"
    description = "Display the population of a specific country (usage: countrypop <country>)"
    usage = "countrypop <country>"

    def build_query(self, args: list[str]) -> Query:
        country = self.place(args, "country")
        return Query(
            "SELECT Name, Population FROM country WHERE Name = ? COLLATE NOCASE",
            (country,),
            scope=country,
        )

    def render(self, rows: list[Row], query: Query) -> str:
        if not rows:
            return f"  No country found with the name: {query.scope}"
        row = rows[0]
        return render_summary(f"Population of {row['Name']}", [("Population", f"{row['Population']:,}")])


class DistrictPopulation(ReportCommand):
    name = "districtpop"
    description = "View population of a specific district (usage: districtpop <district>)"
    usage = "districtpop <district>"

    def build_query(self, args: list[str]) -> Query:
        district = self.place(args, "district")
        return Query(
            "SELECT COUNT(*) AS Cities, MAX(District) AS Name, SUM(Population) AS Population "
            "FROM city WHERE District = ? COLLATE NOCASE",
            (district,),
            scope=district,
        )

    def render(self, rows: list[Row], query: Query) -> str:
        row = rows[0] if rows else None
        if row is None or not row["Cities"]:
            return f"  No district found with the name: {query.scope}"
        return render_summary(
            f"Population of District: {row['Name']}",
            [("Cities", f"{row['Cities']:,}"), ("Population", f"{row['Population']:,}")],
        )


class CityPopulation(ReportCommand):
    name = "citypop"
    description = "Display the population of a specific city (usage: citypop <city>)"
    usage = "citypop <city>"

    def build_query(self, args: list[str]) -> Query:
        city = self.place(args, "city")
        return Query(
            "SELECT ci.Name, ci.Population, co.Name AS Country, co.Population AS CountryPopulation "
            "FROM city ci JOIN country co ON ci.CountryCode = co.Code "
            "WHERE ci.Name = ? COLLATE NOCASE ORDER BY ci.Population DESC LIMIT 1",
            (city,),
            scope=city,
        )

    def render(self, rows: list[Row], query: Query) -> str:
        if not rows:
            return f"  No city found with the name: {query.scope}"
        row = rows[0]
        city_share = share(row["Population"], row["CountryPopulation"])
        return render_summary(
            f"Population of {row['Name']} ({row['Country']})",
            [
                ("City population", f"{row['Population']:,}"),
                ("Country population", f"{row['CountryPopulation']:,}"),
                ("Share of country", f"{city_share:.2%}"),
            ],
        )


__all__ = [
    "GroupedPopulation",
    "PopulationByContinent",
    "PopulationByRegion",
    "PopulationByCountry",
    "ScopePopulation",
    "ContinentPopulation",
    "RegionPopulation",
    "CountryPopulationDetails",
    "WorldPopulation",
    "CountryPopulation",
    "DistrictPopulation",
    "CityPopulation",
]
