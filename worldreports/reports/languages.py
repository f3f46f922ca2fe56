"""Speakers of the major world languages."""

from __future__ import annotations

from .base import Query, ReportCommand, Row, render_table, share

LANGUAGES = ("Chinese", "English", "Hindi", "Spanish", "Arabic")

COLUMNS = "{:<12} {:>20,} {:>21.2%}"
HEADERS = ("Language", "Speakers", "% of World Population")


class LanguageDistribution(ReportCommand):
    name = "language-dist"
    description = (
        "Display number and percentage of people speaking Chinese, English, Hindi, "
        "Spanish, or Arabic globally (usage: language-dist)"
    )

    def build_query(self, args: list[str]) -> Query:
        placeholders = ", ".join("?" for _ in LANGUAGES)
        sql = (
            "SELECT cl.Language, "
            "CAST(ROUND(SUM(co.Population * cl.Percentage / 100.0)) AS INTEGER) AS Speakers, "
            "(SELECT SUM(Population) FROM country) AS World "
            "FROM countrylanguage cl JOIN country co ON cl.CountryCode = co.Code "
            f"WHERE cl.Language IN ({placeholders}) "
            "GROUP BY cl.Language ORDER BY Speakers DESC, cl.Language"
        )
        return Query(sql, LANGUAGES, title="Global Language Distribution")

    def render(self, rows: list[Row], query: Query) -> str:
        table = [
            (row["Language"], row["Speakers"] or 0, share(row["Speakers"], row["World"]))
            for row in rows
        ]
        return render_table(
            query.title,
            COLUMNS,
            HEADERS,
            table,
            empty="No language data found for the selected languages.",
        )


__all__ = ["LanguageDistribution"]
