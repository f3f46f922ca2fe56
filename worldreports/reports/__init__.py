"""Report commands and the explicit registration table.

Modules in this package are also the namespace scanned by reflective
discovery; every concrete command class defined here is picked up.
"""

from __future__ import annotations

from collections.abc import Callable

from ..console.common import Command
from . import capitals, cities, countries, languages, population

# Registration order is the order shown by ``help``.
REPORT_FACTORIES: tuple[Callable[[], Command], ...] = (
    countries.AllCountries,
    countries.AllCountriesByContinent,
    countries.AllCountriesByRegion,
    countries.TopCountries,
    countries.TopCountriesByContinent,
    countries.TopCountriesByRegion,
    cities.AllCities,
    cities.AllCitiesByContinent,
    cities.AllCitiesByRegion,
    cities.AllCitiesByCountry,
    cities.AllCitiesByDistrict,
    cities.TopCities,
    cities.TopCitiesByContinent,
    cities.TopCitiesByRegion,
    cities.TopCitiesByCountry,
    cities.TopCitiesByDistrict,
    capitals.AllCapitals,
    capitals.CapitalsByContinent,
    capitals.CapitalsByRegion,
    capitals.TopCapitals,
    capitals.TopCapitalsByContinent,
    capitals.TopCapitalsByRegion,
    population.PopulationByContinent,
    population.PopulationByRegion,
    population.PopulationByCountry,
    population.ContinentPopulation,
    population.RegionPopulation,
    population.CountryPopulationDetails,
    population.WorldPopulation,
    population.CountryPopulation,
    population.DistrictPopulation,
    population.CityPopulation,
    languages.LanguageDistribution,
)

__all__ = ["REPORT_FACTORIES"]
