"""Pytest fixtures for tabledump unit tests."""

import pytest

from tabledump import Alignment, Table
from tests.fixtures.tables import POPULATIONS, Population


@pytest.fixture
def populations() -> list[Population]:
    return list(POPULATIONS)


@pytest.fixture
def meal_table() -> Table:
    """The weekly meal plan table."""
    table = Table("Test 1")
    table.set_headers("", "Monday", "Tuesday", "Wednesday")
    table.row("Breakfast", "cereal", "eggs", "fruit")
    table.row("Lunch", "sandwich", "salad", "sushi")
    table.row("Dinner", "steak", "fish", "pasta")
    return table


@pytest.fixture
def grouped_table(populations: list[Population]) -> Table:
    """Continent/country/city listing suitable for auto-suppression."""
    table = Table()
    table.set_headers("Continent", "Country", "City", Alignment.RIGHT, "Population")
    for pop in populations:
        table.row(pop.continent, pop.country, pop.city, f"{pop.population:,}")
    return table
