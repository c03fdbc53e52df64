#!/usr/bin/env python3
"""
City Populations Example

Demonstrates the main layout features on a grouped listing:
- Spanning rows that split the table into per-country blocks
- Headers with alignment markers, repeated for every block
- Auto-suppression of repeated continent/country values
- Side-by-side composition of two rendered tables

Run:
    uv run python examples/populations.py
"""

from tabledump import Alignment, Table

POPULATIONS = [
    ("Europe", "UK", "London", 8615246),
    ("Europe", "UK", "Birmingham", 1224136),
    ("Europe", "France", "Paris", 2249975),
    ("Europe", "France", "Marseille", 850636),
    ("North America", "Canada", "Toronto", 2731579),
    ("North America", "Canada", "Montreal", 1704694),
    ("North America", "USA", "New York City", 8175133),
    ("North America", "USA", "Los Angeles", 3792621),
]


def by_country() -> Table:
    """One block per country, introduced by a spanning row."""
    table = Table("Populations by country")
    table.set_indent(2)
    table.set_headers("City", Alignment.RIGHT, "Population")
    last_country = None
    for _, country, city, population in POPULATIONS:
        if country != last_country:
            table.add_span(country)
            last_country = country
        table.row(city, f"{population:,}")
    return table


def grouped() -> Table:
    """A flat listing where repeated leading values are blanked out."""
    table = Table("Populations,\nwith auto-suppress columns = 2")
    table.set_headers("Continent", "Country", "City", Alignment.RIGHT, "Population")
    table.set_auto_suppress(2)
    table.populate(POPULATIONS, lambda p: (p[0], p[1], p[2], f"{p[3]:,}"))
    return table


def main() -> None:
    print(by_country())
    print(grouped())

    evens = Table("Even")
    evens.set_headers(Alignment.RIGHT, "Base", "Square")
    odds = Table("Odd")
    odds.set_headers(Alignment.RIGHT, "Base", "Square")
    for i in range(1, 10):
        (evens if i % 2 == 0 else odds).row(i, i * i)
    print(Table.horizontal(odds, evens))


if __name__ == "__main__":
    main()
