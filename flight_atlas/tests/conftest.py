"""
flight_atlas/tests/conftest.py - Shared pytest fixtures for the Flight Atlas test suite.

Fixtures:
    path_graph       - A-B-C path graph.
    sample_records   - Small hand-written delay-cause records (two components).
    sample_csv       - The same data written as a BTS-style CSV (with a malformed row).
    random_graph     - Seeded random multigraph with self-loops, for cross-checks.
"""

import random

import pandas as pd
import pytest

from flight_atlas.graph.adjacency import Graph
from flight_atlas.ingestion.csv_reader import FlightRecord

SEED = 41

BTS_COLUMNS = [
    "year", "month", "carrier", "carrier_name", "airport", "airport_name",
    "arr_flights", "arr_del15", "carrier_ct", "weather_ct", "nas_ct",
    "security_ct", "late_aircraft_ct", "arr_cancelled", "arr_diverted",
    "arr_delay", "carrier_delay", "weather_delay", "nas_delay",
    "security_delay", "late_aircraft_delay",
]


def make_record(carrier: str, airport: str, *delays: float) -> FlightRecord:
    return FlightRecord(carrier, airport, *delays)


@pytest.fixture
def path_graph() -> Graph:
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    return g


@pytest.fixture
def sample_records() -> list[FlightRecord]:
    """
    Topology:
        AA ── ATL ── DL ── JFK        (component 1; ATL shared by two carriers)
        AA ── JFK                     (closes a 4-cycle AA-ATL-DL-JFK)
        AA ── ATL                     (second month: multi-edge)
        HA ── HNL                     (component 2)
    """
    return [
        make_record("AA", "ATL", 10.0, 5.0, 2.0, 1.0, 3.0),
        make_record("DL", "ATL", 5.0, 2.0, 1.0, 0.0, 2.0),
        make_record("DL", "JFK", 20.0, 0.0, 4.0, 0.0, 6.0),
        make_record("AA", "JFK", 1.0, 1.0, 1.0, 1.0, 1.0),
        make_record("AA", "ATL", 4.0, 0.0, 0.0, 0.0, 0.0),
        make_record("HA", "HNL", 7.5, 0.5, 0.0, 0.0, 0.0),
    ]


@pytest.fixture
def sample_csv(tmp_path, sample_records) -> str:
    """BTS-style CSV of sample_records plus one row with malformed numerics."""
    rows = []
    for r in sample_records:
        row = {c: "" for c in BTS_COLUMNS}
        row.update({
            "year": "2023", "month": "1",
            "carrier": r.carrier_name, "carrier_name": f"{r.carrier_name} Airlines",
            "airport": r.airport_name, "airport_name": f"{r.airport_name} Intl",
            "arr_delay": "999",
            "carrier_delay": str(r.carrier_delay),
            "weather_delay": str(r.weather_delay),
            "nas_delay": str(r.nas_delay),
            "security_delay": str(r.security_delay),
            "late_aircraft_delay": str(r.late_aircraft_delay),
        })
        rows.append(row)

    malformed = {c: "" for c in BTS_COLUMNS}
    malformed.update({
        "carrier": "HA", "airport": "OGG",
        "carrier_delay": "n/a", "weather_delay": "",
        "nas_delay": "3", "security_delay": "abc", "late_aircraft_delay": "NA",
    })
    rows.append(malformed)

    path = tmp_path / "Airline_Delay_Cause.csv"
    pd.DataFrame(rows, columns=BTS_COLUMNS).to_csv(path, index=False)
    return str(path)


@pytest.fixture
def random_graph() -> Graph:
    """Seeded sparse multigraph: 30 names, 45 insertions, some self-loops."""
    rng = random.Random(SEED)
    names = [f"n{i:02d}" for i in range(30)]
    g = Graph()
    for _ in range(45):
        a = rng.choice(names)
        b = a if rng.random() < 0.1 else rng.choice(names)
        g.add_edge(a, b)
    return g
