"""
flight_atlas/tests/test_delay_analysis.py - Tests for delay-cause aggregation.

Tests verify:
- Delay minutes are summed per airport for each of the five causes.
- Airports are ranked descending by total, ties by name, truncated to top_k.
- Every category is present even with no records.
- delay_totals_frame returns one row per airport.
"""

import pandas as pd
import pytest

from flight_atlas.config import DELAY_CATEGORIES
from flight_atlas.ingestion.csv_reader import FlightRecord
from flight_atlas.metrics.delay_analysis import analyze_delays, delay_totals_frame


# ── analyze_delays ────────────────────────────────────────────────────────────

def test_returns_all_categories(sample_records):
    delays = analyze_delays(sample_records)
    assert list(delays.keys()) == list(DELAY_CATEGORIES)


def test_carrier_delay_sums_and_order(sample_records):
    delays = analyze_delays(sample_records)
    assert delays["carrier_delay"] == [("JFK", 21.0), ("ATL", 19.0), ("HNL", 7.5)]


def test_weather_delay_order(sample_records):
    delays = analyze_delays(sample_records)
    assert [a for a, _ in delays["weather_delay"]] == ["ATL", "JFK", "HNL"]


def test_tie_broken_by_airport_name(sample_records):
    """ATL and JFK both total 1.0 security minutes."""
    delays = analyze_delays(sample_records)
    assert delays["security_delay"][:2] == [("ATL", 1.0), ("JFK", 1.0)]


def test_top_k_truncates(sample_records):
    delays = analyze_delays(sample_records, top_k=1)
    assert delays["late_aircraft_delay"] == [("JFK", 7.0)]


def test_original_two_record_example():
    records = [
        FlightRecord("A", "X", 10.0, 5.0, 2.0, 1.0, 3.0),
        FlightRecord("B", "X", 5.0, 2.0, 1.0, 0.0, 2.0),
    ]
    delays = analyze_delays(records)
    assert any(name == "X" for name, _ in delays["carrier_delay"])
    assert delays["carrier_delay"] == [("X", 15.0)]


def test_no_records():
    delays = analyze_delays([])
    assert set(delays.keys()) == set(DELAY_CATEGORIES)
    assert all(v == [] for v in delays.values())


def test_values_are_python_floats(sample_records):
    for ranked in analyze_delays(sample_records).values():
        for airport, minutes in ranked:
            assert isinstance(airport, str)
            assert type(minutes) is float


# ── delay_totals_frame ────────────────────────────────────────────────────────

def test_totals_frame_shape(sample_records):
    df = delay_totals_frame(sample_records)
    assert isinstance(df, pd.DataFrame)
    assert set(df.index) == {"ATL", "JFK", "HNL"}
    assert list(df.columns) == list(DELAY_CATEGORIES)


def test_totals_frame_values(sample_records):
    df = delay_totals_frame(sample_records)
    assert df.loc["ATL", "carrier_delay"] == pytest.approx(19.0)
    assert df.loc["JFK", "late_aircraft_delay"] == pytest.approx(7.0)


def test_totals_frame_empty():
    df = delay_totals_frame([])
    assert len(df) == 0
    assert list(df.columns) == list(DELAY_CATEGORIES)
