"""
flight_atlas/metrics/delay_analysis.py - Delay minutes by cause per airport.

Sums each delay cause over all records for an airport, then ranks airports by
total minutes within each cause. Independent of the graph: it reads the same
records the graph was built from.
"""

import logging
from collections.abc import Sequence
from dataclasses import asdict

import pandas as pd

from flight_atlas.config import DELAY_CATEGORIES
from flight_atlas.ingestion.csv_reader import FlightRecord
from flight_atlas.metrics.ranking import top_k as rank_top_k

logger = logging.getLogger(__name__)


def delay_totals_frame(records: Sequence[FlightRecord]) -> pd.DataFrame:
    """
    Grouped delay totals.

    Returns:
        df_totals: DataFrame indexed by airport_name, one float column per
                   delay category. Empty (with the category columns) when
                   there are no records.
    """
    if not records:
        return pd.DataFrame(columns=list(DELAY_CATEGORIES), dtype=float).rename_axis(
            "airport_name"
        )

    df = pd.DataFrame([asdict(r) for r in records])
    df_totals = df.groupby("airport_name", sort=False)[list(DELAY_CATEGORIES)].sum()
    return df_totals.astype(float)


def analyze_delays(
    records: Sequence[FlightRecord],
    top_k: int = 10,
) -> dict[str, list[tuple[str, float]]]:
    """
    Top airports per delay category.

    Args:
        records: Flight records (delay fields already coerced to floats).
        top_k:   Airports kept per category.

    Returns:
        delays: Dict mapping category name → list of (airport, total minutes),
                descending by minutes, ties by airport name. Every category
                is present, with an empty list when there are no records.
    """
    df_totals = delay_totals_frame(records)

    delays: dict[str, list[tuple[str, float]]] = {}
    for category in DELAY_CATEGORIES:
        totals = {str(airport): float(v) for airport, v in df_totals[category].items()}
        delays[category] = rank_top_k(totals, top_k)

    logger.debug(
        "Delay analysis complete: %d airports across %d categories.",
        len(df_totals),
        len(DELAY_CATEGORIES),
    )
    return delays
