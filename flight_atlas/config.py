"""
flight_atlas/config.py - All tunable parameters for Flight Atlas.

No column name, ranking depth or precision should be hardcoded in a metric or
report module. Everything lives here so that adapting to a differently shaped
delay-cause export is a single-file diff.
"""

from dataclasses import dataclass, field

DELAY_CATEGORIES: tuple[str, ...] = (
    "carrier_delay",
    "weather_delay",
    "nas_delay",
    "security_delay",
    "late_aircraft_delay",
)


@dataclass(frozen=True)
class FlightAtlasConfig:
    """
    Immutable configuration for the Flight Atlas pipeline.

    Override by constructing a new FlightAtlasConfig with the desired values.
    """

    # ── Ranking ───────────────────────────────────────────────────────────────
    top_k: int = 10
    # Number of entries kept per ranking (closeness, degree, each delay cause).

    # ── Ingestion column mapping ──────────────────────────────────────────────
    carrier_column: str = "carrier"
    # Header of the carrier identifier column (BTS Airline_Delay_Cause layout).

    airport_column: str = "airport"
    # Header of the airport identifier column.

    delay_columns: dict[str, str] = field(
        default_factory=lambda: {category: category for category in DELAY_CATEGORIES}
    )
    # FlightRecord delay field -> CSV header. Keys must be names from
    # DELAY_CATEGORIES; a field left out reads as 0.0. Reports always follow
    # DELAY_CATEGORIES order.

    # ── Centrality ────────────────────────────────────────────────────────────
    closeness_max_workers: int = 1
    # 1 runs the per-source BFS passes sequentially. Larger values spread them
    # over a thread pool; results are identical either way.

    # ── Presentation ──────────────────────────────────────────────────────────
    closeness_precision: int = 4
    delay_precision: int = 2

    # ── Data paths ────────────────────────────────────────────────────────────
    default_csv_path: str = "Airline_Delay_Cause.csv"
    # Used when neither --csv nor FLIGHT_ATLAS_CSV is given.


# Singleton default: import this everywhere instead of constructing anew.
DEFAULT_CONFIG = FlightAtlasConfig()
