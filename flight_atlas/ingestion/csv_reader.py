"""
flight_atlas/ingestion/csv_reader.py - Delay-cause CSV ingestion.

Reads a monthly carrier-by-airport delay-cause export (the BTS
Airline_Delay_Cause.csv layout) into FlightRecord objects. Columns are looked
up by header name, configured in FlightAtlasConfig.

Numeric coercion is forgiving: a blank, malformed or missing delay value
becomes 0.0, and a delay column absent from the file is treated as all zeros.
Carrier and airport columns are required; rows where either is blank are
skipped because they cannot form an edge.
"""

import logging
from dataclasses import dataclass

import pandas as pd

from flight_atlas.config import DEFAULT_CONFIG, DELAY_CATEGORIES, FlightAtlasConfig

logger = logging.getLogger(__name__)


@dataclass
class FlightRecord:
    """
    One carrier-at-airport row of the delay-cause export.

    Fields:
        carrier_name:        Carrier identifier (graph node).
        airport_name:        Airport identifier (graph node).
        carrier_delay:       Minutes attributed to the carrier.
        weather_delay:       Minutes attributed to significant weather.
        nas_delay:           Minutes attributed to the National Airspace System.
        security_delay:      Minutes attributed to security.
        late_aircraft_delay: Minutes attributed to a late-arriving aircraft.
    """
    carrier_name: str
    airport_name: str
    carrier_delay: float = 0.0
    weather_delay: float = 0.0
    nas_delay: float = 0.0
    security_delay: float = 0.0
    late_aircraft_delay: float = 0.0


def records_from_dataframe(
    df: pd.DataFrame,
    config: FlightAtlasConfig = DEFAULT_CONFIG,
) -> list[FlightRecord]:
    """
    Map a raw delay-cause DataFrame to FlightRecords.

    Args:
        df:     DataFrame as read from the CSV (string or numeric columns).
        config: Supplies carrier_column, airport_column and delay_columns.
                delay_columns maps each FlightRecord delay field to
                its CSV header.

    Returns:
        records: One FlightRecord per row with non-blank carrier and airport.

    Raises:
        ValueError: if the carrier or airport column is missing, or
                    delay_columns names a field FlightRecord does not have.
    """
    unknown = sorted(set(config.delay_columns) - set(DELAY_CATEGORIES))
    if unknown:
        raise ValueError(
            f"Unknown delay fields in delay_columns: {unknown}. "
            f"Expected a subset of {list(DELAY_CATEGORIES)}"
        )

    for key_column in (config.carrier_column, config.airport_column):
        if key_column not in df.columns:
            raise ValueError(
                f"Required column '{key_column}' not found. "
                f"Available columns: {list(df.columns)}"
            )

    carriers = df[config.carrier_column].fillna("").astype(str).str.strip()
    airports = df[config.airport_column].fillna("").astype(str).str.strip()

    delays: dict[str, pd.Series] = {}
    for field_name, column in config.delay_columns.items():
        if column in df.columns:
            delays[field_name] = pd.to_numeric(df[column], errors="coerce").fillna(0.0)
        else:
            logger.warning("Delay column '%s' not found; treating as 0.0.", column)

    records: list[FlightRecord] = []
    skipped = 0
    for pos, (carrier, airport) in enumerate(zip(carriers, airports)):
        if not carrier or not airport:
            skipped += 1
            logger.debug("Skipping row %d with blank carrier or airport.", pos)
            continue
        values = {name: float(series.iat[pos]) for name, series in delays.items()}
        records.append(FlightRecord(carrier, airport, **values))

    if skipped:
        logger.info("Skipped %d rows with blank carrier or airport.", skipped)
    return records


def read_flight_records(
    path: str,
    config: FlightAtlasConfig = DEFAULT_CONFIG,
) -> list[FlightRecord]:
    """
    Load flight records from a delay-cause CSV file.

    All columns are read as strings so that coercion happens in one place
    (records_from_dataframe) with the zero fallback.

    Raises:
        FileNotFoundError: if path does not exist.
        ValueError:        if a required key column is missing.
    """
    logger.info("Loading delay-cause records from: %s", path)
    df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    records = records_from_dataframe(df, config)
    logger.debug("Parsed %d flight records.", len(records))
    return records
