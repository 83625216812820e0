"""
flight_atlas.ingestion - Delay-cause record ingestion.

Modules:
    csv_reader  - Read a BTS Airline_Delay_Cause style CSV into FlightRecords.
"""

from flight_atlas.ingestion.csv_reader import (
    FlightRecord,
    read_flight_records,
    records_from_dataframe,
)
