"""
flight_atlas.metrics - Metric computation.

Modules:
    centrality      - Closeness (per-source BFS) and degree centrality.
    ranking         - Top-K ordering for presentation; NaN is fatal.
    delay_analysis  - Delay minutes per airport per cause, top-K airports.

Centrality functions treat the Graph as read-only and return a fresh dict per
call. All ranking depths live in flight_atlas.config.FlightAtlasConfig.
"""
