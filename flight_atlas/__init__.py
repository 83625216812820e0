"""
flight_atlas - Carrier/airport network analysis over airline delay-cause data.

Builds an undirected graph linking carriers to the airports they serve, ranks
nodes by structural importance (closeness and degree centrality), and
summarizes delay minutes by cause for each airport.

Subpackages:
- flight_atlas.graph      Index-stable adjacency graph and its builder.
- flight_atlas.metrics    Centrality engine, top-K ranking, delay aggregation.
- flight_atlas.ingestion  Delay-cause CSV reader.
- flight_atlas.reports    Console and Markdown summaries.
- flight_atlas.viz        Matplotlib figures.
"""

__version__ = "0.1.0"
