"""
flight_atlas.graph - Graph construction layer.

Modules:
    adjacency  - Undirected multigraph with dense integer node indices.
    builder    - Build a Graph from flight records; NetworkX view for analysis.

Node types : carrier codes and airport codes share one name space.
Edge types : one undirected edge per flight record (carrier, airport).
"""

from flight_atlas.graph.adjacency import Graph
from flight_atlas.graph.builder import build_graph_from_records, to_networkx
