"""
flight_atlas/graph/builder.py - Graph construction from flight records.

Each delay-cause record links the reporting carrier to the airport it served.
One record becomes one undirected edge; carriers appearing at the same airport
in many months produce multi-edges, which the graph preserves.

to_networkx() exposes the same structure as an nx.MultiGraph so connectivity
statistics (component count) can come from NetworkX rather than being
re-implemented here.
"""

import logging
from collections.abc import Iterable

import networkx as nx

from flight_atlas.graph.adjacency import Graph
from flight_atlas.ingestion.csv_reader import FlightRecord

logger = logging.getLogger(__name__)


def build_graph_from_records(records: Iterable[FlightRecord]) -> Graph:
    """
    Build the carrier-airport graph.

    Args:
        records: Flight records, in file order. Every record adds the edge
                 (carrier_name, airport_name); nothing is deduplicated.

    Returns:
        graph: Graph with one node per distinct carrier or airport name.
    """
    graph = Graph()
    for record in records:
        graph.add_edge(record.carrier_name, record.airport_name)

    logger.debug(
        "Graph built with %d nodes and %d edges.",
        graph.node_count(),
        graph.edge_count(),
    )
    return graph


def to_networkx(graph: Graph) -> nx.MultiGraph:
    """
    Convert a Graph to a multiplicity-preserving nx.MultiGraph.

    Node IDs are the graph's names. Each inserted edge appears once. A
    self-loop shows up twice in its own adjacency list but is a single edge,
    so for i == j only every second occurrence is emitted.

    Isolated nodes cannot arise from add_edge, but are added explicitly so the
    node sets always match.
    """
    names: list[str] = [""] * graph.node_count()
    for name, idx in graph.nodes():
        names[idx] = name

    G = nx.MultiGraph()
    G.add_nodes_from(names)
    for i, neighbors in enumerate(graph.adjacency):
        self_loops_seen = 0
        for j in neighbors:
            if i < j:
                G.add_edge(names[i], names[j])
            elif i == j:
                self_loops_seen += 1
                if self_loops_seen % 2 == 0:
                    G.add_edge(names[i], names[j])
    return G
