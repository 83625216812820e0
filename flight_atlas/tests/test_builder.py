"""
flight_atlas/tests/test_builder.py - Tests for flight_atlas.graph.builder.

Tests verify:
- build_graph_from_records adds one edge per record, keeping multi-edges.
- Carriers and airports become nodes with a shared name space.
- to_networkx preserves nodes, multi-edges and self-loops.
"""

import networkx as nx

from flight_atlas.graph.adjacency import Graph
from flight_atlas.graph.builder import build_graph_from_records, to_networkx
from flight_atlas.ingestion.csv_reader import FlightRecord


# ── build_graph_from_records ──────────────────────────────────────────────────

class TestBuildGraphFromRecords:
    """Tests for the record-backed graph builder."""

    def test_returns_graph(self, sample_records):
        assert isinstance(build_graph_from_records(sample_records), Graph)

    def test_node_count(self, sample_records):
        """AA, DL, HA carriers + ATL, JFK, HNL airports."""
        g = build_graph_from_records(sample_records)
        assert g.node_count() == 6

    def test_one_edge_per_record(self, sample_records):
        g = build_graph_from_records(sample_records)
        assert g.edge_count() == len(sample_records)

    def test_repeated_record_is_multi_edge(self, sample_records):
        g = build_graph_from_records(sample_records)
        aa = g.index_of("AA")
        atl = g.index_of("ATL")
        assert g.neighbors(aa).count(atl) == 2

    def test_empty_records(self):
        g = build_graph_from_records([])
        assert g.node_count() == 0
        assert g.edge_count() == 0

    def test_accepts_generator(self):
        records = (FlightRecord(c, "ORD") for c in ("UA", "AA"))
        g = build_graph_from_records(records)
        assert g.node_count() == 3


# ── to_networkx ───────────────────────────────────────────────────────────────

class TestToNetworkx:
    """Tests for the NetworkX view."""

    def test_returns_multigraph(self, path_graph):
        G = to_networkx(path_graph)
        assert isinstance(G, nx.MultiGraph)
        assert not G.is_directed()

    def test_same_nodes_and_edges(self, random_graph):
        G = to_networkx(random_graph)
        assert set(G.nodes) == {name for name, _ in random_graph.nodes()}
        assert G.number_of_edges() == random_graph.edge_count()

    def test_multi_edge_preserved(self):
        g = Graph()
        g.add_edge("A", "B")
        g.add_edge("B", "A")
        G = to_networkx(g)
        assert G.number_of_edges("A", "B") == 2

    def test_self_loop_is_single_edge(self):
        g = Graph()
        g.add_edge("A", "A")
        g.add_edge("A", "A")
        G = to_networkx(g)
        assert G.number_of_edges("A", "A") == 2
        assert G.degree("A") == 4

    def test_degrees_match(self, random_graph):
        G = to_networkx(random_graph)
        for name, idx in random_graph.nodes():
            assert G.degree(name) == len(random_graph.neighbors(idx))

    def test_components_of_sample(self, sample_records):
        G = to_networkx(build_graph_from_records(sample_records))
        assert nx.number_connected_components(G) == 2
