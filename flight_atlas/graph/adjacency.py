"""
flight_atlas/graph/adjacency.py - Index-stable undirected adjacency graph.

Node names are mapped to dense, zero-based integer indices in the order they
are first seen. Adjacency is an append-only list of neighbor-index lists, one
per node index, so an index handed out once stays valid for the lifetime of
the graph.

Multi-edges are preserved: inserting the same pair twice appends each endpoint
twice. A self-loop appends the node's own index to its list twice. Degree is
therefore the raw adjacency-list length, not a unique-neighbor count.
"""

from collections.abc import Iterator


class Graph:
    """
    Undirected multigraph built by incremental edge insertion.

    Invariants:
        len(adjacency) == len(name_to_index)
        every index in any adjacency list is < len(adjacency)
        j in adjacency[i]  <=>  i in adjacency[j]
    """

    def __init__(self) -> None:
        self.name_to_index: dict[str, int] = {}
        self.adjacency: list[list[int]] = []

    def add_edge(self, node_a: str, node_b: str) -> None:
        """Insert an undirected edge, creating either endpoint if unseen."""
        idx_a = self._get_or_insert_node(node_a)
        idx_b = self._get_or_insert_node(node_b)
        self.adjacency[idx_a].append(idx_b)
        self.adjacency[idx_b].append(idx_a)

    def _get_or_insert_node(self, name: str) -> int:
        idx = self.name_to_index.get(name)
        if idx is None:
            idx = len(self.adjacency)
            self.name_to_index[name] = idx
            self.adjacency.append([])
        return idx

    def node_count(self) -> int:
        return len(self.name_to_index)

    def edge_count(self) -> int:
        """
        Total inserted edges.

        Every insertion contributes exactly two adjacency entries (one per side,
        or two to the same list for a self-loop), so the summed length is even.
        """
        return sum(len(neighbors) for neighbors in self.adjacency) // 2

    def neighbors(self, index: int) -> list[int]:
        """
        Adjacency list for a node index.

        The index must have been assigned by this graph; anything outside
        [0, node_count()) raises IndexError, negative values included. Callers
        must not mutate the returned list.
        """
        if not 0 <= index < len(self.adjacency):
            raise IndexError(
                f"Node index {index} out of range for graph with "
                f"{len(self.adjacency)} nodes"
            )
        return self.adjacency[index]

    def nodes(self) -> Iterator[tuple[str, int]]:
        """Lazy (name, index) pairs over the live mapping. Order is unspecified."""
        return iter(self.name_to_index.items())

    def index_of(self, name: str) -> int:
        """Index assigned to name. Raises KeyError for an unseen name."""
        return self.name_to_index[name]

    def __len__(self) -> int:
        return self.node_count()

    def __contains__(self, name: object) -> bool:
        return name in self.name_to_index

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
