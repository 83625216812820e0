"""
flight_atlas/metrics/centrality.py - Closeness and degree centrality.

Closeness uses the Wasserman-Faust form restricted to the reachable set:

    closeness(v) = (r - 1) / sum(d(v, u) for u reachable from v)

where r counts v itself and every node reachable from it. Isolated nodes
(r == 1) score 0.0. Normalisation is by reachable-set size only, not total
graph size, so scores from components of different sizes are not directly
comparable. This is the intended behaviour.

Distances come from one breadth-first search per source node: O(V * (V + E))
overall. The searches share nothing but the read-only graph, so they can run
on a thread pool (max_workers > 1) with identical results.

Degree is the raw adjacency-list length: multi-edges count once per
insertion, and a self-loop counts twice.
"""

import logging
from collections import deque
from concurrent.futures import ThreadPoolExecutor

from flight_atlas.graph.adjacency import Graph

logger = logging.getLogger(__name__)


def _closeness_from(graph: Graph, source: int) -> float:
    """BFS from source; returns its closeness score."""
    visited = [False] * graph.node_count()
    queue: deque[tuple[int, int]] = deque()
    total_distance = 0
    visited_count = 0

    visited[source] = True
    queue.append((source, 0))

    while queue:
        node, dist = queue.popleft()
        total_distance += dist
        visited_count += 1
        for neighbor in graph.neighbors(node):
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append((neighbor, dist + 1))

    # visited_count > 1 guarantees total_distance > 0, so never NaN.
    if visited_count > 1:
        return (visited_count - 1) / total_distance
    return 0.0


def closeness_centrality(
    graph: Graph,
    max_workers: int | None = None,
) -> dict[str, float]:
    """
    Compute closeness centrality for every node.

    Args:
        graph:       Fully built Graph. Not modified.
        max_workers: None or 1 runs the searches sequentially. A larger value
                     distributes them over a ThreadPoolExecutor; each search
                     allocates its own visited list and queue.

    Returns:
        centrality: Dict mapping node name → closeness score in [0.0, 1.0].
                    Empty dict for an empty graph.
    """
    nodes = list(graph.nodes())

    if max_workers is None or max_workers <= 1 or len(nodes) < 2:
        centrality = {name: _closeness_from(graph, idx) for name, idx in nodes}
    else:
        centrality = {}
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            scores = executor.map(lambda item: _closeness_from(graph, item[1]), nodes)
            for (name, _), score in zip(nodes, scores):
                centrality[name] = score

    logger.debug(
        "Closeness computed for %d nodes (workers=%s). Max score: %.4f.",
        len(centrality),
        max_workers or 1,
        max(centrality.values(), default=0.0),
    )
    return centrality


def degree_centrality(graph: Graph) -> dict[str, int]:
    """
    Compute degree centrality for every node.

    Returns:
        degree: Dict mapping node name → adjacency-list length (int).
    """
    degree = {name: len(graph.neighbors(idx)) for name, idx in graph.nodes()}

    logger.debug(
        "Degree computed for %d nodes. Max degree: %d.",
        len(degree),
        max(degree.values(), default=0),
    )
    return degree
