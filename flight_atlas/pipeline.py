"""
flight_atlas/pipeline.py - Single-call pipeline orchestrator.

Provides run_full_pipeline() which loads the delay-cause CSV, builds the
carrier-airport graph, computes both centralities and the delay summary, and
optionally exports a Markdown report and figures.

Usage:
    from flight_atlas.pipeline import run_full_pipeline
    result = run_full_pipeline("Airline_Delay_Cause.csv")
    print(result.top_closeness[:3])
"""

import logging
from dataclasses import dataclass, field

import networkx as nx

from flight_atlas.config import DEFAULT_CONFIG, FlightAtlasConfig
from flight_atlas.graph.adjacency import Graph
from flight_atlas.graph.builder import build_graph_from_records, to_networkx
from flight_atlas.ingestion.csv_reader import FlightRecord, read_flight_records
from flight_atlas.metrics.centrality import closeness_centrality, degree_centrality
from flight_atlas.metrics.delay_analysis import analyze_delays
from flight_atlas.metrics.ranking import top_k

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Complete output of a single Flight Atlas run.

    Full score maps are kept alongside the top-K views so callers can inspect
    any node, not just the leaders.
    """

    records: list[FlightRecord]
    graph: Graph

    closeness: dict[str, float]
    degree: dict[str, int]
    delays: dict[str, list[tuple[str, float]]]

    # Closeness is only comparable within a component.
    connected_components: int = 0

    top_closeness: list[tuple[str, float]] = field(default_factory=list)
    top_degree: list[tuple[str, int]] = field(default_factory=list)

    report_path: str | None = None
    figure_paths: dict[str, str] = field(default_factory=dict)


def analyze_records(
    records: list[FlightRecord],
    config: FlightAtlasConfig = DEFAULT_CONFIG,
) -> PipelineResult:
    """Build the graph and compute every metric for already-loaded records."""
    graph = build_graph_from_records(records)
    logger.info(
        "Phase 2/5: Graph built - %d nodes, %d edges.",
        graph.node_count(),
        graph.edge_count(),
    )

    components = nx.number_connected_components(to_networkx(graph)) if len(graph) else 0

    closeness = closeness_centrality(graph, max_workers=config.closeness_max_workers)
    logger.info(
        "Phase 3/5: Closeness - scored %d nodes across %d components.",
        len(closeness),
        components,
    )

    degree = degree_centrality(graph)
    logger.info("Phase 4/5: Degree - scored %d nodes.", len(degree))

    delays = analyze_delays(records, config.top_k)
    logger.info("Phase 5/5: Delays - %d categories summarized.", len(delays))

    return PipelineResult(
        records=records,
        graph=graph,
        closeness=closeness,
        degree=degree,
        delays=delays,
        connected_components=components,
        top_closeness=top_k(closeness, config.top_k),
        top_degree=top_k(degree, config.top_k),
    )


def run_full_pipeline(
    csv_path: str | None = None,
    config: FlightAtlasConfig = DEFAULT_CONFIG,
    report_path: str | None = None,
    figures_dir: str | None = None,
) -> PipelineResult:
    """
    Execute the complete Flight Atlas pipeline in one call.

    Dependency order:
        1. Load records from CSV
        2. Build carrier-airport graph
        3. Closeness centrality
        4. Degree centrality
        5. Delay summary
        6. Figures (optional)
        7. Markdown export (optional, links any figures)

    Args:
        csv_path:    Delay-cause CSV (defaults to config.default_csv_path).
        config:      FlightAtlasConfig with column mapping and ranking depth.
        report_path: If provided, exports a Markdown report to this path.
        figures_dir: If provided, writes PNG figures to this directory.

    Returns:
        PipelineResult with every intermediate and final result.

    Raises:
        FileNotFoundError: if the CSV does not exist.
        ValueError:        if the CSV lacks a carrier or airport column.
    """
    logger.info("Flight Atlas pipeline starting.")

    path = csv_path or config.default_csv_path
    records = read_flight_records(path, config)
    logger.info("Phase 1/5: Loaded %d flight records.", len(records))

    result = analyze_records(records, config)

    if figures_dir:
        from flight_atlas.viz.figures import generate_all_figures
        result.figure_paths = generate_all_figures(result, figures_dir)
        logger.info("Generated %d figures to %s.", len(result.figure_paths), figures_dir)

    if report_path:
        from flight_atlas.reports.summary import export_report_markdown
        export_report_markdown(result, report_path, config)
        result.report_path = report_path
        logger.info("Markdown report exported to %s.", report_path)

    logger.info("Flight Atlas pipeline complete.")
    return result
