"""
flight_atlas/reports/summary.py - Console and Markdown summaries.

Both outputs present the same three sections:
    - Top nodes by closeness centrality
    - Top nodes by degree centrality
    - Top airports per delay category

Ordering always comes from flight_atlas.metrics.ranking.top_k, so a NaN
score aborts the report instead of producing a silently misordered table.
"""

import logging
import os
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from flight_atlas.config import DEFAULT_CONFIG, FlightAtlasConfig

if TYPE_CHECKING:
    from flight_atlas.pipeline import PipelineResult

logger = logging.getLogger(__name__)


def _format_value(value: int | float, precision: int) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.{precision}f}"


def format_top_scores(
    title: str,
    ranked: list[tuple[str, int | float]],
    precision: int = 4,
) -> str:
    """
    Render a ranked list as "name: value" lines under a title line.

    Integers are printed as-is; floats with `precision` decimal places.
    """
    lines = [f"{title}:"]
    for name, value in ranked:
        lines.append(f"{name}: {_format_value(value, precision)}")
    return "\n".join(lines)


def render_console_summary(
    result: "PipelineResult",
    config: FlightAtlasConfig = DEFAULT_CONFIG,
) -> str:
    """Plain-text run summary in the order the metrics were computed."""
    graph = result.graph
    blocks = [
        f"Loaded {len(result.records)} flight records.",
        f"Graph built with {graph.node_count()} nodes and {graph.edge_count()} edges.",
        format_top_scores(
            "Top by closeness centrality",
            result.top_closeness,
            config.closeness_precision,
        ),
        format_top_scores("Top by degree centrality", result.top_degree),
        f"Top {config.top_k} airports by delay category:",
    ]
    for category, top_airports in result.delays.items():
        blocks.append(format_top_scores(category, top_airports, config.delay_precision))
    return "\n\n".join(blocks)


def _markdown_table(
    ranked: list[tuple[str, int | float]],
    header: str,
    precision: int,
) -> list[str]:
    if not ranked:
        return ["_No data._", ""]
    lines = [f"| Rank | Name | {header} |", "|---:|---|---:|"]
    for rank, (name, value) in enumerate(ranked, start=1):
        lines.append(f"| {rank} | {name} | {_format_value(value, precision)} |")
    lines.append("")
    return lines


def export_report_markdown(
    result: "PipelineResult",
    output_path: str,
    config: FlightAtlasConfig = DEFAULT_CONFIG,
) -> str:
    """
    Export a Markdown network and delay report.

    Structure:
        # Flight Atlas - Carrier/Airport Network Report
        ## Network Overview        (records, nodes, edges, components)
        ## Closeness Centrality    (top-K table + comparability note)
        ## Degree Centrality       (top-K table)
        ## Delay Causes            (one top-K table per category)
        ## Figures                 (only when figures were generated)

    Writes the file to output_path (parent directories created as needed)
    and returns the Markdown string.
    """
    graph = result.graph
    generated = datetime.now(tz=timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    lines: list[str] = [
        "# Flight Atlas - Carrier/Airport Network Report",
        "",
        f"**Generated:** {generated}",
        "",
        "## Network Overview",
        "",
        "| Metric | Value |",
        "|---|---:|",
        f"| Flight records | {len(result.records)} |",
        f"| Nodes (carriers + airports) | {graph.node_count()} |",
        f"| Edges (records linking carrier to airport) | {graph.edge_count()} |",
        f"| Connected components | {result.connected_components} |",
        "",
        "## Closeness Centrality",
        "",
        "Closeness is normalised by the size of each node's reachable set, not by "
        "the whole graph. Scores are only comparable between nodes in the same "
        "connected component.",
        "",
    ]
    lines += _markdown_table(result.top_closeness, "Closeness", config.closeness_precision)

    lines += ["## Degree Centrality", ""]
    lines += _markdown_table(result.top_degree, "Degree", 0)

    lines += ["## Delay Causes", ""]
    for category, top_airports in result.delays.items():
        lines += [f"### {category}", ""]
        lines += _markdown_table(top_airports, "Minutes", config.delay_precision)

    if result.figure_paths:
        lines += ["## Figures", ""]
        for name, path in sorted(result.figure_paths.items()):
            lines.append(f"![{name}]({path})")
        lines.append("")

    markdown = "\n".join(lines)

    parent = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(parent, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as fh:
        fh.write(markdown)

    logger.debug("Report written: %d lines to %s.", len(lines), output_path)
    return markdown
