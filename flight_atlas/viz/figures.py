"""
flight_atlas/viz/figures.py - Programmatic figure generation.

Generates the Flight Atlas figures from a PipelineResult. No file I/O beyond
writing the PNGs: all data is read from the result.

Usage:
    from flight_atlas.viz.figures import generate_all_figures
    paths = generate_all_figures(result, output_dir="figures")
    # paths = {"fig1_top_closeness.png": "/abs/path/...", ...}
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from flight_atlas.config import DELAY_CATEGORIES
from flight_atlas.graph.builder import to_networkx
from flight_atlas.metrics.delay_analysis import delay_totals_frame

if TYPE_CHECKING:
    from flight_atlas.pipeline import PipelineResult

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Shared palette
# ---------------------------------------------------------------------------
C_PRIMARY = "#2196A6"   # teal
C_ACCENT = "#E05E3A"    # orange-red
C_DARK = "#1A2B3C"      # near-black
C_LIGHT = "#E8EFF5"     # background tint

CATEGORY_COLORS = ["#2196A6", "#F2B134", "#6C8EBF", "#E05E3A", "#8E6CB8"]

STYLE = {
    "figure.facecolor": "white",
    "axes.facecolor": C_LIGHT,
    "axes.edgecolor": C_DARK,
    "axes.labelcolor": C_DARK,
    "xtick.color": C_DARK,
    "ytick.color": C_DARK,
    "text.color": C_DARK,
    "grid.color": "white",
    "grid.linewidth": 1.0,
    "axes.spines.top": False,
    "axes.spines.right": False,
}

NETWORK_NODE_LIMIT = 40


def generate_all_figures(result: "PipelineResult", output_dir: str) -> dict[str, str]:
    """
    Generate all figures that have data behind them.

    Args:
        result:     PipelineResult from run_full_pipeline() or analyze_records().
        output_dir: Directory to save PNG files into (created if needed).

    Returns:
        Dict mapping filename -> absolute path for each generated figure.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths: dict[str, str] = {}

    plt.rcParams.update(STYLE)

    if result.top_closeness:
        p = _ranked_bar(
            result.top_closeness,
            "Closeness centrality (reachable-set normalised)",
            "Top nodes by closeness centrality",
            C_PRIMARY,
            os.path.join(output_dir, "fig1_top_closeness.png"),
        )
        paths[os.path.basename(p)] = p

    if result.top_degree:
        p = _ranked_bar(
            result.top_degree,
            "Degree (records touching the node)",
            "Top nodes by degree centrality",
            C_ACCENT,
            os.path.join(output_dir, "fig2_top_degree.png"),
        )
        paths[os.path.basename(p)] = p

    if result.records:
        p = _fig3_delay_causes(result, output_dir)
        paths[os.path.basename(p)] = p

    for category, color in zip(DELAY_CATEGORIES, CATEGORY_COLORS):
        ranked = result.delays.get(category)
        if not ranked:
            continue
        p = _ranked_bar(
            ranked,
            "Delay minutes",
            f"Top airports by {category}",
            color,
            os.path.join(output_dir, f"fig4_{category}.png"),
        )
        paths[os.path.basename(p)] = p

    if result.top_degree:
        p = _net1_hub_network(result, output_dir)
        paths[os.path.basename(p)] = p

    logger.info("Generated %d figures in %s", len(paths), output_dir)
    return paths


# ---------------------------------------------------------------------------
# Figures 1, 2 & 4 - ranked horizontal bars
# ---------------------------------------------------------------------------
def _ranked_bar(
    ranked: list[tuple[str, int | float]],
    xlabel: str,
    title: str,
    color: str,
    path: str,
) -> str:
    names = [name for name, _ in ranked][::-1]
    values = [value for _, value in ranked][::-1]

    fig, ax = plt.subplots(figsize=(8, max(3, 0.45 * len(names) + 1)))
    ax.barh(names, values, color=color, edgecolor="white", zorder=3)
    ax.set_xlabel(xlabel, fontsize=11)
    ax.set_title(title, fontsize=13, fontweight="bold", pad=12)
    ax.xaxis.grid(True, zorder=0)

    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return os.path.abspath(path)


# ---------------------------------------------------------------------------
# Figure 3 - delay minutes by cause for the most delayed airports
# ---------------------------------------------------------------------------
def _fig3_delay_causes(result: "PipelineResult", output_dir: str) -> str:
    df_totals = delay_totals_frame(result.records)
    order = df_totals.sum(axis=1).sort_values(ascending=False).head(10).index
    df_top = df_totals.loc[order[::-1]]

    fig, ax = plt.subplots(figsize=(9, max(3, 0.45 * len(df_top) + 1)))
    left = np.zeros(len(df_top))
    for category, color in zip(DELAY_CATEGORIES, CATEGORY_COLORS):
        values = df_top[category].to_numpy()
        ax.barh(df_top.index.astype(str), values, left=left, color=color,
                edgecolor="white", label=category, zorder=3)
        left += values

    ax.set_xlabel("Delay minutes", fontsize=11)
    ax.set_title("Delay causes at the most delayed airports",
                 fontsize=13, fontweight="bold", pad=12)
    ax.xaxis.grid(True, zorder=0)
    ax.legend(fontsize=9, loc="lower right")

    fig.tight_layout()
    path = os.path.join(output_dir, "fig3_delay_causes.png")
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return os.path.abspath(path)


# ---------------------------------------------------------------------------
# Network - induced subgraph on the highest-degree nodes
# ---------------------------------------------------------------------------
def _net1_hub_network(result: "PipelineResult", output_dir: str) -> str:
    G = nx.Graph(to_networkx(result.graph))
    G.remove_edges_from(nx.selfloop_edges(G))

    hubs = sorted(result.degree, key=lambda n: (-result.degree[n], n))[:NETWORK_NODE_LIMIT]
    H = G.subgraph(hubs)

    carriers = {r.carrier_name for r in result.records}
    colors = [C_ACCENT if n in carriers else C_PRIMARY for n in H.nodes]
    max_degree = max((result.degree[n] for n in H.nodes), default=1) or 1
    sizes = [80 + 900 * result.degree[n] / max_degree for n in H.nodes]

    fig, ax = plt.subplots(figsize=(10, 8))
    pos = nx.spring_layout(H, seed=42)
    nx.draw_networkx_edges(H, pos, ax=ax, alpha=0.25, edge_color=C_DARK)
    nx.draw_networkx_nodes(H, pos, ax=ax, node_color=colors, node_size=sizes,
                           edgecolors="white", linewidths=0.8)
    nx.draw_networkx_labels(H, pos, ax=ax, font_size=8)
    ax.set_title(
        f"Carrier-airport network: top {H.number_of_nodes()} nodes by degree",
        fontsize=13, fontweight="bold", pad=12,
    )
    ax.axis("off")

    fig.tight_layout()
    path = os.path.join(output_dir, "net1_hub_network.png")
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return os.path.abspath(path)
