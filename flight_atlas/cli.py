"""
flight_atlas/cli.py - Command-line interface for the Flight Atlas pipeline.

Usage:
    python -m flight_atlas run            # graph + centrality + delays (+ report/figures)
    python -m flight_atlas centrality     # closeness and degree rankings only
    python -m flight_atlas delays         # delay-cause rankings only

The CSV path comes from --csv, then FLIGHT_ATLAS_CSV (which may be set in a
.env file), then the config default Airline_Delay_Cause.csv.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from dataclasses import replace
from pathlib import Path

from flight_atlas.config import DEFAULT_CONFIG, FlightAtlasConfig

CSV_ENV_VAR = "FLIGHT_ATLAS_CSV"
ENV_PREFIX = "FLIGHT_ATLAS_"

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"
NOISY_LOGGERS = ("matplotlib", "PIL")


# ── .env handling ─────────────────────────────────────────────────────────────

def _find_dotenv(start: Path | None = None) -> Path | None:
    """Nearest .env at or above start (default: the working directory)."""
    start = (start or Path.cwd()).resolve()
    for directory in [start, *start.parents]:
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _read_dotenv(path: Path) -> dict[str, str]:
    """Parse FLIGHT_ATLAS_* settings from a dotenv file.

    Accepts `KEY=value`, `export KEY=value`, quoted values and trailing
    ` # comments` on unquoted values. Keys without the FLIGHT_ATLAS_ prefix
    are ignored: the file may be shared with other tools.
    """
    settings: dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]
        else:
            value = value.split(" #", 1)[0].rstrip()
        if key.startswith(ENV_PREFIX):
            settings[key] = value
    return settings


def _load_dotenv(env_file: str | None = None) -> dict[str, str]:
    """Apply .env settings that are not already set in the environment.

    Args:
        env_file: Explicit path. If None, uses the nearest .env found from
                  the working directory upward.

    Returns:
        The settings newly placed into os.environ.
    """
    path = Path(env_file) if env_file else _find_dotenv()
    if path is None or not path.is_file():
        return {}

    loaded = {k: v for k, v in _read_dotenv(path).items() if k not in os.environ}
    os.environ.update(loaded)
    return loaded


# ── Logging setup ─────────────────────────────────────────────────────────────

def _setup_logging(level: str = "INFO") -> None:
    """Route log records to stderr so stdout carries only the rankings."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT, datefmt="%H:%M:%S",
                        stream=sys.stderr)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))


logger = logging.getLogger("flight_atlas.cli")


def _prepare(args: argparse.Namespace) -> tuple[str, FlightAtlasConfig]:
    """Shared start-up: env, logging, CSV path and config overrides."""
    _load_dotenv(args.env_file)
    _setup_logging(args.log_level)

    config = DEFAULT_CONFIG
    if args.top_k is not None:
        config = replace(config, top_k=args.top_k)
    workers = getattr(args, "workers", None)
    if workers is not None:
        config = replace(config, closeness_max_workers=workers)

    csv_path = args.csv or os.environ.get(CSV_ENV_VAR) or config.default_csv_path
    return csv_path, config


# ── Subcommand: run ───────────────────────────────────────────────────────────

def cmd_run(args: argparse.Namespace) -> int:
    """Full pipeline: load → graph → centrality → delays → report/figures."""
    csv_path, config = _prepare(args)

    from flight_atlas.pipeline import run_full_pipeline
    from flight_atlas.reports.summary import render_console_summary

    logger.info("=" * 60)
    logger.info("Flight Atlas - Full Pipeline Run")
    logger.info("  CSV          : %s", csv_path)
    logger.info("  Top K        : %d", config.top_k)
    logger.info("  BFS workers  : %d", config.closeness_max_workers)
    logger.info("  Report path  : %s", args.report_path or "(none)")
    logger.info("  Figures dir  : %s", args.figures_dir or "(none)")
    logger.info("=" * 60)

    t0 = time.monotonic()
    try:
        result = run_full_pipeline(
            csv_path=csv_path,
            config=config,
            report_path=args.report_path,
            figures_dir=args.figures_dir,
        )
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Pipeline failed: %s", exc)
        return 1
    elapsed = time.monotonic() - t0

    print(render_console_summary(result, config))
    print()
    print(f"Elapsed: {elapsed:.1f}s | components: {result.connected_components}")
    if result.report_path:
        print(f"Report saved to: {result.report_path}")
    if result.figure_paths:
        print(f"Figures ({len(result.figure_paths)}): {os.path.abspath(args.figures_dir)}/")
    return 0


# ── Subcommand: centrality ────────────────────────────────────────────────────

def cmd_centrality(args: argparse.Namespace) -> int:
    """Closeness and degree rankings only."""
    csv_path, config = _prepare(args)

    from flight_atlas.graph.builder import build_graph_from_records
    from flight_atlas.ingestion.csv_reader import read_flight_records
    from flight_atlas.metrics.centrality import closeness_centrality, degree_centrality
    from flight_atlas.metrics.ranking import top_k
    from flight_atlas.reports.summary import format_top_scores

    try:
        records = read_flight_records(csv_path, config)
        graph = build_graph_from_records(records)
        closeness = closeness_centrality(graph, max_workers=config.closeness_max_workers)
        degree = degree_centrality(graph)
        top_closeness = top_k(closeness, config.top_k)
        top_degree = top_k(degree, config.top_k)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Centrality failed: %s", exc)
        return 1

    print(f"Graph built with {graph.node_count()} nodes and {graph.edge_count()} edges.")
    print()
    print(format_top_scores("Top by closeness centrality", top_closeness,
                            config.closeness_precision))
    print()
    print(format_top_scores("Top by degree centrality", top_degree))
    return 0


# ── Subcommand: delays ────────────────────────────────────────────────────────

def cmd_delays(args: argparse.Namespace) -> int:
    """Delay-cause rankings only (no graph)."""
    csv_path, config = _prepare(args)

    from flight_atlas.ingestion.csv_reader import read_flight_records
    from flight_atlas.metrics.delay_analysis import analyze_delays
    from flight_atlas.reports.summary import format_top_scores

    try:
        records = read_flight_records(csv_path, config)
        delays = analyze_delays(records, config.top_k)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Delay analysis failed: %s", exc)
        return 1

    print(f"Top {config.top_k} airports by delay category:")
    for category, top_airports in delays.items():
        print()
        print(format_top_scores(category, top_airports, config.delay_precision))
    return 0


# ── Argument parser ───────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flight-atlas",
        description=(
            "Flight Atlas - carrier/airport network centrality and delay-cause summary.\n"
            f"Reads {CSV_ENV_VAR} from .env automatically."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Everything, printed to the console
  python -m flight_atlas run --csv Airline_Delay_Cause.csv

  # With a Markdown report and figures, BFS spread over 4 threads
  python -m flight_atlas run --report-path out/report.md --figures-dir out/figures --workers 4

  # Top 5 nodes by centrality
  python -m flight_atlas centrality --top-k 5

  # Delay causes only
  python -m flight_atlas delays
        """,
    )

    parser.add_argument(
        "--env-file",
        default=None,
        metavar="PATH",
        help="Path to .env file (default: auto-detect .env from the working directory up)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    def add_input_flags(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--csv",
            default=None,
            metavar="PATH",
            help=f"Delay-cause CSV (default: ${CSV_ENV_VAR} or {DEFAULT_CONFIG.default_csv_path})",
        )
        p.add_argument(
            "--top-k",
            type=int,
            default=None,
            metavar="N",
            help=f"Entries per ranking (default: {DEFAULT_CONFIG.top_k})",
        )

    def add_worker_flag(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--workers",
            type=int,
            default=None,
            metavar="N",
            help="Threads for closeness BFS passes (default: 1, sequential)",
        )

    # run
    p_run = subparsers.add_parser(
        "run",
        help="Full pipeline: graph → centrality → delays → report",
    )
    add_input_flags(p_run)
    add_worker_flag(p_run)
    p_run.add_argument(
        "--report-path", default=None, metavar="PATH",
        help="Markdown report output path (default: no report)",
    )
    p_run.add_argument(
        "--figures-dir", default=None, metavar="PATH",
        help="Directory for PNG figures (default: no figures)",
    )
    p_run.set_defaults(func=cmd_run)

    # centrality
    p_centrality = subparsers.add_parser(
        "centrality",
        help="Closeness and degree rankings only",
    )
    add_input_flags(p_centrality)
    add_worker_flag(p_centrality)
    p_centrality.set_defaults(func=cmd_centrality)

    # delays
    p_delays = subparsers.add_parser(
        "delays",
        help="Delay-cause rankings per airport only",
    )
    add_input_flags(p_delays)
    p_delays.set_defaults(func=cmd_delays)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
