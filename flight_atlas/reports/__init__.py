"""
flight_atlas.reports - Human-readable output.

Modules:
    summary  - Console summary (top-K tables) and Markdown report export.
"""

from flight_atlas.reports.summary import (
    export_report_markdown,
    format_top_scores,
    render_console_summary,
)
