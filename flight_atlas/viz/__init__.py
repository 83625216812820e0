"""
flight_atlas.viz - Static figures.

Modules:
    figures  - Matplotlib PNG figures generated from a PipelineResult.
"""

from flight_atlas.viz.figures import generate_all_figures
