"""
Population package exposing the row parser, filters and wikitext renderers.
"""

from .chart import render_chart
from .filters import YearStride, select_records
from .metadata import render_metadata
from .records import ParseAnomaly, PopulationRecord
from .table import format_population, render_table

__all__ = [
    "ParseAnomaly",
    "PopulationRecord",
    "YearStride",
    "format_population",
    "render_chart",
    "render_metadata",
    "render_table",
    "select_records",
]
