"""
Render a municipality's population series as a Graph:Chart macro.
"""

from typing import List, Optional

from constants import CHART_TITLE, POPULATION_LABEL, YEAR_LABEL
from ssb_api.constants import SSB_URL
from ssb_api.utils import build_ssb_ref
from population.filters import YearStride, select_records
from population.records import PopulationRecord

CHART_TEMPLATE = """{title}{ref}
{{{{Graph:Chart
|width=600
|height=200
|type=line
|xAxisTitle={x_label}
|yAxisTitle={y_label}
|x={x}
|y={y}
}}}}"""


def short_year(year: int) -> str:
    """Drop the century: 1986 -> '86', 2000 -> '00'."""
    return str(year)[2:]


def chart_from_records(records: List[PopulationRecord], access_date: str = None, url: str = SSB_URL) -> str:
    if not records:
        return ""
    return CHART_TEMPLATE.format(
        title=CHART_TITLE,
        ref=build_ssb_ref(url=url, access_date=access_date),
        x_label=YEAR_LABEL,
        y_label=POPULATION_LABEL,
        x=",".join(short_year(record.year) for record in records),
        y=",".join(str(record.population) for record in records),
    )


def render_chart(
    dataset: Optional[str],
    code: str,
    stride: YearStride,
    access_date: str = None,
    url: str = SSB_URL,
) -> str:
    """
    Return the chart macro for one municipality. A failed fetch, an empty
    dataset and an unmatched municipality code all produce an empty string.
    """
    if not dataset:
        return ""
    return chart_from_records(select_records(dataset, code, stride), access_date=access_date, url=url)
