"""
Render a municipality's population series as a two-row wikitable.
"""

from typing import List, Optional

from constants import POPULATION_LABEL, YEAR_LABEL
from ssb_api.constants import SSB_URL
from ssb_api.utils import build_ssb_ref
from population.filters import YearStride, select_records
from population.records import PopulationRecord

TABLE_OPEN = '{| class="wikitable"'
TABLE_CLOSE = "|}"
ROW_SEPARATOR = "|-"
THOUSANDS_SEPARATOR = "."
GROUPING_THRESHOLD = 10000


def format_population(value: int) -> str:
    """
    Insert a '.' thousands separator; four-digit values stay ungrouped.
    """
    if value < GROUPING_THRESHOLD:
        return str(value)
    return f"{value:,}".replace(",", THOUSANDS_SEPARATOR)


def _header_row(years: List[int]) -> str:
    return "! " + " !! ".join([YEAR_LABEL] + [str(year) for year in years])


def _data_row(populations: List[int], ref: str) -> str:
    cells = [f"{POPULATION_LABEL}{ref}"] + [format_population(value) for value in populations]
    return "| " + " || ".join(cells)


def table_from_records(records: List[PopulationRecord], access_date: str = None, url: str = SSB_URL) -> str:
    ref = build_ssb_ref(url=url, access_date=access_date)
    lines = [
        TABLE_OPEN,
        ROW_SEPARATOR,
        _header_row([record.year for record in records]),
        ROW_SEPARATOR,
        _data_row([record.population for record in records], ref),
        TABLE_CLOSE,
    ]
    return "\n".join(lines)


def render_table(
    dataset: Optional[str],
    code: str,
    stride: YearStride,
    access_date: str = None,
    url: str = SSB_URL,
) -> str:
    """
    Return the wikitable for one municipality, or an empty string when the
    dataset is empty or could not be fetched. A municipality without rows
    still gets the two labelled rows.
    """
    if not dataset:
        return ""
    return table_from_records(select_records(dataset, code, stride), access_date=access_date, url=url)
