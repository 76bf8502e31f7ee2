"""
Row selection by municipality code and year stride.
"""

import sys
from enum import Enum
from typing import List, Optional

from ssb_api.constants import MUNICIPALITY_PREFIX
from population.records import ParseAnomaly, PopulationRecord, parse_record, parse_year_population

# First year of the series; always sampled alongside the five-year marks.
FIRST_DATASET_YEAR = 1986


class YearStride(Enum):
    EVERY_YEAR = 1
    EVERY_FIVE_YEARS = 5
    EVERY_TEN_YEARS = 10


def parse_stride(value) -> YearStride:
    """Map a CLI value such as '5' or 'EVERY_FIVE_YEARS' to a YearStride."""
    if isinstance(value, YearStride):
        return value
    text = str(value).strip()
    if text.isdigit():
        return YearStride(int(text))
    try:
        return YearStride[text.upper()]
    except KeyError:
        raise ValueError(f"Unsupported year stride: {value!r}") from None


def municipality_marker(code: str) -> str:
    """
    Return the exact region prefix for a municipality, e.g. '"K-0301 '.

    The quote and trailing space keep '030' from matching '0301'.
    """
    return f'"{MUNICIPALITY_PREFIX}{code} '


def accepts_year(year: int, stride: YearStride) -> bool:
    if stride is YearStride.EVERY_YEAR:
        return True
    if stride is YearStride.EVERY_FIVE_YEARS:
        return year == FIRST_DATASET_YEAR or year % 5 == 0
    if stride is YearStride.EVERY_TEN_YEARS:
        return year % 10 == 0
    raise ValueError(f"Unsupported year stride: {stride!r}")


def line_matches(line: str, code: str, stride: YearStride) -> bool:
    """
    Check the cheap municipality marker before parsing the year.
    """
    if municipality_marker(code) not in line:
        return False
    if stride is YearStride.EVERY_YEAR:
        return True
    year, _ = parse_year_population(line)
    return accepts_year(int(year), stride)


def select_records(dataset: Optional[str], code: str, stride: YearStride) -> List[PopulationRecord]:
    """
    Return the records for one municipality in dataset order. Malformed rows
    are reported on stderr and skipped.
    """
    records: List[PopulationRecord] = []
    if not dataset:
        return records
    for line in dataset.splitlines():
        try:
            if line_matches(line, code, stride):
                records.append(parse_record(line))
        except ParseAnomaly as exc:
            print(f"Skipping malformed row: {exc}", file=sys.stderr)
    return records
