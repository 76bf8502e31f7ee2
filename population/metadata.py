"""
Build the body of the German Wikipedia template Metadaten_Einwohnerzahl_NO.

Counties and the whole country are left out; only rows with a four-digit
municipality code are listed.
"""

import sys
from typing import List, Optional

from constants import REFERENCE_YEAR
from ssb_api.constants import MUNICIPALITY_CODE_LENGTH, PERSONS_MARKER
from population.records import ParseAnomaly, PopulationRecord, parse_record


def select_reference_year(dataset: Optional[str], year: str = REFERENCE_YEAR) -> List[PopulationRecord]:
    """Return the municipality records for year, sorted by municipality code."""
    entries: List[PopulationRecord] = []
    if not dataset:
        return entries
    marker = f'"{PERSONS_MARKER}"'
    target_year = int(year)
    for line in dataset.splitlines():
        if marker not in line:
            continue
        try:
            record = parse_record(line)
        except ParseAnomaly as exc:
            print(f"Skipping malformed row: {exc}", file=sys.stderr)
            continue
        if record.year == target_year and len(record.municipality_code) == MUNICIPALITY_CODE_LENGTH:
            entries.append(record)
    entries.sort(key=lambda record: record.municipality_code)
    return entries


def render_metadata(dataset: Optional[str], year: str = REFERENCE_YEAR) -> str:
    if dataset is None:
        return ""
    return "".join(
        f"| {entry.municipality_code} = {entry.population} <!-- {entry.municipality_name} -->\n"
        for entry in select_reference_year(dataset, year)
    )
