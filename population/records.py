"""
Parse rows of the SSB population CSV into PopulationRecord values.

Every data row carries four quoted fields in a fixed order:

    "K-0301 Oslo - Oslove","2022","Persons",699827

region (prefixed code and name), year, contents label and population.
"""

import csv
from dataclasses import dataclass
from typing import List, Tuple

from ssb_api.constants import (
    CONTENTS_INDEX,
    FIELD_COUNT,
    PERSONS_MARKER,
    POPULATION_INDEX,
    REGION_INDEX,
    YEAR_INDEX,
)

REPLACEMENT_CHARACTER = "\ufffd"
NAME_PLACEHOLDER = "?"


class ParseAnomaly(ValueError):
    """Raised when a row does not carry the expected column layout."""


@dataclass(frozen=True)
class PopulationRecord:
    year: int
    population: int
    municipality_code: str
    municipality_name: str


def split_fields(line: str) -> List[str]:
    """
    Split one raw row into its four fields with the surrounding quotes removed.
    """
    rows = list(csv.reader([line.strip()]))
    fields = rows[0] if rows else []
    if len(fields) != FIELD_COUNT:
        raise ParseAnomaly(f"Expected {FIELD_COUNT} fields, found {len(fields)}: {line!r}")
    return fields


def parse_year_population(line: str) -> Tuple[str, str]:
    """
    Return the (year, population) fields exactly as they appear in a "Persons" row.
    """
    fields = split_fields(line)
    if fields[CONTENTS_INDEX] != PERSONS_MARKER:
        raise ParseAnomaly(f"Expected contents {PERSONS_MARKER!r}, found {fields[CONTENTS_INDEX]!r}: {line!r}")
    year = fields[YEAR_INDEX]
    population = fields[POPULATION_INDEX]
    if len(year) != 4 or not year.isdigit():
        raise ParseAnomaly(f"Unexpected year {year!r}: {line!r}")
    if not population.isdigit():
        raise ParseAnomaly(f"Unexpected population {population!r}: {line!r}")
    return year, population


def split_region(region: str) -> Tuple[str, str]:
    """
    Split a region field such as 'K-0301 Oslo - Oslove' into ('0301', 'Oslo - Oslove').
    """
    head, separator, name = region.partition(" ")
    if not separator:
        raise ParseAnomaly(f"Region without name: {region!r}")
    _, dash, code = head.partition("-")
    return (code if dash else head), name


def normalize_name(name: str) -> str:
    return name.replace(REPLACEMENT_CHARACTER, NAME_PLACEHOLDER)


def parse_full(line: str) -> Tuple[str, str, str, str]:
    """Return (year, population, municipality code, municipality name) for a row."""
    year, population = parse_year_population(line)
    code, name = split_region(split_fields(line)[REGION_INDEX])
    return year, population, code, normalize_name(name)


def parse_record(line: str) -> PopulationRecord:
    year, population, code, name = parse_full(line)
    return PopulationRecord(
        year=int(year),
        population=int(population),
        municipality_code=code,
        municipality_name=name,
    )
