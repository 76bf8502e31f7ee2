"""
Shared constants for Statistics Norway (SSB) dataset access and citation metadata.
"""

DATASET_ID = "26975"
SSB_URL = f"https://data.ssb.no/api/v0/dataset/{DATASET_ID}.csv?lang=en"

# "K-0301 Oslo - Oslove","2022","Persons",699827
FIELD_COUNT = 4
REGION_INDEX = 0
YEAR_INDEX = 1
CONTENTS_INDEX = 2
POPULATION_INDEX = 3

MUNICIPALITY_PREFIX = "K-"
PERSONS_MARKER = "Persons"
MUNICIPALITY_CODE_LENGTH = 4

CITATION_DETAILS = {
    "name": f"SSB{DATASET_ID}",
    "title": "Population, by region, year and contents",
    "template": (
        "{{cite web|title={title}|url={url}|website=Statistics Norway|"
        "access-date={access_date}}}"
    ),
    "default_url": SSB_URL,
}
