REFERENCE_YEAR = "2022"

YEAR_LABEL = "Year"
POPULATION_LABEL = "Population"
CHART_TITLE = "Population development"

# (municipality code, name, stride in years)
EXAMPLE_MUNICIPALITIES = [
    ("0301", "Oslo", 5),
    ("4601", "Bergen", 10),
    ("1120", "Klepp", 1),
]

OUTPUT_FORMATS = ["table", "chart", "both"]
