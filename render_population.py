"""
Print SSB municipality population figures as wikitext.

Examples:
    python render_population.py --examples
    python render_population.py --metadata --year 2022
    python render_population.py --municipality 0301 --stride 5 --format table
"""

import argparse
import sys
from typing import Optional

from app_logging.logger import log_render
from constants import EXAMPLE_MUNICIPALITIES, OUTPUT_FORMATS, REFERENCE_YEAR
from ssb_api.constants import SSB_URL
from ssb_api.fetch_population_data import load_dataset
from population.chart import chart_from_records
from population.filters import YearStride, parse_stride, select_records
from population.metadata import render_metadata
from population.table import table_from_records


def parse_arguments():
    parser = argparse.ArgumentParser(
        description="Render Statistics Norway municipality population data as wikitext."
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--examples",
        action="store_true",
        help="Print table and chart for the built-in example municipalities",
    )
    mode.add_argument(
        "--metadata",
        action="store_true",
        help="Print the Metadaten_Einwohnerzahl_NO block for the reference year",
    )
    mode.add_argument(
        "--municipality",
        help="Municipality code (kommunenummer), e.g. 0301",
    )
    parser.add_argument(
        "--stride",
        type=parse_stride,
        default=YearStride.EVERY_YEAR,
        help="Year stride: 1, 5 (plus 1986) or 10",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="both",
        help="Output for --municipality",
    )
    parser.add_argument(
        "--year",
        default=REFERENCE_YEAR,
        help=f"Reference year for --metadata (default {REFERENCE_YEAR})",
    )
    parser.add_argument(
        "--access-date",
        help="Citation access date, e.g. '18 October 2026' (default today)",
    )
    parser.add_argument("--url", default=SSB_URL, help="Dataset URL")
    args = parser.parse_args()
    if args.year and not (len(args.year) == 4 and args.year.isdigit()):
        parser.error("--year must be a four-digit year")
    return args


def render_municipality(
    dataset: Optional[str],
    code: str,
    stride: YearStride,
    output_format: str = "both",
    access_date: str = None,
    url: str = SSB_URL,
) -> str:
    parts = []
    records = select_records(dataset, code, stride)
    if dataset and not records:
        print(f"No rows found for municipality {code}.", file=sys.stderr)
    if dataset and output_format in ("table", "both"):
        parts.append(table_from_records(records, access_date=access_date, url=url))
    if output_format in ("chart", "both"):
        parts.append(chart_from_records(records, access_date=access_date, url=url))
    output = "\n\n".join(part for part in parts if part)
    log_render(output_format, code, output)
    return output


def render_examples(dataset: Optional[str], access_date: str = None, url: str = SSB_URL) -> str:
    blocks = []
    for code, name, years in EXAMPLE_MUNICIPALITIES:
        print(f"Rendering {name} ({code}), every {years} year(s)...", file=sys.stderr)
        block = render_municipality(dataset, code, YearStride(years), access_date=access_date, url=url)
        if block:
            blocks.append(block)
    return "\n\n".join(blocks)


def main() -> None:
    args = parse_arguments()
    dataset = load_dataset(args.url)
    if dataset is None:
        sys.exit(1)

    if args.metadata:
        output = render_metadata(dataset, args.year)
        log_render("metadata", args.year, output)
    elif args.examples:
        output = render_examples(dataset, access_date=args.access_date, url=args.url)
    else:
        output = render_municipality(
            dataset,
            args.municipality,
            args.stride,
            output_format=args.format,
            access_date=args.access_date,
            url=args.url,
        )
    print(output.rstrip("\n"))


if __name__ == "__main__":
    main()
