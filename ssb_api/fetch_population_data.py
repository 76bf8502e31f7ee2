"""
Fetch the municipality population time series published by Statistics Norway.

Reference curl command:
    curl "https://data.ssb.no/api/v0/dataset/26975.csv?lang=en"
"""

import sys
from typing import Optional

import requests

from ssb_api.constants import SSB_URL


class SsbFetchError(Exception):
    """Raised when fetching the SSB dataset fails."""


def fetch_dataset(url: str = SSB_URL, timeout: Optional[float] = None) -> str:
    """Request the CSV dataset and return the response body as text."""
    try:
        response = requests.get(url, timeout=timeout)
        print(f"Requested: {response.url}", file=sys.stderr)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SsbFetchError(f"Failed request to {url}: {exc}") from exc
    # Legacy rows carry mis-encoded bytes; keep them visible as U+FFFD.
    return response.content.decode("utf-8", errors="replace")


def load_dataset(url: str = SSB_URL) -> Optional[str]:
    """
    Fetch the dataset once for a run. Returns None when the fetch failed so
    callers can stop without a traceback.
    """
    try:
        return fetch_dataset(url)
    except SsbFetchError as exc:
        print(f"Failed to fetch population dataset: {exc}", file=sys.stderr)
        return None


def main() -> None:
    url = sys.argv[1] if len(sys.argv) >= 2 else SSB_URL
    dataset = load_dataset(url)
    if dataset is None:
        sys.exit(1)
    print(dataset)


if __name__ == "__main__":
    main()
