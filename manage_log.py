import argparse
import json
from pathlib import Path

from app_logging.logger import LOG_FILE


def remove_entries(target: str, log_path: Path = LOG_FILE) -> int:
    """
    Remove log entries for the given municipality code or reference year. Returns the count removed.
    """
    if not log_path.exists():
        return 0
    removed = 0
    kept_lines = []
    with log_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            try:
                entry = json.loads(line)
            except ValueError:
                kept_lines.append(line)
                continue
            if entry.get("target") == target.strip():
                removed += 1
                continue
            kept_lines.append(line)
    if removed:
        log_path.write_text("".join(kept_lines), encoding="utf-8")
    return removed


def _load_rendered_targets(log_path: Path = LOG_FILE) -> set:
    rendered = set()
    if not log_path.exists():
        return rendered
    with log_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            try:
                entry = json.loads(line)
            except ValueError:
                continue
            if not entry.get("result", {}).get("empty", True):
                target = entry.get("target")
                if target:
                    rendered.add((entry.get("kind"), target))
    return rendered


def main():
    parser = argparse.ArgumentParser(
        description="Inspect or prune render entries in app_logging/logs/render.log"
    )
    parser.add_argument(
        "--remove-log",
        dest="target",
        required=False,
        help="Municipality code or reference year (e.g., '0301' or '2022')",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Show the number of distinct (kind, target) pairs with non-empty output",
    )
    args = parser.parse_args()
    if args.count:
        rendered = _load_rendered_targets()
        print(f"Total distinct rendered targets: {len(rendered)}")
    if args.target:
        count = remove_entries(args.target)
        print(f"Removed {count} matching log entr{'y' if count == 1 else 'ies'}.")


if __name__ == "__main__":
    main()
