import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

LOG_DIR = Path(__file__).resolve().parent / "logs"
LOG_FILE = LOG_DIR / "render.log"


def summarize_output(output: str) -> Dict[str, Any]:
    lines = output.splitlines()
    return {"lines": len(lines), "empty": not lines}


def log_render(kind: str, target: str, output: str) -> None:
    """
    Append a log entry for a render with timestamp, render kind and target
    (municipality code or reference year).
    """
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "kind": kind,
            "target": target,
            "result": summarize_output(output or ""),
        }
        with LOG_FILE.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(entry) + "\n")
    except Exception:
        # Logging should never break the caller.
        pass
