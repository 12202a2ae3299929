"""Append-only log of completed trades."""

from __future__ import annotations

import gzip
import json
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List

from ..config import CONFIG

# Event type constants used by the trading system
TRADE_BUY = "TRADE_BUY"
TRADE_SELL = "TRADE_SELL"


def _log_retention_bytes() -> int:
    """Return log rotation threshold in bytes from the configuration."""

    return int(CONFIG.persistence.log_retention_mb) * 1024 * 1024


def _rotate_log(path: Path) -> None:
    """Compress ``path`` and clear it for new events."""

    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
    rotated = path.with_name(f"{path.stem}_{ts}{path.suffix}")
    counter = 1
    # Never reuse the name of an earlier rotation.
    while rotated.exists() or rotated.with_suffix(rotated.suffix + ".gz").exists():
        rotated = path.with_name(f"{path.stem}_{ts}_{counter}{path.suffix}")
        counter += 1
    path.rename(rotated)
    gz_path = rotated.with_suffix(rotated.suffix + ".gz")
    with open(rotated, "rb") as src, gzip.open(gz_path, "wb") as dst:
        shutil.copyfileobj(src, dst)
    rotated.unlink()


def append_event(
    dest: str | Path | List[Dict[str, Any]], event_type: str, data: Any
) -> Dict[str, Any]:
    """Append an event to ``dest`` which may be a path or in-memory list."""

    event = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event_type": event_type,
        "data": data,
    }
    if isinstance(dest, list):
        dest.append(event)
        return event

    p = Path(dest)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)

    if p.exists() and p.stat().st_size >= _log_retention_bytes():
        _rotate_log(p)

    with p.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(event, ensure_ascii=False) + "\n")
    return event


def iter_events(path: str | Path) -> Iterator[Dict[str, Any]]:
    """Yield events from ``path`` in the order they were logged."""

    p = Path(path)
    if not p.exists():
        return

    with p.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                continue
            yield event


class EventLog:
    """Convenience wrapper around :func:`append_event` and :func:`iter_events`."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def append(self, event_type: str, data: Any) -> None:
        append_event(self.path, event_type, data)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        yield from iter_events(self.path)


__all__ = [
    "EventLog",
    "append_event",
    "iter_events",
    "TRADE_BUY",
    "TRADE_SELL",
]
