from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from threading import RLock
from typing import Any

from emotion_weather.models.activity import ActivityEvent

logger = logging.getLogger(__name__)


class ActivityLog:
    """Append-only JSON-lines trail of feedback and policy changes.

    Writes are best-effort: a failed append is logged and never undoes or
    fails the change it describes.
    """

    def __init__(self, event_path: Path) -> None:
        self.event_path = event_path
        self.event_path.parent.mkdir(parents=True, exist_ok=True)
        self.lock = RLock()

    def log_event(self, event_type: str, details: dict[str, Any]) -> None:
        payload = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
            "details": details,
        }
        line = json.dumps(payload)
        try:
            with self.lock:
                with self.event_path.open("a", encoding="utf-8") as f:
                    f.write(line + "\n")
        except OSError:
            logger.exception("Could not record %s event in %s", event_type, self.event_path)

    def _read_lines(self) -> list[str]:
        if not self.event_path.is_file():
            return []
        with self.lock:
            return self.event_path.read_text(encoding="utf-8").splitlines()

    @staticmethod
    def _parse(raw: str) -> ActivityEvent | None:
        if not raw.strip():
            return None
        try:
            return ActivityEvent(**json.loads(raw))
        except (json.JSONDecodeError, TypeError, ValueError):
            return None

    def read_events(self) -> list[ActivityEvent]:
        events = (self._parse(raw) for raw in self._read_lines())
        return [event for event in events if event is not None]

    def recent_events(self, limit: int = 100) -> list[ActivityEvent]:
        # Parse from the end so only the requested tail is decoded.
        recent: list[ActivityEvent] = []
        for raw in reversed(self._read_lines()):
            if len(recent) >= limit:
                break
            event = self._parse(raw)
            if event is not None:
                recent.append(event)
        recent.reverse()
        return recent

    def cleanup_older_than(self, retention_days: int) -> int:
        """Drop events older than ``retention_days``; returns how many were removed."""
        if retention_days < 1 or not self.event_path.is_file():
            return 0

        cutoff = datetime.now(timezone.utc) - timedelta(days=retention_days)
        kept: list[str] = []
        removed = 0

        with self.lock:
            for raw in self._read_lines():
                if not raw.strip():
                    continue
                event = self._parse(raw)
                if event is None or event.timestamp >= cutoff:
                    kept.append(raw)
                else:
                    removed += 1

            self.event_path.write_text("\n".join(kept) + ("\n" if kept else ""), encoding="utf-8")

        logger.info("Activity retention (%d days) removed %d events", retention_days, removed)
        return removed
