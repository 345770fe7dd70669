from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ActivityEvent(BaseModel):
    timestamp: datetime
    event_type: str
    details: dict[str, Any]


class ActivityCleanupResponse(BaseModel):
    retention_days: int
    removed_events: int
