from fastapi import APIRouter, Depends, Query

from emotion_weather.api.deps import get_activity_log
from emotion_weather.models.activity import ActivityCleanupResponse, ActivityEvent
from emotion_weather.services.activity_service import ActivityLog


router = APIRouter(prefix="/activity", tags=["Activity"])


@router.get("", response_model=list[ActivityEvent])
def get_recent_activity(
    limit: int = Query(default=100, ge=1, le=1000),
    activity_log: ActivityLog = Depends(get_activity_log),
) -> list[ActivityEvent]:
    return activity_log.recent_events(limit)


@router.post("/cleanup", response_model=ActivityCleanupResponse)
def run_activity_cleanup(
    retention_days: int = Query(default=365, ge=1, le=3650),
    activity_log: ActivityLog = Depends(get_activity_log),
) -> ActivityCleanupResponse:
    removed = activity_log.cleanup_older_than(retention_days)
    return ActivityCleanupResponse(retention_days=retention_days, removed_events=removed)
