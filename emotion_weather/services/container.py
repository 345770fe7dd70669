from __future__ import annotations

from dataclasses import dataclass

from emotion_weather.core.config import Settings
from emotion_weather.repositories.data_store import DataStore
from emotion_weather.repositories.seed import seed_sample_data
from emotion_weather.services.activity_service import ActivityLog
from emotion_weather.services.comment_service import CommentService
from emotion_weather.services.policy_service import PolicyService
from emotion_weather.services.vote_service import VoteService


@dataclass
class ServiceContainer:
    store: DataStore
    activity_log: ActivityLog
    policy_service: PolicyService
    vote_service: VoteService
    comment_service: CommentService


def build_container(settings: Settings, store: DataStore | None = None) -> ServiceContainer:
    store = store or DataStore()
    if settings.seed_sample_data:
        seed_sample_data(store)

    activity_log = ActivityLog(settings.activity_log_path)
    return ServiceContainer(
        store=store,
        activity_log=activity_log,
        policy_service=PolicyService(store=store, activity_log=activity_log),
        vote_service=VoteService(store=store, activity_log=activity_log),
        comment_service=CommentService(store=store, activity_log=activity_log),
    )
