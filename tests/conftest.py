import os
import tempfile

# Import-time defaults (the module-level app, its log files) go to a scratch
# directory instead of the source tree.
os.environ["EMOTION_WEATHER_DATA_DIR"] = tempfile.mkdtemp(prefix="emotion-weather-tests-")

import pytest
from fastapi.testclient import TestClient

from emotion_weather.core.config import Settings
from emotion_weather.main import create_app
from emotion_weather.repositories.data_store import DataStore
from emotion_weather.repositories.seed import seed_sample_data
from emotion_weather.services.activity_service import ActivityLog
from emotion_weather.services.comment_service import CommentService
from emotion_weather.services.container import build_container
from emotion_weather.services.policy_service import PolicyService
from emotion_weather.services.vote_service import VoteService


@pytest.fixture
def store() -> DataStore:
    return DataStore()


@pytest.fixture
def seeded_store(store: DataStore) -> DataStore:
    seed_sample_data(store)
    return store


@pytest.fixture
def activity_log(tmp_path) -> ActivityLog:
    return ActivityLog(tmp_path / "activity.jsonl")


@pytest.fixture
def policy_service(store: DataStore, activity_log: ActivityLog) -> PolicyService:
    return PolicyService(store=store, activity_log=activity_log)


@pytest.fixture
def vote_service(store: DataStore, activity_log: ActivityLog) -> VoteService:
    return VoteService(store=store, activity_log=activity_log)


@pytest.fixture
def comment_service(store: DataStore, activity_log: ActivityLog) -> CommentService:
    return CommentService(store=store, activity_log=activity_log)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(data_dir=tmp_path, seed_sample_data=True)


@pytest.fixture
def container(settings: Settings):
    return build_container(settings)


@pytest.fixture
def client(settings: Settings, container) -> TestClient:
    return TestClient(create_app(settings=settings, container=container))
