from fastapi import Depends, Request

from emotion_weather.services.activity_service import ActivityLog
from emotion_weather.services.comment_service import CommentService
from emotion_weather.services.container import ServiceContainer
from emotion_weather.services.policy_service import PolicyService
from emotion_weather.services.vote_service import VoteService


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_policy_service(container: ServiceContainer = Depends(get_container)) -> PolicyService:
    return container.policy_service


def get_vote_service(container: ServiceContainer = Depends(get_container)) -> VoteService:
    return container.vote_service


def get_comment_service(container: ServiceContainer = Depends(get_container)) -> CommentService:
    return container.comment_service


def get_activity_log(container: ServiceContainer = Depends(get_container)) -> ActivityLog:
    return container.activity_log
