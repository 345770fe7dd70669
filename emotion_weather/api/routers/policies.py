from fastapi import APIRouter, Depends, Response, status

from emotion_weather.api.deps import (
    get_comment_service,
    get_policy_service,
    get_vote_service,
)
from emotion_weather.models.comment import Comment
from emotion_weather.models.policy import Policy, PolicyCreate, PolicyUpdate
from emotion_weather.models.vote import Vote, VoteStats
from emotion_weather.services.comment_service import CommentService
from emotion_weather.services.policy_service import PolicyService
from emotion_weather.services.vote_service import VoteService


router = APIRouter(tags=["Policies"])


@router.get("/policies", response_model=list[Policy])
def list_policies(policy_service: PolicyService = Depends(get_policy_service)) -> list[Policy]:
    return policy_service.list_policies()


@router.get("/current-policy", response_model=Policy)
def get_current_policy(policy_service: PolicyService = Depends(get_policy_service)) -> Policy:
    return policy_service.current_policy()


@router.get("/policies/{policy_id}", response_model=Policy)
def get_policy(
    policy_id: str,
    policy_service: PolicyService = Depends(get_policy_service),
) -> Policy:
    return policy_service.get_policy(policy_id)


@router.post("/policies", response_model=Policy, status_code=status.HTTP_201_CREATED)
def create_policy(
    payload: PolicyCreate,
    policy_service: PolicyService = Depends(get_policy_service),
) -> Policy:
    return policy_service.create_policy(payload)


@router.put("/policies/{policy_id}", response_model=Policy)
def update_policy(
    policy_id: str,
    payload: PolicyUpdate,
    policy_service: PolicyService = Depends(get_policy_service),
) -> Policy:
    return policy_service.update_policy(policy_id, payload)


@router.delete("/policies/{policy_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_policy(
    policy_id: str,
    policy_service: PolicyService = Depends(get_policy_service),
) -> Response:
    policy_service.delete_policy(policy_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/policies/{policy_id}/votes", response_model=list[Vote])
def list_policy_votes(
    policy_id: str,
    vote_service: VoteService = Depends(get_vote_service),
) -> list[Vote]:
    return vote_service.list_votes(policy_id)


@router.get("/policies/{policy_id}/stats", response_model=VoteStats)
def get_policy_vote_stats(
    policy_id: str,
    vote_service: VoteService = Depends(get_vote_service),
) -> VoteStats:
    return vote_service.get_vote_stats(policy_id)


@router.get("/policies/{policy_id}/comments", response_model=list[Comment])
def list_policy_comments(
    policy_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> list[Comment]:
    return comment_service.list_comments_for_policy(policy_id)
