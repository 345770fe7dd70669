from fastapi import APIRouter, Depends, status

from emotion_weather.api.deps import get_vote_service
from emotion_weather.models.vote import Vote, VoteCreate
from emotion_weather.services.vote_service import VoteService


router = APIRouter(prefix="/votes", tags=["Votes"])


@router.post("", response_model=Vote, status_code=status.HTTP_201_CREATED)
def create_vote(
    payload: VoteCreate,
    vote_service: VoteService = Depends(get_vote_service),
) -> Vote:
    return vote_service.create_vote(payload)
