from typing import Optional

from fastapi import APIRouter, Depends, status

from emotion_weather.api.deps import get_comment_service
from emotion_weather.models.comment import Comment, CommentCreate, CommentSummary
from emotion_weather.services.comment_service import CommentService


router = APIRouter(prefix="/comments", tags=["Comments"])


@router.get("", response_model=list[Comment])
def list_comments(
    comment_service: CommentService = Depends(get_comment_service),
) -> list[Comment]:
    return comment_service.list_comments()


@router.post("", response_model=Comment, status_code=status.HTTP_201_CREATED)
def create_comment(
    payload: CommentCreate,
    comment_service: CommentService = Depends(get_comment_service),
) -> Comment:
    return comment_service.create_comment(payload)


@router.get("/summary", response_model=CommentSummary)
def summarize_comments(
    policy_id: Optional[str] = None,
    comment_service: CommentService = Depends(get_comment_service),
) -> CommentSummary:
    return comment_service.summarize(policy_id)
