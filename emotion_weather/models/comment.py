from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_AUTHOR = "Anonymous"


class SentimentBucket(str, Enum):
    NEGATIVE = "negative"
    POSITIVE = "positive"
    SUGGESTION = "suggestion"
    NEUTRAL = "neutral"


class CommentCreate(BaseModel):
    policy_id: str = Field(min_length=1)
    content: str = Field(max_length=2000)
    author: Optional[str] = Field(default=None, max_length=100, validate_default=True)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("content must not be empty")
        return value

    @field_validator("author")
    @classmethod
    def default_author(cls, value: Optional[str]) -> str:
        if value is None or not value.strip():
            return DEFAULT_AUTHOR
        return value.strip()


class Comment(BaseModel):
    id: str
    policy_id: str
    content: str
    author: str = DEFAULT_AUTHOR
    sentiment: str = SentimentBucket.NEUTRAL.value
    created_at: datetime


class ClassifiedComment(Comment):
    category: SentimentBucket


class CommentSummary(BaseModel):
    total: int
    negative: list[ClassifiedComment]
    positive: list[ClassifiedComment]
    suggestion: list[ClassifiedComment]
    neutral: list[ClassifiedComment]
    positive_percent: int
    concern_percent: int
    suggestion_percent: int
