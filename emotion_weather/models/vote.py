from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class VoteType(str, Enum):
    HAPPY = "happy"
    ANGRY = "angry"
    NEUTRAL = "neutral"
    SUGGESTION = "suggestion"


class VoteCreate(BaseModel):
    policy_id: str = Field(min_length=1)
    vote_type: VoteType
    comment: Optional[str] = Field(default=None, max_length=1000)


class Vote(BaseModel):
    id: str
    policy_id: str
    # Stored as plain text; the aggregator only counts known vote types.
    vote_type: str
    comment: Optional[str] = None
    created_at: datetime


class VoteStats(BaseModel):
    stats: dict[str, int]
    total: int
    percentages: dict[str, int]
