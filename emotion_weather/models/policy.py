from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PolicyStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    UNDER_REVIEW = "under_review"
    COMPLETED = "completed"


class PolicyCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str
    details: Optional[str] = None
    status: PolicyStatus = PolicyStatus.DRAFT


class PolicyUpdate(BaseModel):
    """Fields of a policy that may be changed after creation."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    details: Optional[str] = None
    status: Optional[PolicyStatus] = None

    def changes(self) -> dict:
        # Only details may be cleared; an explicit null elsewhere is ignored.
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key == "details"
        }


class Policy(BaseModel):
    id: str
    title: str
    description: str
    details: Optional[str] = None
    status: PolicyStatus
    created_at: datetime
