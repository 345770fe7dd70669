from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from threading import RLock
from typing import Optional, TypeVar
from uuid import uuid4

from emotion_weather.models.comment import Comment, CommentCreate
from emotion_weather.models.policy import Policy, PolicyCreate, PolicyUpdate
from emotion_weather.models.user import User, UserCreate
from emotion_weather.models.vote import Vote, VoteCreate

RecordT = TypeVar("RecordT", Policy, Comment)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid4())


def newest_first(rows: Iterable[RecordT]) -> list[RecordT]:
    # Reversing first keeps later inserts ahead of earlier ones on equal timestamps.
    return sorted(reversed(list(rows)), key=lambda row: row.created_at, reverse=True)


class DataStore:
    """In-memory repository for policies, votes, comments and users.

    Nothing is persisted; a restart starts from an empty (or freshly seeded)
    store. Votes and comments reference policies by id only, so deleting a
    policy leaves its votes and comments in place.
    """

    def __init__(self) -> None:
        self.lock = RLock()
        self.users: dict[str, User] = {}
        self.policies: dict[str, Policy] = {}
        self.votes: dict[str, Vote] = {}
        self.comments: dict[str, Comment] = {}

    # Policies

    def list_policies(self) -> list[Policy]:
        with self.lock:
            rows = list(self.policies.values())
        return newest_first(rows)

    def get_policy(self, policy_id: str) -> Optional[Policy]:
        with self.lock:
            return self.policies.get(policy_id)

    def create_policy(self, payload: PolicyCreate) -> Policy:
        policy = Policy(id=new_id(), created_at=utcnow(), **payload.model_dump())
        return self.add_policy(policy)

    def add_policy(self, policy: Policy) -> Policy:
        with self.lock:
            self.policies[policy.id] = policy
        return policy

    def update_policy(self, policy_id: str, patch: PolicyUpdate) -> Optional[Policy]:
        with self.lock:
            existing = self.policies.get(policy_id)
            if existing is None:
                return None
            updated = existing.model_copy(update=patch.changes())
            self.policies[policy_id] = updated
        return updated

    def delete_policy(self, policy_id: str) -> bool:
        with self.lock:
            return self.policies.pop(policy_id, None) is not None

    # Votes

    def list_votes(self) -> list[Vote]:
        with self.lock:
            return list(self.votes.values())

    def list_votes_by_policy(self, policy_id: str) -> list[Vote]:
        return [vote for vote in self.list_votes() if vote.policy_id == policy_id]

    def get_vote(self, vote_id: str) -> Optional[Vote]:
        with self.lock:
            return self.votes.get(vote_id)

    def create_vote(self, payload: VoteCreate) -> Vote:
        vote = Vote(
            id=new_id(),
            policy_id=payload.policy_id,
            vote_type=payload.vote_type.value,
            comment=payload.comment,
            created_at=utcnow(),
        )
        return self.add_vote(vote)

    def add_vote(self, vote: Vote) -> Vote:
        with self.lock:
            self.votes[vote.id] = vote
        return vote

    # Comments

    def list_comments(self) -> list[Comment]:
        with self.lock:
            rows = list(self.comments.values())
        return newest_first(rows)

    def list_comments_by_policy(self, policy_id: str) -> list[Comment]:
        return [c for c in self.list_comments() if c.policy_id == policy_id]

    def get_comment(self, comment_id: str) -> Optional[Comment]:
        with self.lock:
            return self.comments.get(comment_id)

    def create_comment(self, payload: CommentCreate) -> Comment:
        comment = Comment(
            id=new_id(),
            policy_id=payload.policy_id,
            content=payload.content,
            author=payload.author,
            created_at=utcnow(),
        )
        return self.add_comment(comment)

    def add_comment(self, comment: Comment) -> Comment:
        with self.lock:
            self.comments[comment.id] = comment
        return comment

    # Users

    def get_user(self, user_id: str) -> Optional[User]:
        with self.lock:
            return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self.lock:
            users = list(self.users.values())
        return next((u for u in users if u.username == username), None)

    def create_user(self, payload: UserCreate) -> User:
        with self.lock:
            if self.get_user_by_username(payload.username) is not None:
                raise ValueError(f"Username already taken: {payload.username}")
            user = User(id=new_id(), **payload.model_dump())
            self.users[user.id] = user
        return user
