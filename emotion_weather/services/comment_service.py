from __future__ import annotations

import logging
from typing import Optional

from emotion_weather.models.comment import Comment, CommentCreate, CommentSummary
from emotion_weather.repositories.data_store import DataStore
from emotion_weather.services.activity_service import ActivityLog
from emotion_weather.services.comment_classifier import classify_text, summarize_comments

logger = logging.getLogger(__name__)


class CommentService:
    def __init__(self, store: DataStore, activity_log: ActivityLog) -> None:
        self.store = store
        self.activity_log = activity_log

    def list_comments(self) -> list[Comment]:
        return self.store.list_comments()

    def list_comments_for_policy(self, policy_id: str) -> list[Comment]:
        return self.store.list_comments_by_policy(policy_id)

    def create_comment(self, payload: CommentCreate) -> Comment:
        comment = self.store.create_comment(payload)
        logger.info("Comment posted on %s by %s", comment.policy_id, comment.author)
        self.activity_log.log_event(
            event_type="comment_posted",
            details={
                "comment_id": comment.id,
                "policy_id": comment.policy_id,
                "category": classify_text(comment.content).value,
            },
        )
        return comment

    def summarize(self, policy_id: Optional[str] = None) -> CommentSummary:
        if policy_id is None:
            comments = self.store.list_comments()
        else:
            comments = self.store.list_comments_by_policy(policy_id)
        return summarize_comments(comments)
