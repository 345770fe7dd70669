from __future__ import annotations

import logging

from emotion_weather.core.stats import rounded_percent
from emotion_weather.models.vote import Vote, VoteCreate, VoteStats, VoteType
from emotion_weather.repositories.data_store import DataStore
from emotion_weather.services.activity_service import ActivityLog

logger = logging.getLogger(__name__)

VOTE_CATEGORIES = tuple(vote_type.value for vote_type in VoteType)


class VoteService:
    def __init__(self, store: DataStore, activity_log: ActivityLog) -> None:
        self.store = store
        self.activity_log = activity_log

    def list_votes(self, policy_id: str) -> list[Vote]:
        return self.store.list_votes_by_policy(policy_id)

    def create_vote(self, payload: VoteCreate) -> Vote:
        # The policy reference is not checked; votes may point at deleted policies.
        vote = self.store.create_vote(payload)
        logger.info("Vote cast: %s on %s", vote.vote_type, vote.policy_id)
        self.activity_log.log_event(
            event_type="vote_cast",
            details={"vote_id": vote.id, "policy_id": vote.policy_id, "vote_type": vote.vote_type},
        )
        return vote

    def get_vote_stats(self, policy_id: str) -> VoteStats:
        stats = {category: 0 for category in VOTE_CATEGORIES}
        for vote in self.store.list_votes_by_policy(policy_id):
            if vote.vote_type in stats:
                stats[vote.vote_type] += 1

        total = sum(stats.values())
        return VoteStats(
            stats=stats,
            total=total,
            percentages={
                category: rounded_percent(count, total) for category, count in stats.items()
            },
        )
