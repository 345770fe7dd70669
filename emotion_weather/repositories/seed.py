from __future__ import annotations

import json
import logging
from datetime import timedelta

from emotion_weather.models.comment import Comment
from emotion_weather.models.policy import Policy, PolicyStatus
from emotion_weather.models.vote import Vote
from emotion_weather.repositories.data_store import DataStore, utcnow

logger = logging.getLogger(__name__)

SAMPLE_POLICIES = [
    {
        "id": "policy-1",
        "title": "Climate Action Initiative 2024",
        "description": (
            "A comprehensive policy proposal aimed at reducing carbon emissions by 50% over the "
            "next decade through renewable energy investments and sustainable transportation "
            "initiatives."
        ),
        "details": json.dumps(
            {
                "objectives": [
                    "Implement renewable energy infrastructure in all government buildings",
                    "Expand public transportation networks by 30%",
                    "Provide tax incentives for electric vehicle adoption",
                    "Establish community solar programs",
                ],
                "timeline": "Implementation period: January 2024 - December 2034 (10 years)",
                "budget": "Total investment: $2.4 billion over 10 years",
            }
        ),
        "status": PolicyStatus.ACTIVE,
    },
    {
        "id": "policy-2",
        "title": "Education Reform Act",
        "description": "Modernizing curriculum and increasing teacher funding across all districts",
        "details": "{}",
        "status": PolicyStatus.DRAFT,
    },
    {
        "id": "policy-3",
        "title": "Healthcare Accessibility",
        "description": "Expanding healthcare coverage to underserved communities",
        "details": "{}",
        "status": PolicyStatus.UNDER_REVIEW,
    },
    {
        "id": "policy-4",
        "title": "Digital Infrastructure",
        "description": "Improving internet connectivity in rural areas",
        "details": "{}",
        "status": PolicyStatus.ACTIVE,
    },
    {
        "id": "policy-5",
        "title": "Small Business Support",
        "description": "Tax breaks and grants for local entrepreneurs",
        "details": "{}",
        "status": PolicyStatus.ACTIVE,
    },
    {
        "id": "policy-6",
        "title": "Urban Development",
        "description": "Sustainable city planning and affordable housing",
        "details": "{}",
        "status": PolicyStatus.DRAFT,
    },
]

SAMPLE_VOTES = ["happy", "happy", "angry", "neutral", "suggestion"]

SAMPLE_COMMENTS = [
    {
        "content": (
            "This is exactly what we need! The renewable energy focus will create so many "
            "jobs in our community."
        ),
        "author": "Sarah M.",
        "sentiment": "positive",
    },
    {
        "content": (
            "I'm concerned about the cost. $2.4 billion seems like a lot when we have other "
            "pressing issues."
        ),
        "author": "Mike T.",
        "sentiment": "negative",
    },
    {
        "content": (
            "Why not include nuclear energy as part of the clean energy mix? "
            "It's reliable and carbon-free."
        ),
        "author": "Dr. Kumar",
        "sentiment": "suggestion",
    },
    {
        "content": (
            "The 10-year timeline is reasonable, but we need more details on the "
            "implementation phases."
        ),
        "author": "Anonymous",
        "sentiment": "neutral",
    },
    {
        "content": (
            "Love the community solar programs! This will help low-income families access "
            "clean energy."
        ),
        "author": "Lisa R.",
        "sentiment": "positive",
    },
]


def seed_sample_data(store: DataStore) -> None:
    """Load the bootstrap records of a fresh instance.

    Records are stamped one second apart, oldest last, so newest-first
    listings keep the order above and ``policy-1`` is the current policy.
    """
    with store.lock:
        if store.policies:
            return

        now = utcnow()
        for offset, row in enumerate(SAMPLE_POLICIES):
            store.add_policy(Policy(**row, created_at=now - timedelta(seconds=offset)))

        for offset, vote_type in enumerate(SAMPLE_VOTES):
            store.add_vote(
                Vote(
                    id=f"vote-{offset + 1}",
                    policy_id="policy-1",
                    vote_type=vote_type,
                    created_at=now - timedelta(seconds=offset),
                )
            )

        for offset, row in enumerate(SAMPLE_COMMENTS):
            store.add_comment(
                Comment(
                    id=f"comment-{offset + 1}",
                    policy_id="policy-1",
                    created_at=now - timedelta(seconds=offset),
                    **row,
                )
            )

    logger.info(
        "Seeded %d policies, %d votes, %d comments",
        len(SAMPLE_POLICIES),
        len(SAMPLE_VOTES),
        len(SAMPLE_COMMENTS),
    )
