from emotion_weather.models.vote import Vote, VoteCreate, VoteType
from emotion_weather.repositories.data_store import utcnow


def cast(vote_service, policy_id, *vote_types):
    for vote_type in vote_types:
        vote_service.create_vote(VoteCreate(policy_id=policy_id, vote_type=vote_type))


def test_stats_without_votes(vote_service):
    stats = vote_service.get_vote_stats("policy-x")

    assert stats.stats == {"happy": 0, "angry": 0, "neutral": 0, "suggestion": 0}
    assert stats.total == 0
    assert stats.percentages == {"happy": 0, "angry": 0, "neutral": 0, "suggestion": 0}


def test_stats_counts_and_percentages(vote_service):
    cast(
        vote_service,
        "p1",
        VoteType.HAPPY,
        VoteType.HAPPY,
        VoteType.ANGRY,
        VoteType.NEUTRAL,
        VoteType.SUGGESTION,
    )
    cast(vote_service, "p2", VoteType.ANGRY)

    stats = vote_service.get_vote_stats("p1")

    assert stats.stats == {"happy": 2, "angry": 1, "neutral": 1, "suggestion": 1}
    assert stats.total == 5
    assert stats.percentages == {"happy": 40, "angry": 20, "neutral": 20, "suggestion": 20}


def test_unknown_vote_types_are_ignored(store, vote_service):
    store.add_vote(Vote(id="odd", policy_id="p1", vote_type="confused", created_at=utcnow()))
    cast(vote_service, "p1", VoteType.HAPPY)

    stats = vote_service.get_vote_stats("p1")

    assert stats.total == 1
    assert stats.percentages["happy"] == 100


def test_create_vote_is_logged(vote_service, activity_log):
    cast(vote_service, "p1", VoteType.SUGGESTION)

    events = activity_log.read_events()

    assert [e.event_type for e in events] == ["vote_cast"]
    assert events[0].details["vote_type"] == "suggestion"
    assert vote_service.list_votes("p1")[0].vote_type == "suggestion"
