from datetime import timedelta

import pytest

from emotion_weather.models.comment import Comment, CommentCreate
from emotion_weather.models.policy import PolicyCreate, PolicyStatus, PolicyUpdate
from emotion_weather.models.user import UserCreate
from emotion_weather.models.vote import VoteCreate, VoteType
from emotion_weather.repositories.data_store import utcnow


def make_policy(store, title="Bike Lanes", status=PolicyStatus.DRAFT):
    return store.create_policy(
        PolicyCreate(title=title, description="Protected lanes downtown", status=status)
    )


class TestPolicies:
    def test_create_then_get_returns_same_record(self, store):
        payload = PolicyCreate(
            title="Bike Lanes",
            description="Protected lanes downtown",
            details='{"budget": "$4M"}',
            status=PolicyStatus.ACTIVE,
        )

        created = store.create_policy(payload)
        fetched = store.get_policy(created.id)

        assert fetched == created
        assert fetched.id
        assert fetched.created_at is not None
        assert fetched.model_dump(exclude={"id", "created_at"}) == payload.model_dump()

    def test_ids_are_unique(self, store):
        ids = {make_policy(store).id for _ in range(20)}
        assert len(ids) == 20

    def test_get_missing_returns_none(self, store):
        assert store.get_policy("nope") is None

    def test_list_is_newest_first(self, store):
        first = make_policy(store, "First")
        second = make_policy(store, "Second")
        third = make_policy(store, "Third")

        assert [p.id for p in store.list_policies()] == [third.id, second.id, first.id]

    def test_update_merges_only_set_fields(self, store):
        policy = make_policy(store)

        updated = store.update_policy(policy.id, PolicyUpdate(status=PolicyStatus.ACTIVE))

        assert updated.status == PolicyStatus.ACTIVE
        assert updated.title == policy.title
        assert updated.created_at == policy.created_at
        assert store.get_policy(policy.id) == updated

    def test_update_ignores_explicit_null_title(self, store):
        policy = make_policy(store)

        updated = store.update_policy(policy.id, PolicyUpdate(title=None, details=None))

        assert updated.title == policy.title
        assert updated.details is None

    def test_update_missing_returns_none(self, store):
        assert store.update_policy("nope", PolicyUpdate(title="x")) is None

    def test_delete_twice(self, store):
        policy = make_policy(store)

        assert store.delete_policy(policy.id) is True
        assert store.delete_policy(policy.id) is False
        assert store.get_policy(policy.id) is None

    def test_delete_leaves_votes_and_comments(self, store):
        policy = make_policy(store)
        store.create_vote(VoteCreate(policy_id=policy.id, vote_type=VoteType.HAPPY))
        store.create_comment(CommentCreate(policy_id=policy.id, content="Finally!"))

        store.delete_policy(policy.id)

        assert len(store.list_votes_by_policy(policy.id)) == 1
        assert len(store.list_comments_by_policy(policy.id)) == 1


class TestVotesAndComments:
    def test_votes_filtered_by_policy(self, store):
        store.create_vote(VoteCreate(policy_id="a", vote_type=VoteType.HAPPY))
        store.create_vote(VoteCreate(policy_id="b", vote_type=VoteType.ANGRY))
        store.create_vote(VoteCreate(policy_id="a", vote_type=VoteType.NEUTRAL, comment="meh"))

        votes = store.list_votes_by_policy("a")

        assert [v.vote_type for v in votes] == ["happy", "neutral"]
        assert votes[1].comment == "meh"
        assert len(store.list_votes()) == 3

    def test_comment_defaults(self, store):
        comment = store.create_comment(CommentCreate(policy_id="a", content="  Good plan  "))

        assert comment.content == "Good plan"
        assert comment.author == "Anonymous"
        assert comment.sentiment == "neutral"
        assert store.get_comment(comment.id) == comment

    def test_comments_for_policy_newest_first(self, store):
        created = [
            store.create_comment(CommentCreate(policy_id="a", content=f"comment {i}"))
            for i in range(3)
        ]
        store.create_comment(CommentCreate(policy_id="b", content="elsewhere"))

        listed = store.list_comments_by_policy("a")

        assert [c.id for c in listed] == [c.id for c in reversed(created)]

    def test_comments_sorted_by_timestamp_not_insertion(self, store):
        now = utcnow()
        older = store.add_comment(
            Comment(id="old", policy_id="a", content="old", created_at=now - timedelta(hours=1))
        )
        newer = store.add_comment(Comment(id="new", policy_id="a", content="new", created_at=now))
        oldest = store.add_comment(
            Comment(id="oldest", policy_id="a", content="x", created_at=now - timedelta(days=1))
        )

        assert [c.id for c in store.list_comments()] == [newer.id, older.id, oldest.id]


class TestUsers:
    def test_create_and_lookup(self, store):
        user = store.create_user(UserCreate(username="admin", password="secret"))

        assert store.get_user(user.id) == user
        assert store.get_user_by_username("admin") == user
        assert store.get_user_by_username("ghost") is None

    def test_duplicate_username_rejected(self, store):
        store.create_user(UserCreate(username="admin", password="secret"))

        with pytest.raises(ValueError):
            store.create_user(UserCreate(username="admin", password="other"))
