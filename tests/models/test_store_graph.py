"""Unit tests for ContentStore follow operations."""

import pytest

from models.errors import ConflictError, UnauthorizedError
from tests.fixtures.store import ALICE, ANONYMOUS, BOB, CAROL


class TestFollow:
    def test_follow_updates_both_sides(self, social_store):
        social_store.follow(BOB, ALICE)

        assert social_store.is_following(BOB, ALICE)
        assert not social_store.is_following(ALICE, BOB)
        assert social_store.get_own_profile(ALICE).followers_count == 1
        assert social_store.get_own_profile(BOB).following_count == 1
        assert social_store.get_followers(ALICE, 0, 10) == [BOB]
        assert social_store.get_following(BOB, 0, 10) == [ALICE]

    def test_follow_twice_conflicts(self, social_store):
        social_store.follow(BOB, ALICE)
        with pytest.raises(ConflictError):
            social_store.follow(BOB, ALICE)
        assert social_store.get_own_profile(ALICE).followers_count == 1

    def test_self_follow_conflicts(self, social_store):
        with pytest.raises(ConflictError):
            social_store.follow(ALICE, ALICE)
        assert social_store.get_following(ALICE, 0, 10) == []

    def test_anonymous_follow_rejected(self, social_store):
        with pytest.raises(UnauthorizedError):
            social_store.follow(ANONYMOUS, ALICE)

    def test_follow_unregistered_target(self, social_store):
        social_store.follow(ALICE, "stranger-id")
        assert social_store.get_followers("stranger-id", 0, 10) == [ALICE]
        assert social_store.get_own_profile(ALICE).following_count == 1

    def test_followers_in_follow_order_and_paged(self, social_store):
        for follower in (CAROL, BOB):
            social_store.follow(follower, ALICE)

        assert social_store.get_followers(ALICE, 0, 10) == [CAROL, BOB]
        assert social_store.get_followers(ALICE, 1, 1) == [BOB]
        assert social_store.get_followers(ALICE, 2, 1) == []


class TestUnfollow:
    def test_unfollow_restores_counters(self, social_store):
        social_store.follow(BOB, ALICE)
        social_store.unfollow(BOB, ALICE)

        assert not social_store.is_following(BOB, ALICE)
        assert social_store.get_own_profile(ALICE).followers_count == 0
        assert social_store.get_own_profile(BOB).following_count == 0
        assert social_store.validate_state() == []

    def test_unfollow_when_following_nobody(self, social_store):
        with pytest.raises(ConflictError):
            social_store.unfollow(BOB, ALICE)

    def test_unfollow_stranger(self, social_store):
        social_store.follow(BOB, CAROL)
        with pytest.raises(ConflictError):
            social_store.unfollow(BOB, ALICE)
        assert social_store.is_following(BOB, CAROL)

    def test_unfollow_self(self, social_store):
        with pytest.raises(ConflictError):
            social_store.unfollow(ALICE, ALICE)

    def test_refollow_after_unfollow(self, social_store):
        social_store.follow(BOB, ALICE)
        social_store.unfollow(BOB, ALICE)
        social_store.follow(BOB, ALICE)
        assert social_store.get_followers(ALICE, 0, 10) == [BOB]
        assert social_store.get_own_profile(ALICE).followers_count == 1
