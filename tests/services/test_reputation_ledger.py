# tests/services/test_reputation_ledger.py
"""Tests for karma crediting and leaderboards."""

import pytest

from dubhub.services.reputation import ReputationLedger
from tests.factories import make_profile


@pytest.fixture()
def ledger(db_session):
    return ReputationLedger(db_session)


def test_first_identification_creates_row(ledger, commenter):
    karma = ledger.credit_identification(commenter.id)

    assert karma.user_id == commenter.id
    assert karma.score == 10
    assert karma.correct_ids == 1


def test_identifications_accumulate(ledger, commenter):
    ledger.credit_identification(commenter.id)
    karma = ledger.credit_identification(commenter.id)

    assert karma.score == 20
    assert karma.correct_ids == 2


def test_moderation_credit_does_not_count_ids(ledger, moderator):
    ledger.credit_moderation(moderator.id)
    karma = ledger.credit_moderation(moderator.id)

    assert karma.score == 2
    assert karma.correct_ids == 0


def test_mixed_credits_share_one_row(ledger, moderator):
    ledger.credit_moderation(moderator.id)
    karma = ledger.credit_identification(moderator.id)

    assert karma.score == 11
    assert karma.correct_ids == 1


def test_karma_defaults_to_zero(ledger, other_user):
    assert ledger.get(other_user.id) is None
    assert ledger.karma(other_user.id) == 0


def test_user_leaderboard_ordering(db_session, ledger):
    top = make_profile(db_session, "top")
    tied_more_ids = make_profile(db_session, "steady")
    tied_fewer_ids = make_profile(db_session, "lucky")
    idle = make_profile(db_session, "idle")
    artist = make_profile(db_session, "producer", account_type="artist", verified_artist=True)

    for _ in range(3):
        ledger.credit_identification(top.id)
    # Both reach 20; "steady" did it with two confirmed IDs.
    ledger.credit_identification(tied_more_ids.id)
    ledger.credit_identification(tied_more_ids.id)
    ledger.credit_identification(tied_fewer_ids.id)
    for _ in range(10):
        ledger.credit_moderation(tied_fewer_ids.id)
    ledger.credit_identification(artist.id)

    board = ledger.leaderboard("user")

    assert [row["user_id"] for row in board[:3]] == [
        top.id,
        tied_more_ids.id,
        tied_fewer_ids.id,
    ]
    assert board[0]["score"] == 30
    assert board[0]["correct_ids"] == 3
    idle_row = next(row for row in board if row["user_id"] == idle.id)
    assert idle_row["score"] == 0
    assert idle_row["correct_ids"] == 0
    assert artist.id not in [row["user_id"] for row in board]


def test_artist_leaderboard(db_session, ledger, commenter):
    artist = make_profile(db_session, "producer", account_type="artist", verified_artist=True)
    ledger.credit_identification(artist.id)
    ledger.credit_identification(commenter.id)

    board = ledger.leaderboard("artist")

    assert [row["user_id"] for row in board] == [artist.id]
    assert board[0]["account_type"] == "artist"


def test_leaderboard_limit(db_session, ledger):
    for index in range(5):
        make_profile(db_session, f"user{index}")

    assert len(ledger.leaderboard("user", limit=3)) == 3


def test_leaderboard_rejects_unknown_account_type(ledger):
    with pytest.raises(ValueError):
        ledger.leaderboard("moderator")
