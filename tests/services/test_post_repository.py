# tests/services/test_post_repository.py
"""Tests for the post and comment repository."""

import pytest

from dubhub.models.post import STATUS_COMMUNITY, STATUS_UNVERIFIED
from dubhub.repositories.post_repo import PostRepository
from dubhub.services.errors import NotFound
from tests.factories import make_comment, make_post


@pytest.fixture()
def repo(db_session):
    return PostRepository(db_session)


def test_update_post_verification_writes_only_given_fields(repo, post, comment, commenter):
    updated = repo.update_post_verification(
        post.id,
        verification_status=STATUS_COMMUNITY,
        verified_comment_id=comment.id,
    )

    assert updated.verification_status == STATUS_COMMUNITY
    assert updated.verified_comment_id == comment.id
    assert updated.verified_by is None
    assert updated.is_verified_community is False
    assert updated.title == "Closing track at Fabric"


def test_update_post_verification_rejects_other_columns(repo, post):
    with pytest.raises(ValueError):
        repo.update_post_verification(post.id, title="Renamed")

    assert repo.get_post(post.id).title == "Closing track at Fabric"


def test_update_post_verification_missing_post(repo):
    with pytest.raises(NotFound):
        repo.update_post_verification("missing", verification_status=STATUS_UNVERIFIED)


def test_create_post_starts_unverified(repo, owner):
    post = repo.create_post(
        user_id=owner.id,
        title="Boiler Room closer",
        video_url="https://cdn.example.com/videos/closer.mp4",
        genre="Techno",
    )

    assert post.verification_status == STATUS_UNVERIFIED
    assert post.is_verified_community is False
    assert post.verified_by_moderator is False
    assert post.verified_comment_id is None


def test_list_posts_filters_by_genre(db_session, repo, owner, post):
    make_post(db_session, owner, title="Liquid roller", genre="Drum & Bass")

    assert [p.id for p in repo.list_posts(limit=10, genre="techno")] == [post.id]
    assert len(repo.list_posts(limit=10, genre="all")) == 2
    assert len(repo.list_posts(limit=1)) == 1


def test_list_pending(db_session, repo, post, comment):
    assert repo.list_pending() == []

    repo.update_post_verification(post.id, verification_status=STATUS_COMMUNITY)

    assert [p.id for p in repo.list_pending()] == [post.id]


def test_comments(db_session, repo, post, comment, other_user):
    second = repo.create_comment(post_id=post.id, user_id=other_user.id, body="ID?")

    assert {c.id for c in repo.list_comments(post.id)} == {comment.id, second.id}
    assert repo.get_comment(second.id).author.id == other_user.id


def test_create_comment_on_missing_post(repo, other_user):
    with pytest.raises(NotFound):
        repo.create_comment(post_id="missing", user_id=other_user.id, body="ID?")


def test_list_user_posts(db_session, repo, owner, other_user, post):
    make_post(db_session, other_user, title="Someone else")
    make_comment(db_session, post, other_user)

    assert [p.id for p in repo.list_user_posts(owner.id)] == [post.id]
