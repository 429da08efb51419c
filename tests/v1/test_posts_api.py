# tests/v1/test_posts_api.py
"""Tests for post, comment and community verification endpoints."""

from fastapi import status
from sqlalchemy import select

from dubhub.models import Notification
from tests.factories import auth_headers, make_post


def test_create_post(client, owner) -> None:
    response = client.post(
        "/api/v1/posts/",
        json={
            "title": "Peak time at Berghain",
            "video_url": "https://cdn.example.com/videos/peak.mp4",
            "genre": "Techno",
            "dj_name": "Ben Klock",
        },
        headers=auth_headers(owner),
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["user_id"] == owner.id
    assert data["verification_status"] == "unverified"
    assert data["is_verified_community"] is False
    assert data["verified_by_moderator"] is False


def test_create_post_requires_auth(client) -> None:
    response = client.post(
        "/api/v1/posts/",
        json={"title": "x", "video_url": "https://cdn.example.com/x.mp4"},
    )

    assert response.status_code in {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def test_list_posts(client, db_session, owner, post) -> None:
    make_post(db_session, owner, title="Jungle set", genre="Jungle")

    response = client.get("/api/v1/posts/", params={"genre": "Techno"})

    assert response.status_code == status.HTTP_200_OK
    assert [p["id"] for p in response.json()] == [post.id]


def test_get_post(client, post) -> None:
    response = client.get(f"/api/v1/posts/{post.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["title"] == post.title


def test_get_missing_post(client) -> None:
    response = client.get("/api/v1/posts/missing")

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_comment_on_post(client, post, other_user) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/comments",
        json={"body": "  Blawan - Getting Me Down  "},
        headers=auth_headers(other_user),
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["body"] == "Blawan - Getting Me Down"
    assert data["author"]["id"] == other_user.id


def test_blank_comment_rejected(client, post, other_user) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/comments",
        json={"body": "   "},
        headers=auth_headers(other_user),
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_comment_on_missing_post(client, other_user) -> None:
    response = client.post(
        "/api/v1/posts/missing/comments",
        json={"body": "ID?"},
        headers=auth_headers(other_user),
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_list_comments(client, post, comment) -> None:
    response = client.get(f"/api/v1/posts/{post.id}/comments")

    assert response.status_code == status.HTTP_200_OK
    assert [c["id"] for c in response.json()] == [comment.id]


def test_community_verify(client, db_session, owner, commenter, moderator, post, comment) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/community-verify",
        json={"comment_id": comment.id},
        headers=auth_headers(owner),
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["verification_status"] == "community"
    assert data["is_verified_community"] is True
    assert data["verified_comment_id"] == comment.id
    assert data["verified_by"] == commenter.id

    recipients = set(db_session.execute(select(Notification.user_id)).scalars())
    assert recipients == {commenter.id, moderator.id}


def test_community_verify_by_non_owner(client, other_user, post, comment) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/community-verify",
        json={"comment_id": comment.id},
        headers=auth_headers(other_user),
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Only the post owner can verify"


def test_community_verify_missing_comment(client, owner, post) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/community-verify",
        json={"comment_id": "missing"},
        headers=auth_headers(owner),
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_community_verify_requires_comment_id(client, owner, post) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/community-verify",
        json={},
        headers=auth_headers(owner),
    )

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_community_verify_identified_post(client, owner, moderator, post, comment) -> None:
    client.post(
        f"/api/v1/moderator/confirm-verification/{post.id}",
        json={"comment_id": comment.id},
        headers=auth_headers(moderator),
    )

    response = client.post(
        f"/api/v1/posts/{post.id}/community-verify",
        json={"comment_id": comment.id},
        headers=auth_headers(owner),
    )

    assert response.status_code == status.HTTP_409_CONFLICT
