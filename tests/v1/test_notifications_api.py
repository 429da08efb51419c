# tests/v1/test_notifications_api.py
"""Tests for the notification feed endpoints."""

from fastapi import status

from tests.factories import auth_headers


def _submit(client, owner, post, comment) -> None:
    response = client.post(
        f"/api/v1/posts/{post.id}/community-verify",
        json={"comment_id": comment.id},
        headers=auth_headers(owner),
    )
    assert response.status_code == status.HTTP_200_OK


def test_feed_after_submission(client, owner, commenter, post, comment) -> None:
    _submit(client, owner, post, comment)

    response = client.get("/api/v1/notifications/", headers=auth_headers(commenter))

    assert response.status_code == status.HTTP_200_OK
    feed = response.json()
    assert len(feed) == 1
    assert feed[0]["type"] == "moderator_review_submitted"
    assert feed[0]["triggered_by_user_id"] == owner.id
    assert feed[0]["read"] is False


def test_unread_counts(client, owner, moderator, post, comment) -> None:
    _submit(client, owner, post, comment)
    headers = auth_headers(moderator)

    assert client.get("/api/v1/notifications/unread-count", headers=headers).json() == {"count": 1}
    assert client.get(
        "/api/v1/notifications/moderator-unread-count", headers=headers
    ).json() == {"count": 1}
    assert client.get(
        "/api/v1/notifications/unread-count", headers=auth_headers(owner)
    ).json() == {"count": 0}


def test_mark_read(client, owner, commenter, post, comment) -> None:
    _submit(client, owner, post, comment)
    headers = auth_headers(commenter)
    notification_id = client.get("/api/v1/notifications/", headers=headers).json()[0]["id"]

    response = client.patch(f"/api/v1/notifications/{notification_id}/read", headers=headers)

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get("/api/v1/notifications/unread-count", headers=headers).json() == {"count": 0}


def test_mark_read_of_someone_else(client, owner, commenter, other_user, post, comment) -> None:
    _submit(client, owner, post, comment)
    notification_id = client.get(
        "/api/v1/notifications/", headers=auth_headers(commenter)
    ).json()[0]["id"]

    response = client.patch(
        f"/api/v1/notifications/{notification_id}/read",
        headers=auth_headers(other_user),
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_mark_all_read(client, owner, commenter, moderator, post, comment) -> None:
    _submit(client, owner, post, comment)
    client.post(
        f"/api/v1/moderator/confirm-verification/{post.id}",
        headers=auth_headers(moderator),
    )
    headers = auth_headers(commenter)

    response = client.patch("/api/v1/notifications/mark-all-read", headers=headers)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"count": 2}
    assert client.get("/api/v1/notifications/unread-count", headers=headers).json() == {"count": 0}
