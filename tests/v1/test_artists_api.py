# tests/v1/test_artists_api.py
"""Tests for artist tagging and artist directory endpoints."""

from fastapi import status

from tests.factories import auth_headers, make_profile


def _comment(client, post, author, body):
    response = client.post(
        f"/api/v1/posts/{post.id}/comments",
        json={"body": body},
        headers=auth_headers(author),
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_mention_creates_tag(client, post, commenter, artist) -> None:
    comment = _comment(client, post, commenter, f"Unreleased @{artist.username} dub")

    response = client.get(f"/api/v1/posts/{post.id}/artist-tags")

    assert response.status_code == status.HTTP_200_OK
    tags = response.json()
    assert len(tags) == 1
    assert tags[0]["artist_id"] == artist.id
    assert tags[0]["comment_id"] == comment["id"]
    assert tags[0]["status"] == "pending"
    assert comment["artist_tag"] == tags[0]["id"]


def test_comment_cannot_set_artist_tag_directly(client, post, commenter) -> None:
    comment = _comment(client, post, commenter, "Surgeon - Magneze")

    assert comment["artist_tag"] is None


def test_artist_tags_of_missing_post(client) -> None:
    response = client.get("/api/v1/posts/missing/artist-tags")

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_artist_confirms_tag(client, post, commenter, artist) -> None:
    _comment(client, post, commenter, f"@{artist.username}")
    tag_id = client.get(f"/api/v1/posts/{post.id}/artist-tags").json()[0]["id"]

    response = client.post(
        f"/api/v1/artist-tags/{tag_id}/status",
        json={"status": "confirmed"},
        headers=auth_headers(artist),
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "confirmed"


def test_other_user_cannot_answer_tag(client, post, commenter, artist) -> None:
    _comment(client, post, commenter, f"@{artist.username}")
    tag_id = client.get(f"/api/v1/posts/{post.id}/artist-tags").json()[0]["id"]

    response = client.post(
        f"/api/v1/artist-tags/{tag_id}/status",
        json={"status": "denied"},
        headers=auth_headers(commenter),
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_invalid_tag_status(client, post, commenter, artist) -> None:
    _comment(client, post, commenter, f"@{artist.username}")
    tag_id = client.get(f"/api/v1/posts/{post.id}/artist-tags").json()[0]["id"]

    response = client.post(
        f"/api/v1/artist-tags/{tag_id}/status",
        json={"status": "maybe"},
        headers=auth_headers(artist),
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_verified_artists(client, db_session, artist) -> None:
    make_profile(db_session, "waiting", account_type="artist", verified_artist=False)

    response = client.get("/api/v1/artists/verified")

    assert response.status_code == status.HTTP_200_OK
    assert [a["id"] for a in response.json()] == [artist.id]


def test_artist_posts(client, post, commenter, artist) -> None:
    _comment(client, post, commenter, f"@{artist.username}")

    response = client.get(f"/api/v1/artists/{artist.id}/posts")

    assert response.status_code == status.HTTP_200_OK
    assert [p["id"] for p in response.json()] == [post.id]


def test_artist_posts_of_non_artist(client, commenter) -> None:
    response = client.get(f"/api/v1/artists/{commenter.id}/posts")

    assert response.status_code == status.HTTP_404_NOT_FOUND
