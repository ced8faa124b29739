"""End-to-end tests for posts, comments and reactions."""

import pytest
from fastapi.testclient import TestClient

from virtue.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    return TestClient(create_app(build_test_container()))


def auth(token: str) -> dict[str, str]:
    """Bearer header for the mock identity verifier."""
    return {"Authorization": f"Bearer {token}"}


def create_post(client, token: str = "alice", content: str = "hello") -> dict:
    response = client.post("/posts", json={"content": content}, headers=auth(token))
    assert response.status_code == 201
    return response.json()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestPostEndpoints:
    """End-to-end tests for post endpoints."""

    def test_create_post_trims_content(self, client):
        """Created posts are trimmed and carry counts."""
        # Act
        response = client.post(
            "/posts",
            json={"content": "  hello  ", "imageUrl": "https://img/1.png"},
            headers=auth("alice"),
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["content"] == "hello"
        assert data["imageUrl"] == "https://img/1.png"
        assert data["_count"] == {"comments": 0, "reactions": 0}
        assert data["likedByCurrentUser"] is False
        assert data["author"]["username"] == "alice"

    def test_create_post_without_auth_fails(self, client):
        """Posting requires a token."""
        response = client.post("/posts", json={"content": "hello"})

        assert response.status_code == 401
        assert response.json() == {"message": "Unauthorized"}

    def test_create_post_with_invalid_token_fails(self, client):
        """Rejected tokens are treated as unauthenticated."""
        response = client.post(
            "/posts", json={"content": "hello"}, headers=auth("invalid-token")
        )

        assert response.status_code == 401

    def test_cookie_token_is_accepted(self, client):
        """The auth_token cookie works when no header is sent."""
        client.cookies.set("auth_token", "alice")

        response = client.post("/posts", json={"content": "from cookie"})

        assert response.status_code == 201

    def test_blank_content_is_rejected(self, client):
        """Whitespace-only content counts as missing."""
        response = client.post("/posts", json={"content": "   "}, headers=auth("alice"))

        assert response.status_code == 400
        assert response.json()["message"] == "content is required"

    def test_list_posts_paginates_newest_first(self, client):
        """Pages follow each other through nextCursor."""
        ids = [create_post(client, content=f"post {i}")["id"] for i in range(3)]

        first = client.get("/posts", params={"limit": 2}).json()
        second = client.get(
            "/posts", params={"limit": 2, "cursor": first["pageInfo"]["nextCursor"]}
        ).json()

        assert [p["id"] for p in first["items"]] == ids[::-1][:2]
        assert first["pageInfo"]["hasNextPage"] is True
        assert [p["id"] for p in second["items"]] == ids[::-1][2:]
        assert second["pageInfo"] == {"nextCursor": None, "hasNextPage": False}

    def test_list_posts_with_unknown_cursor_is_empty(self, client):
        """A stale cursor yields an empty page rather than an error."""
        create_post(client)

        response = client.get("/posts", params={"cursor": "not-a-post"})

        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_get_missing_post_returns_404(self, client):
        response = client.get("/posts/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_only_author_can_update_post(self, client):
        """Other users get 403; the author can edit."""
        post = create_post(client, "alice")

        forbidden = client.patch(
            f"/posts/{post['id']}", json={"content": "hijack"}, headers=auth("bob")
        )
        updated = client.patch(
            f"/posts/{post['id']}", json={"content": " edited "}, headers=auth("alice")
        )

        assert forbidden.status_code == 403
        assert forbidden.json() == {"message": "Forbidden"}
        assert updated.status_code == 200
        assert updated.json()["content"] == "edited"

    def test_delete_post(self, client):
        """Deleting removes the post; a second delete is a 404."""
        post = create_post(client, "alice")

        assert (
            client.delete(f"/posts/{post['id']}", headers=auth("bob")).status_code
            == 403
        )
        assert (
            client.delete(f"/posts/{post['id']}", headers=auth("alice")).status_code
            == 204
        )
        assert client.get(f"/posts/{post['id']}").status_code == 404
        assert (
            client.delete(f"/posts/{post['id']}", headers=auth("alice")).status_code
            == 404
        )


class TestCommentEndpoints:
    """End-to-end tests for comment endpoints."""

    def test_comment_lifecycle(self, client):
        """Comments are created, listed, edited and deleted."""
        post = create_post(client, "alice")

        created = client.post(
            f"/posts/{post['id']}/comments",
            json={"content": " nice "},
            headers=auth("bob"),
        )
        assert created.status_code == 201
        comment = created.json()
        assert comment["content"] == "nice"
        assert comment["isAuthor"] is True

        listing = client.get(f"/posts/{post['id']}/comments", headers=auth("alice"))
        assert listing.status_code == 200
        items = listing.json()["items"]
        assert [c["id"] for c in items] == [comment["id"]]
        assert items[0]["isAuthor"] is False

        counts = client.get(f"/posts/{post['id']}").json()["_count"]
        assert counts["comments"] == 1

        assert (
            client.patch(
                f"/comments/{comment['id']}",
                json={"content": "mine now"},
                headers=auth("alice"),
            ).status_code
            == 403
        )
        edited = client.patch(
            f"/comments/{comment['id']}",
            json={"content": "edited"},
            headers=auth("bob"),
        )
        assert edited.json()["content"] == "edited"

        assert (
            client.delete(f"/comments/{comment['id']}", headers=auth("bob")).status_code
            == 204
        )
        assert client.get(f"/posts/{post['id']}/comments").json()["items"] == []

    def test_comment_length_limit(self, client):
        """2000 characters is allowed, 2001 is not."""
        post = create_post(client)

        ok = client.post(
            f"/posts/{post['id']}/comments",
            json={"content": "a" * 2000},
            headers=auth("alice"),
        )
        too_long = client.post(
            f"/posts/{post['id']}/comments",
            json={"content": "a" * 2001},
            headers=auth("alice"),
        )

        assert ok.status_code == 201
        assert too_long.status_code == 400
        assert too_long.json()["message"] == "content too long (max 2000 chars)"

    def test_comment_on_missing_post_returns_404(self, client):
        response = client.post(
            "/posts/00000000-0000-0000-0000-000000000000/comments",
            json={"content": "hello"},
            headers=auth("alice"),
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}

    def test_update_missing_comment_returns_404(self, client):
        response = client.patch(
            "/comments/not-a-comment", json={"content": "x"}, headers=auth("alice")
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Comment not found"}


class TestReactionEndpoints:
    """End-to-end tests for reaction endpoints."""

    def test_toggle_reaction(self, client):
        """Toggling twice returns the post to its original state."""
        post = create_post(client, "alice")
        url = f"/posts/{post['id']}/reactions"

        first = client.post(url, headers=auth("bob"))
        assert first.json() == {"reacted": True, "reactionCount": 1}

        liked = client.get(f"/posts/{post['id']}", headers=auth("bob")).json()
        assert liked["likedByCurrentUser"] is True
        assert liked["_count"]["reactions"] == 1

        second = client.post(url, headers=auth("bob"))
        assert second.json() == {"reacted": False, "reactionCount": 0}

    def test_down_is_stored_as_up(self, client):
        """Both reaction types are persisted as UP."""
        post = create_post(client)

        response = client.put(
            f"/posts/{post['id']}/reaction", json={"type": "DOWN"}, headers=auth("bob")
        )

        assert response.status_code == 200
        data = response.json()
        assert data["clickedType"] == "DOWN"
        assert data["storedType"] == "UP"
        assert data["reaction"]["storedType"] == "UP"

    def test_set_reaction_is_idempotent(self, client):
        """Repeating PUT keeps a single reaction."""
        post = create_post(client)
        url = f"/posts/{post['id']}/reaction"

        client.put(url, json={"type": "UP"}, headers=auth("bob"))
        client.put(url, json={"type": "UP"}, headers=auth("bob"))

        state = client.get(url, headers=auth("bob")).json()
        assert state["hasReacted"] is True
        assert client.get(f"/posts/{post['id']}").json()["_count"]["reactions"] == 1

    def test_invalid_reaction_type_is_rejected(self, client):
        post = create_post(client)

        response = client.put(
            f"/posts/{post['id']}/reaction", json={"type": "SIDEWAYS"}, headers=auth("bob")
        )

        assert response.status_code == 400
        assert response.json()["message"] == 'type must be "UP" or "DOWN"'

    def test_remove_reaction_without_one_succeeds(self, client):
        """Removing is a no-op when there is nothing to remove."""
        post = create_post(client)

        response = client.delete(f"/posts/{post['id']}/reaction", headers=auth("bob"))

        assert response.status_code == 204
        assert client.get(f"/posts/{post['id']}").json()["_count"]["reactions"] == 0

    def test_delete_on_reactions_toggles(self, client):
        """DELETE on the toggle path reacts first, then un-reacts."""
        post = create_post(client)
        url = f"/posts/{post['id']}/reactions"

        first = client.delete(url, headers=auth("bob"))
        assert first.status_code == 200
        assert first.json() == {"reacted": True, "reactionCount": 1}

        second = client.delete(url, headers=auth("bob"))
        assert second.json() == {"reacted": False, "reactionCount": 0}

    def test_post_then_delete_on_reactions_restores_count(self, client):
        post = create_post(client)
        url = f"/posts/{post['id']}/reactions"

        client.post(url, headers=auth("bob"))
        response = client.delete(url, headers=auth("bob"))

        assert response.json() == {"reacted": False, "reactionCount": 0}

    def test_reaction_on_missing_post_returns_404(self, client):
        response = client.post(
            "/posts/00000000-0000-0000-0000-000000000000/reactions",
            headers=auth("bob"),
        )

        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}
