"""
Integration tests for /api/posts endpoints.
"""
import pytest

pytestmark = pytest.mark.integration


@pytest.fixture
def alice(register):
    return register(name="Alice", email="alice@example.com")


@pytest.fixture
def bob(register):
    return register(name="Bob", email="bob@example.com")


@pytest.fixture
def create_post(client, auth_header):
    def _create(token, content="Hello ProCircle"):
        response = client.post("/api/posts", json={"content": content}, headers=auth_header(token))
        assert response.status_code == 201, response.text
        return response.json()["post"]

    return _create


class TestCreateAndRead:
    def test_create_requires_token(self, client):
        response = client.post("/api/posts", json={"content": "hi"})
        assert response.status_code == 401

    def test_create_returns_populated_post(self, client, auth_header, alice):
        token, user = alice
        response = client.post("/api/posts", json={"content": "  Hello  "}, headers=auth_header(token))

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Post created successfully"
        post = data["post"]
        assert post["content"] == "Hello"
        assert post["authorId"] == user["id"]
        assert post["author"]["name"] == "Alice"
        assert post["likesCount"] == 0
        assert post["likedBy"] == []
        assert post["comments"] == []

    def test_blank_content_returns_400(self, client, auth_header, alice):
        token, _ = alice
        response = client.post("/api/posts", json={"content": "   "}, headers=auth_header(token))
        assert response.status_code == 400
        assert response.json() == {"message": "Post content is required"}

    def test_get_post(self, client, create_post, alice):
        post = create_post(alice[0])
        response = client.get(f"/api/posts/{post['id']}")
        assert response.status_code == 200
        assert response.json()["id"] == post["id"]

    def test_get_missing_post_returns_404(self, client):
        response = client.get(f"/api/posts/{'f' * 24}")
        assert response.status_code == 404
        assert response.json() == {"message": "Post not found"}


class TestListing:
    def test_feed_pagination(self, client, create_post, alice, bob):
        for i in range(3):
            create_post(alice[0], f"alice {i}")
        create_post(bob[0], "bob")

        response = client.get("/api/posts", params={"page": 1, "limit": 3})

        assert response.status_code == 200
        data = response.json()
        assert len(data["posts"]) == 3
        assert data["currentPage"] == 1
        assert data["totalPages"] == 2
        assert data["totalPosts"] == 4

    def test_default_page_size(self, client, create_post, alice):
        create_post(alice[0])
        data = client.get("/api/posts").json()
        assert data["currentPage"] == 1
        assert data["totalPosts"] == 1

    def test_user_posts(self, client, create_post, alice, bob):
        create_post(alice[0], "from alice")
        create_post(bob[0], "from bob")

        data = client.get(f"/api/posts/user/{bob[1]['id']}").json()

        assert [p["content"] for p in data["posts"]] == ["from bob"]

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}, {"page": "abc"}])
    def test_invalid_paging_returns_400(self, client, params):
        response = client.get("/api/posts", params=params)
        assert response.status_code == 400
        assert "message" in response.json()


class TestAuthorOnlyMutations:
    def test_author_updates_post(self, client, auth_header, create_post, alice):
        post = create_post(alice[0], "draft")
        response = client.put(
            f"/api/posts/{post['id']}", json={"content": "final"}, headers=auth_header(alice[0])
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Post updated successfully"
        assert response.json()["post"]["content"] == "final"
        assert response.json()["post"]["createdAt"] == post["createdAt"]

    def test_other_user_cannot_update(self, client, auth_header, create_post, alice, bob):
        post = create_post(alice[0], "original")
        response = client.put(
            f"/api/posts/{post['id']}", json={"content": "hijacked"}, headers=auth_header(bob[0])
        )
        assert response.status_code == 401
        assert response.json() == {"message": "Not authorized to update this post"}
        assert client.get(f"/api/posts/{post['id']}").json()["content"] == "original"

    def test_other_user_cannot_delete(self, client, auth_header, create_post, alice, bob):
        post = create_post(alice[0])
        response = client.delete(f"/api/posts/{post['id']}", headers=auth_header(bob[0]))
        assert response.status_code == 401
        assert client.get(f"/api/posts/{post['id']}").status_code == 200

    def test_author_deletes_post(self, client, auth_header, create_post, alice):
        post = create_post(alice[0])
        response = client.delete(f"/api/posts/{post['id']}", headers=auth_header(alice[0]))
        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully"}
        assert client.get(f"/api/posts/{post['id']}").status_code == 404


class TestLikesAndComments:
    def test_like_toggles(self, client, auth_header, create_post, alice, bob):
        post = create_post(alice[0])
        url = f"/api/posts/{post['id']}/like"

        liked = client.post(url, headers=auth_header(bob[0])).json()
        assert liked["message"] == "Post liked"
        assert liked["liked"] is True
        assert liked["post"]["likesCount"] == 1
        assert liked["post"]["likes"] == [{"id": bob[1]["id"], "name": "Bob"}]

        unliked = client.post(url, headers=auth_header(bob[0])).json()
        assert unliked["message"] == "Post unliked"
        assert unliked["liked"] is False
        assert unliked["post"]["likedBy"] == []

    def test_like_missing_post_returns_404(self, client, auth_header, bob):
        response = client.post(f"/api/posts/{'f' * 24}/like", headers=auth_header(bob[0]))
        assert response.status_code == 404

    def test_comment(self, client, auth_header, create_post, alice, bob):
        post = create_post(alice[0])
        response = client.post(
            f"/api/posts/{post['id']}/comment",
            json={"text": "Welcome!"},
            headers=auth_header(bob[0]),
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Comment added successfully"
        comment = data["post"]["comments"][0]
        assert comment["text"] == "Welcome!"
        assert comment["authorId"] == bob[1]["id"]
        assert comment["author"]["name"] == "Bob"

    def test_blank_comment_returns_400(self, client, auth_header, create_post, alice, bob):
        post = create_post(alice[0])
        response = client.post(
            f"/api/posts/{post['id']}/comment", json={"text": "  "}, headers=auth_header(bob[0])
        )
        assert response.status_code == 400
        assert client.get(f"/api/posts/{post['id']}").json()["comments"] == []

    def test_comment_requires_token(self, client, create_post, alice):
        post = create_post(alice[0])
        response = client.post(f"/api/posts/{post['id']}/comment", json={"text": "hi"})
        assert response.status_code == 401
