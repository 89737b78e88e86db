"""
Tests for forum comment endpoints.
"""
from sqlalchemy import select

from app.models import Comment

API = "/api/v1/forum"


def _comment_exists(db, comment_id):
    return db.execute(select(Comment.id).where(Comment.id == comment_id)).first() is not None


class TestCreateComment:
    def test_create_top_level_comment(self, client, make_post, author, auth_headers):
        post = make_post()
        response = client.post(
            f"{API}/posts/{post.id}/comments",
            json={"content": {"en": "Great tip", "hi": "बढ़िया सुझाव"}},
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["content"] == {"en": "Great tip", "hi": "बढ़िया सुझाव"}
        assert data["post"] == post.id
        assert data["parentComment"] is None
        assert data["author"]["name"] == author.name
        assert data["isEdited"] is False
        assert data["likes"] == []

    def test_reply_stores_parent_as_sent(self, client, make_post, make_comment, auth_headers):
        post = make_post()
        other_post = make_post()
        foreign = make_comment(other_post)

        response = client.post(
            f"{API}/posts/{post.id}/comments",
            json={"content": {"en": "Reply"}, "parentComment": foreign.id},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json()["data"]["parentComment"] == foreign.id

    def test_post_must_exist(self, client, auth_headers):
        response = client.post(
            f"{API}/posts/999/comments",
            json={"content": {"en": "Anyone?"}},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json()["message"] == "Post not found"

    def test_requires_authentication(self, client, make_post):
        post = make_post()
        response = client.post(f"{API}/posts/{post.id}/comments", json={"content": {"en": "x"}})
        assert response.status_code == 401

    def test_rejects_empty_content(self, client, make_post, auth_headers):
        post = make_post()
        response = client.post(f"{API}/posts/{post.id}/comments", json={"content": {}}, headers=auth_headers)
        assert response.status_code == 422


class TestCommentThread:
    def test_detail_nests_one_level_of_replies(self, client, make_post, make_comment, other_user):
        post = make_post()
        first = make_comment(post, content={"en": "First", "hi": "पहला"})
        second = make_comment(post, content={"en": "Second"}, user=other_user)
        reply = make_comment(post, content={"en": "Reply to first"}, parent=first)
        make_comment(post, content={"en": "Reply to reply"}, parent=reply)

        data = client.get(f"{API}/posts/{post.id}", params={"lang": "hi"}).json()["data"]
        comments = data["comments"]

        assert [c["id"] for c in comments] == [first.id, second.id]
        assert comments[0]["content"] == "पहला"
        assert comments[1]["content"] == "Second"
        assert comments[1]["author"]["id"] == other_user.id

        replies = comments[0]["replies"]
        assert [r["id"] for r in replies] == [reply.id]
        assert replies[0]["content"] == "Reply to first"
        # grandchildren are not resolved
        assert replies[0]["replies"] == []
        assert comments[1]["replies"] == []
        # every stored comment counts, including unresolved grandchildren
        assert data["commentCount"] == 4

    def test_post_without_comments(self, client, make_post):
        post = make_post()
        assert client.get(f"{API}/posts/{post.id}").json()["data"]["comments"] == []


class TestUpdateComment:
    def test_update_marks_edited_even_if_unchanged(self, client, make_post, make_comment, auth_headers):
        post = make_post()
        comment = make_comment(post, content={"en": "Same"})

        response = client.put(
            f"{API}/comments/{comment.id}",
            json={"content": {"en": "Same"}},
            headers=auth_headers,
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["isEdited"] is True
        assert data["content"] == {"en": "Same"}

    def test_update_replaces_locale_map(self, client, make_post, make_comment, auth_headers):
        post = make_post()
        comment = make_comment(post, content={"en": "One", "hi": "एक"})

        data = client.put(
            f"{API}/comments/{comment.id}",
            json={"content": {"en": "Uno"}},
            headers=auth_headers,
        ).json()["data"]
        assert data["content"] == {"en": "Uno"}

    def test_non_author_forbidden(self, client, make_post, make_comment, other_user, headers_for):
        post = make_post()
        comment = make_comment(post)
        response = client.put(
            f"{API}/comments/{comment.id}",
            json={"content": {"en": "Mine now"}},
            headers=headers_for(other_user),
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Not authorized to update this comment"

    def test_admin_can_update(self, client, make_post, make_comment, admin_user, headers_for):
        post = make_post()
        comment = make_comment(post)
        response = client.put(
            f"{API}/comments/{comment.id}",
            json={"content": {"en": "Moderated"}},
            headers=headers_for(admin_user),
        )
        assert response.status_code == 200

    def test_missing_comment(self, client, auth_headers):
        response = client.put(f"{API}/comments/5555", json={"content": {"en": "x"}}, headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Comment not found"}


class TestDeleteComment:
    def test_delete_removes_direct_replies_only(self, client, db, make_post, make_comment, auth_headers):
        post = make_post()
        top = make_comment(post)
        reply = make_comment(post, parent=top)
        sibling_reply = make_comment(post, parent=top)
        grandchild = make_comment(post, parent=reply)
        unrelated = make_comment(post)

        response = client.delete(f"{API}/comments/{top.id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Comment deleted successfully"}

        assert not _comment_exists(db, top.id)
        assert not _comment_exists(db, reply.id)
        assert not _comment_exists(db, sibling_reply.id)
        # one-level cascade: the reply-of-a-reply survives with a dangling parent
        assert _comment_exists(db, grandchild.id)
        assert _comment_exists(db, unrelated.id)

    def test_delete_reply_keeps_parent(self, client, db, make_post, make_comment, auth_headers):
        post = make_post()
        top = make_comment(post)
        reply = make_comment(post, parent=top)

        client.delete(f"{API}/comments/{reply.id}", headers=auth_headers)
        assert _comment_exists(db, top.id)
        assert not _comment_exists(db, reply.id)

    def test_non_author_forbidden(self, client, db, make_post, make_comment, other_user, headers_for):
        post = make_post()
        comment = make_comment(post)
        response = client.delete(f"{API}/comments/{comment.id}", headers=headers_for(other_user))
        assert response.status_code == 403
        assert _comment_exists(db, comment.id)

    def test_missing_comment(self, client, auth_headers):
        assert client.delete(f"{API}/comments/8080", headers=auth_headers).status_code == 404


class TestCommentLikes:
    def test_toggle_twice(self, client, make_post, make_comment, other_user, headers_for):
        post = make_post()
        comment = make_comment(post)
        headers = headers_for(other_user)

        first = client.post(f"{API}/comments/{comment.id}/like", headers=headers).json()
        assert first["message"] == "Comment liked successfully"
        assert first["data"] == {"liked": True, "likeCount": 1}

        detail = client.get(f"{API}/posts/{post.id}").json()["data"]
        assert detail["comments"][0]["likes"] == [other_user.id]

        second = client.post(f"{API}/comments/{comment.id}/like", headers=headers).json()
        assert second["message"] == "Comment unliked successfully"
        assert second["data"] == {"liked": False, "likeCount": 0}

    def test_like_missing_comment(self, client, auth_headers):
        response = client.post(f"{API}/comments/4040/like", headers=auth_headers)
        assert response.status_code == 404
        assert response.json()["message"] == "Comment not found"
